import sys

from hostlog.start import main

if __name__ == "__main__":
    sys.exit(main())
