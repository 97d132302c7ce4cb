"""
Diagnostic logging for hostlog itself.

The library only creates module loggers; handlers are installed by the
command line entry point (or by the host application).
"""
import logging

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(log_level: str = "WARNING") -> None:
    """Attach a console handler to the hostlog logger."""
    logger = logging.getLogger("hostlog")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid adding multiple handlers when called more than once
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
