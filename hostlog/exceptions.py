"""
Exceptions raised by hostlog.

Filesystem failures are wrapped in OSError subclasses so callers that
already catch OSError keep working.
"""
from pathlib import Path
from typing import List, Tuple


class HostLogError(Exception):
    """Base class for all hostlog errors."""


class ConfigError(HostLogError, ValueError):
    """Raised when a configuration value or file is invalid."""


class LogDirectoryError(HostLogError, OSError):
    """Raised when the Logs directory cannot be created."""

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        super().__init__(f"Cannot create log directory {directory}: {reason}")


class LogWriteError(HostLogError, OSError):
    """Raised when an entry cannot be appended to the log file."""

    def __init__(self, log_file: Path, reason: str):
        self.log_file = log_file
        super().__init__(f"Cannot write to log file {log_file}: {reason}")


class LogDeletionError(HostLogError, OSError):
    """
    Raised by a strict retention sweep when one or more files could not be
    deleted. The sweep still visits every file before raising.
    """

    def __init__(self, failures: List[Tuple[Path, OSError]]):
        self.failures = failures
        names = ", ".join(path.name for path, _ in failures)
        super().__init__(f"Failed to delete {len(failures)} old log file(s): {names}")
