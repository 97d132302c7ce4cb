"""
hostlog: timestamped per-day, per-host log files with retention.
"""
from hostlog.config import LoggerConfig, load_config
from hostlog.exceptions import (
    ConfigError,
    HostLogError,
    LogDeletionError,
    LogDirectoryError,
    LogWriteError,
)
from hostlog.logging_utils import (
    DailyLogger,
    RetentionResult,
    delete_old_log_files,
    log,
    log_and_console,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "DailyLogger",
    "HostLogError",
    "LogDeletionError",
    "LogDirectoryError",
    "LogWriteError",
    "LoggerConfig",
    "RetentionResult",
    "delete_old_log_files",
    "load_config",
    "log",
    "log_and_console",
]
