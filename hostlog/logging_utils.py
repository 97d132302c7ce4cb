"""
Per-day, per-host log files.

Entries are appended as ``[YYYY-MM-DD HH:MM:SSZ] message`` to
``<base>/Logs/<HOST>-<COMPONENT>-<dd-MM-yy>.log``. Old files are pruned by
``delete_old_log_files``.
"""
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, TextIO, Tuple, Union

from hostlog import paths
from hostlog.config import LoggerConfig
from hostlog.exceptions import LogDeletionError, LogDirectoryError, LogWriteError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%SZ"
HIGHLIGHT = "\033[92m"
RESET = "\033[0m"

PathLike = Union[str, Path]


@dataclass
class RetentionResult:
    deleted: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, OSError]] = field(default_factory=list)


def _config_for(log_path: Optional[PathLike], config: Optional[LoggerConfig]) -> LoggerConfig:
    config = config or LoggerConfig()
    return config.with_base_directory(log_path).resolved()


def format_entry(message: str, now: datetime) -> str:
    timestamp = now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
    return f"[{timestamp}] {message}"


def _use_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def log(message: str, log_path: Optional[PathLike] = None,
        config: Optional[LoggerConfig] = None, now: Optional[datetime] = None) -> Path:
    """
    Append one timestamped line to today's log file.

    Creates the Logs directory when missing. Returns the path written to.
    """
    config = _config_for(log_path, config)
    now = now or paths.utc_now()
    directory = paths.log_directory(config.base_directory)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LogDirectoryError(directory, str(e)) from e

    log_file = paths.log_file_path(config, now)
    try:
        with open(log_file, 'a', encoding='utf-8') as f:
            f.write(format_entry(message, now) + "\n")
    except OSError as e:
        raise LogWriteError(log_file, str(e)) from e
    return log_file


def log_and_console(message: str, log_path: Optional[PathLike] = None,
                    config: Optional[LoggerConfig] = None, now: Optional[datetime] = None,
                    stream: Optional[TextIO] = None) -> Path:
    """Echo the message to the console, then write it like ``log``."""
    stream = stream or sys.stdout
    if _use_color(stream):
        print(f"{HIGHLIGHT}{message}{RESET}", file=stream)
    else:
        print(message, file=stream)
    return log(message, log_path=log_path, config=config, now=now)


def delete_old_log_files(days: Optional[int] = None, log_path: Optional[PathLike] = None,
                         config: Optional[LoggerConfig] = None, now: Optional[datetime] = None,
                         strict: bool = False, stream: Optional[TextIO] = None) -> RetentionResult:
    """
    Delete ``*.log`` files under ``<log_path>/Logs`` last modified more than
    ``days`` days ago.

    ``days`` defaults to the config's retention window (90 days unless
    configured otherwise). ``days=0`` deletes every log file. A missing Logs
    directory counts as empty. A file that cannot be deleted is reported and
    skipped; with ``strict`` a LogDeletionError is raised once the sweep is
    finished.
    """
    config = _config_for(log_path, config)
    if days is None:
        days = config.retention_days
    if isinstance(days, bool) or not isinstance(days, int) or days < 0:
        raise ValueError(f"days must be a non-negative integer, got {days!r}")

    now = now or paths.utc_now()
    cutoff = (now - timedelta(days=days)).timestamp()
    directory = paths.log_directory(config.base_directory)
    result = RetentionResult()

    if not directory.is_dir():
        logger.debug(f"Log directory {directory} does not exist, nothing to delete")
        return result

    # List candidates before any deletion notice is written
    candidates = [p for p in directory.glob(paths.LOG_FILE_PATTERN) if p.is_file()]
    logger.debug(f"Found {len(candidates)} log file(s) in {directory}")

    for log_file in candidates:
        try:
            modified = log_file.stat().st_mtime
        except FileNotFoundError:
            continue
        if days > 0 and modified >= cutoff:
            continue

        log_and_console(f"[+] Deleting old log file {log_file.name}...",
                        config=config, now=now, stream=stream)
        try:
            log_file.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(f"Could not delete {log_file}: {type(e).__name__}: {str(e)}")
            result.failed.append((log_file, e))
            continue
        result.deleted.append(log_file)

    if strict and result.failed:
        raise LogDeletionError(result.failed)
    return result


class DailyLogger:
    """The three operations bound to one LoggerConfig."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self.config = config or LoggerConfig()

    def log_file_path(self, now: Optional[datetime] = None) -> Path:
        return paths.log_file_path(self.config, now)

    def log(self, message: str, now: Optional[datetime] = None) -> Path:
        return log(message, config=self.config, now=now)

    def log_and_console(self, message: str, now: Optional[datetime] = None,
                        stream: Optional[TextIO] = None) -> Path:
        return log_and_console(message, config=self.config, now=now, stream=stream)

    def delete_old_log_files(self, days: Optional[int] = None, now: Optional[datetime] = None,
                             strict: bool = False, stream: Optional[TextIO] = None) -> RetentionResult:
        return delete_old_log_files(days, config=self.config, now=now, strict=strict, stream=stream)
