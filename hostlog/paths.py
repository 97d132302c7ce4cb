"""
Log file naming and path resolution.

    <base>/Logs/<HOST>-<COMPONENT>-<dd-MM-yy>.log
"""
import os
import socket
import sys
from datetime import date, datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hostlog.config import LoggerConfig

LOG_DIR_NAME = "Logs"
LOG_FILE_PATTERN = "*.log"
DATE_FORMAT = "%d-%m-%y"
UNKNOWN_HOST = "UNKNOWNHOST"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def host_name() -> str:
    """Return the upper-cased host identifier, or a placeholder."""
    for candidate in (os.environ.get("COMPUTERNAME"), os.environ.get("HOSTNAME")):
        if candidate:
            return candidate.upper()
    try:
        name = socket.gethostname()
    except OSError:
        name = ""
    return name.upper() if name else UNKNOWN_HOST


def _invoking_script() -> Optional[Path]:
    # Interactive sessions leave argv[0] empty or set to "-c"
    script = sys.argv[0] if sys.argv else ""
    if not script or script in ("-", "-c"):
        main = sys.modules.get("__main__")
        script = getattr(main, "__file__", None) or ""
    if not script:
        return None
    path = Path(script)
    return path.resolve() if path.is_file() else None


def default_base_directory() -> Path:
    """Directory of the invoking script, else the current working directory."""
    script = _invoking_script()
    if script is None:
        return Path.cwd()
    return script.parent


def log_directory(base_directory: Path) -> Path:
    return Path(base_directory) / LOG_DIR_NAME


def log_file_name(host: str, component: str, day: date) -> str:
    return f"{host}-{component}-{day.strftime(DATE_FORMAT)}.log"


def log_file_path(config: "LoggerConfig", now: Optional[datetime] = None) -> Path:
    """Full path of the log file for the day containing ``now`` (UTC)."""
    config = config.resolved()
    now = now or utc_now()
    return log_directory(config.base_directory) / log_file_name(
        config.host_name, config.component_name, now.astimezone(timezone.utc).date()
    )
