import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture(autouse=True)
def fixed_host(monkeypatch):
    monkeypatch.delenv("COMPUTERNAME", raising=False)
    monkeypatch.setenv("HOSTNAME", "testhost")
    monkeypatch.delenv("NO_COLOR", raising=False)
    return "TESTHOST"


@pytest.fixture
def make_log_file():
    """Create a file under ``directory`` whose mtime is ``age_days`` before NOW."""
    def _make(directory: Path, name: str, age_days: float, now: datetime = NOW) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text("[2024-01-01 00:00:00Z] old entry\n", encoding="utf-8")
        stamp = (now - timedelta(days=age_days)).timestamp()
        os.utime(path, (stamp, stamp))
        return path
    return _make


@pytest.fixture(autouse=True)
def reset_hostlog_logger():
    hostlog_logger = logging.getLogger("hostlog")
    handlers, level = hostlog_logger.handlers[:], hostlog_logger.level
    yield
    hostlog_logger.handlers[:] = handlers
    hostlog_logger.setLevel(level)
