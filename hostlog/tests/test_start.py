import os
import time

import pytest

from hostlog import paths
from hostlog.start import main


def _today(component: str = "") -> str:
    return paths.log_file_name("TESTHOST", component, paths.utc_now().date())


def test_log_command_writes_entry(tmp_path):
    assert main(["log", "from cron", "--log-path", str(tmp_path), "--component", "cron"]) == 0

    log_file = tmp_path / "Logs" / _today("cron")
    assert log_file.read_text(encoding="utf-8").rstrip().endswith("] from cron")


def test_console_command_echoes_message(tmp_path, capsys):
    assert main(["console", "visible", "--log-path", str(tmp_path)]) == 0

    assert "visible" in capsys.readouterr().out
    assert (tmp_path / "Logs" / _today()).exists()


def test_cleanup_command_uses_config_file(tmp_path, capsys):
    logs = tmp_path / "Logs"
    logs.mkdir()
    aged = logs / "TESTHOST-job-01-01-20.log"
    aged.write_text("old\n")
    stamp = time.time() - 40 * 86400
    os.utime(aged, (stamp, stamp))

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("logging:\n  component_name: job\n  base_directory: .\n  retention_days: 30\n")

    assert main(["cleanup", "--config", str(cfg_path)]) == 0

    assert not aged.exists()
    out = capsys.readouterr().out
    assert "[+] Deleting old log file TESTHOST-job-01-01-20.log..." in out
    assert "Deleted 1 old log file(s)" in out
    assert (logs / _today("job")).exists()


def test_cleanup_days_option_overrides_config(tmp_path, capsys):
    logs = tmp_path / "Logs"
    logs.mkdir()
    kept = logs / "TESTHOST-job-01-01-20.log"
    kept.write_text("old\n")
    stamp = time.time() - 40 * 86400
    os.utime(kept, (stamp, stamp))

    assert main(["cleanup", "--log-path", str(tmp_path), "--days", "60"]) == 0
    assert kept.exists()
    assert "Deleted 0 old log file(s)" in capsys.readouterr().out


def test_invalid_config_exits_with_error(tmp_path, capsys):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("logging:\n  colour: red\n")

    assert main(["log", "x", "--config", str(cfg_path)]) == 1
    assert "ConfigError" in capsys.readouterr().err


def test_negative_days_exits_with_error(tmp_path, capsys):
    assert main(["cleanup", "--log-path", str(tmp_path), "--days", "-3"]) == 1
    assert "days must be a non-negative integer" in capsys.readouterr().err


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_log_command_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["log", "from cron"]) == 0

    log_file = tmp_path / "Logs" / _today()
    assert log_file.read_text(encoding="utf-8").rstrip().endswith("] from cron")


def test_cleanup_command_sweeps_working_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    logs = tmp_path / "Logs"
    logs.mkdir()
    aged = logs / "TESTHOST--01-01-20.log"
    aged.write_text("old\n")
    stamp = time.time() - 100 * 86400
    os.utime(aged, (stamp, stamp))

    assert main(["cleanup"]) == 0

    assert not aged.exists()
    assert "Deleted 1 old log file(s)" in capsys.readouterr().out
