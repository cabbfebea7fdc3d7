"""Tests for logging setup."""

from __future__ import annotations

import json

from xdirs.logging import configure_logging, get_logger


def test_json_log_file(tmp_path):
    """JSON log lines carry the event and its structured fields."""
    log_file = tmp_path / "xdirs.log"
    configure_logging(json_log=str(log_file))

    get_logger("xdirs.test").debug("Resolved", kind="cache")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["event"] == "Resolved"
    assert entry["kind"] == "cache"
    assert entry["level"] == "debug"
    assert entry["logger"] == "xdirs.test"


def test_quiet_by_default(capsys):
    """Debug events are not printed unless verbose."""
    configure_logging()
    get_logger("xdirs.test").debug("Hidden")
    captured = capsys.readouterr()
    assert "Hidden" not in captured.err


def test_verbose_prints_debug(capsys):
    """Verbose logging renders debug events to stderr."""
    configure_logging(verbose=True)
    get_logger("xdirs.test").debug("Shown", kind="config")
    captured = capsys.readouterr()
    assert "Shown" in captured.err
    assert "kind=config" in captured.err
