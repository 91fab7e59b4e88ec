"""Tests for logger configuration."""

import logging
import os
import time

import pytest

from emitkit.lib.logger import CustomFormatter, clean_old_logs, configure_logger


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest had it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_clean_old_logs_keeps_newest(tmp_path):
    now = time.time()
    for i in range(4):
        log_file = tmp_path / f"{i}.log"
        log_file.write_text("log")
        os.utime(log_file, (now + i, now + i))
    (tmp_path / "notes.txt").write_text("keep me")

    clean_old_logs(tmp_path, max_files=2)

    assert sorted(p.name for p in tmp_path.glob("*.log")) == ["2.log", "3.log"]
    assert (tmp_path / "notes.txt").exists()


def test_custom_formatter_pads_level_name():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    output = CustomFormatter("%(levelname)s|%(message)s").format(record)

    assert output == "INFO    |hello"


def test_configure_logger_console_only(restore_root_logger):
    handlers = configure_logger(logging.INFO)

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert logging.getLogger().level == logging.INFO


def test_configure_logger_writes_file(tmp_path, restore_root_logger):
    log_dir = tmp_path / "logs"

    handlers = configure_logger(logging.DEBUG, log_dir=log_dir)
    logging.error("listener failed")
    for handler in handlers:
        handler.flush()

    log_files = list(log_dir.glob("*.log"))
    assert len(log_files) == 1
    assert "listener failed" in log_files[0].read_text()
