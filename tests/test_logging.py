from __future__ import annotations

import logging
from pathlib import Path

from autofolder.logging import ColoredFormatter, get_logger, setup_logging


def test_get_logger_is_namespaced() -> None:
    assert get_logger("autofolder.service.x").name == "autofolder.service.x"
    assert get_logger("tests").name == "autofolder.tests"


def test_setup_logging_writes_file_without_colors(tmp_path: Path) -> None:
    log_file = tmp_path / "app.log"
    root = setup_logging("DEBUG", str(log_file))
    try:
        get_logger("autofolder.test").info("hello %s", "vault")
        for h in root.handlers:
            h.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "hello vault" in text
        assert "\033[" not in text
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            h.close()
        root.handlers.clear()


def test_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("AUTOFOLDER_LOG_LEVEL", "warning")
    root = setup_logging()
    try:
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()


def test_colored_formatter_keeps_record_untouched() -> None:
    record = logging.LogRecord("autofolder", logging.ERROR, __file__, 1, "boom", None, None)
    out = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "boom" in out and "\033[" in out
    assert record.levelname == "ERROR"
