"""
Logging-Konfiguration für Auto Folder Creator.

setup_logging() einmal beim Start aufrufen, danach pro Modul
`logger = get_logger(__name__)`.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER = "autofolder"
LOG_LEVEL_ENV = "AUTOFOLDER_LOG_LEVEL"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BG_RED = "\033[41m"


class ColoredFormatter(logging.Formatter):
    """Formatter mit Farbe pro Log-Level (für Dateien abschaltbar)."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DIM + Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.BG_RED + Colors.WHITE,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors and record.levelno in self.LEVEL_COLORS:
            # Kopie, damit andere Handler den ungefärbten Levelnamen sehen
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.LEVEL_COLORS[record.levelno]}{record.levelname}{Colors.RESET}"
        return super().format(record)


def level_from_env(default: str = "INFO") -> str:
    return (os.environ.get(LOG_LEVEL_ENV) or default).upper()


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Konfiguriert den `autofolder`-Logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR, CRITICAL (Default: $AUTOFOLDER_LOG_LEVEL oder INFO)
        log_file: optionaler Pfad für eine zusätzliche Log-Datei (ohne Farben)
    """
    numeric_level = getattr(logging, (level or level_from_env()).upper(), logging.INFO)

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(numeric_level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    if numeric_level <= logging.DEBUG:
        console.setFormatter(ColoredFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"))
    else:
        console.setFormatter(ColoredFormatter("[%(levelname)s] %(message)s"))
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(numeric_level)
        fh.setFormatter(ColoredFormatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s", use_colors=False))
        root.addHandler(fh)

    return root


def get_logger(name: str) -> logging.Logger:
    """Logger unterhalb von `autofolder` (typisch: get_logger(__name__))."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
