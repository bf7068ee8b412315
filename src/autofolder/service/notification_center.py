from __future__ import annotations
from PySide6.QtCore import QObject, Signal

LEVELS = ("info", "success", "warn", "error")
_DEFAULT_MS = {"info": 3000, "success": 3000, "warn": 3500, "error": 5000}


class NotificationCenter(QObject):
    notification_requested = Signal(str, str, int)  # level, text, ms

    def notify(self, level: str, text: str, ms: int | None = None) -> None:
        if level not in LEVELS:
            level = "info"
        self.notification_requested.emit(level, text, ms if ms is not None else _DEFAULT_MS[level])

    def info(self, text: str, ms: int = 3000) -> None:
        self.notify("info", text, ms)

    def success(self, text: str, ms: int = 3000) -> None:
        self.notify("success", text, ms)

    def warn(self, text: str, ms: int = 3500) -> None:
        self.notify("warn", text, ms)

    def error(self, text: str, ms: int = 5000) -> None:
        self.notify("error", text, ms)
