from __future__ import annotations
from pathlib import Path

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from autofolder.logging import get_logger

logger = get_logger(__name__)

SAVE_DELAY_MS = 600


class NoteEditor(QPlainTextEdit):
    """Einfacher Editor für eine Notiz; speichert verzögert nach dem Tippen."""

    save_failed = Signal(str)

    def __init__(self, path: Path, rel_path: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.path = path
        self.rel_path = rel_path
        self.setPlaceholderText("Note content…")

        self.blockSignals(True)
        try:
            self.setPlainText(path.read_text(encoding="utf-8"))
        finally:
            self.blockSignals(False)

        self._tm = QTimer(self)
        self._tm.setInterval(SAVE_DELAY_MS)
        self._tm.setSingleShot(True)
        self._tm.timeout.connect(self.save)
        self.textChanged.connect(self._deb)

    def _deb(self) -> None:
        self._tm.start()

    def save(self) -> None:
        self._tm.stop()
        try:
            self.path.write_text(self.toPlainText(), encoding="utf-8")
        except OSError as e:
            logger.error("Saving %s failed: %s", self.path, e)
            self.save_failed.emit(f"Save error: {e}")

    def flush(self) -> None:
        """Ausstehende Änderungen sofort schreiben (z. B. beim Schließen)."""
        if self._tm.isActive():
            self.save()
