from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

_COLORS = {
    "info": "#2d6cdf",
    "success": "#2e7d32",
    "warn": "#b26a00",
    "error": "#c62828",
}


class ToastOverlay(QWidget):
    """Very small toast overlay widget."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowFlags(Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        self.label = QLabel(self)
        lay = QVBoxLayout(self)
        lay.addWidget(self.label)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

    def show_toast(self, level: str, text: str, ms: int) -> None:
        color = _COLORS.get(level, _COLORS["info"])
        self.label.setStyleSheet(f"color: white; background: {color}; padding: 6px 10px; border-radius: 4px;")
        self.label.setText(text)
        self.adjustSize()
        parent = self.parentWidget()
        if parent:
            # unten rechts im Hauptfenster
            corner = parent.mapToGlobal(parent.rect().bottomRight())
            self.move(corner.x() - self.width() - 16, corner.y() - self.height() - 16)
        self.show()
        # neuer Toast verlängert die Anzeige statt vorzeitig zu verschwinden
        self._timer.start(ms)
