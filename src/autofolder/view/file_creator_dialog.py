from __future__ import annotations
from typing import Dict, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QLabel, QComboBox,
    QGroupBox, QWidget
)

from autofolder.model.selection import Level

PLACEHOLDER = "Select existing folder"


class LevelInput(QWidget):
    """
    Dropdown + Freitext für eine Ordnerebene.
    Wer zuletzt bearbeitet wurde, bestimmt den Wert (der andere wird geleert).
    """
    value_changed = Signal(int, object)   # level, str | None

    def __init__(self, level: Level, parent: QWidget | None = None):
        super().__init__(parent)
        self.level = level
        self.combo = QComboBox(self)
        self.edit = QLineEdit(self)
        self.edit.setPlaceholderText("Or enter new folder name")

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self.combo, 1)
        lay.addWidget(self.edit, 1)

        self._syncing = False
        self.set_choices([])
        self.combo.currentIndexChanged.connect(self._on_combo_changed)
        self.edit.textEdited.connect(self._on_text_edited)

    # ---------------------- API ----------------------
    def value(self) -> Optional[str]:
        txt = self.edit.text().strip()
        if txt:
            return txt
        return self.combo.currentData() or None

    def choices(self) -> List[str]:
        return [self.combo.itemData(i) for i in range(1, self.combo.count())]

    def set_choices(self, choices: List[str]) -> None:
        """Optionen neu setzen, ohne value_changed auszulösen (Auswahl geht verloren)."""
        self._syncing = True
        try:
            self.combo.clear()
            self.combo.addItem(PLACEHOLDER, "")
            for name in choices:
                self.combo.addItem(name, name)
            self.combo.setCurrentIndex(0)
        finally:
            self._syncing = False

    def clear(self) -> None:
        self._syncing = True
        try:
            self.combo.setCurrentIndex(0)
            self.edit.clear()
        finally:
            self._syncing = False

    def set_state(self, enabled: bool, has_choices: bool) -> None:
        # Dropdown nur mit Optionen, Freitext sobald die Ebene erlaubt ist
        self.combo.setEnabled(enabled and has_choices)
        self.edit.setEnabled(enabled)

    # ---------------------- Slots ----------------------
    def _on_combo_changed(self, _idx: int) -> None:
        if self._syncing:
            return
        if self.combo.currentData():
            self._syncing = True
            self.edit.clear()
            self._syncing = False
        self.value_changed.emit(self.level, self.value())

    def _on_text_edited(self, text: str) -> None:
        if self._syncing:
            return
        if text.strip():
            self._syncing = True
            self.combo.setCurrentIndex(0)
            self._syncing = False
        self.value_changed.emit(self.level, self.value())


class FileCreatorDialog(QDialog):
    """Modaler Dialog: Dateiname + bis zu drei Ordnerebenen."""

    level_changed = Signal(int, object)   # level, str | None

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Create New File")
        self.setModal(True)
        self.setMinimumWidth(520)

        layout = QVBoxLayout(self)

        # File name
        name_row = QHBoxLayout()
        name_row.addWidget(QLabel("File Name:"))
        self.file_name_edit = QLineEdit()
        self.file_name_edit.setPlaceholderText("Enter file name (without .md)")
        name_row.addWidget(self.file_name_edit, 1)
        layout.addLayout(name_row)

        # Ordnerebenen
        self.levels: Dict[Level, LevelInput] = {}
        titles = {
            1: "First Level Folder:",
            2: "Second Level Folder (Optional):",
            3: "Third Level Folder (Optional):",
        }
        for level, title in titles.items():
            group = QGroupBox(title)
            g_lay = QVBoxLayout(group)
            row = LevelInput(level, group)
            g_lay.addWidget(row)
            layout.addWidget(group)
            self.levels[level] = row
            row.value_changed.connect(self.level_changed)
            if level > 1:
                row.set_state(False, False)

        self.create_button = QPushButton("Create File")
        self.create_button.setDefault(True)
        layout.addWidget(self.create_button, 0, Qt.AlignRight)

    def set_extension_hint(self, extension: str) -> None:
        self.file_name_edit.setPlaceholderText(f"Enter file name (without {extension})")
