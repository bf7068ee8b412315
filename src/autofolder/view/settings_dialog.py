# src/autofolder/view/settings_dialog.py
from __future__ import annotations
from pathlib import Path

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QFileDialog, QDialogButtonBox, QWidget, QSizePolicy, QGroupBox, QRadioButton
)

from autofolder.settings import (
    note_extension, notify_style_default, reserved_folder_name, set_note_extension,
    set_notify_style, set_reserved_folder_name, set_vault_path, vault_path
)


class SettingsDialog(QDialog):
    notify_style_changed = Signal(str)
    vault_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setAttribute(Qt.WA_DeleteOnClose, True)

        # --- Widgets --------------------------------------------------------
        self.le_vault = QLineEdit(self)
        self.btn_vault = QPushButton("…", self)
        self.btn_vault.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.btn_vault.clicked.connect(self._pick_vault)

        self.le_reserved = QLineEdit(self)
        self.le_extension = QLineEdit(self)

        self.grp_notify = QGroupBox("Notifications", self)
        self.rb_status = QRadioButton("Status bar", self.grp_notify)
        self.rb_dialog = QRadioButton("Dialog", self.grp_notify)
        self.rb_toast = QRadioButton("Toast", self.grp_notify)
        v_notify = QVBoxLayout(self.grp_notify)
        v_notify.addWidget(self.rb_status)
        v_notify.addWidget(self.rb_dialog)
        v_notify.addWidget(self.rb_toast)

        self.btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel, self)
        self.btns.accepted.connect(self._save)
        self.btns.rejected.connect(self.reject)

        # --- Layout ---------------------------------------------------------
        lay = QVBoxLayout(self)

        row_vault = QHBoxLayout()
        row_vault.addWidget(QLabel("Vault folder:", self))
        row_vault.addWidget(self.le_vault, 1)
        row_vault.addWidget(self.btn_vault)
        lay.addLayout(row_vault)

        row_reserved = QHBoxLayout()
        row_reserved.addWidget(QLabel("Hidden config folder:", self))
        row_reserved.addWidget(self.le_reserved, 1)
        lay.addLayout(row_reserved)

        row_ext = QHBoxLayout()
        row_ext.addWidget(QLabel("Note extension:", self))
        row_ext.addWidget(self.le_extension, 1)
        lay.addLayout(row_ext)

        lay.addWidget(self.grp_notify)
        lay.addWidget(self.btns)

        self._load_from_settings()

    def _load_from_settings(self):
        vp = vault_path()
        self.le_vault.setText(str(vp) if vp else "")
        self.le_reserved.setText(reserved_folder_name())
        self.le_extension.setText(note_extension())

        cur = notify_style_default()
        if cur == "statusbar":
            self.rb_status.setChecked(True)
        elif cur == "dialog":
            self.rb_dialog.setChecked(True)
        else:
            self.rb_toast.setChecked(True)

    # ---------------------- Aktionen ----------------------------------------
    def _pick_vault(self):
        path = QFileDialog.getExistingDirectory(self, "Choose vault folder", self.le_vault.text())
        if path:
            self.le_vault.setText(path)

    def _save(self):
        set_reserved_folder_name(self.le_reserved.text())
        set_note_extension(self.le_extension.text())

        style = "toast"
        if self.rb_status.isChecked():
            style = "statusbar"
        elif self.rb_dialog.isChecked():
            style = "dialog"
        set_notify_style(style)
        self.notify_style_changed.emit(style)

        new_vault = self.le_vault.text().strip()
        if new_vault and Path(new_vault).is_dir():
            old = vault_path()
            set_vault_path(Path(new_vault))
            if old is None or old.resolve() != Path(new_vault).resolve():
                self.vault_changed.emit(new_vault)
        self.accept()
