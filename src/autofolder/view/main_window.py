from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QByteArray, Qt
from PySide6.QtGui import QAction, QIcon, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QLabel, QMainWindow, QMenuBar, QStatusBar, QStyle,
    QTabWidget, QToolBar
)

from autofolder.controller.file_creator_controller import FileCreatorController
from autofolder.controller.vault_host import VaultHost
from autofolder.logging import get_logger
from autofolder.model.vault_entry import FileEntry
from autofolder.service.notification_center import NotificationCenter
from autofolder.service.vault_service import VaultService
from autofolder.settings import (
    note_extension, notify_style_default, reserved_folder_name, set_vault_path,
    settings_get_bytes, settings_set_bytes
)
from autofolder.view.note_editor import NoteEditor
from autofolder.view.notifiers import DialogNotifier, INotifier, StatusBarNotifier, ToastNotifier
from autofolder.view.settings_dialog import SettingsDialog
from autofolder.view.toast_overlay import ToastOverlay

logger = get_logger(__name__)

APP_TITLE = "Auto Folder Creator"


class MainWindow(QMainWindow):
    """Hauptfenster: Vault, Notiz-Tabs und der Befehl "Create New File with Folders"."""

    def __init__(self, vault_root: Path):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.notifications = NotificationCenter(self)
        self._toast_overlay = ToastOverlay(self)
        self._notifier: INotifier = self._make_notifier()
        self.notifications.notification_requested.connect(self._on_notification_requested)

        self.vault = VaultService(vault_root)
        self.host = VaultHost(self.vault, self.open_note, self.notifications)
        self._editors: Dict[str, NoteEditor] = {}

        self._build_menu()
        self._build_ui()
        self._update_vault_label()

        g = settings_get_bytes("ui/main/geometry")
        if g:
            self.restoreGeometry(QByteArray(g))
        else:
            self.resize(900, 600)
            center_on_screen(self)

    def _build_ui(self) -> None:
        self.tabs = QTabWidget(self)
        self.tabs.setTabsClosable(True)
        self.tabs.tabCloseRequested.connect(self._close_tab)
        self.setCentralWidget(self.tabs)

        self.vault_label = QLabel(self)
        self.vault_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.setStatusBar(QStatusBar())
        self.statusBar().addPermanentWidget(self.vault_label)

        # "Ribbon": Werkzeugleiste mit Ordner-Plus-Symbol
        self.ribbon = QToolBar("Ribbon", self)
        self.ribbon.setMovable(False)
        self.ribbon.addAction(self.act_create)
        self.addToolBar(Qt.LeftToolBarArea, self.ribbon)

    # ---------- Menü ----------
    def _build_menu(self):
        menubar = QMenuBar(self)
        self.setMenuBar(menubar)

        self.menu_file = menubar.addMenu("&File")

        self.act_open_vault = QAction("Open Vault…", self)
        self.act_open_vault.setShortcut(QKeySequence("Ctrl+O"))
        self.act_open_vault.triggered.connect(self._pick_vault)
        self.menu_file.addAction(self.act_open_vault)

        icon = QIcon.fromTheme("folder-new", self.style().standardIcon(QStyle.SP_FileDialogNewFolder))
        self.act_create = QAction(icon, "Create New File with Folders", self)
        self.act_create.setShortcut(QKeySequence("Ctrl+Shift+N"))
        self.act_create.triggered.connect(self.show_file_creator)
        self.menu_file.addAction(self.act_create)

        self.menu_file.addSeparator()
        self.act_quit = QAction("Quit", self)
        self.act_quit.setShortcut(QKeySequence(QKeySequence.Quit))
        self.act_quit.triggered.connect(self.close)
        self.menu_file.addAction(self.act_quit)

        self.menu_settings = menubar.addMenu("&Settings")
        self.act_settings = QAction("Settings…", self)
        self.act_settings.setShortcut(Qt.Key_F2)
        self.act_settings.triggered.connect(self._open_settings)
        self.menu_settings.addAction(self.act_settings)

    # ---------- Dateierstellung ----------
    def show_file_creator(self) -> Optional[FileEntry]:
        ctrl = FileCreatorController(
            self.host, self, reserved=reserved_folder_name(), extension=note_extension()
        )
        return ctrl.show()

    def open_note(self, handle: FileEntry) -> None:
        """Notiz im Editor-Tab öffnen (vorhandenen Tab nur aktivieren)."""
        ed = self._editors.get(handle.path)
        if ed is None:
            ed = NoteEditor(self.vault.absolute_path(handle.path), handle.path, self.tabs)
            ed.save_failed.connect(self.notifications.error)
            self._editors[handle.path] = ed
            self.tabs.addTab(ed, handle.name)
            self.tabs.setTabToolTip(self.tabs.indexOf(ed), handle.path)
        self.tabs.setCurrentWidget(ed)
        ed.setFocus()

    def _close_tab(self, index: int) -> None:
        ed = self.tabs.widget(index)
        if isinstance(ed, NoteEditor):
            ed.flush()
            self._editors.pop(ed.rel_path, None)
        self.tabs.removeTab(index)
        if ed is not None:
            ed.deleteLater()

    # ---------- Vault ----------
    def _pick_vault(self):
        path = QFileDialog.getExistingDirectory(self, "Choose vault folder", str(self.vault.root))
        if path:
            set_vault_path(Path(path))
            self.load_vault(Path(path))

    def load_vault(self, root: Path) -> None:
        for i in reversed(range(self.tabs.count())):
            self._close_tab(i)
        self.vault = VaultService(root)
        self.host.vault = self.vault
        self._update_vault_label()
        logger.info("Opened vault %s", self.vault.root)

    def _update_vault_label(self) -> None:
        self.vault_label.setText(f"Vault: {self.vault.root}")

    # ---------- Benachrichtigungen / Settings ----------
    def _make_notifier(self):
        style = notify_style_default()
        if style == "statusbar":
            return StatusBarNotifier(self)
        if style == "dialog":
            return DialogNotifier(self)
        return ToastNotifier(self, self._toast_overlay)

    def _on_notification_requested(self, level: str, text: str, ms: int) -> None:
        if self._notifier:
            self._notifier.notify(level, text, ms)

    def _on_notify_style_changed(self, style: str) -> None:
        self._notifier = self._make_notifier()

    def _open_settings(self):
        dlg = SettingsDialog(self)
        dlg.notify_style_changed.connect(self._on_notify_style_changed)
        dlg.vault_changed.connect(lambda p: self.load_vault(Path(p)))
        if dlg.exec():
            self.statusBar().showMessage("Settings saved", 4000)

    def closeEvent(self, event):
        for ed in self._editors.values():
            ed.flush()
        settings_set_bytes("ui/main/geometry", bytes(self.saveGeometry()))
        super().closeEvent(event)


def center_on_screen(win: QMainWindow) -> None:
    screen = win.screen() or QApplication.primaryScreen()
    if not screen:
        return
    frame = win.frameGeometry()
    frame.moveCenter(screen.availableGeometry().center())
    win.move(frame.topLeft())
