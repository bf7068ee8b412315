from __future__ import annotations
from typing import Optional

from PySide6.QtWidgets import QWidget

from autofolder.logging import get_logger
from autofolder.model.selection import LEVELS, DialogState, Level, Selection
from autofolder.model.vault_entry import FileEntry
from autofolder.service.creation_service import CreationService
from autofolder.service.host import IVaultHost
from autofolder.service.path_selector import RESERVED_FOLDER, DEFAULT_EXTENSION, level_options
from autofolder.view.file_creator_dialog import FileCreatorDialog

logger = get_logger(__name__)


class FileCreatorController:
    """Verdrahtet den Dialog mit Auswahl-Zustand, PathSelector und Host."""

    def __init__(self, host: IVaultHost, parent: QWidget | None = None,
                 reserved: str = RESERVED_FOLDER, extension: str = DEFAULT_EXTENSION):
        self.host = host
        self.reserved = reserved
        self.creation = CreationService(host, extension)
        self.view = FileCreatorDialog(parent)
        self.view.set_extension_hint(extension)

        self.selection = Selection()
        self._terminal: Optional[DialogState] = None
        self.created: Optional[FileEntry] = None

        self._connect_signals()
        self._refresh_levels(1)

    # ---------------------- Zustand ----------------------
    @property
    def state(self) -> DialogState:
        return self._terminal or self.selection.state

    @property
    def is_open(self) -> bool:
        return not self.state.terminal

    def show(self) -> Optional[FileEntry]:
        try:
            self.view.exec()
        finally:
            # Dialog ist Kind des Hauptfensters: nach exec() freigeben
            self.view.deleteLater()
        return self.created

    def _connect_signals(self):
        self.view.file_name_edit.textChanged.connect(self._on_file_name_changed)
        self.view.level_changed.connect(self._on_level_changed)
        self.view.create_button.clicked.connect(self._create_file)
        self.view.finished.connect(self._on_finished)

    # ---------------------- Slots ----------------------
    def _on_file_name_changed(self, text: str):
        if not self.is_open:
            return
        self.selection = self.selection.with_file_name(text)

    def _on_level_changed(self, level: Level, value: Optional[str]):
        if not self.is_open:
            return
        before = self.selection
        self.selection = before.with_level(level, value)
        if self.selection is before:
            return
        logger.debug("Level %s -> %r (%s)", level, value, self.selection.state.name)
        self._refresh_levels(level + 1)

    def _refresh_levels(self, start: int):
        """Ebenen ab `start` leeren und aus einem frischen Snapshot neu befüllen."""
        if start > LEVELS[-1]:
            return
        snapshot = self.host.list_all_folders()
        if not self.is_open:
            # Dialog wurde währenddessen geschlossen – Ergebnis verwerfen
            return
        for level in LEVELS:
            if level < start:
                continue
            opts = level_options(snapshot, self.selection, level, self.reserved)
            row = self.view.levels[level]
            row.set_choices(opts.choices)
            row.clear()
            row.set_state(opts.enabled, bool(opts.choices))

    def _create_file(self):
        if not self.is_open:
            return
        handle = self.creation.submit(self.selection)
        if handle is None:
            # Validierungs-/Host-Fehler: Dialog bleibt offen
            return
        self.created = handle
        self._terminal = DialogState.SUBMITTED
        self.view.accept()

    def _on_finished(self, _result: int):
        if self._terminal is None:
            self._terminal = DialogState.CANCELLED
