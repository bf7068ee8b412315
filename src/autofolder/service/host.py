from __future__ import annotations
from typing import Protocol

from autofolder.model.folder_snapshot import FolderSnapshot
from autofolder.model.vault_entry import FileEntry


class IVaultHost(Protocol):
    """Was der Dialog vom Host braucht (Dateisystem, Editor, Meldungen)."""

    def list_all_folders(self) -> FolderSnapshot:
        ...

    def folder_exists(self, path: str) -> bool:
        ...

    def create_folder(self, path: str) -> None:
        ...

    def create_file(self, path: str, initial_content: str = "") -> FileEntry:
        ...

    def open_in_editor(self, handle: FileEntry) -> None:
        ...

    def notify_user(self, message: str, level: str = "info") -> None:
        ...
