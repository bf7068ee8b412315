from __future__ import annotations
from typing import Callable

from autofolder.model.folder_snapshot import FolderSnapshot
from autofolder.model.vault_entry import FileEntry
from autofolder.service.notification_center import NotificationCenter
from autofolder.service.vault_service import VaultService


class VaultHost:
    """Bündelt Vault, Editor und Benachrichtigungen zu dem, was der Dialog braucht."""

    def __init__(self, vault: VaultService, open_editor: Callable[[FileEntry], None],
                 notifications: NotificationCenter):
        self.vault = vault
        self._open_editor = open_editor
        self.notifications = notifications

    def list_all_folders(self) -> FolderSnapshot:
        return self.vault.list_all_folders()

    def folder_exists(self, path: str) -> bool:
        return self.vault.folder_exists(path)

    def create_folder(self, path: str) -> None:
        self.vault.create_folder(path)

    def create_file(self, path: str, initial_content: str = "") -> FileEntry:
        return self.vault.create_file(path, initial_content)

    def open_in_editor(self, handle: FileEntry) -> None:
        self._open_editor(handle)

    def notify_user(self, message: str, level: str = "info") -> None:
        self.notifications.notify(level, message)
