"""
Shared pytest fixtures.

Qt runs headless (offscreen) and settings go to a per-test JSON file, so
tests never touch the user's real QSettings.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from autofolder.model.folder_snapshot import FolderSnapshot  # noqa: E402
from autofolder.model.vault_entry import FileEntry  # noqa: E402
from autofolder.service.errors import HostOperationError  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    cfg = tmp_path / "config" / "settings.json"
    monkeypatch.setenv("AUTOFOLDER_CONFIG", str(cfg))
    return cfg


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


class FakeHost:
    """In-memory host: records every call, can be told to fail on a path."""

    def __init__(self, folders: Optional[List[str]] = None, fail_on: Optional[str] = None):
        self.folders = set(folders or [])
        self.files: set[str] = set()
        self.fail_on = fail_on
        self.calls: List[Tuple[str, str]] = []
        self.notifications: List[Tuple[str, str]] = []
        self.opened: List[FileEntry] = []

    def list_all_folders(self) -> FolderSnapshot:
        self.calls.append(("list_all_folders", ""))
        return FolderSnapshot.of(self.folders)

    def folder_exists(self, path: str) -> bool:
        self.calls.append(("folder_exists", path))
        return path in self.folders

    def create_folder(self, path: str) -> None:
        self.calls.append(("create_folder", path))
        if path == self.fail_on or path in self.folders:
            raise HostOperationError(f"cannot create folder '{path}'")
        self.folders.add(path)

    def create_file(self, path: str, initial_content: str = "") -> FileEntry:
        self.calls.append(("create_file", path))
        if path == self.fail_on or path in self.files:
            raise HostOperationError(f"cannot create file '{path}'")
        self.files.add(path)
        return FileEntry(path)

    def open_in_editor(self, handle: FileEntry) -> None:
        self.opened.append(handle)

    def notify_user(self, message: str, level: str = "info") -> None:
        self.notifications.append((level, message))

    def host_calls(self) -> List[Tuple[str, str]]:
        """Calls that touch the file system (everything but listing)."""
        return [c for c in self.calls if c[0] != "list_all_folders"]


@pytest.fixture
def fake_host():
    return FakeHost
