from __future__ import annotations

from pathlib import Path

import pytest

from autofolder.model.vault_entry import FileEntry, FolderEntry
from autofolder.service.errors import HostOperationError
from autofolder.service.vault_service import VaultService


@pytest.fixture
def vault(tmp_path: Path) -> VaultService:
    root = tmp_path / "vault"
    (root / ".obsidian").mkdir(parents=True)
    (root / "Projects" / "Alpha").mkdir(parents=True)
    (root / "Projects" / "Alpha" / "todo.md").write_text("x", encoding="utf-8")
    (root / "Inbox").mkdir()
    (root / "readme.md").write_text("", encoding="utf-8")
    return VaultService(root)


def test_list_all_entries_tags_folders_and_files(vault: VaultService) -> None:
    entries = vault.list_all_entries()
    assert FolderEntry("Projects/Alpha") in entries
    assert FileEntry("Projects/Alpha/todo.md") in entries
    assert FileEntry("readme.md") in entries
    assert [e.path for e in entries] == sorted(e.path for e in entries)


def test_list_all_folders(vault: VaultService) -> None:
    assert {str(f) for f in vault.list_all_folders()} == {
        ".obsidian", "Projects", "Projects/Alpha", "Inbox",
    }


def test_missing_root_lists_nothing(tmp_path: Path) -> None:
    assert VaultService(tmp_path / "missing").list_all_entries() == []


def test_folder_exists(vault: VaultService) -> None:
    assert vault.folder_exists("Projects/Alpha")
    assert not vault.folder_exists("Projects/Beta")
    assert not vault.folder_exists("readme.md")


def test_create_folder(vault: VaultService) -> None:
    vault.create_folder("Projects/Beta")
    assert (vault.root / "Projects" / "Beta").is_dir()


def test_create_folder_fails_if_exists(vault: VaultService) -> None:
    with pytest.raises(HostOperationError):
        vault.create_folder("Projects")


def test_create_folder_fails_without_parent(vault: VaultService) -> None:
    with pytest.raises(HostOperationError):
        vault.create_folder("Nope/Child")


def test_create_file(vault: VaultService) -> None:
    handle = vault.create_file("Inbox/idea.md", "# Idea\n")
    assert handle == FileEntry("Inbox/idea.md")
    assert (vault.root / "Inbox" / "idea.md").read_text(encoding="utf-8") == "# Idea\n"


def test_create_file_fails_if_exists(vault: VaultService) -> None:
    with pytest.raises(HostOperationError, match="readme.md"):
        vault.create_file("readme.md")
    assert (vault.root / "readme.md").read_text(encoding="utf-8") == ""


def test_paths_cannot_escape_vault(vault: VaultService) -> None:
    with pytest.raises(HostOperationError):
        vault.absolute_path("../outside")
    with pytest.raises(HostOperationError):
        vault.absolute_path("")


def test_null_byte_is_a_host_error(vault: VaultService) -> None:
    with pytest.raises(HostOperationError):
        vault.create_file("Inbox/a\x00b.md")
    with pytest.raises(HostOperationError):
        vault.create_folder("Inbox/a\x00b")
    assert [p.name for p in (vault.root / "Inbox").iterdir()] == []


def test_links_outside_vault_are_not_listed(vault: VaultService, tmp_path: Path) -> None:
    outside = tmp_path / "elsewhere"
    outside.mkdir()
    try:
        (vault.root / "External").symlink_to(outside, target_is_directory=True)
        (vault.root / "Shortcut").symlink_to(vault.root / "Projects", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    folders = {str(f) for f in vault.list_all_folders()}
    assert "External" not in folders
    assert "Shortcut" in folders
