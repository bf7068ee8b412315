from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator

from autofolder.model.folder_path import FolderPath
from autofolder.model.vault_entry import FileEntry, FolderEntry, VaultEntry


@dataclass(frozen=True)
class FolderSnapshot:
    """Momentaufnahme aller Ordner im Vault (keine Live-Ansicht)."""
    folders: FrozenSet[FolderPath] = field(default_factory=frozenset)

    @classmethod
    def of(cls, paths: Iterable[str]) -> "FolderSnapshot":
        return cls(frozenset(FolderPath.parse(p) for p in paths))

    @classmethod
    def from_entries(cls, entries: Iterable[VaultEntry]) -> "FolderSnapshot":
        folders = set()
        for entry in entries:
            match entry:
                case FolderEntry(path=path):
                    folders.add(FolderPath.parse(path))
                case FileEntry():
                    continue
                case _:
                    raise TypeError(f"unknown vault entry: {entry!r}")
        return cls(frozenset(folders))

    def __iter__(self) -> Iterator[FolderPath]:
        return iter(self.folders)

    def __len__(self) -> int:
        return len(self.folders)

    def __contains__(self, item: object) -> bool:
        return item in self.folders
