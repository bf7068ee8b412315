from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FolderEntry:
    path: str   # vault-relativ, "/"-getrennt

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class FileEntry:
    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


VaultEntry = Union[FolderEntry, FileEntry]
