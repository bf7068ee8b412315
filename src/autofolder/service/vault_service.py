# src/autofolder/service/vault_service.py
from __future__ import annotations
import os
from pathlib import Path
from typing import List

from autofolder.logging import get_logger
from autofolder.model.folder_path import SEPARATOR
from autofolder.model.folder_snapshot import FolderSnapshot
from autofolder.model.vault_entry import FileEntry, FolderEntry, VaultEntry
from autofolder.service.errors import HostOperationError

logger = get_logger(__name__)


def _reason(e: Exception) -> str:
    # ValueError (z. B. NUL-Byte im Namen) hat kein strerror
    return getattr(e, "strerror", None) or str(e)


class VaultService:
    """Dateisystem-Zugriff auf einen Vault (Ordner mit Markdown-Notizen)."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root).resolve()

    # ---------------------- Pfade ----------------------
    def absolute_path(self, rel: str) -> Path:
        """Vault-relativen "/"-Pfad in einen absoluten Pfad übersetzen (ohne Ausbruch aus dem Vault)."""
        parts = [p for p in rel.split(SEPARATOR) if p]
        if not parts:
            raise HostOperationError("empty path")
        try:
            p = self.root.joinpath(*parts).resolve()
        except (OSError, ValueError) as e:
            raise HostOperationError(f"invalid path '{rel}': {_reason(e)}") from e
        if not self._inside(p):
            raise HostOperationError(f"path outside of vault: {rel}")
        return p

    def _inside(self, p: Path) -> bool:
        return p == self.root or self.root in p.parents

    def _relative(self, p: Path) -> str:
        return p.relative_to(self.root).as_posix()

    # ---------------------- Abfragen ----------------------
    def list_all_entries(self) -> List[VaultEntry]:
        entries: List[VaultEntry] = []
        if not self.root.is_dir():
            logger.warning("Vault root does not exist: %s", self.root)
            return entries
        for dirpath, dirnames, filenames in os.walk(self.root):
            base = Path(dirpath)
            for d in dirnames:
                if self._links_outside(base / d):
                    continue
                entries.append(FolderEntry(self._relative(base / d)))
            for f in filenames:
                if self._links_outside(base / f):
                    continue
                entries.append(FileEntry(self._relative(base / f)))
        entries.sort(key=lambda e: e.path)
        return entries

    def _links_outside(self, p: Path) -> bool:
        """Symlinks, die aus dem Vault herauszeigen, werden nicht angeboten."""
        if not p.is_symlink():
            return False
        try:
            outside = not self._inside(p.resolve())
        except OSError:
            outside = True
        if outside:
            logger.debug("Skipping link outside of vault: %s", p)
        return outside

    def list_all_folders(self) -> FolderSnapshot:
        return FolderSnapshot.from_entries(self.list_all_entries())

    def folder_exists(self, rel: str) -> bool:
        return self.absolute_path(rel).is_dir()

    # ---------------------- Anlegen ----------------------
    def create_folder(self, rel: str) -> None:
        """Legt genau einen Ordner an; Fehler, wenn er existiert oder der Elternordner fehlt."""
        target = self.absolute_path(rel)
        try:
            target.mkdir(parents=False, exist_ok=False)
        except (OSError, ValueError) as e:
            raise HostOperationError(f"cannot create folder '{rel}': {_reason(e)}") from e
        logger.info("Created folder %s", rel)

    def create_file(self, rel: str, initial_content: str = "") -> FileEntry:
        target = self.absolute_path(rel)
        try:
            # "x": schlägt fehl, wenn die Datei schon existiert
            with target.open("x", encoding="utf-8") as fh:
                fh.write(initial_content)
        except (OSError, ValueError) as e:
            raise HostOperationError(f"cannot create file '{rel}': {_reason(e)}") from e
        logger.info("Created file %s", rel)
        return FileEntry(self._relative(target))
