# src/autofolder/service/path_selector.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from autofolder.model.creation_plan import CreationPlan
from autofolder.model.folder_path import SEPARATOR, FolderPath
from autofolder.model.folder_snapshot import FolderSnapshot
from autofolder.model.selection import LEVELS, Level, Selection
from autofolder.service.errors import InvalidArgument

RESERVED_FOLDER = ".obsidian"
DEFAULT_EXTENSION = ".md"


@dataclass(frozen=True)
class LevelOptions:
    choices: List[str] = field(default_factory=list)
    enabled: bool = False


def list_top_level_folders(snapshot: FolderSnapshot, reserved: str = RESERVED_FOLDER) -> List[str]:
    """Alle Ordner der ersten Ebene, ohne den Konfigurationsordner des Vaults."""
    names = {f.name for f in snapshot if f.depth == 1 and f.name != reserved}
    return sorted(names)


def list_child_folders(snapshot: FolderSnapshot, parent_segments: Sequence[str]) -> List[str]:
    """Direkte Unterordner von `parent_segments` (sortiert, ohne Duplikate)."""
    parent = tuple(parent_segments)
    if not parent:
        raise InvalidArgument("parent_segments must not be empty")
    depth = len(parent) + 1
    names = {f.name for f in snapshot if f.depth == depth and f.starts_with(parent)}
    return sorted(names)


def level_options(snapshot: FolderSnapshot, selection: Selection, level: Level,
                  reserved: str = RESERVED_FOLDER) -> LevelOptions:
    """
    Auswahlmöglichkeiten für eine Ebene des Dialogs.
    Ebene N > 1 ist nur aktiv, wenn alle flacheren Ebenen gesetzt sind –
    sonst werden auch keine Optionen berechnet.
    """
    if level == 1:
        return LevelOptions(list_top_level_folders(snapshot, reserved), True)
    if not selection.prerequisites_met(level):
        return LevelOptions([], False)
    parent = [selection.level(lv) for lv in LEVELS if lv < level]
    return LevelOptions(list_child_folders(snapshot, parent), True)


def resolve_creation_plan(selection: Selection, extension: str = DEFAULT_EXTENSION) -> CreationPlan:
    """
    Baut aus der Auswahl den Anlege-Plan: alle Präfix-Ordner (flach → tief)
    plus den finalen Dateipfad.

    Eine verwaiste tiefere Ebene (z. B. `second` ohne `first`) ist ein
    Programmfehler und wird mit InvalidArgument abgewiesen, nicht ignoriert.
    """
    name = selection.file_name
    if not name:
        raise InvalidArgument("file name is empty")
    if SEPARATOR in name:
        raise InvalidArgument(f"file name must not contain {SEPARATOR!r}: {name!r}")
    if not selection.is_consistent:
        raise InvalidArgument(f"inconsistent folder levels: {selection.levels()!r}")

    segments = [seg for seg in selection.levels() if seg]
    folders = tuple(FolderPath.of(segments[:i]) for i in range(1, len(segments) + 1))
    file_path = SEPARATOR.join([*segments, f"{name}{extension}"])
    return CreationPlan(folders=folders, file_path=file_path)
