# src/autofolder/model/folder_path.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from autofolder.service.errors import InvalidArgument

SEPARATOR = "/"
# "." / ".." würden auf einen anderen Ordner zeigen als den angezeigten
RELATIVE_SEGMENTS = (".", "..")


@dataclass(frozen=True, order=True)
class FolderPath:
    """Ordner im Vault als Folge von Segmenten, z. B. ('Projekte', '2024')."""
    segments: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise InvalidArgument("FolderPath needs at least one segment")
        for seg in self.segments:
            if not seg or SEPARATOR in seg or seg in RELATIVE_SEGMENTS:
                raise InvalidArgument(f"invalid folder segment: {seg!r}")

    @classmethod
    def of(cls, segments: Iterable[str]) -> "FolderPath":
        return cls(tuple(segments))

    @classmethod
    def parse(cls, path: str) -> "FolderPath":
        # leere Teile (führender/doppelter Slash) ignorieren
        return cls(tuple(p for p in path.split(SEPARATOR) if p))

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def name(self) -> str:
        return self.segments[-1]

    def starts_with(self, prefix: Tuple[str, ...]) -> bool:
        return self.segments[:len(prefix)] == tuple(prefix)

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
