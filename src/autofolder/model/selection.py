# src/autofolder/model/selection.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal, Optional, Tuple

Level = Literal[1, 2, 3]
LEVELS: Tuple[Level, ...] = (1, 2, 3)
_FIELDS = {1: "first", 2: "second", 3: "third"}


class DialogState(Enum):
    EMPTY = "empty"
    FIRST_CHOSEN = "first_chosen"
    SECOND_CHOSEN = "second_chosen"
    THIRD_CHOSEN = "third_chosen"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self in (DialogState.SUBMITTED, DialogState.CANCELLED)


def _norm(value: Optional[str]) -> Optional[str]:
    return value if value else None


@dataclass(frozen=True)
class Selection:
    """
    Auswahl im Dialog (unveränderlich). Jede Änderung liefert eine neue Instanz:
    - with_level(n, v): setzt Ebene n; bei neuem Wert werden alle tieferen Ebenen geleert
    - with_file_name(name)
    """
    first: Optional[str] = None
    second: Optional[str] = None
    third: Optional[str] = None
    file_name: str = ""

    def level(self, level: Level) -> Optional[str]:
        return getattr(self, _FIELDS[level])

    def levels(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return self.first, self.second, self.third

    def with_level(self, level: Level, value: Optional[str]) -> "Selection":
        if level not in _FIELDS:
            raise ValueError(f"unknown level: {level!r}")
        value = _norm(value)
        if self.level(level) == value:
            return self
        changes = {_FIELDS[level]: value}
        for deeper in LEVELS:
            if deeper > level:
                changes[_FIELDS[deeper]] = None
        return replace(self, **changes)

    def with_file_name(self, name: str) -> "Selection":
        return replace(self, file_name=name or "")

    def prerequisites_met(self, level: Level) -> bool:
        """True, wenn alle flacheren Ebenen gesetzt sind (Ebene 1: immer)."""
        return all(self.level(lv) for lv in LEVELS if lv < level)

    @property
    def is_consistent(self) -> bool:
        return all(self.prerequisites_met(lv) for lv in LEVELS if self.level(lv))

    @property
    def state(self) -> DialogState:
        if not self.first:
            return DialogState.EMPTY
        if not self.second:
            return DialogState.FIRST_CHOSEN
        if not self.third:
            return DialogState.SECOND_CHOSEN
        return DialogState.THIRD_CHOSEN
