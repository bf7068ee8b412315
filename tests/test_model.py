from __future__ import annotations

import pytest

from autofolder.model.folder_path import FolderPath
from autofolder.model.folder_snapshot import FolderSnapshot
from autofolder.model.selection import DialogState, Selection
from autofolder.model.vault_entry import FileEntry, FolderEntry
from autofolder.service.errors import InvalidArgument


def test_folder_path_parse_and_str() -> None:
    p = FolderPath.parse("/A//B/")
    assert p.segments == ("A", "B")
    assert p.depth == 2
    assert p.name == "B"
    assert str(p) == "A/B"
    assert p == FolderPath(("A", "B"))


@pytest.mark.parametrize("segments", [(), ("",), ("A", "b/c"), (".",), ("A", "..")])
def test_folder_path_rejects_invalid(segments) -> None:
    with pytest.raises(InvalidArgument):
        FolderPath(segments)


def test_folder_path_starts_with() -> None:
    p = FolderPath.parse("A/B/C")
    assert p.starts_with(("A", "B"))
    assert not p.starts_with(("B",))


def test_snapshot_from_entries_ignores_files() -> None:
    snap = FolderSnapshot.from_entries([
        FolderEntry("A"), FileEntry("A/note.md"), FolderEntry("A/B"), FileEntry("top.md"),
    ])
    assert set(map(str, snap)) == {"A", "A/B"}
    assert FolderPath.parse("A/B") in snap
    assert len(snap) == 2


def test_snapshot_from_entries_rejects_unknown_kind() -> None:
    with pytest.raises(TypeError):
        FolderSnapshot.from_entries(["A"])  # type: ignore[list-item]


def test_entry_names() -> None:
    assert FolderEntry("A/B").name == "B"
    assert FileEntry("note.md").name == "note.md"


def test_selection_changing_first_clears_deeper_levels() -> None:
    sel = Selection("A", "B", "C", "note")
    changed = sel.with_level(1, "X")
    assert changed.levels() == ("X", None, None)
    assert changed.file_name == "note"
    # Original bleibt unverändert
    assert sel.levels() == ("A", "B", "C")


def test_selection_changing_second_clears_only_third() -> None:
    sel = Selection("A", "B", "C")
    assert sel.with_level(2, "Y").levels() == ("A", "Y", None)


def test_selection_same_value_is_noop() -> None:
    sel = Selection("A", "B", "C")
    assert sel.with_level(1, "A") is sel


def test_selection_empty_value_unsets() -> None:
    sel = Selection("A", "B")
    assert sel.with_level(1, "").levels() == (None, None, None)


def test_selection_unknown_level() -> None:
    with pytest.raises(ValueError):
        Selection().with_level(4, "x")  # type: ignore[arg-type]


def test_selection_states() -> None:
    sel = Selection()
    assert sel.state is DialogState.EMPTY
    sel = sel.with_level(1, "A")
    assert sel.state is DialogState.FIRST_CHOSEN
    sel = sel.with_level(2, "B")
    assert sel.state is DialogState.SECOND_CHOSEN
    sel = sel.with_level(3, "C")
    assert sel.state is DialogState.THIRD_CHOSEN
    assert sel.with_level(1, "Z").state is DialogState.FIRST_CHOSEN
    assert not sel.state.terminal
    assert DialogState.SUBMITTED.terminal and DialogState.CANCELLED.terminal


def test_selection_consistency() -> None:
    assert Selection("A", "B").is_consistent
    assert not Selection(second="B").is_consistent
    assert not Selection(first="A", third="C").is_consistent
    assert Selection().prerequisites_met(1)
    assert not Selection().prerequisites_met(2)
