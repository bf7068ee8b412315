from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from autofolder.model.folder_path import FolderPath


@dataclass(frozen=True)
class CreationPlan:
    folders: Tuple[FolderPath, ...]   # flachster zuerst
    file_path: str

    def folder_strings(self) -> List[str]:
        return [str(f) for f in self.folders]
