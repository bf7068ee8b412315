# src/autofolder/service/creation_service.py
from __future__ import annotations
from typing import Optional

from autofolder.logging import get_logger
from autofolder.model.creation_plan import CreationPlan
from autofolder.model.folder_path import RELATIVE_SEGMENTS, SEPARATOR
from autofolder.model.selection import Selection
from autofolder.model.vault_entry import FileEntry
from autofolder.service.errors import HostOperationError, ValidationError
from autofolder.service.host import IVaultHost
from autofolder.service.path_selector import DEFAULT_EXTENSION, resolve_creation_plan

logger = get_logger(__name__)


class CreationService:
    """Ablauf beim Klick auf "Create File": prüfen → Plan → Ordner/Datei anlegen → öffnen."""

    def __init__(self, host: IVaultHost, extension: str = DEFAULT_EXTENSION):
        self.host = host
        self.extension = extension

    def prepare(self, selection: Selection) -> CreationPlan:
        name = selection.file_name
        if not name or not name.strip():
            raise ValidationError("Please enter a file name")
        if SEPARATOR in name:
            raise ValidationError(f"File name must not contain '{SEPARATOR}'")
        for seg in selection.levels():
            if seg and SEPARATOR in seg:
                raise ValidationError(f"Folder name must not contain '{SEPARATOR}': {seg}")
            if seg in RELATIVE_SEGMENTS:
                raise ValidationError(f"Invalid folder name: {seg}")
        # InvalidArgument (inkonsistente Ebenen) ist ein Bug und geht bewusst nach oben durch
        return resolve_creation_plan(selection, self.extension)

    def execute(self, plan: CreationPlan) -> FileEntry:
        """Ordner streng nacheinander sicherstellen, dann die Datei anlegen."""
        for folder in plan.folder_strings():
            if not self.host.folder_exists(folder):
                self.host.create_folder(folder)
        return self.host.create_file(plan.file_path, "")

    def submit(self, selection: Selection) -> Optional[FileEntry]:
        """
        Gibt das Handle der neuen Datei zurück, oder None wenn abgebrochen
        (Meldung an den Benutzer ist dann bereits raus).
        """
        try:
            plan = self.prepare(selection)
        except ValidationError as e:
            self.host.notify_user(str(e), "warn")
            return None

        try:
            handle = self.execute(plan)
        except HostOperationError as e:
            logger.error("Creating %s failed: %s", plan.file_path, e)
            self.host.notify_user(f"Error creating file: {e}", "error")
            return None

        self.host.open_in_editor(handle)
        self.host.notify_user(f"File created: {plan.file_path}", "success")
        return handle
