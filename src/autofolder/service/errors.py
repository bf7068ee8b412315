from __future__ import annotations


class AutoFolderError(Exception):
    """Basis aller Fehler dieses Pakets."""


class ValidationError(AutoFolderError):
    """Benutzereingabe unvollständig/ungültig – wird vor jedem Host-Aufruf erkannt."""


class HostOperationError(AutoFolderError):
    """Vault konnte Ordner/Datei nicht anlegen (existiert schon, keine Rechte, ...)."""


class InvalidArgument(AutoFolderError, ValueError):
    """Verletzter Aufrufvertrag (Programmfehler, kein Laufzeitzustand)."""
