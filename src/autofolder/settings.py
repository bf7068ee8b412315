# src/autofolder/settings.py
from __future__ import annotations
from pathlib import Path
import base64
import json
import os
from typing import Optional

from PySide6.QtCore import QSettings

from autofolder.logging import get_logger

ORG = "AutoFolder"
APP = "AutoFolderCreator"

# Zeigt diese Variable auf eine JSON-Datei, wird statt QSettings diese Datei benutzt
CONFIG_ENV = "AUTOFOLDER_CONFIG"

DEFAULT_RESERVED_FOLDER = ".obsidian"
DEFAULT_EXTENSION = ".md"
NOTIFY_STYLES = ("statusbar", "dialog", "toast")

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}

logger = get_logger(__name__)


class _DictSettings:
    """
    Kleiner Adapter mit QSettings-ähnlichem Interface über eine JSON-Datei.
    Wird genutzt, wenn $AUTOFOLDER_CONFIG gesetzt ist (portable Installation, Tests).
    """
    def __init__(self, path: Path):
        self.path = path
        self._data: dict = {}
        if self.path.exists():
            try:
                self._data = json.loads(self.path.read_text("utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.path, e)
                self._data = {}

    def value(self, key: str, default=None, type=None):  # noqa: A003
        val = self._data.get(key, default)
        if type is bool:
            return _parse_bool_like(val, default if isinstance(default, bool) else False)
        if type is int:
            try:
                return int(val)
            except (TypeError, ValueError):
                return default
        if type is str:
            return "" if val is None else str(val)
        return val

    def setValue(self, key: str, val):
        self._data[key] = val
        self._flush()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write config %s: %s", self.path, e)


def get_settings():
    """
    Liefert ein Objekt mit .value(key, default, type=...) und .setValue(key, val)
    – entweder QSettings oder die JSON-Datei aus $AUTOFOLDER_CONFIG.
    """
    cfg = os.environ.get(CONFIG_ENV)
    if cfg:
        return _DictSettings(Path(cfg))
    # QSettings schreibt unter Windows in die Registry, unter Linux nach ~/.config
    return QSettings(ORG, APP)


# ---------------------- Bool-Helper ----------------------

def _parse_bool_like(v, default: bool = False) -> bool:
    """Robuste Interpretation von bools aus QSettings (bool, int, str)."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        val = v.strip().lower()
        if val in _TRUE:
            return True
        if val in _FALSE:
            return False
    return default


# ---------------------- Notify-Style ----------------------

def notify_style_default() -> str:
    """Return current notification style or default to "toast"."""
    style = get_settings().value("notify_style", "toast", type=str) or "toast"
    return style if style in NOTIFY_STYLES else "toast"


def set_notify_style(style: str) -> None:
    if style not in NOTIFY_STYLES:
        style = "toast"
    get_settings().setValue("notify_style", style)


# ---------------------- Vault ----------------------

def vault_path() -> Optional[Path]:
    """Zuletzt geöffneter Vault, nur wenn der Ordner noch existiert."""
    v = (get_settings().value("vault_path", "", type=str) or "").strip()
    return Path(v) if v and Path(v).is_dir() else None


def set_vault_path(path: Path) -> None:
    get_settings().setValue("vault_path", str(Path(path).resolve()))


def reserved_folder_name() -> str:
    """Konfigurationsordner des Vaults, der nie als Zielordner angeboten wird."""
    v = (get_settings().value("reserved_folder", DEFAULT_RESERVED_FOLDER, type=str) or "").strip()
    return v or DEFAULT_RESERVED_FOLDER


def set_reserved_folder_name(name: str) -> None:
    get_settings().setValue("reserved_folder", name.strip())


def _normalize_extension(ext: str) -> str:
    ext = (ext or "").strip()
    if not ext:
        return DEFAULT_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"


def note_extension() -> str:
    return _normalize_extension(get_settings().value("note_extension", DEFAULT_EXTENSION, type=str))


def set_note_extension(ext: str) -> None:
    get_settings().setValue("note_extension", _normalize_extension(ext))


# --- Bytes-Helper (Fenstergeometrie; funktionieren mit QSettings und JSON-Datei) ---

def settings_set_bytes(key: str, data: bytes) -> None:
    s = get_settings()
    if isinstance(s, _DictSettings):
        # JSON kann keine Bytes: als Base64-String speichern
        s.setValue(key, base64.b64encode(data).decode("ascii"))
    else:
        s.setValue(key, data)


def settings_get_bytes(key: str) -> bytes | None:
    val = get_settings().value(key, None)
    if val is None:
        return None
    if isinstance(val, (bytes, bytearray)):
        return bytes(val)
    if isinstance(val, str):
        try:
            return base64.b64decode(val, validate=True)
        except ValueError:
            return None
    # QSettings liefert u. U. QByteArray
    try:
        return bytes(val)
    except TypeError:
        return None
