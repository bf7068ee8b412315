# src/autofolder/main.py
from __future__ import annotations

import sys
import traceback
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from autofolder.logging import get_logger, setup_logging
from autofolder.settings import APP, ORG, vault_path

logger = get_logger(__name__)


def resolve_vault_root(argv: list[str]) -> Path:
    """Vault aus der Kommandozeile, sonst aus den Settings, sonst aktuelles Verzeichnis."""
    args = [a for a in argv[1:] if not a.startswith("-")]
    if args:
        return Path(args[0]).expanduser().resolve()
    return vault_path() or Path.cwd()


# -------- Exceptions sichtbar --------
def excepthook(exc_type, exc_value, exc_tb):
    logger.critical("Uncaught exception: %s: %s\n%s", exc_type.__name__, exc_value,
                    "".join(traceback.format_tb(exc_tb)))
    if QApplication.instance() is not None:
        QMessageBox.critical(None, f"{APP} – Error", f"{exc_type.__name__}: {exc_value}")


def main() -> int:
    setup_logging()
    sys.excepthook = excepthook

    app = QApplication(sys.argv)
    app.setOrganizationName(ORG)
    app.setApplicationName(APP)

    root = resolve_vault_root(sys.argv)
    if not root.is_dir():
        logger.error("Vault folder does not exist: %s", root)
        QMessageBox.critical(None, APP, f"Vault folder does not exist:\n{root}")
        return 2

    from autofolder.view.main_window import MainWindow

    win = MainWindow(root)
    win.show()
    logger.info("Vault: %s", root)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
