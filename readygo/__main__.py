"""Allow running ReadyGo as a module: python -m readygo."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import ReadyGoApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("ReadyGo")
    app.setOrganizationName("ReadyGo")

    window = ReadyGoApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
