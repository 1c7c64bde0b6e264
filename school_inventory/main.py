from __future__ import annotations

import logging
import sys

from . import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT,
    datefmt=config.LOG_DATEFMT,
)


def run_qt() -> int:
    from PySide6 import QtWidgets  # type: ignore
    from .ui.main_window import MainWindow

    app = QtWidgets.QApplication(sys.argv)

    win = MainWindow()
    win.show()

    # Connect application quit to controller shutdown
    app.aboutToQuit.connect(win.controller.shutdown)

    rc = app.exec()
    return int(rc)


def main() -> int:
    try:
        import PySide6  # noqa: F401
    except ImportError as exc:
        raise RuntimeError("PySide6 is required to run the inventory window.") from exc
    return run_qt()


if __name__ == "__main__":
    raise SystemExit(main())
