"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from fairychess.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Set the root log level from *settings*."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from fairychess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Fairy Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from fairychess.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings=settings)
    window.show()
    _LOGGER.info("Fairy Chess started")

    return app.exec()
