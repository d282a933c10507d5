"""Allow running StudyHub as a module: python -m studyhub."""

import sys

from loguru import logger
from PyQt6.QtWidgets import QApplication

from .app import StudyHubApp
from .audio.sounds import SoundManager
from .database.db import init_db
from .log import setup_logging
from .settings import app_support_dir, load_settings


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, app_support_dir() / "logs")
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("StudyHub")
    app.setOrganizationName("StudyHub")

    window = StudyHubApp(settings, sound_manager=SoundManager())
    window.show()
    logger.info("StudyHub ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
