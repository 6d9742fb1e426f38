#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hami - Mental Wellness Companion
Main entry point for the application

حامی - همراه سلامت روان
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app.main_window import MainWindow
from repositories.database import Database
from repositories.local_storage import SQLiteLocalStorage
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        # Create Qt application
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)

        # Log startup
        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        # Local storage keeps the in-progress signup between runs
        db_path = Config.LOCAL_STORAGE_DB_PATH
        if db_path.exists():
            logger.info(f"Using existing local storage: {db_path}")
        else:
            logger.info("No local storage found, will create a fresh one")
        storage = SQLiteLocalStorage(Database(db_path))
        logger.info(">> Local storage initialized")

        window = MainWindow(storage, lang=Config.DEFAULT_LANGUAGE)
        window.start()
        window.show()
        logger.info(">> Main window created and displayed")

        # Run application event loop
        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
