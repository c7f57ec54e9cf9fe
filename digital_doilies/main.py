"""
Digital Doilies - Main Entry Point

Draw radially symmetric patterns and keep the best ones in a gallery.

Usage:
    python -m digital_doilies.main
"""

import sys

from PyQt6.QtWidgets import QApplication

from .config import Config
from .events.event_bus import get_event_bus
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    # Initialize event bus (singleton)
    event_bus = get_event_bus()

    logger = LoggingConfig.get_logger(__name__)

    def on_error(error_type: str, message: str):
        """Log errors reported by widgets"""
        logger.warning(f"{error_type}: {message}")

    event_bus.error_occurred.connect(on_error)

    return app


def main():
    """
    Main entry point for Digital Doilies

    Creates the application, sets up the main window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path()}")

    # Setup application
    app = setup_application()

    # Create and show main window
    from .widgets.main_window import MainWindow
    window = MainWindow()
    window.show()

    logger.info(f"Canvas: {Config.CANVAS_WIDTH}x{Config.CANVAS_HEIGHT}, "
                f"{get_event_bus().get_sectors()} sectors")

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
