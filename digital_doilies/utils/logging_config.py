"""
Centralized logging configuration for Digital Doilies

Handlers are attached to the ``digital_doilies`` package logger, not the
root logger. Every module logger (``logging.getLogger(__name__)``) is a
child of it, so Qt and third-party loggers keep their own configuration.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import Config


class LoggingConfig:
    """Central logging configuration"""

    LOGGER_NAME = 'digital_doilies'
    FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    CONSOLE_FORMAT = '[%(levelname)s] %(name)s: %(message)s'
    DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    _initialized = False
    _log_file_path: Optional[Path] = None
    _handlers: List[logging.Handler] = []

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO):
        """
        Attach file and console handlers to the package logger.

        Args:
            log_dir: Directory for the log file (created if missing)
            console_level: Minimum level echoed to stdout
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / Config.LOG_FILE_NAME

        logger = logging.getLogger(cls.LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # File handler: full debug trace of strokes, replays and gallery use
        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(cls.FILE_FORMAT, datefmt=cls.DATE_FORMAT))

        # Console handler (for terminal output)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(cls.CONSOLE_FORMAT))

        cls._handlers = [file_handler, console_handler]
        for handler in cls._handlers:
            logger.addHandler(handler)

        cls._initialized = True
        logger.info("Logging system initialized")

    @classmethod
    def shutdown(cls):
        """Detach and close the handlers added by setup_logging."""
        logger = logging.getLogger(cls.LOGGER_NAME)
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._log_file_path = None
        cls._initialized = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger under the package logger.

        Names outside the package (e.g. ``__main__`` when run with -m) are
        nested under it so their records reach the configured handlers.
        """
        if name != cls.LOGGER_NAME and not name.startswith(cls.LOGGER_NAME + '.'):
            name = f"{cls.LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
