"""Utility functions for Digital Doilies"""

from .logging_config import LoggingConfig

__all__ = [
    'LoggingConfig',
]
