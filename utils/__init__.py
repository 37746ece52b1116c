"""Utilities and helper functions.

- exceptions: Provider exception hierarchy
- logging: loguru configuration (get_logger)
- sanitizer: Host-safe copies of shaped records
"""

from utils import exceptions
from utils.sanitizer import sanitize, sanitize_text

__all__ = [
    "exceptions",
    "sanitize",
    "sanitize_text",
]
