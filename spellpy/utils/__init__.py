"""Utility functions for SpellPy."""

from spellpy.utils.constants import Constants
from spellpy.utils.helpers import expand_file_path, file_exists
from spellpy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "file_exists",
    "setup_logger",
]
