"""Shared utility functions for SpellPy."""

import os
from pathlib import Path


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def file_exists(filepath: str | None) -> bool:
    """Check whether an (unexpanded) path points to an existing regular file."""
    expanded = expand_file_path(filepath)
    if not expanded:
        return False
    return Path(expanded).is_file()
