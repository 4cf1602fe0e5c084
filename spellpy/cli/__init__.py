"""Command-line interface for SpellPy."""

from spellpy.cli.parser import create_parser

__all__ = ["create_parser"]
