"""Command-line interface for SpellPy."""

import argparse

from spellpy.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="spellpy",
        description="Look up words in a word list and suggest the closest match",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session with a word list file
  %(prog)s english.dict

  # Ask for the word list path at startup
  %(prog)s

  # Answer a few words and exit
  %(prog)s english.dict -w helo -w wrold

  # Built-in English word list, verbose
  %(prog)s --english-words -v

  # Using JSON config
  %(prog)s --config config.json

Each word is answered by trying, in order: exact lookup, the nearest word by
edit distance, same-length words, and same-length words with the same
consonants. A suggestion must match at least half of the word's letters
in place.

Example config.json:
{
  "dictionary": "english.dict",
  "words": ["helo", "wrold"],
  "log_file": "logs/spellpy.log",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "dictionary",
        nargs="?",
        default=None,
        help="Word list file, one word per line (prompted for if omitted)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word source
    parser.add_argument(
        "--english-words",
        action="store_true",
        help="Use the built-in english-words list instead of a file",
    )

    # Queries
    parser.add_argument(
        "-w",
        "--word",
        dest="words",
        action="append",
        default=None,
        help="Word to look up (repeatable); answers and exits instead of prompting",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=Constants.DEFAULT_PROMPT,
        help="Prompt shown before each word in interactive mode",
    )

    # Logging
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Minimum level written to --log-file (-d lowers it to DEBUG)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
