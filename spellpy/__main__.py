"""Main entry point for spellpy package."""

import sys

from loguru import logger

from spellpy.cli import create_parser
from spellpy.core import Config, load_config
from spellpy.processing import QueryService, answer_words, load_dictionary, run_interactive
from spellpy.utils import add_log_file_handler, setup_logger


def _run(config: Config) -> int:
    """Load the dictionary and answer queries; returns the exit code."""
    try:
        dictionary = load_dictionary(config)
    except EOFError:
        logger.error("Exiting program.")
        return 1
    except (OSError, UnicodeDecodeError, RuntimeError):
        logger.error("Error reading file, cannot continue.")
        return 1

    service = QueryService(dictionary)

    if config.words:
        answer_words(service, config.words)
    else:
        run_interactive(service, prompt=config.prompt)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Logging defaults until the config is known
    setup_logger(verbose=args.verbose, debug=args.debug)

    try:
        config = load_config(args.config, args, parser)
    except (OSError, ValueError):
        return 1

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, level=config.log_level, debug=config.debug)

    try:
        return _run(config)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
