"""Configuration management for SpellPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from spellpy.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a spell-checking session."""

    dictionary: str | None = Field(None, description="Word list file, one word per line")
    english_words: bool = Field(False, description="Use the built-in english-words list")
    words: list[str] = Field(default_factory=list, description="Answer these words and exit")
    prompt: str = Field(Constants.DEFAULT_PROMPT, min_length=1)
    log_file: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Minimum level written to the log file"
    )
    verbose: bool = False
    debug: bool = False

    @field_validator("words", mode="before")
    @classmethod
    def parse_word_list(cls, v):
        """Parse comma-separated string or array into a list of trimmed words."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [s.strip() for s in v if s.strip()]

    @model_validator(mode="after")
    def validate_word_source(self):
        """A file and the built-in list cannot both be the word source."""
        if self.dictionary and self.english_words:
            raise ValueError("dictionary file and english_words are mutually exclusive")
        return self


def _read_json_config(json_path: str) -> dict:
    """Read a JSON config file, logging a helpful message on failure."""
    json_path = expand_file_path(json_path) or json_path
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            json_config = json.load(f)
    except FileNotFoundError:
        logger.error(f"✗ Config file not found: {json_path}")
        logger.error("  Please check the file path and try again")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
        logger.error("  Please validate your JSON syntax")
        raise ValueError(f"Invalid JSON configuration: {e}") from e
    except PermissionError:
        logger.error(f"✗ Permission denied reading config file: {json_path}")
        logger.error("  Please check file permissions and try again")
        raise

    if not isinstance(json_config, dict):
        logger.error(f"✗ Config file {json_path} must contain a JSON object")
        raise ValueError("Invalid JSON configuration: top level must be an object")
    return json_config


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = _read_json_config(json_path) if json_path else {}

    # A word source chosen on the command line replaces the JSON one entirely
    if cli_args.dictionary or cli_args.english_words:
        json_config.pop("dictionary", None)
        json_config.pop("english_words", None)

    config_dict = {
        "dictionary": get_value("dictionary", None),
        "english_words": cli_args.english_words or json_config.get("english_words", False),
        "log_level": get_value("log_level", "INFO"),
        "words": get_value("words", None),
        "prompt": get_value("prompt", Constants.DEFAULT_PROMPT),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
