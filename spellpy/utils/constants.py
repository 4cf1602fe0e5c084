"""Constants shared across SpellPy."""


class Constants:
    """User-facing messages and matching constants."""

    # Query responses
    MSG_LETTERS_ONLY = "Word must contain only letters."
    MSG_TOO_SHORT = "Word must be longer than one letter."
    MSG_NOT_FOUND = "Couldn't find your word!"

    # Interactive session
    GREETING = "What are you looking for today?"
    DEFAULT_PROMPT = "> "
    FILE_PROMPT = "Please specify the file location/name:"

    # Vowels include 'y'
    VOWELS = "AaEeIiOoUuYy"

    # Shortest query the pipeline will look up
    MIN_QUERY_LENGTH = 2

    # english-words lists used for the built-in dictionary
    ENGLISH_WORDS_SOURCES = ("web2",)
