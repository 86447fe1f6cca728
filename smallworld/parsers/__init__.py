from smallworld.parsers.ydk import (
    DeckFileError,
    is_ydk_filename,
    parse_main_deck,
    read_deck_file,
)

__all__ = [
    "DeckFileError",
    "is_ydk_filename",
    "parse_main_deck",
    "read_deck_file",
]
