"""
Parser for YGOPro deck files (.ydk).

YDK format:
    #created by ...
    #main
    89631139
    89631139
    46986414
    #extra
    44508094
    !side
    14558127

The first two lines are a creator comment and the "#main" header. Every
line before "#extra" is a main deck card passcode; the extra and side
decks that follow are ignored.
"""

from pathlib import Path

YDK_EXTENSION = ".ydk"

# Lines preceding the main deck entries
HEADER_LINE_COUNT = 2

# Marks the end of the main deck
EXTRA_DECK_MARKER = "#extra"


class DeckFileError(Exception):
    """Raised when a deck file cannot be read."""

    pass


def is_ydk_filename(filename: str | None) -> bool:
    """Check that an uploaded file is named like a YDK deck."""
    if not filename:
        return False
    return filename.lower().endswith(YDK_EXTENSION)


def parse_main_deck(text: str) -> set[str]:
    """
    Parse YDK text into the set of main deck card identifiers.

    Args:
        text: Raw deck file content

    Returns:
        Unique identifiers listed before the "#extra" marker. Empty set if
        the file holds nothing past its header.

    Handles:
        - Files shorter than the header (nothing to keep)
        - Missing "#extra" marker (everything after the header is kept)
        - Windows line endings and stray whitespace
        - Blank lines and repeated copies of a card
    """
    identifiers: set[str] = set()

    for line in text.splitlines()[HEADER_LINE_COUNT:]:
        line = line.strip()

        if line == EXTRA_DECK_MARKER:
            break

        # An empty line can never resolve to a card
        if not line:
            continue

        identifiers.add(line)

    return identifiers


def read_deck_file(path: Path) -> str:
    """
    Read a YDK deck file from disk.

    Raises:
        DeckFileError: If the file is not a .ydk file or cannot be read
    """
    if not is_ydk_filename(path.name):
        raise DeckFileError(f"{path.name} is not a {YDK_EXTENSION} file")

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DeckFileError(f"Could not read deck file {path}: {e}") from e
