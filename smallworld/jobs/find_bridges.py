"""
Print bridge chains for a deck file.

Usage: python -m smallworld.jobs.find_bridges path/to/deck.ydk
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from smallworld.parsers.ydk import DeckFileError, read_deck_file
from smallworld.services.card_catalog import CardCatalog
from smallworld.services.chain_formatter import format_chains_text
from smallworld.services.deck_bridges import find_deck_bridges

logger = logging.getLogger(__name__)


async def run_find_bridges(deck_path: Path, include_empty_groups: bool | None = None) -> str:
    """Compute and format bridge chains for a deck file."""
    text = read_deck_file(deck_path)
    logger.info("Finding bridges for %s", deck_path)

    async with CardCatalog() as catalog:
        report = await find_deck_bridges(text, catalog, include_empty_groups=include_empty_groups)

    return format_chains_text(report)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Find two-hop bridge chains in a .ydk deck")
    parser.add_argument("deck", type=Path, help="Path to a .ydk deck file")
    parser.add_argument(
        "--hide-empty",
        action="store_true",
        help="Omit cards that bridge with nothing",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        output = asyncio.run(
            run_find_bridges(args.deck, include_empty_groups=False if args.hide_empty else None)
        )
    except DeckFileError as e:
        logger.error("%s", e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
