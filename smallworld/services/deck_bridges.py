"""
Deck bridge pipeline.

Runs a deck file through every stage: parse the main deck, resolve the
cards, build the bridge graph, then enumerate chains. Each stage takes the
previous stage's output and nothing else.
"""

import logging
from dataclasses import dataclass, field

from smallworld.config import settings
from smallworld.models.card import MonsterCard
from smallworld.models.chain import ChainGroup, ChainTriple
from smallworld.models.resolution import LookupFailure
from smallworld.parsers.ydk import parse_main_deck
from smallworld.services.bridge_finder import (
    BridgeGraph,
    build_bridge_graph,
    build_chain_groups,
    enumerate_chains,
)
from smallworld.services.card_catalog import CardSource, resolve_deck

logger = logging.getLogger(__name__)


@dataclass
class BridgeReport:
    """Everything computed for one deck."""

    cards: dict[str, MonsterCard] = field(default_factory=dict)
    graph: BridgeGraph = field(default_factory=dict)
    groups: list[ChainGroup] = field(default_factory=list)
    triples: list[ChainTriple] = field(default_factory=list)
    failures: list[LookupFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


async def find_deck_bridges(
    text: str,
    catalog: CardSource,
    include_empty_groups: bool | None = None,
    max_concurrency: int | None = None,
) -> BridgeReport:
    """
    Compute bridge chains for a YDK deck.

    Args:
        text: Raw deck file content
        catalog: Card source used to resolve identifiers
        include_empty_groups: Keep hand reveals with no bridges. Defaults to
            settings.include_empty_groups
        max_concurrency: Concurrent catalog lookups

    Returns:
        BridgeReport. Lookup failures are reported, never raised.
    """
    if include_empty_groups is None:
        include_empty_groups = settings.include_empty_groups

    identifiers = parse_main_deck(text)
    logger.info("Parsed %d unique main deck cards", len(identifiers))

    resolution = await resolve_deck(catalog, identifiers, max_concurrency=max_concurrency)

    graph = build_bridge_graph(resolution.cards)
    groups = build_chain_groups(graph, include_empty=include_empty_groups)
    triples = enumerate_chains(graph)

    logger.info("Found %d chains across %d monsters", len(triples), len(graph))

    return BridgeReport(
        cards=resolution.cards,
        graph=graph,
        groups=groups,
        triples=triples,
        failures=resolution.failures,
        skipped=resolution.skipped,
    )
