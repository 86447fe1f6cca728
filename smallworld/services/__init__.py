"""
SmallWorld services.

Bridge computation, card resolution and rendering.
"""

from smallworld.services.bridge_finder import (
    BridgeGraph,
    bridges,
    build_bridge_graph,
    build_chain_groups,
    enumerate_chains,
)
from smallworld.services.card_catalog import (
    CardCatalog,
    CardSource,
    CatalogError,
    card_from_catalog,
    resolve_deck,
)
from smallworld.services.chain_formatter import format_chains_html, format_chains_text
from smallworld.services.deck_bridges import BridgeReport, find_deck_bridges

__all__ = [
    "BridgeGraph",
    "BridgeReport",
    "CardCatalog",
    "CardSource",
    "CatalogError",
    "bridges",
    "build_bridge_graph",
    "build_chain_groups",
    "card_from_catalog",
    "enumerate_chains",
    "find_deck_bridges",
    "format_chains_html",
    "format_chains_text",
    "resolve_deck",
]
