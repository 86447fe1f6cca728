"""
Bridge finder.

Two monsters bridge when exactly one of their ATK, DEF, Attribute, Type
and Level matches. Chains are two bridges long: reveal a card from hand,
reveal a card from the deck that bridges with it, then add a card that
bridges with the deck reveal.
"""

from collections.abc import Mapping

from smallworld.models.card import MonsterCard
from smallworld.models.chain import ChainGroup, ChainLink, ChainTriple

BridgeGraph = dict[str, set[str]]


def bridges(a: MonsterCard, b: MonsterCard) -> bool:
    """
    Check whether two cards share exactly one bridging property.

    A card never bridges with itself since all five properties match.
    """
    matches = 0
    for mine, theirs in zip(a.bridging_properties(), b.bridging_properties(), strict=True):
        if mine == theirs:
            matches += 1
            if matches > 1:
                return False
    return matches == 1


def build_bridge_graph(cards: Mapping[str, MonsterCard]) -> BridgeGraph:
    """
    Map every card to the cards it bridges with.

    Args:
        cards: Resolved monsters keyed by name

    Returns:
        Dict with one entry per card, in the order of `cards`. A card that
        bridges with nothing maps to an empty set.
    """
    graph: BridgeGraph = {}

    for reveal, reveal_card in cards.items():
        graph[reveal] = {
            target for target, target_card in cards.items() if bridges(reveal_card, target_card)
        }

    return graph


def _ordered(graph: BridgeGraph, members: set[str]) -> list[str]:
    """Members of a bridge set, in the graph's key order."""
    ordered = [name for name in graph if name in members]
    return ordered + sorted(members.difference(graph))


def _targets(graph: BridgeGraph, reveal: str, bridge: str) -> list[str]:
    """Cards reachable through `bridge`, minus the card already in hand."""
    return [name for name in _ordered(graph, graph.get(bridge, set())) if name != reveal]


def build_chain_groups(graph: BridgeGraph, include_empty: bool = True) -> list[ChainGroup]:
    """
    Group two-hop chains by the card revealed from hand.

    Args:
        graph: Output of build_bridge_graph
        include_empty: Keep groups for cards that bridge with nothing

    Returns:
        One ChainGroup per hand reveal, in graph order. The same
        (deck reveal, target) pair may appear under several hand reveals.
        A deck reveal whose only bridge leads back to the hand reveal is
        kept as a link without targets.
    """
    groups: list[ChainGroup] = []

    for reveal in graph:
        links = tuple(
            ChainLink(reveal=bridge, targets=tuple(_targets(graph, reveal, bridge)))
            for bridge in _ordered(graph, graph[reveal])
        )
        if not links and not include_empty:
            continue
        groups.append(ChainGroup(reveal=reveal, links=links))

    return groups


def enumerate_chains(graph: BridgeGraph) -> list[ChainTriple]:
    """List every (hand reveal, deck reveal, target) chain in the graph."""
    return [
        triple
        for group in build_chain_groups(graph, include_empty=False)
        for triple in group.triples()
    ]
