from smallworld.models.card import MonsterCard
from smallworld.models.chain import ChainGroup, ChainLink, ChainTriple
from smallworld.models.resolution import DeckResolution, LookupFailure, LookupFailureKind

__all__ = [
    "ChainGroup",
    "ChainLink",
    "ChainTriple",
    "DeckResolution",
    "LookupFailure",
    "LookupFailureKind",
    "MonsterCard",
]
