from dataclasses import dataclass, field
from enum import Enum

from smallworld.models.card import MonsterCard


class LookupFailureKind(str, Enum):
    """Why a card identifier could not be resolved."""

    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class LookupFailure:
    """A single identifier that failed catalog resolution."""

    identifier: str
    kind: LookupFailureKind
    message: str


@dataclass
class DeckResolution:
    """
    Outcome of resolving every identifier of a deck.

    Cards are keyed by name. Identifiers that resolved to spells or traps
    land in `skipped`, lookups that failed land in `failures`.
    """

    cards: dict[str, MonsterCard] = field(default_factory=dict)
    failures: list[LookupFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def failed_identifiers(self) -> list[str]:
        return [failure.identifier for failure in self.failures]
