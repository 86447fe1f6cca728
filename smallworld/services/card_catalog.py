"""
Card catalog gateway.

Resolves YGOPro card passcodes to MonsterCard records through the
YGOPRODeck card info API.

API docs: https://ygoprodeck.com/api-guide/
"""

import asyncio
import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Protocol

import httpx

from smallworld.config import settings
from smallworld.models.card import MonsterCard
from smallworld.models.resolution import DeckResolution, LookupFailure, LookupFailureKind

logger = logging.getLogger(__name__)

# Substring of the catalog "type" field shared by every monster card
MONSTER_TYPE_MARKER = "monster"


class CatalogError(Exception):
    """Raised when a card identifier cannot be resolved."""

    def __init__(self, identifier: str, kind: LookupFailureKind, message: str) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.kind = kind
        self.message = message

    def to_failure(self) -> LookupFailure:
        return LookupFailure(identifier=self.identifier, kind=self.kind, message=self.message)


class CardSource(Protocol):
    """Anything that can resolve a card identifier."""

    async def resolve(self, identifier: str) -> MonsterCard | None: ...


def is_monster(payload: dict[str, Any]) -> bool:
    """Check the catalog type classification, e.g. "Effect Monster"."""
    return MONSTER_TYPE_MARKER in str(payload.get("type", "")).lower()


def _image_url(payload: dict[str, Any]) -> str | None:
    images = payload.get("card_images") or []
    if not images:
        return None
    url: str | None = images[0].get("image_url")
    return url


def _text_field(payload: dict[str, Any], key: str, identifier: str) -> str:
    value = payload.get(key, "")
    if not isinstance(value, str):
        raise CatalogError(
            identifier,
            LookupFailureKind.MALFORMED_RESPONSE,
            f"Catalog entry for {identifier} has a non-text {key!r}",
        )
    return value


def _stat_field(payload: dict[str, Any], key: str, identifier: str) -> int | None:
    value = payload.get(key)
    # bool is an int subclass but never a valid stat
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise CatalogError(
            identifier,
            LookupFailureKind.MALFORMED_RESPONSE,
            f"Catalog entry for {identifier} has a non-integer {key!r}",
        )
    return value


def card_from_catalog(payload: dict[str, Any], identifier: str | None = None) -> MonsterCard | None:
    """
    Build a MonsterCard from one catalog entry.

    Args:
        payload: A single element of the API's "data" list
        identifier: Passcode the entry was requested with, for error
            reporting. Defaults to the entry's own "id"

    Returns:
        MonsterCard, or None if the entry is a spell or trap.

    Raises:
        CatalogError: If a monster entry has no name or a field of the
            wrong type
    """
    if not is_monster(payload):
        return None

    if identifier is None:
        identifier = str(payload.get("id", ""))

    if not isinstance(payload.get("name"), str) or not payload["name"]:
        raise CatalogError(
            identifier,
            LookupFailureKind.MALFORMED_RESPONSE,
            f"Catalog entry for {identifier} has no name",
        )

    # Link monsters carry no "def" or "level"
    return MonsterCard(
        name=payload["name"],
        attack=_stat_field(payload, "atk", identifier),
        defense=_stat_field(payload, "def", identifier),
        attribute=_text_field(payload, "attribute", identifier),
        type=_text_field(payload, "race", identifier),
        level=_stat_field(payload, "level", identifier),
        image_url=_image_url(payload),
    )


class CardCatalog:
    """
    Async client for the card info API.

    Use as an async context manager, or pass in an existing
    httpx.AsyncClient whose lifetime the caller owns.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url or settings.catalog_url
        self._timeout = timeout if timeout is not None else settings.catalog_timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "CardCatalog":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, identifier: str) -> dict[str, Any]:
        """
        Fetch the raw catalog entry for a card passcode.

        Raises:
            CatalogError: If the card is unknown, the request fails, or the
                response is not shaped like a card info payload
        """
        if self._client is None:
            raise RuntimeError("CardCatalog used outside of its async context")

        try:
            response = await self._client.get(self.base_url, params={"id": identifier})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The API answers unknown passcodes with 400
            if e.response.status_code in (400, 404):
                raise CatalogError(
                    identifier, LookupFailureKind.NOT_FOUND, f"No card with id {identifier}"
                ) from e
            raise CatalogError(
                identifier,
                LookupFailureKind.HTTP_ERROR,
                f"Catalog returned {e.response.status_code} for {identifier}",
            ) from e
        except httpx.RequestError as e:
            raise CatalogError(
                identifier,
                LookupFailureKind.NETWORK_ERROR,
                f"Failed to reach catalog for {identifier}: {e}",
            ) from e

        try:
            entry: dict[str, Any] = response.json()["data"][0]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CatalogError(
                identifier,
                LookupFailureKind.MALFORMED_RESPONSE,
                f"Unexpected catalog response for {identifier}",
            ) from e

        return entry

    async def resolve(self, identifier: str) -> MonsterCard | None:
        """
        Resolve a card passcode to a MonsterCard.

        Returns:
            MonsterCard, or None for spells and traps

        Raises:
            CatalogError: If the lookup fails
        """
        entry = await self.fetch(identifier)
        try:
            return card_from_catalog(entry, identifier)
        except (AttributeError, TypeError) as e:
            raise CatalogError(
                identifier,
                LookupFailureKind.MALFORMED_RESPONSE,
                f"Incomplete catalog entry for {identifier}",
            ) from e


async def resolve_deck(
    catalog: CardSource,
    identifiers: Iterable[str],
    max_concurrency: int | None = None,
) -> DeckResolution:
    """
    Resolve every identifier of a deck, isolating failures per card.

    Args:
        catalog: Card source to query
        identifiers: Main deck card identifiers
        max_concurrency: Lookups allowed in flight at once. Defaults to
            settings.max_concurrent_lookups

    Returns:
        DeckResolution with monsters keyed by name. A failed lookup is
        recorded and never aborts the rest of the deck.
    """
    limit = max_concurrency or settings.max_concurrent_lookups
    semaphore = asyncio.Semaphore(max(1, limit))

    # Sorted so the resolved mapping has a stable order
    ordered = sorted(identifiers)

    async def lookup(identifier: str) -> MonsterCard | LookupFailure | None:
        async with semaphore:
            try:
                return await catalog.resolve(identifier)
            except CatalogError as e:
                logger.warning("Lookup failed for %s: %s", identifier, e.message)
                return e.to_failure()
            except Exception as e:
                logger.warning("Unexpected error resolving %s: %s", identifier, e)
                return LookupFailure(
                    identifier=identifier,
                    kind=LookupFailureKind.UNKNOWN,
                    message=f"Could not resolve {identifier}: {e}",
                )

    results = await asyncio.gather(*(lookup(identifier) for identifier in ordered))

    resolution = DeckResolution()
    for identifier, result in zip(ordered, results, strict=True):
        if isinstance(result, LookupFailure):
            resolution.failures.append(result)
        elif result is None:
            resolution.skipped.append(identifier)
        else:
            resolution.cards.setdefault(result.name, result)

    logger.info(
        "Resolved %d monsters (%d skipped, %d failed)",
        len(resolution.cards),
        len(resolution.skipped),
        len(resolution.failures),
    )
    return resolution
