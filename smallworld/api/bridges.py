"""
Bridge API endpoints.

Accepts an uploaded .ydk deck and returns its two-hop bridge chains.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from smallworld.config import settings
from smallworld.parsers.ydk import is_ydk_filename
from smallworld.services.card_catalog import CardCatalog, CardSource
from smallworld.services.chain_formatter import format_chains_html
from smallworld.services.deck_bridges import BridgeReport, find_deck_bridges

router = APIRouter(prefix="/bridges", tags=["bridges"])


async def get_card_catalog() -> AsyncGenerator[CardSource, None]:
    """Provide a catalog client for the duration of a request."""
    async with CardCatalog() as catalog:
        yield catalog


class CardResponse(BaseModel):
    """A resolved monster."""

    name: str
    attack: int | None = None
    defense: int | None = None
    attribute: str
    type: str
    level: int | None = None
    image_url: str | None = None


class LinkResponse(BaseModel):
    """A deck reveal and its targets."""

    reveal: str
    targets: list[str] = Field(default_factory=list)


class GroupResponse(BaseModel):
    """Chains starting from one hand reveal."""

    reveal: str
    links: list[LinkResponse] = Field(default_factory=list)


class TripleResponse(BaseModel):
    """One hand reveal -> deck reveal -> target chain."""

    reveal: str
    bridge: str
    target: str


class LookupErrorResponse(BaseModel):
    """A card identifier that could not be resolved."""

    identifier: str
    kind: str
    message: str


class BridgeResponse(BaseModel):
    """Response model for a deck's bridge chains."""

    cards: list[CardResponse] = Field(default_factory=list)
    groups: list[GroupResponse] = Field(default_factory=list)
    triples: list[TripleResponse] = Field(default_factory=list)
    errors: list[LookupErrorResponse] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


async def _read_deck(deck: UploadFile) -> str:
    """Validate an uploaded deck and return its text."""
    if not is_ydk_filename(deck.filename):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please upload a ydk file.",
        )

    content = await deck.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Deck file exceeds {settings.max_upload_bytes} bytes",
        )

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deck file is not valid UTF-8 text",
        ) from e


def _to_response(report: BridgeReport) -> BridgeResponse:
    return BridgeResponse(
        cards=[
            CardResponse(
                name=card.name,
                attack=card.attack,
                defense=card.defense,
                attribute=card.attribute,
                type=card.type,
                level=card.level,
                image_url=card.image_url,
            )
            for card in report.cards.values()
        ],
        groups=[
            GroupResponse(
                reveal=group.reveal,
                links=[
                    LinkResponse(reveal=link.reveal, targets=list(link.targets))
                    for link in group.links
                ],
            )
            for group in report.groups
        ],
        triples=[
            TripleResponse(reveal=t.reveal, bridge=t.bridge, target=t.target)
            for t in report.triples
        ],
        errors=[
            LookupErrorResponse(
                identifier=failure.identifier,
                kind=failure.kind.value,
                message=failure.message,
            )
            for failure in report.failures
        ],
        skipped=report.skipped,
    )


@router.post("", response_model=BridgeResponse)
async def compute_bridges(
    deck: Annotated[UploadFile, File()],
    catalog: Annotated[CardSource, Depends(get_card_catalog)],
) -> BridgeResponse:
    """
    Compute bridge chains for an uploaded deck.

    Cards the catalog cannot resolve are listed in `errors`;
    the rest of the deck is still processed.
    """
    text = await _read_deck(deck)
    report = await find_deck_bridges(text, catalog)
    return _to_response(report)


@router.post("/html", response_class=HTMLResponse)
async def compute_bridges_html(
    deck: Annotated[UploadFile, File()],
    catalog: Annotated[CardSource, Depends(get_card_catalog)],
) -> HTMLResponse:
    """Compute bridge chains and render them as nested HTML lists."""
    text = await _read_deck(deck)
    report = await find_deck_bridges(text, catalog)
    return HTMLResponse(content=format_chains_html(report))
