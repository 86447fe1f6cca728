from collections.abc import Callable

import pytest

from smallworld.models.card import MonsterCard


@pytest.fixture
def make_card() -> Callable[..., MonsterCard]:
    """Factory for monsters with distinct default stats."""

    def _make(
        name: str,
        attack: int | None = 1000,
        defense: int | None = 1000,
        attribute: str = "DARK",
        type: str = "Spellcaster",
        level: int | None = 4,
        image_url: str | None = None,
    ) -> MonsterCard:
        return MonsterCard(
            name=name,
            attack=attack,
            defense=defense,
            attribute=attribute,
            type=type,
            level=level,
            image_url=image_url,
        )

    return _make


@pytest.fixture
def sample_ydk() -> str:
    """Sample YDK deck export for testing."""
    return """#created by Player
#main
1
2
3
#extra
4
!side
5
"""


@pytest.fixture
def catalog_entries() -> dict[str, dict]:
    """
    Catalog entries keyed by passcode.

    1 and 2 share only ATK, 2 and 3 share only Level, 1 and 3 share nothing.
    5 is a spell.
    """
    return {
        "1": {
            "id": 1,
            "name": "Ash Blossom & Joyous Spring",
            "type": "Tuner Effect Monster",
            "atk": 0,
            "def": 1800,
            "level": 3,
            "race": "Zombie",
            "attribute": "FIRE",
            "card_images": [{"image_url": "https://images.example/1.jpg"}],
        },
        "2": {
            "id": 2,
            "name": "Effect Veiler",
            "type": "Tuner Effect Monster",
            "atk": 0,
            "def": 0,
            "level": 1,
            "race": "Spellcaster",
            "attribute": "LIGHT",
            "card_images": [{"image_url": "https://images.example/2.jpg"}],
        },
        "3": {
            "id": 3,
            "name": "Maxx \"C\"",
            "type": "Effect Monster",
            "atk": 500,
            "def": 200,
            "level": 1,
            "race": "Insect",
            "attribute": "EARTH",
            "card_images": [{"image_url": "https://images.example/3.jpg"}],
        },
        "5": {
            "id": 5,
            "name": "Called by the Grave",
            "type": "Spell Card",
            "race": "Quick-Play",
            "card_images": [{"image_url": "https://images.example/5.jpg"}],
        },
    }
