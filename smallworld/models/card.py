from dataclasses import dataclass

BridgingProperties = tuple[int | None, int | None, str, str, int | None]


@dataclass(frozen=True, slots=True)
class MonsterCard:
    """
    A monster card's comparable attributes.

    Attributes:
        name: Card name, unique within a resolved deck
        attack: ATK value (None when the catalog omits it)
        defense: DEF value (None for Link monsters)
        attribute: Attribute, e.g. "DARK", "LIGHT"
        type: Monster type/race, e.g. "Spellcaster", "Dragon"
        level: Level or Rank (None for Link monsters)
        image_url: Artwork link for display only, never compared
    """

    name: str
    attack: int | None
    defense: int | None
    attribute: str
    type: str
    level: int | None
    image_url: str | None = None

    def bridging_properties(self) -> BridgingProperties:
        """The five values compared when checking for a bridge, in fixed order."""
        return (self.attack, self.defense, self.attribute, self.type, self.level)
