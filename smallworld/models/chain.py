from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChainTriple:
    """
    One two-hop chain.

    Attributes:
        reveal: Card revealed from hand
        bridge: Card revealed from deck, bridges with `reveal`
        target: Card added to hand, bridges with `bridge`
    """

    reveal: str
    bridge: str
    target: str


@dataclass(frozen=True, slots=True)
class ChainLink:
    """A deck reveal and every target it reaches."""

    reveal: str
    targets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ChainGroup:
    """All chains starting from one card revealed from hand."""

    reveal: str
    links: tuple[ChainLink, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.links

    def triples(self) -> list[ChainTriple]:
        """Flatten this group into chain triples."""
        return [
            ChainTriple(reveal=self.reveal, bridge=link.reveal, target=target)
            for link in self.links
            for target in link.targets
        ]
