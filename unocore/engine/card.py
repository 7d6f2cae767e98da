"""Card, Color and CardKind types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. WILD is reserved for the two wild action kinds."""

    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    WILD = "Wild"


SUIT_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


class CardKind(str, Enum):
    """Card ranks (Zero-Nine) and action kinds."""

    WILD_CARD = "WildCard"
    DRAW_FOUR = "DrawFour"
    DRAW_TWO = "DrawTwo"
    CANCEL = "Cancel"
    REVERSE = "Reverse"
    ZERO = "Zero"
    ONE = "One"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"

    @property
    def is_wild(self) -> bool:
        return self in (CardKind.WILD_CARD, CardKind.DRAW_FOUR)

    @property
    def is_number(self) -> bool:
        return self in NUMBER_KINDS

    @property
    def is_action(self) -> bool:
        return not self.is_number

    @property
    def number(self) -> Optional[int]:
        """Face value for Zero-Nine, None for action kinds."""
        if not self.is_number:
            return None
        return NUMBER_KINDS.index(self)


NUMBER_KINDS = (
    CardKind.ZERO, CardKind.ONE, CardKind.TWO, CardKind.THREE, CardKind.FOUR,
    CardKind.FIVE, CardKind.SIX, CardKind.SEVEN, CardKind.EIGHT, CardKind.NINE,
)

# Suited action kinds, in the order they are laid out per color.
SUITED_ACTION_KINDS = (CardKind.REVERSE, CardKind.DRAW_TWO, CardKind.CANCEL)


@dataclass(frozen=True)
class Card:
    """A single card.

    WildCard and DrawFour always carry color=Wild; every other kind carries
    one of the four suit colors.
    """

    color: Color
    kind: CardKind

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if not isinstance(self.kind, CardKind):
            raise ValueError(f"Invalid card kind: {self.kind!r}")
        if self.kind.is_wild and self.color is not Color.WILD:
            raise ValueError(f"{self.kind.value} cards must have color=Wild")
        if not self.kind.is_wild and self.color is Color.WILD:
            raise ValueError(f"{self.kind.value} cards must have a suit color")

    def __str__(self) -> str:
        if self.kind.is_wild:
            return self.kind.value
        return f"{self.color.value} {self.kind.value}"
