"""Player state."""

from dataclasses import dataclass, field
from typing import List

from unocore.engine.card import Card


@dataclass
class Player:
    """A seated player: display name, turn order index and hand."""

    name: str = ""
    turn: int = 0
    cards: List[Card] = field(default_factory=list)

    @classmethod
    def new(cls) -> "Player":
        return cls()

    def set_name(self, name: str) -> None:
        self.name = name

    def set_turn(self, turn: int) -> None:
        if turn < 0:
            raise ValueError(f"Turn index must be non-negative, got {turn}")
        self.turn = turn

    def take(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def hand_size(self) -> int:
        return len(self.cards)
