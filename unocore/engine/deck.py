"""Deck creation and shuffling."""

import logging
import random
from collections import deque
from typing import Iterable, Iterator, List, Optional

from unocore.engine.card import (
    NUMBER_KINDS,
    SUIT_COLORS,
    SUITED_ACTION_KINDS,
    Card,
    CardKind,
    Color,
)

logger = logging.getLogger(__name__)

STANDARD_DECK_SIZE = 56


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


class Deck:
    """Draw pile: an ordered, double-ended sequence of cards.

    The front of the deck is the top card.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: deque[Card] = deque(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return list(self._cards) == list(other._cards)

    def __repr__(self) -> str:
        return f"Deck({list(self._cards)!r})"

    def draw_top(self) -> Optional[Card]:
        """Remove and return the top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.popleft()

    def push_front(self, card: Card) -> None:
        self._cards.appendleft(card)

    def push_back(self, card: Card) -> None:
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def reshuffle(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Deck":
        """Randomly reorder the remaining cards in place and return the deck."""
        cards = list(self._cards)
        _resolve_rng(rng, seed).shuffle(cards)
        self._cards = deque(cards)
        logger.debug("Reshuffled deck of %d cards", len(cards))
        return self


def standard_cards() -> List[Card]:
    """Return the 56-card composition in its fixed, unshuffled order.

    - 4 colors × (Reverse, Draw Two, Cancel, 0-9): 52 cards
    - 2 Draw Four, 2 Wild Card: 4 cards
    - Total: 56 cards
    """
    cards: List[Card] = []

    for color in SUIT_COLORS:
        for kind in SUITED_ACTION_KINDS + NUMBER_KINDS:
            cards.append(Card(color=color, kind=kind))

    for _ in range(2):
        cards.append(Card(color=Color.WILD, kind=CardKind.DRAW_FOUR))
    for _ in range(2):
        cards.append(Card(color=Color.WILD, kind=CardKind.WILD_CARD))

    return cards


def create_deck(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Deck:
    """Create a shuffled standard deck.

    Pass ``rng`` to share a random source, or ``seed`` for a reproducible order.
    """
    deck = Deck(standard_cards())
    deck.reshuffle(rng=rng, seed=seed)
    logger.debug("Created deck of %d cards (seed=%s)", len(deck), seed)
    return deck
