"""Game aggregate: players, draw pile and the face-up card."""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from unocore.engine.card import Card
from unocore.engine.deck import Deck, create_deck
from unocore.engine.player import Player

logger = logging.getLogger(__name__)


@dataclass
class Game:
    """Mutable game state.

    Players are seated by the caller after construction; no turn order or
    play legality is enforced here.
    """

    deck: Deck
    current_card: Card
    players: List[Player] = field(default_factory=list)

    def draw_top(self) -> Optional[Card]:
        """Remove and return the top card of the deck, or None when empty."""
        return self.deck.draw_top()

    def reshuffle(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.deck.reshuffle(rng=rng, seed=seed)

    def add_player(self, player: Player) -> Player:
        self.players.append(player)
        logger.debug("Seated player %r at turn %d", player.name, player.turn)
        return player

    def draw_for(self, player: Player) -> Optional[Card]:
        """Move the top deck card into a player's hand.

        Returns the card, or None (hand unchanged) when the deck is empty.
        """
        card = self.draw_top()
        if card is not None:
            player.take(card)
        return card


def new_game(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """Create a game with a shuffled deck and its top card face up."""
    deck = create_deck(seed=seed, rng=rng)
    current = deck.draw_top()
    if current is None:
        raise RuntimeError("Freshly generated deck is empty")
    logger.debug("New game: face-up %s, %d cards left in deck", current, len(deck))
    return Game(deck=deck, current_card=current)
