"""Game state model: cards, deck, players and the game aggregate."""

from unocore.engine.card import Card, CardKind, Color
from unocore.engine.deck import STANDARD_DECK_SIZE, Deck, create_deck, standard_cards
from unocore.engine.game import Game, new_game
from unocore.engine.player import Player
from unocore.engine.serialization import (
    SerializationError,
    dumps_game,
    game_from_dict,
    game_to_dict,
    loads_game,
)

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "Deck",
    "STANDARD_DECK_SIZE",
    "create_deck",
    "standard_cards",
    "Game",
    "new_game",
    "Player",
    "SerializationError",
    "dumps_game",
    "loads_game",
    "game_to_dict",
    "game_from_dict",
]
