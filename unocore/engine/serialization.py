"""Conversion of game state to and from plain dicts and JSON.

Field names and enum variant names form the stored format:

    {"players": [{"name": ..., "turn": ..., "cards": [...]}],
     "deck": [{"color": "Red", "kind": "Seven"}, ...],
     "current_card": {"color": "Wild", "kind": "DrawFour"}}

The deck is stored as an array in draw order (top card first).
"""

import json
from typing import Any, Dict, List

from unocore.engine.card import Card, CardKind, Color
from unocore.engine.deck import Deck
from unocore.engine.game import Game
from unocore.engine.player import Player


class SerializationError(ValueError):
    """Raised when stored data does not describe a valid game object."""


def _require(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise SerializationError(f"{what} must be an object, got {type(data).__name__}")
    if key not in data:
        raise SerializationError(f"{what} is missing field '{key}'")
    return data[key]


def _require_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise SerializationError(f"{what} must be an array, got {type(value).__name__}")
    return value


def card_to_dict(card: Card) -> Dict[str, str]:
    return {"color": card.color.value, "kind": card.kind.value}


def card_from_dict(data: Dict[str, Any]) -> Card:
    color = _require(data, "color", "card")
    kind = _require(data, "kind", "card")
    try:
        return Card(color=Color(color), kind=CardKind(kind))
    except ValueError as e:
        raise SerializationError(f"Invalid card {data!r}: {e}") from e


def deck_to_list(deck: Deck) -> List[Dict[str, str]]:
    return [card_to_dict(c) for c in deck]


def deck_from_list(data: List[Dict[str, Any]]) -> Deck:
    return Deck(card_from_dict(c) for c in _require_list(data, "deck"))


def player_to_dict(player: Player) -> Dict[str, Any]:
    return {
        "name": player.name,
        "turn": player.turn,
        "cards": [card_to_dict(c) for c in player.cards],
    }


def player_from_dict(data: Dict[str, Any]) -> Player:
    name = _require(data, "name", "player")
    turn = _require(data, "turn", "player")
    cards = _require_list(_require(data, "cards", "player"), "player cards")
    if not isinstance(name, str):
        raise SerializationError(f"Player name must be a string, got {name!r}")
    # bool is an int subclass
    if not isinstance(turn, int) or isinstance(turn, bool) or turn < 0:
        raise SerializationError(f"Player turn must be a non-negative integer, got {turn!r}")
    return Player(name=name, turn=turn, cards=[card_from_dict(c) for c in cards])


def game_to_dict(game: Game) -> Dict[str, Any]:
    return {
        "players": [player_to_dict(p) for p in game.players],
        "deck": deck_to_list(game.deck),
        "current_card": card_to_dict(game.current_card),
    }


def game_from_dict(data: Dict[str, Any]) -> Game:
    players = _require_list(_require(data, "players", "game"), "game players")
    return Game(
        players=[player_from_dict(p) for p in players],
        deck=deck_from_list(_require(data, "deck", "game")),
        current_card=card_from_dict(_require(data, "current_card", "game")),
    )


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e


def dumps_card(card: Card) -> str:
    return json.dumps(card_to_dict(card))


def loads_card(text: str) -> Card:
    return card_from_dict(_loads(text))


def dumps_player(player: Player) -> str:
    return json.dumps(player_to_dict(player))


def loads_player(text: str) -> Player:
    return player_from_dict(_loads(text))


def dumps_game(game: Game, indent: int | None = None) -> str:
    return json.dumps(game_to_dict(game), indent=indent)


def loads_game(text: str) -> Game:
    return game_from_dict(_loads(text))
