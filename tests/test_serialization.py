"""Unit tests for game state serialization."""

import json

import pytest
from unocore.engine import Card, CardKind, Color, Deck, Game, Player, SerializationError, new_game
from unocore.engine.serialization import (
    card_from_dict,
    card_to_dict,
    dumps_card,
    dumps_game,
    dumps_player,
    game_from_dict,
    game_to_dict,
    loads_card,
    loads_game,
    loads_player,
    player_from_dict,
)


def _seated_game() -> Game:
    game = new_game(seed=17)
    for turn, name in enumerate(["ana", "bo"]):
        player = game.add_player(Player(name=name, turn=turn))
        for _ in range(3):
            game.draw_for(player)
    return game


def test_card_uses_variant_names() -> None:
    card = Card(color=Color.YELLOW, kind=CardKind.DRAW_TWO)
    assert card_to_dict(card) == {"color": "Yellow", "kind": "DrawTwo"}
    wild = Card(color=Color.WILD, kind=CardKind.WILD_CARD)
    assert json.loads(dumps_card(wild)) == {"color": "Wild", "kind": "WildCard"}


def test_game_field_names() -> None:
    data = game_to_dict(_seated_game())
    assert list(data) == ["players", "deck", "current_card"]
    assert list(data["players"][0]) == ["name", "turn", "cards"]
    assert isinstance(data["deck"], list)
    assert len(data["deck"]) == 56 - 1 - 6


def test_deck_order_is_draw_order() -> None:
    game = _seated_game()
    data = game_to_dict(game)
    top = game.draw_top()
    assert data["deck"][0] == card_to_dict(top)


def test_game_round_trip() -> None:
    game = _seated_game()
    restored = loads_game(dumps_game(game))
    assert restored == game
    assert list(restored.deck) == list(game.deck)
    assert restored.players[1].cards == game.players[1].cards


def test_game_round_trip_through_dict() -> None:
    game = new_game(seed=3)
    assert game_from_dict(game_to_dict(game)) == game


def test_empty_deck_round_trip() -> None:
    game = Game(deck=Deck(), current_card=Card(color=Color.BLUE, kind=CardKind.NINE))
    assert loads_game(dumps_game(game, indent=2)) == game


def test_player_round_trip() -> None:
    player = Player(name="cy", turn=4, cards=[Card(color=Color.GREEN, kind=CardKind.CANCEL)])
    assert loads_player(dumps_player(player)) == player


def test_card_round_trip() -> None:
    for card in [Card(color=Color.RED, kind=CardKind.ZERO), Card(color=Color.WILD, kind=CardKind.DRAW_FOUR)]:
        assert loads_card(dumps_card(card)) == card


@pytest.mark.parametrize(
    "data",
    [
        {"color": "Purple", "kind": "One"},
        {"color": "Red", "kind": "Eleven"},
        {"color": "Red", "kind": "WildCard"},
        {"color": "Wild", "kind": "Reverse"},
        {"color": "Red"},
        ["Red", "One"],
    ],
)
def test_invalid_card_data(data: object) -> None:
    with pytest.raises(SerializationError):
        card_from_dict(data)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "data",
    [
        {"name": "a", "turn": -1, "cards": []},
        {"name": "a", "turn": "1", "cards": []},
        {"name": "a", "turn": True, "cards": []},
        {"name": 5, "turn": 0, "cards": []},
        {"name": "a", "turn": 0, "cards": {}},
        {"name": "a", "turn": 0},
    ],
)
def test_invalid_player_data(data: dict) -> None:
    with pytest.raises(SerializationError):
        player_from_dict(data)


def test_invalid_game_data() -> None:
    data = game_to_dict(new_game(seed=1))
    del data["current_card"]
    with pytest.raises(SerializationError, match="current_card"):
        game_from_dict(data)


def test_invalid_json() -> None:
    with pytest.raises(SerializationError):
        loads_game("{not json")


def test_serialization_error_is_value_error() -> None:
    assert issubclass(SerializationError, ValueError)
