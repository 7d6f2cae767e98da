"""Seat a few players, deal them a hand and print the saved state."""

import random

from unocore.engine import Player, dumps_game, loads_game, new_game


def main():
    rng = random.Random(42)
    game = new_game(rng=rng)

    for turn, name in enumerate(["Ana", "Bo", "Cy", "Dee"]):
        player = Player()
        player.set_name(name)
        player.set_turn(turn)
        game.add_player(player)

    for _ in range(7):
        for player in game.players:
            game.draw_for(player)

    print(f"Face-up card: {game.current_card}")
    for player in game.players:
        print(f"{player.name}: {', '.join(str(c) for c in player.cards)}")

    # Put the face-up card back under the pile and reshuffle what is left
    game.deck.push_back(game.current_card)
    game.reshuffle(rng=rng)
    game.current_card = game.draw_top()
    print(f"New face-up card: {game.current_card} ({len(game.deck)} cards left)")

    text = dumps_game(game)
    assert loads_game(text) == game
    print(f"Serialized state: {len(text)} bytes")

if __name__ == "__main__":
    main()
