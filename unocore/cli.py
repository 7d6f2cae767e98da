"""CLI entry point."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional

import typer

from unocore.config import load_settings

app = typer.Typer(help="Create, save and inspect Uno game states")

logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """Load settings from the environment and configure logging."""
    try:
        settings = load_settings()
    except ValueError as e:
        raise typer.BadParameter(str(e))
    logging.basicConfig(level=settings.log_level)


def _resolve_seed(seed: Optional[int]) -> Optional[int]:
    if seed is not None:
        return seed
    return load_settings(dotenv=False).seed


@app.command("new-game")
def new_game_command(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (defaults to UNOCORE_SEED)"),
    players: Optional[List[str]] = typer.Option(
        None,
        "--player",
        "-p",
        help="Seat a player by name; repeat for each player, in turn order",
    ),
    hand_size: int = typer.Option(0, "--hand-size", "-n", help="Cards dealt to each player"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON state to this file"),
) -> None:
    """Start a game, optionally seat players and deal, and emit its JSON state."""
    from unocore.engine import Player, dumps_game, new_game

    if hand_size < 0:
        raise typer.BadParameter("Hand size must be non-negative", param_hint="--hand-size")

    game = new_game(seed=_resolve_seed(seed))
    for turn, name in enumerate(players or []):
        player = Player()
        player.set_name(name)
        player.set_turn(turn)
        game.add_player(player)

    if hand_size * len(game.players) > len(game.deck):
        raise typer.BadParameter(
            f"Cannot deal {hand_size} cards to {len(game.players)} players from {len(game.deck)} cards",
            param_hint="--hand-size",
        )
    for _ in range(hand_size):
        for player in game.players:
            game.draw_for(player)
    logger.info("Dealt %d cards to %d players", hand_size, len(game.players))

    text = dumps_game(game, indent=2)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Saved game to {output}")


@app.command()
def show(path: Path = typer.Argument(..., help="Saved game JSON file")) -> None:
    """Print a summary of a saved game."""
    from unocore.engine import SerializationError, loads_game

    try:
        game = loads_game(path.read_text(encoding="utf-8"))
    except OSError as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1)
    except SerializationError as e:
        typer.echo(f"Invalid game file {path}: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Face-up card: {game.current_card}")
    typer.echo(f"Cards in deck: {len(game.deck)}")
    typer.echo(f"Players: {len(game.players)}")
    for player in sorted(game.players, key=lambda p: p.turn):
        hand = ", ".join(str(c) for c in player.cards) or "-"
        typer.echo(f"  [{player.turn}] {player.name or '(unnamed)'}: {hand}")


@app.command()
def deck(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (defaults to UNOCORE_SEED)"),
) -> None:
    """Print the composition of a freshly generated deck."""
    from unocore.engine import create_deck

    cards = create_deck(seed=_resolve_seed(seed))
    counts = Counter((c.color, c.kind) for c in cards)
    typer.echo(f"Total: {len(cards)} cards")
    for (color, kind), n in sorted(counts.items(), key=lambda x: (x[0][0].value, x[0][1].value)):
        typer.echo(f"  {color.value} {kind.value}: {n}")


if __name__ == "__main__":
    app()
