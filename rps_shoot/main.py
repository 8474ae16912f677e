"""Command-line entry point for rps-shoot.

Commands:
  - play   : Play rounds over the given moves (odd count, at least three).
  - verify : Check a revealed key and move against a published HMAC.

Example:
  rps-shoot play Rock Paper Scissors Lizard Spock
  rps-shoot verify <key-hex> Rock <hmac-hex>
"""

from typing import List, Optional, Sequence, Union

import typer

from rps_shoot.config import settings
from rps_shoot.constants import EXIT_CHOICE, HELP_CHOICE, USAGE_EXAMPLE, MenuChoice
from rps_shoot.errors import InvalidMoveSet, RandomnessUnavailable
from rps_shoot.services.game_service import GameSession
from rps_shoot.utils.commit_reveal import verify_commitment
from rps_shoot.utils.outcome import validate_move_set

app = typer.Typer(
    name="rps-shoot",
    help="Generalized rock-paper-scissors with a verifiable HMAC commitment.",
    no_args_is_help=True,
)


def menu_selector(moves: Sequence[str]) -> Union[str, MenuChoice]:
    """Show the numbered move menu and read one choice."""
    typer.echo("Available moves:")
    for i, move in enumerate(moves, start=1):
        typer.echo(f"{i} - {move}")
    typer.echo("0 - exit")
    typer.echo("? - help")
    try:
        raw = typer.prompt("Enter your move").strip()
    except typer.Abort:
        return EXIT_CHOICE

    if raw == "0":
        return EXIT_CHOICE
    if raw == "?":
        return HELP_CHOICE
    if raw.isdigit() and 1 <= int(raw) <= len(moves):
        return moves[int(raw) - 1]
    return raw


@app.command()
def play(
    moves: List[str] = typer.Argument(..., help="Move names, in cycle order"),
    rounds: Optional[int] = typer.Option(None, "--rounds", "-n", min=1, help="Stop after this many rounds"),
) -> None:
    """Play against the computer."""
    try:
        move_set = validate_move_set(moves)
    except InvalidMoveSet as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Example usage: {USAGE_EXAMPLE}", err=True)
        raise typer.Exit(1)

    session = GameSession(move_set, selector=menu_selector, output=typer.echo, key_bytes=settings.key_bytes)
    try:
        summary = session.play(rounds=rounds)
    except RandomnessUnavailable as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Rounds: {summary.rounds}  wins: {summary.wins}  losses: {summary.losses}  draws: {summary.draws}")
    typer.echo("Goodbye!")


@app.command()
def verify(
    key: str = typer.Argument(..., help="Revealed HMAC key (hex)"),
    move: str = typer.Argument(..., help="Revealed computer move"),
    commitment: str = typer.Argument(..., help="HMAC shown before you chose"),
) -> None:
    """Check that a key and move reproduce an HMAC."""
    if verify_commitment(key, move, commitment):
        typer.echo("OK: the HMAC matches this key and move.")
        return
    typer.echo("MISMATCH: the HMAC does not match this key and move.", err=True)
    raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
