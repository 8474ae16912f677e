"""Outcome engine for generalized rock-paper-scissors.

A move set is an ordered, odd-length cycle of distinct labels. Every move
beats the floor(N/2) moves that precede it in the cycle and loses to the
floor(N/2) moves that follow it, so each pair of distinct moves has exactly
one winner.

This module is pure: no randomness, no I/O.
"""

from typing import Iterable, Sequence, Tuple

from rps_shoot.constants import DRAW, MIN_MOVES, OUTCOME_SIGN, WIN_A, WIN_B, Outcome
from rps_shoot.errors import InvalidMove, InvalidMoveSet

OutcomeMatrix = Tuple[Tuple[Outcome, ...], ...]


def validate_move_set(moves: Iterable[str]) -> Tuple[str, ...]:
    """Check a move list and return it as a tuple.

    Args:
        moves: Move labels in cycle order

    Returns:
        The labels as an immutable tuple, order preserved

    Raises:
        InvalidMoveSet: Fewer than three moves, an even count, a blank
            label, or a repeated label
    """
    move_set = tuple(moves)
    if len(move_set) < MIN_MOVES or len(move_set) % 2 == 0:
        raise InvalidMoveSet(
            f"You must provide an odd number of moves, at least {MIN_MOVES} (got {len(move_set)})"
        )
    if any(not isinstance(m, str) or not m.strip() for m in move_set):
        raise InvalidMoveSet("Move names must be non-empty strings")

    seen = set()
    duplicates = []
    for move in move_set:
        if move in seen and move not in duplicates:
            duplicates.append(move)
        seen.add(move)
    if duplicates:
        raise InvalidMoveSet(f"All moves must be unique (repeated: {', '.join(duplicates)})")
    return move_set


def move_index(move: str, moves: Sequence[str]) -> int:
    """Return the 0-based position of a move, raising InvalidMove if absent."""
    try:
        return list(moves).index(move)
    except ValueError:
        raise InvalidMove(move) from None


def compare(move_a: str, move_b: str, moves: Sequence[str]) -> Outcome:
    """Decide the result of move_a against move_b.

    With a, b the indices of the two moves, n the set size and p = n // 2:

        delta = ((a - b + p + n) mod n) - p

    delta == 0 is a draw, delta > 0 means move_a wins, delta < 0 means
    move_b wins. Python's % already returns a non-negative result for a
    positive modulus.

    Args:
        move_a: First move label
        move_b: Second move label
        moves: The active move set

    Returns:
        "WIN_A", "WIN_B" or "DRAW"

    Raises:
        InvalidMoveSet: The move set is malformed
        InvalidMove: Either move is not in the set
    """
    move_set = validate_move_set(moves)
    a = move_index(move_a, move_set)
    b = move_index(move_b, move_set)
    n = len(move_set)
    p = n // 2

    delta = ((a - b + p + n) % n) - p
    if delta == 0:
        return DRAW
    return WIN_A if delta > 0 else WIN_B


def outcome_sign(outcome: Outcome) -> int:
    """Signed view of an outcome: +1 for WIN_A, -1 for WIN_B, 0 for DRAW."""
    return OUTCOME_SIGN[outcome]


def full_matrix(moves: Sequence[str]) -> OutcomeMatrix:
    """Compare every ordered pair of moves.

    Row i, column j holds compare(moves[i], moves[j]). The result is
    antisymmetric and its diagonal is all draws.
    """
    move_set = validate_move_set(moves)
    return tuple(
        tuple(compare(row, col, move_set) for col in move_set)
        for row in move_set
    )


def beats(move: str, moves: Sequence[str]) -> Tuple[str, ...]:
    """Moves that the given move defeats, in set order."""
    move_set = validate_move_set(moves)
    move_index(move, move_set)
    return tuple(other for other in move_set if compare(move, other, move_set) == WIN_A)


def loses_to(move: str, moves: Sequence[str]) -> Tuple[str, ...]:
    """Moves that defeat the given move, in set order."""
    move_set = validate_move_set(moves)
    move_index(move, move_set)
    return tuple(other for other in move_set if compare(move, other, move_set) == WIN_B)
