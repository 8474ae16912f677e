"""Error types raised by the rps-shoot core.

The core never prints or exits; callers catch these and decide whether to
abort (bad move set), re-prompt (bad move) or start a fresh round.
"""


class GameError(Exception):
    """Base class for all rps-shoot errors."""


class InvalidMoveSet(GameError):
    """The move list is too short, has an even length, or repeats a label."""


class InvalidMove(GameError):
    """A move is not a member of the active move set."""

    def __init__(self, move: str):
        self.move = move
        super().__init__(f"Unknown move: {move!r}")


class InvalidState(GameError):
    """A commitment operation was called out of sequence."""


class RandomnessUnavailable(GameError):
    """The operating system's secure random source failed."""
