"""Round state models for rps-shoot."""

from typing import Optional, Sequence

from rps_shoot.constants import MIN_KEY_BYTES, CommitState
from rps_shoot.errors import InvalidState
from rps_shoot.utils.commit_reveal import (
    KeyLike,
    compute_commitment,
    generate_key,
    verify_commitment,
)
from rps_shoot.utils.outcome import move_index, validate_move_set


class CommitmentManager:
    """Commit-reveal state for one round.

    UNCOMMITTED -> commit() -> COMMITTED -> reveal() -> REVEALED.
    An instance is never reused; every round gets a new one and therefore a
    new key.
    """

    __slots__ = ("_state", "_key", "_move", "_commitment", "_moves", "_key_bytes")

    def __init__(self, moves: Optional[Sequence[str]] = None, key_bytes: int = MIN_KEY_BYTES):
        self._state: CommitState = "UNCOMMITTED"
        self._key: Optional[bytes] = None
        self._move: Optional[str] = None
        self._commitment: Optional[str] = None
        self._moves = validate_move_set(moves) if moves is not None else None
        self._key_bytes = key_bytes

    @property
    def state(self) -> CommitState:
        return self._state

    @property
    def commitment(self) -> Optional[str]:
        """Hex commitment, None until commit() has run."""
        return self._commitment

    @property
    def key_hex(self) -> str:
        """Revealed key as hex. Only available after reveal()."""
        if self._state != "REVEALED" or self._key is None:
            raise InvalidState("Key is only available after reveal")
        return self._key.hex()

    def commit(self, move: str) -> str:
        """Commit to a move and return the hex commitment.

        Raises:
            InvalidState: Already committed or revealed
            InvalidMove: The manager is bound to a move set and move is not in it
            RandomnessUnavailable: No key could be generated
        """
        if self._state != "UNCOMMITTED":
            raise InvalidState(f"Cannot commit from state {self._state}")
        if self._moves is not None:
            move_index(move, self._moves)

        key = generate_key(self._key_bytes)
        commitment = compute_commitment(key, move)

        self._key = key
        self._move = move
        self._commitment = commitment
        self._state = "COMMITTED"
        return commitment

    def reveal(self) -> bytes:
        """Disclose the key used by commit(). Valid once, after commit().

        Raises:
            InvalidState: Not in the COMMITTED state
        """
        if self._state != "COMMITTED" or self._key is None:
            raise InvalidState(f"Cannot reveal from state {self._state}")
        self._state = "REVEALED"
        return self._key

    @staticmethod
    def verify(key: KeyLike, move: str, commitment: str) -> bool:
        """Recompute HMAC(key, move) and compare it to commitment."""
        return verify_commitment(key, move, commitment)

    def __repr__(self) -> str:
        # never include the key or the move
        return f"CommitmentManager(state={self._state!r}, commitment={self._commitment!r})"
