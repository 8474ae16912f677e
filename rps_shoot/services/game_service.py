"""Game session service for rps-shoot.

This module runs the round loop:
- Picking and committing to the computer's move before the user chooses
- Collecting the user's move (help and exit are handled here)
- Judging the pair and revealing the key
- Checking the revealed key against the published commitment
"""

import secrets
from typing import Callable, Optional, Sequence, Union

from rps_shoot.config import settings
from rps_shoot.constants import DRAW, EXIT_CHOICE, HELP_CHOICE, WIN_A, WIN_B, MenuChoice
from rps_shoot.errors import InvalidMove
from rps_shoot.models.game import CommitmentManager
from rps_shoot.models.responses import RoundResult, SessionSummary
from rps_shoot.utils.help_table import render_help_table
from rps_shoot.utils.outcome import compare, validate_move_set

# selector(moves) -> a move label, HELP_CHOICE or EXIT_CHOICE
Selector = Callable[[Sequence[str]], Union[str, MenuChoice]]
Output = Callable[[str], None]

RESULT_TEXT = {WIN_A: "You win!", WIN_B: "Computer wins!", DRAW: "Draw!"}


class GameSession:
    """Plays rounds over one validated move set."""

    def __init__(
        self,
        moves: Sequence[str],
        selector: Selector,
        output: Output = print,
        key_bytes: Optional[int] = None,
        chooser: Optional[Callable[[Sequence[str]], str]] = None,
    ):
        self.moves = validate_move_set(moves)
        self.selector = selector
        self.output = output
        self.key_bytes = key_bytes if key_bytes is not None else settings.key_bytes
        self.chooser = chooser or secrets.choice
        self.summary = SessionSummary()

    def _ask(self) -> Optional[str]:
        """Ask until the user gives a move. Returns None on exit."""
        while True:
            choice = self.selector(self.moves)
            if choice is EXIT_CHOICE:
                return None
            if choice is HELP_CHOICE:
                self.output(render_help_table(self.moves))
                continue
            if choice not in self.moves:
                self.output(str(InvalidMove(choice)))
                continue
            return choice

    def play_round(self) -> Optional[RoundResult]:
        """Play one round. Returns None if the user chose to exit."""
        manager = CommitmentManager(self.moves, key_bytes=self.key_bytes)
        computer_move = self.chooser(self.moves)
        commitment = manager.commit(computer_move)
        self.output(f"HMAC: {commitment}")

        user_move = self._ask()
        if user_move is None:
            return None

        outcome = compare(user_move, computer_move, self.moves)
        key = manager.reveal()
        verified = CommitmentManager.verify(key, computer_move, commitment)

        self.output(f"Your move: {user_move}")
        self.output(f"Computer move: {computer_move}")
        self.output(RESULT_TEXT[outcome])
        self.output(f"HMAC key: {manager.key_hex}")

        result = RoundResult(
            user_move=user_move,
            computer_move=computer_move,
            outcome=outcome,
            commitment=commitment,
            key_hex=manager.key_hex,
            verified=verified,
        )
        self.summary.record(result)
        return result

    def play(self, rounds: Optional[int] = None) -> SessionSummary:
        """Play rounds until the user exits or the round limit is reached."""
        if settings.show_banner:
            self.output(settings.banner)
        while rounds is None or self.summary.rounds < rounds:
            if self.play_round() is None:
                break
        return self.summary
