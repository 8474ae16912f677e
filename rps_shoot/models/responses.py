"""Pydantic result models for rps-shoot."""

from typing import Optional

from pydantic import BaseModel

from rps_shoot.constants import WIN_A, WIN_B, Outcome


class RoundResult(BaseModel):
    """Outcome of one played round, as shown to the user."""
    user_move: str
    computer_move: str
    outcome: Outcome  # WIN_A = user won
    commitment: str
    key_hex: str
    verified: bool


class SessionSummary(BaseModel):
    """Totals for a session of rounds."""
    rounds: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    last: Optional[RoundResult] = None

    def record(self, result: RoundResult) -> None:
        """Add a round to the totals."""
        self.rounds += 1
        if result.outcome == WIN_A:
            self.wins += 1
        elif result.outcome == WIN_B:
            self.losses += 1
        else:
            self.draws += 1
        self.last = result
