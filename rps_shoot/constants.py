"""Constants and type definitions for rps-shoot."""

from enum import Enum
from typing import Dict, Literal

# Type definitions
Outcome = Literal["WIN_A", "WIN_B", "DRAW"]
CommitState = Literal["UNCOMMITTED", "COMMITTED", "REVEALED"]

WIN_A: Outcome = "WIN_A"
WIN_B: Outcome = "WIN_B"
DRAW: Outcome = "DRAW"

OUTCOME_SIGN: Dict[str, int] = {WIN_A: 1, WIN_B: -1, DRAW: 0}

# Move-set rules
MIN_MOVES = 3

# Commitment parameters
MIN_KEY_BYTES = 32  # 256 bits
HMAC_DIGEST = "sha256"


# Menu selections that are not moves; never equal to any move label
class MenuChoice(Enum):
    EXIT = "exit"
    HELP = "help"


EXIT_CHOICE = MenuChoice.EXIT
HELP_CHOICE = MenuChoice.HELP

# Help table cell labels, from the user's point of view
TABLE_LABELS: Dict[str, str] = {WIN_A: "Win", WIN_B: "Lose", DRAW: "Draw"}
TABLE_CORNER = "v PC\\User >"

USAGE_EXAMPLE = "rps-shoot Rock Paper Scissors Lizard Spock"
