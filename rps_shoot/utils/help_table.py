"""Help table rendering for the outcome matrix."""

from typing import List, Sequence

from tabulate import tabulate

from rps_shoot.constants import TABLE_CORNER, TABLE_LABELS
from rps_shoot.utils.outcome import beats, full_matrix, loses_to, validate_move_set

HELP_INTRO = (
    "Each move beats the half of the moves listed before it (wrapping around)\n"
    "and loses to the half listed after it.\n"
    "The table shows the result for you (columns) against the computer (rows)."
)


def move_summary(moves: Sequence[str]) -> List[str]:
    """One line per move naming what it beats and what it loses to."""
    move_set = validate_move_set(moves)
    return [
        f"{move} beats {', '.join(beats(move, move_set))}; loses to {', '.join(loses_to(move, move_set))}"
        for move in move_set
    ]


def help_rows(moves: Sequence[str]) -> List[List[str]]:
    """Rows of the help table: computer move, then the user's result per column."""
    move_set = validate_move_set(moves)
    matrix = full_matrix(move_set)
    rows = []
    for j, pc_move in enumerate(move_set):
        # matrix[i][j] is the user's move i against the computer's move j
        rows.append([pc_move] + [TABLE_LABELS[matrix[i][j]] for i in range(len(move_set))])
    return rows


def render_help_table(moves: Sequence[str]) -> str:
    """Explanation text, a per-move summary, then a grid table of every pairing."""
    move_set = validate_move_set(moves)
    summary = "\n".join(move_summary(move_set))
    table = tabulate(help_rows(move_set), headers=[TABLE_CORNER, *move_set], tablefmt="grid")
    return f"{HELP_INTRO}\n{summary}\n{table}"
