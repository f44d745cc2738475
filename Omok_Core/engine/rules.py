"""Gomoku rule enforcement: win/draw detection and threat classification."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum

from ..Board import Board, Cell, WIN_LENGTH
from . import line_scanner


class ThreatLevel(Enum):
    FIVE = "five"
    OPEN_FOUR = "open_four"
    OPEN_THREE = "open_three"
    BLOCKED_THREE = "blocked_three"
    OPEN_TWO = "open_two"
    BLOCKED_TWO = "blocked_two"
    NONE = "none"


# Single source of the (count, open ends) weights used by AI scoring and alerts.
THREAT_WEIGHTS = {
    ThreatLevel.FIVE: 100000,
    ThreatLevel.OPEN_FOUR: 10000,
    ThreatLevel.OPEN_THREE: 1000,
    ThreatLevel.BLOCKED_THREE: 100,
    ThreatLevel.OPEN_TWO: 100,
    ThreatLevel.BLOCKED_TWO: 10,
    ThreatLevel.NONE: 0,
}

# Run lengths that trigger a post-move alert, highest first.
ALERT_COUNTS = (4, 3)


@contextmanager
def simulate(board: Board, pos, color: Cell):
    """Temporarily place `color` at an empty `pos`; always restores Empty."""
    row, col = pos
    if not board.is_empty(row, col):
        raise ValueError(f"cannot simulate on non-empty cell {pos}")
    board._push_stone(row, col, color)
    try:
        yield
    finally:
        board._pop_stone(row, col)


def classify_threat(count: int, open_ends: int) -> ThreatLevel:
    if count >= WIN_LENGTH:
        return ThreatLevel.FIVE
    if count == 4 and open_ends >= 1:
        return ThreatLevel.OPEN_FOUR
    if count == 3:
        if open_ends == 2:
            return ThreatLevel.OPEN_THREE
        if open_ends == 1:
            return ThreatLevel.BLOCKED_THREE
    if count == 2:
        if open_ends == 2:
            return ThreatLevel.OPEN_TWO
        if open_ends == 1:
            return ThreatLevel.BLOCKED_TWO
    return ThreatLevel.NONE


def threat_weight(count: int, open_ends: int) -> int:
    return THREAT_WEIGHTS[classify_threat(count, open_ends)]


def check_win(board: Board, pos, color: Cell) -> list[tuple[int, int]] | None:
    """
    Return the winning line through `pos` for `color`, or None.
    The cell at `pos` is counted as `color`; directions are tried in
    DIRECTIONS order and the first run of WIN_LENGTH or more is reported.
    """
    for direction in line_scanner.DIRECTIONS:
        line = line_scanner.collect_run(board, pos, color, direction)
        if len(line) >= WIN_LENGTH:
            return line
    return None


def check_draw(board: Board) -> bool:
    """Only meaningful after a non-winning placement: win check runs first."""
    return board.is_full()


def consecutive_alert(board: Board, pos, color: Cell) -> int | None:
    """Return 4 or 3 when the mover's longest run through `pos` is exactly that, else None."""
    longest = line_scanner.max_consecutive(board, pos, color)
    for count in ALERT_COUNTS:
        if longest == count:
            return count
    return None
