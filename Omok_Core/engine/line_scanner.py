"""Directional line scanning shared by win detection and move scoring."""

from __future__ import annotations

from ..Board import Board, Cell, WIN_LENGTH

# horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _count_dir(board: Board, row: int, col: int, dr: int, dc: int, color: Cell) -> int:
    """Count contiguous stones of color from (row, col) (exclusive) in (dr, dc)."""
    count = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == color:
        count += 1
        r += dr
        c += dc
    return count


def scan(board: Board, pos, color: Cell, direction) -> tuple[int, int]:
    """
    Return (count, open_ends) for the run through `pos` along `direction`,
    counting `pos` itself as a stone of `color` whether or not it is placed.
    """
    row, col = pos
    dr, dc = direction
    count = 1
    open_ends = 0
    for sign in (1, -1):
        run = _count_dir(board, row, col, sign * dr, sign * dc, color)
        count += run
        if board.is_empty(row + sign * dr * (run + 1), col + sign * dc * (run + 1)):
            open_ends += 1
    return count, open_ends


def scan_all(board: Board, pos, color: Cell) -> list[tuple[int, int]]:
    return [scan(board, pos, color, d) for d in DIRECTIONS]


def collect_run(board: Board, pos, color: Cell, direction, reach: int = WIN_LENGTH - 1) -> list[tuple[int, int]]:
    """
    Positions of the run through `pos`: `pos` first, then up to `reach` stones
    in +direction, then up to `reach` stones in -direction.
    """
    row, col = pos
    dr, dc = direction
    line = [(row, col)]
    for sign in (1, -1):
        for i in range(1, reach + 1):
            r, c = row + sign * dr * i, col + sign * dc * i
            if not (board.in_bounds(r, c) and board.cells[r][c] == color):
                break
            line.append((r, c))
    return line


def max_consecutive(board: Board, pos, color: Cell) -> int:
    """Longest run through `pos` across the four axes."""
    return max(count for count, _ in scan_all(board, pos, color))
