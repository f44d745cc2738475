"""One-ply heuristic opponent: win now, block now, else best-scored cell."""

from __future__ import annotations

import logging

from . import move_selector
from ..Board import Board, Cell
from ..engine import line_scanner, rules
from ..engine.errors import GameAlreadyOver

LOGGER = logging.getLogger(__name__)

DEFENSE_FACTOR = 1.2


def find_winning_move(board: Board, color: Cell):
    """First empty cell in row-major order where `color` would complete five."""
    for pos in move_selector.empty_cells(board):
        with rules.simulate(board, pos, color):
            if rules.check_win(board, pos, color):
                return pos
    return None


def evaluate_line(board: Board, pos, color: Cell) -> int:
    """Sum of threat weights over the four axes as if `color` had just played `pos`."""
    total = 0
    for count, open_ends in line_scanner.scan_all(board, pos, color):
        total += rules.threat_weight(count, open_ends)
    return total


def center_bonus(pos, size: int = Board.size) -> int:
    center = size // 2
    row, col = pos
    return 2 * size - (abs(row - center) + abs(col - center))


def score_cell(board: Board, pos, color: Cell, opponent: Cell) -> float:
    attack = evaluate_line(board, pos, color)
    defense = evaluate_line(board, pos, opponent)
    return attack + defense * DEFENSE_FACTOR + center_bonus(pos, board.size)


def choose_move(board: Board, color: Cell = Cell.WHITE, opponent: Cell | None = None, rng=None):
    """
    Return the cell `color` should play.
    1. a cell that wins immediately, 2. a cell the opponent would win on,
    3. a uniformly random pick among the highest-scoring empty cells.
    The board is left unchanged.
    """
    if board.is_full():
        raise GameAlreadyOver(message="no empty cell left to play")
    opponent = opponent or color.opponent

    win_move = find_winning_move(board, color)
    if win_move is not None:
        LOGGER.debug("%s wins at %s", color.label, win_move)
        return win_move

    block_move = find_winning_move(board, opponent)
    if block_move is not None:
        LOGGER.debug("%s blocks %s at %s", color.label, opponent.label, block_move)
        return block_move

    scored = ((pos, score_cell(board, pos, color, opponent)) for pos in move_selector.empty_cells(board))
    best_score, best = move_selector.best_candidates(scored)
    LOGGER.debug("best score %s shared by %d cell(s)", best_score, len(best))
    return move_selector.pick(best, rng)
