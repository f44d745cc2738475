"""Candidate enumeration (row-major empty cells) and random tie-breaking."""

import random


def empty_cells(board):
    """Yield every empty cell in row-major order."""
    for row in range(board.size):
        for col in range(board.size):
            if board.cells[row][col] == 0:
                yield (row, col)


def best_candidates(scored):
    """
    Return (max_score, cells attaining it) from an iterable of (cell, score).
    Cells keep their input order.
    """
    max_score = None
    best = []
    for cell, score in scored:
        if max_score is None or score > max_score:
            max_score = score
            best = [cell]
        elif score == max_score:
            best.append(cell)
    return max_score, best


def pick(candidates, rng=None):
    """Pick uniformly at random among candidates using `rng` (a random.Random)."""
    if not candidates:
        raise ValueError("no candidates to choose from")
    rng = rng or random
    return rng.choice(candidates)
