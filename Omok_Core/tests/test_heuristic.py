"""Heuristic opponent: win/block priority, scoring, tie-breaking, and board restoration."""

import random

import pytest

from Omok_Core.Board import Board, Cell
from Omok_Core.ai import heuristic, move_selector
from Omok_Core.engine.errors import GameAlreadyOver


def _board_with(black=(), white=()):
    b = Board()
    for pos in black:
        b.place(pos, Cell.BLACK)
    for pos in white:
        b.place(pos, Cell.WHITE)
    return b


def test_takes_immediate_win_first_in_row_major_order():
    b = _board_with(
        black=[(3, 5), (3, 6), (3, 7), (3, 8)],
        white=[(7, 3), (7, 4), (7, 5), (7, 6)],
    )
    before = b.snapshot()
    # Both (7, 2) and (7, 7) win; Black's threat on row 3 is ignored.
    assert heuristic.choose_move(b, Cell.WHITE, Cell.BLACK, rng=random.Random(0)) == (7, 2)
    assert b.snapshot() == before


def test_blocks_opponent_four_when_no_win():
    b = _board_with(
        black=[(3, 5), (3, 6), (3, 7), (3, 8)],
        white=[(10, 10), (12, 1)],
    )
    before = b.snapshot()
    for seed in range(5):
        assert heuristic.choose_move(b, Cell.WHITE, rng=random.Random(seed)) == (3, 4)
    assert b.snapshot() == before


def test_blocks_split_four():
    b = _board_with(black=[(5, 5), (6, 6), (8, 8), (9, 9)], white=[(0, 14)])
    assert heuristic.choose_move(b, Cell.WHITE) == (7, 7)


def test_find_winning_move_none_without_four():
    b = _board_with(black=[(7, 7), (7, 8), (7, 9)])
    assert heuristic.find_winning_move(b, Cell.BLACK) is None


def test_empty_board_prefers_center():
    b = Board()
    assert heuristic.choose_move(b, Cell.WHITE, rng=random.Random(123)) == (7, 7)


def test_center_bonus():
    assert heuristic.center_bonus((7, 7)) == 30
    assert heuristic.center_bonus((7, 8)) == 29
    assert heuristic.center_bonus((0, 0)) == 16
    assert heuristic.center_bonus((14, 0)) == 16


def test_evaluate_line_sums_axes():
    b = _board_with(black=[(7, 6), (6, 7)])
    # open two horizontally and vertically, nothing on the diagonals
    assert heuristic.evaluate_line(b, (7, 7), Cell.BLACK) == 200
    assert heuristic.evaluate_line(b, (7, 7), Cell.WHITE) == 0


def test_score_cell_weights_defense():
    b = _board_with(black=[(7, 6), (7, 5)], white=[(6, 7)])
    # attack: white open two vertically (100); defense: black open three (1000 * 1.2)
    expected = 100 + 1000 * 1.2 + heuristic.center_bonus((7, 7))
    assert heuristic.score_cell(b, (7, 7), Cell.WHITE, Cell.BLACK) == pytest.approx(expected)


def test_ties_broken_among_maximal_cells_with_injected_rng():
    b = _board_with(black=[(7, 7)])
    scored = [(pos, heuristic.score_cell(b, pos, Cell.WHITE, Cell.BLACK)) for pos in move_selector.empty_cells(b)]
    _, best = move_selector.best_candidates(scored)
    assert best == [(6, 7), (7, 6), (7, 8), (8, 7)]

    for seed in range(10):
        expected = random.Random(seed).choice(best)
        assert heuristic.choose_move(b, Cell.WHITE, rng=random.Random(seed)) == expected


def test_choose_move_does_not_mutate_board():
    rng = random.Random(7)
    b = _board_with(black=[(7, 7), (8, 8), (6, 8)], white=[(7, 8), (9, 9)])
    before = b.snapshot()
    before_count = b.move_count
    mv = heuristic.choose_move(b, Cell.WHITE, rng=rng)
    assert b.snapshot() == before
    assert b.move_count == before_count
    assert b.is_empty(*mv)


def test_full_board_is_rejected():
    b = Board()
    for r in range(15):
        for c in range(15):
            b.place((r, c), Cell.BLACK if (r + c) % 2 else Cell.WHITE)
    with pytest.raises(GameAlreadyOver):
        heuristic.choose_move(b, Cell.WHITE)


def test_best_candidates_keeps_input_order():
    score, best = move_selector.best_candidates([((0, 0), 1), ((0, 1), 3), ((0, 2), 3), ((0, 3), 2)])
    assert score == 3
    assert best == [(0, 1), (0, 2)]
    with pytest.raises(ValueError):
        move_selector.pick([])
