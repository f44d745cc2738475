"""Directional counts and open ends through a cell."""

from Omok_Core.Board import Board, Cell
from Omok_Core.engine import line_scanner


def _board_with(stones):
    b = Board()
    for pos, color in stones:
        b.place(pos, color)
    return b


def test_lone_cell_counts_itself_with_two_open_ends():
    b = Board()
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (0, 1)) == (1, 2)


def test_run_counts_both_directions_and_open_ends():
    b = _board_with([((7, 5), Cell.BLACK), ((7, 6), Cell.BLACK), ((7, 8), Cell.BLACK)])
    # (7, 7) is empty: scanned as if Black played there
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (0, 1)) == (4, 2)
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (1, 0)) == (1, 2)


def test_opponent_stone_closes_an_end():
    b = _board_with([((7, 6), Cell.BLACK), ((7, 5), Cell.WHITE)])
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (0, 1)) == (2, 1)


def test_board_edge_is_not_an_open_end():
    b = _board_with([((0, 1), Cell.WHITE)])
    assert line_scanner.scan(b, (0, 0), Cell.WHITE, (0, 1)) == (2, 1)
    assert line_scanner.scan(b, (0, 0), Cell.WHITE, (1, 1)) == (1, 1)
    # corner, anti-diagonal: both ends off board
    assert line_scanner.scan(b, (0, 0), Cell.WHITE, (1, -1)) == (1, 0)


def test_diagonals():
    b = _board_with([((6, 6), Cell.BLACK), ((8, 8), Cell.BLACK), ((6, 8), Cell.BLACK)])
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (1, 1)) == (3, 2)
    assert line_scanner.scan(b, (7, 7), Cell.BLACK, (1, -1)) == (2, 2)


def test_collect_run_starts_at_pos_then_forward_then_backward():
    b = _board_with([((3, c), Cell.BLACK) for c in (2, 3, 5)])
    assert line_scanner.collect_run(b, (3, 4), Cell.BLACK, (0, 1)) == [(3, 4), (3, 5), (3, 3), (3, 2)]


def test_collect_run_reaches_at_most_four_each_way():
    b = _board_with([((5, c), Cell.WHITE) for c in range(15) if c != 7])
    line = line_scanner.collect_run(b, (5, 7), Cell.WHITE, (0, 1))
    assert len(line) == 9
    assert line[0] == (5, 7)


def test_max_consecutive_picks_longest_axis():
    b = _board_with([((r, 4), Cell.BLACK) for r in (1, 2, 3)] + [((4, 5), Cell.BLACK)])
    assert line_scanner.max_consecutive(b, (4, 4), Cell.BLACK) == 4
