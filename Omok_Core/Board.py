"""Board state container: fixed 15x15 grid of Empty/Black/White cells."""

from enum import IntEnum

from .engine.errors import CellOccupied, OutOfBounds

BOARD_SIZE = 15
WIN_LENGTH = 5


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self):
        if self is Cell.EMPTY:
            raise ValueError("empty cell has no opponent")
        return Cell.WHITE if self is Cell.BLACK else Cell.BLACK

    @property
    def label(self):
        return self.name.capitalize()


class Board:
    size = BOARD_SIZE

    def __init__(self):
        # cells[row][col]
        self.cells = [[Cell.EMPTY] * self.size for _ in range(self.size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == Cell.EMPTY

    def get(self, pos):
        row, col = pos
        if not self.in_bounds(row, col):
            raise OutOfBounds(pos)
        return self.cells[row][col]

    def place(self, pos, color):
        """Place a stone; raise if out of bounds or occupied."""
        if color not in (Cell.BLACK, Cell.WHITE):
            raise ValueError("color must be Cell.BLACK or Cell.WHITE")
        row, col = pos
        if not self.in_bounds(row, col):
            raise OutOfBounds(pos)
        if self.cells[row][col] != Cell.EMPTY:
            raise CellOccupied(pos)
        self.cells[row][col] = Cell(color)
        self.move_count += 1
        self.history.append((row, col))

    def is_full(self):
        return all(v != Cell.EMPTY for row in self.cells for v in row)

    def clone(self):
        new_board = Board()
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def snapshot(self):
        """Immutable copy of the grid for readers outside the session."""
        return tuple(tuple(row) for row in self.cells)

    # Hypothetical placements used by rule checks and AI search. Callers must
    # pair every push with a pop (see engine.rules.simulate).
    def _push_stone(self, row, col, color):
        self.cells[row][col] = color

    def _pop_stone(self, row, col):
        self.cells[row][col] = Cell.EMPTY
