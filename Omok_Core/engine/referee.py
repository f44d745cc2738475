"""Move validation for a game session."""

from .errors import CellOccupied, GameAlreadyOver, NotPlayersTurn, OutOfBounds


def check_move(move, board, color, current_color, active=True):
    """
    Validate a proposed move in order: game over, bounds, turn, occupancy.
    Raises a MoveError subclass on invalid moves; never mutates the board.
    """
    if not active:
        raise GameAlreadyOver(move)

    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBounds(move)
    if color != current_color:
        raise NotPlayersTurn(move, f"it is {current_color.label}'s turn, not {color.label}'s")
    if not board.is_empty(row, col):
        raise CellOccupied(move)

    return True
