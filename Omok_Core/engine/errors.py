"""Recoverable move errors reported back to the caller."""


class MoveError(ValueError):
    """Base class for a rejected move. `pos` is the offending position, if any."""

    message = "invalid move"

    def __init__(self, pos=None, message=None):
        self.pos = tuple(pos) if pos is not None else None
        text = message or self.message
        if self.pos is not None:
            text = f"{text}: {self.pos}"
        super().__init__(text)

    @property
    def kind(self):
        return type(self).__name__


class OutOfBounds(MoveError):
    message = "move out of bounds"


class CellOccupied(MoveError):
    message = "cell already occupied"


class GameAlreadyOver(MoveError):
    message = "game is already over"


class NotPlayersTurn(MoveError):
    message = "not this player's turn"
