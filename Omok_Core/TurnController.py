"""Two-state turn machine: Black to move / White to move."""

from .Board import Cell


class TurnController:
    def __init__(self, first=Cell.BLACK):
        self.current = first
        self.frozen = False

    def advance(self):
        """Flip to the other player after a successful non-terminal placement."""
        if self.frozen:
            raise RuntimeError("turn order is frozen after the game ended")
        self.current = self.current.opponent
        return self.current

    def freeze(self):
        self.frozen = True
