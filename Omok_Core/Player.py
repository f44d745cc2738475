"""Player interface for human or computer controllers."""

import time


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, session):
        """Return (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, reader=None):
        super().__init__(color)
        self.reader = reader

    def next_move(self, session):
        """Text-input player; raises ValueError on malformed input."""
        read = self.reader or input
        raw = read(f"{self.color.label}, enter move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class GuiHumanPlayer(Player):
    def __init__(self, color, view):
        super().__init__(color)
        self.view = view

    def next_move(self, session):
        return self.view.wait_for_move(session)


class ComputerPlayer(Player):
    """Plays the heuristic move; the optional delay is cosmetic only."""

    def __init__(self, color, think_delay=0.0, sleeper=time.sleep):
        super().__init__(color)
        self.think_delay = think_delay
        self.sleeper = sleeper

    def next_move(self, session):
        if self.think_delay > 0:
            self.sleeper(self.think_delay)
        return session.computer_turn()
