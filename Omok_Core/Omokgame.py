"""Interactive game loop: asks each player for a move and commits it."""

import time

from .Session import Continued, Drawn, Won
from .engine.errors import MoveError

ALERT_TEXT = {4: "4 in a row", 3: "3 in a row"}


class Omokgame:
    def __init__(self, session, black_player, white_player, logger=print, renderer=None, closer=None, final_pause=3.0):
        self.session = session
        self.players = {p.color: p for p in (black_player, white_player)}
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.final_pause = final_pause

    def play(self):
        """Run the session to the end. Returns the winning Cell, or None for a draw."""
        session = self.session
        try:
            while session.active:
                if self.renderer:
                    self.renderer(session)

                color = session.current_player
                player = self.players[color]
                try:
                    move = player.next_move(session)
                    outcome = session.attempt_move(move, color)
                except MoveError as exc:
                    self.logger(f"Rejected move ({exc.kind}): {exc}")
                    continue
                except ValueError as exc:
                    self.logger(f"Invalid input: {exc}")
                    continue

                self.logger(f"Move {session.move_count}: {color.label[0]} {move}")
                if getattr(outcome, "alert", None):
                    self.logger(f"{color.label}: {ALERT_TEXT[outcome.alert]}")

                if isinstance(outcome, Won):
                    self.logger(f"Winner: {outcome.player.label} {list(outcome.line)}")
                elif isinstance(outcome, Drawn):
                    self.logger("Result: Draw (board full)")

            if self.renderer:
                self.renderer(session)
                # Pause to show the result
                if self.final_pause:
                    time.sleep(self.final_pause)

            return session.winner
        finally:
            if self.closer:
                self.closer()


def describe(outcome):
    """One-line summary of a move outcome for logs and status bars."""
    if isinstance(outcome, Won):
        return f"{outcome.player.label} wins"
    if isinstance(outcome, Drawn):
        return "Draw"
    if isinstance(outcome, Continued):
        return f"{outcome.next_player.label} to move"
    return "Game not started"
