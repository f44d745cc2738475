"""Game session: owns the board and turn state and commits moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .Board import Board, Cell
from .TurnController import TurnController
from .ai import heuristic
from .engine import referee, rules
from .engine.errors import GameAlreadyOver, NotPlayersTurn

LOGGER = logging.getLogger(__name__)


class Mode(Enum):
    PVP = "pvp"
    PVE = "pve"


COMPUTER_COLOR = Cell.WHITE


@dataclass(frozen=True)
class Continued:
    next_player: Cell
    alert: int | None = None


@dataclass(frozen=True)
class Won:
    player: Cell
    line: tuple


@dataclass(frozen=True)
class Drawn:
    alert: int | None = None


class GameSession:
    def __init__(self, mode=Mode.PVP, rng=None):
        self.mode = Mode(mode)
        self.rng = rng
        self._board = Board()
        self._turns = TurnController(Cell.BLACK)
        self.active = True
        self.last_move = None
        self.last_alert = None
        self.outcome = None

    @property
    def current_player(self):
        return self._turns.current

    @property
    def is_over(self):
        return not self.active

    @property
    def winner(self):
        return self.outcome.player if isinstance(self.outcome, Won) else None

    @property
    def win_line(self):
        return self.outcome.line if isinstance(self.outcome, Won) else None

    @property
    def move_count(self):
        return self._board.move_count

    def snapshot(self):
        return self._board.snapshot()

    def cell(self, pos):
        return self._board.get(pos)

    def is_computer_turn(self):
        return self.mode is Mode.PVE and self.active and self.current_player == COMPUTER_COLOR

    def attempt_move(self, pos, player):
        """
        Validate and commit `player`'s stone at `pos`, then check win, then draw,
        then advance the turn. Returns Continued, Won or Drawn; raises MoveError.
        """
        pos = tuple(pos)
        player = Cell(player)
        referee.check_move(pos, self._board, player, self.current_player, active=self.active)

        self._board.place(pos, player)
        self.last_move = pos
        self.last_alert = None

        line = rules.check_win(self._board, pos, player)
        if line:
            return self._finish(Won(player, tuple(line)))

        self.last_alert = rules.consecutive_alert(self._board, pos, player)

        if rules.check_draw(self._board):
            return self._finish(Drawn(self.last_alert))

        self.outcome = Continued(self._turns.advance(), self.last_alert)
        return self.outcome

    def _finish(self, outcome):
        self.active = False
        self._turns.freeze()
        self.outcome = outcome
        LOGGER.debug("session finished: %s", outcome)
        return outcome

    def computer_turn(self):
        """Return the computer's chosen cell without committing it."""
        if not self.active:
            raise GameAlreadyOver(message="game is already over")
        if self.mode is not Mode.PVE:
            raise NotPlayersTurn(message="no computer player in player-vs-player mode")
        if self.current_player != COMPUTER_COLOR:
            raise NotPlayersTurn(message=f"it is {self.current_player.label}'s turn")
        return heuristic.choose_move(self._board, COMPUTER_COLOR, COMPUTER_COLOR.opponent, rng=self.rng)

    def play_computer_turn(self):
        pos = self.computer_turn()
        return pos, self.attempt_move(pos, COMPUTER_COLOR)

    def status_text(self):
        if isinstance(self.outcome, Won):
            return f"{self.outcome.player.label} wins!"
        if isinstance(self.outcome, Drawn):
            return "Draw!"
        if self.is_computer_turn():
            return "Computer thinking..."
        return f"{self.current_player.label} to move"

    def rematch(self):
        """Fresh session in the same mode; a finished session is never resumed."""
        return GameSession(self.mode, rng=self.rng)


def new_session(mode=Mode.PVP, rng=None):
    return GameSession(mode, rng=rng)


def attempt_move(session, pos, player):
    return session.attempt_move(pos, player)


def computer_turn(session):
    return session.computer_turn()
