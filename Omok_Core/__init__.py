"""Omok_Core package exports."""

from .Board import Board, Cell, BOARD_SIZE, WIN_LENGTH
from .TurnController import TurnController
from .Session import (
    GameSession,
    Mode,
    Continued,
    Won,
    Drawn,
    new_session,
    attempt_move,
    computer_turn,
)
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer, GuiHumanPlayer, ComputerPlayer
from .engine.errors import MoveError, OutOfBounds, CellOccupied, GameAlreadyOver, NotPlayersTurn

# Subpackages for rule engine, AI, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Cell",
    "BOARD_SIZE",
    "WIN_LENGTH",
    "TurnController",
    "GameSession",
    "Mode",
    "Continued",
    "Won",
    "Drawn",
    "new_session",
    "attempt_move",
    "computer_turn",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "ComputerPlayer",
    "MoveError",
    "OutOfBounds",
    "CellOccupied",
    "GameAlreadyOver",
    "NotPlayersTurn",
    "ai",
    "engine",
    "gui",
    "utils",
]
