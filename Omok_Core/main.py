"""Entry point for Gomoku matches. Load config, wire players, start Omokgame."""

import random
from pathlib import Path

import yaml

from .Board import Board, Cell
from .Omokgame import Omokgame, describe
from .Player import ComputerPlayer, GuiHumanPlayer, HumanPlayer
from .Session import Mode, new_session
from .gui.pygame_view import PygameView, WindowClosed
from .gui.text_view import TextView
from .utils.cli import parse_args
from .utils.logger import configure_logging, log_event

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "mode": "pve",
    "gui": False,
    "ai_delay_seconds": 0.5,
    "seed": None,
    "window_size": 640,
    "log_level": "WARNING",
}


def resolve_project_path(path):
    """Resolve a package-relative path when invoked from outside `Omok_Core/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read YAML settings over the defaults; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(resolve_project_path(path), "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def build_players(mode, view=None, ai_delay=0.0):
    if view:
        black = GuiHumanPlayer(Cell.BLACK, view)
    else:
        black = HumanPlayer(Cell.BLACK)

    if mode is Mode.PVE:
        white = ComputerPlayer(Cell.WHITE, think_delay=ai_delay)
    elif view:
        white = GuiHumanPlayer(Cell.WHITE, view)
    else:
        white = HumanPlayer(Cell.WHITE)
    return black, white


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure_logging(args.log_level or settings["log_level"])
    mode = Mode(args.mode or settings["mode"])
    use_gui = args.gui or bool(settings["gui"])
    seed = args.seed if args.seed is not None else settings["seed"]
    ai_delay = args.ai_delay if args.ai_delay is not None else float(settings["ai_delay_seconds"])

    session = new_session(mode, rng=random.Random(seed))

    view = None
    if use_gui:
        view = PygameView(board_size=Board.size, window_size=settings["window_size"])
        renderer = view.render
    else:
        renderer = TextView().render

    black, white = build_players(mode, view=view, ai_delay=ai_delay)
    game = Omokgame(
        session,
        black_player=black,
        white_player=white,
        logger=log_event,
        renderer=renderer,
        closer=view.close if view else None,
        final_pause=3.0 if view else 0.0,
    )
    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted")
        return 1
    except WindowClosed as exc:
        print(f"Game aborted: {exc}")
        return 1
    print(describe(session.outcome))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
