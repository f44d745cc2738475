"""CLI options for selecting the game mode, interface, and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku (15x15, five in a row)")
    parser.add_argument(
        "--mode",
        choices=["pvp", "pve"],
        default=None,
        help="pvp: two humans; pve: human Black vs computer White (default from settings)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for humans)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's tie-breaking")
    parser.add_argument("--ai-delay", type=float, default=None, help="Cosmetic pause before the computer moves (seconds)")
    parser.add_argument("--log-level", default=None, help="Diagnostics level (DEBUG, INFO, WARNING)")
    return parser.parse_args(argv)
