"""CLI entry point for caseboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="caseboard",
        description="Terminal Kanban board for organizing cases into columns",
    )
    parser.add_argument(
        "--theme",
        choices=["dark", "light"],
        default=None,
        help="Color scheme (default: dark, or CASEBOARD_THEME)",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start with an empty board instead of the sample columns",
    )
    parser.add_argument(
        "--print",
        dest="print_board",
        action="store_true",
        help="Print the starting board to stdout and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args, letting flags override the environment."""
    settings_kwargs: dict = {}
    if args.theme:
        settings_kwargs["theme"] = args.theme
    if args.empty:
        settings_kwargs["seed"] = False
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    # The TUI owns the terminal, so stderr logging only for --print
    setup_logging(settings.verbose, settings.log_file, console=args.print_board)

    if args.print_board:
        from .cli import print_board
        from .models import Board

        print_board(Board.seed() if settings.seed else Board())
        raise SystemExit(0)

    # Import here so --print does not load Textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
