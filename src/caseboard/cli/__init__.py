"""Command line helpers."""

from .output import build_board_table, print_board

__all__ = ["build_board_table", "print_board"]
