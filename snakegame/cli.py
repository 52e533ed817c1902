"""Command entry point: menu loop around the game."""

from __future__ import annotations

import argparse
import curses
from pathlib import Path
from typing import NoReturn

from .game import init_colors, run_game
from .menu import GAME, RECORD, select_level, show_main_menu, show_records
from .scores import get_high_score, save_high_score


def run(stdscr, directory: str | Path = ".") -> NoReturn:
    """Show the main menu forever, starting games and showing records."""
    while True:
        choice = show_main_menu(stdscr)
        if choice == GAME:
            level = select_level(stdscr)
            if level > 0:
                highscore = get_high_score(level, directory)
                score = run_game(stdscr, level, highscore)
                if score > highscore:
                    save_high_score(level, score, directory)
        elif choice == RECORD:
            show_records(stdscr, directory)


def _session(stdscr, directory: str) -> None:
    stdscr.keypad(True)
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    init_colors()
    run(stdscr, directory)


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and play in the terminal until interrupted."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Terminal snake game.")
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding the high score files (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        curses.wrapper(_session, args.directory)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())