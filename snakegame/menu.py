"""Main menu, level selection and high score screens."""

from __future__ import annotations

import curses
from pathlib import Path

from .scores import get_high_score

GAME = 0
RECORD = 1
RETURN_TO_MENU = 0

_MENU_PAIR = 6
_LEVEL_NAMES = {1: "Easy", 2: "Hard", 3: "Super Hard"}
_ENTER = ord("\n")


def _menu_attr() -> int:
    try:
        return curses.color_pair(_MENU_PAIR)
    except curses.error:
        return 0


def _write(stdscr, y: int, x: int, text: str) -> None:
    try:
        stdscr.addstr(y, x, text, _menu_attr())
    except curses.error:
        pass


def _draw(stdscr, lines: dict[int, str]) -> None:
    stdscr.clear()
    for y, text in lines.items():
        _write(stdscr, y, 5, text)
    stdscr.refresh()


def show_main_menu(stdscr) -> int:
    """Let the player pick an entry; return ``GAME`` or ``RECORD``."""
    stdscr.timeout(-1)
    choice = GAME
    while True:
        _draw(
            stdscr,
            {
                5: "=== SNAKE GAME ===",
                7: f"{'>' if choice == GAME else ' '} Game",
                8: f"{'>' if choice == RECORD else ' '} Record",
                10: "Use UP/DOWN arrows to select",
                11: "Press ENTER to confirm",
            },
        )
        key = stdscr.getch()
        if key in (curses.KEY_UP, curses.KEY_DOWN):
            choice = RECORD if choice == GAME else GAME
        elif key == _ENTER:
            return choice


def select_level(stdscr) -> int:
    """Ask for a level 1-3; return it, or ``RETURN_TO_MENU`` when 'r' is pressed."""
    stdscr.timeout(-1)
    prompt = {5: "Select Level:"}
    prompt.update({5 + level: f"{level}. {name}" for level, name in _LEVEL_NAMES.items()})
    prompt[9] = "Enter your choice (1-3): "
    prompt[10] = "Press 'r' to return to menu"
    while True:
        _draw(stdscr, prompt)
        key = stdscr.getch()
        if key in (ord("r"), ord("R")):
            return RETURN_TO_MENU
        if ord("1") <= key <= ord("3"):
            return key - ord("0")


def show_records(stdscr, directory: str | Path = ".") -> None:
    """Show the stored high score of every level and wait for a key."""
    lines = {3: "=== HIGH SCORES ==="}
    lines.update(
        {4 + level: f"{name} Level: {get_high_score(level, directory)}"
         for level, name in _LEVEL_NAMES.items()}
    )
    lines[9] = "Press any key to return to menu..."
    _draw(stdscr, lines)

    stdscr.timeout(-1)
    stdscr.getch()
    stdscr.timeout(0)