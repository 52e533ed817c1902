import curses

import pytest

from snakegame.menu import GAME, RECORD, RETURN_TO_MENU, select_level, show_main_menu, show_records
from snakegame.scores import save_high_score


class ScriptDone(Exception):
    pass


class FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)
        self.lines = {}
        self.written = []
        self.timeouts = []

    def getch(self):
        if not self.keys:
            raise ScriptDone
        key = self.keys.pop(0)
        return ord(key) if isinstance(key, str) else key

    def addstr(self, y, x, text, attr=0):
        self.lines[y] = text
        self.written.append(text)

    def addch(self, y, x, ch, attr=0):
        pass

    def clear(self):
        self.lines.clear()

    def refresh(self):
        pass

    def timeout(self, delay):
        self.timeouts.append(delay)


def test_main_menu_enter_picks_game():
    screen = FakeScreen(["\n"])
    assert show_main_menu(screen) == GAME
    assert screen.lines[7] == "> Game"
    assert screen.lines[8] == "  Record"


def test_main_menu_down_picks_record():
    screen = FakeScreen([curses.KEY_DOWN, "\n"])
    assert show_main_menu(screen) == RECORD
    assert screen.lines[8] == "> Record"


def test_main_menu_up_toggles_twice_back_to_game():
    assert show_main_menu(FakeScreen([curses.KEY_UP, curses.KEY_UP, "\n"])) == GAME


def test_main_menu_ignores_other_keys():
    assert show_main_menu(FakeScreen(["x", "q", curses.KEY_UP, "\n"])) == RECORD


def test_main_menu_keeps_waiting_without_enter():
    with pytest.raises(ScriptDone):
        show_main_menu(FakeScreen([curses.KEY_DOWN]))


@pytest.mark.parametrize("key", ["r", "R"])
def test_select_level_return(key):
    assert select_level(FakeScreen([key])) == RETURN_TO_MENU


@pytest.mark.parametrize("key, level", [("1", 1), ("2", 2), ("3", 3)])
def test_select_level_valid(key, level):
    assert select_level(FakeScreen([key])) == level


def test_select_level_skips_invalid_keys():
    screen = FakeScreen(["x", "0", "4", "3"])
    assert select_level(screen) == 3
    assert screen.lines[5] == "Select Level:"
    assert screen.lines[8] == "3. Super Hard"


def test_show_records_lists_scores(tmp_path):
    save_high_score(1, 7, tmp_path)
    save_high_score(3, 12, tmp_path)
    screen = FakeScreen(["a"])
    show_records(screen, tmp_path)
    assert screen.lines[3] == "=== HIGH SCORES ==="
    assert screen.lines[5] == "Easy Level: 7"
    assert screen.lines[6] == "Hard Level: 0"
    assert screen.lines[7] == "Super Hard Level: 12"
    assert screen.keys == []
    assert screen.timeouts == [-1, 0]