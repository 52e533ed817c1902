"""Snake game state, rules and terminal rendering."""

from __future__ import annotations

import curses
import random
import time
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

from .model import SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Obstacle, Point
from .obstacles import generate_obstacles, update_obstacles

MIN_SPEED = 10
GROWTH = 5
PLAY_TOP = 3
GAME_OVER_MESSAGE = "PRESS 'SPACE' TO PLAY AGAIN"

_INITIAL_SNAKE = tuple(Point(x, 15) for x in range(11, 1, -1))
_INITIAL_FOOD = Point(30, 15)

_BORDER_PAIR = 1
_SNAKE_PAIR = 2
_FOOD_PAIR = 3
_TEXT_PAIR = 4
_OBSTACLE_PAIR = 5
_GAME_OVER_TEXT_PAIR = 7
_GAME_OVER_PAIR = 9

_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
}


@dataclass(frozen=True)
class LevelSettings:
    """Per-level tuning: tick length, speed-up per food and obstacle count."""

    initial_speed: int
    speed_step: int
    num_obstacles: int
    obstacles_move: bool


_LEVELS = {
    1: LevelSettings(initial_speed=200, speed_step=20, num_obstacles=3, obstacles_move=False),
    2: LevelSettings(initial_speed=100, speed_step=15, num_obstacles=5, obstacles_move=True),
    3: LevelSettings(initial_speed=50, speed_step=10, num_obstacles=7, obstacles_move=True),
}


def level_settings(level: int) -> LevelSettings:
    """Return the settings for ``level`` (1 easy, 2 hard, 3 super hard)."""
    try:
        return _LEVELS[level]
    except KeyError:
        raise ValueError(f"unknown level: {level!r}") from None


class Game:
    """State of one round: the snake, the food, the obstacles and the score."""

    def __init__(
        self,
        level: int = 1,
        rng: random.Random | None = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        obstacles: Iterable[Obstacle] | None = None,
    ) -> None:
        self.level = level
        self.settings = level_settings(level)
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        if obstacles is None:
            self.obstacles = generate_obstacles(
                self.settings.num_obstacles, self._rng, width, height
            )
        else:
            self.obstacles = list(obstacles)
        self.snake: deque[Point] = deque(_INITIAL_SNAKE)
        self.food = _INITIAL_FOOD
        self.score = 0
        self.direction = Direction.RIGHT
        self.speed = self.settings.initial_speed
        self.dead = False

    @property
    def head(self) -> Point:
        """The cell the snake's head is on."""
        return self.snake[0]

    def turn(self, direction: Direction) -> None:
        """Steer the snake, ignoring a reversal onto itself."""
        if direction is not self.direction.opposite():
            self.direction = direction

    def advance(self) -> bool:
        """Move the snake one cell and apply the rules; return whether it is dead."""
        self.snake.appendleft(self.direction.step(self.head))

        if self.head == self.food:
            self.score += 1
            self.speed = max(MIN_SPEED, self.speed - self.settings.speed_step)
            self._place_food()
            tail = self.snake[-1]
            self.snake.extend([tail] * GROWTH)

        self._wrap_head()

        blocked = {seg for obstacle in self.obstacles for seg in obstacle.segments}
        if any(seg in blocked for seg in self.snake):
            self.dead = True
        if self.head in islice(self.snake, 1, None):
            self.dead = True

        self.snake.pop()
        return self.dead

    def _wrap_head(self) -> None:
        x, y = self.head
        if x < 0:
            x = self.width - 1
        elif x >= self.width:
            x = 0
        if y < PLAY_TOP:
            y = self.height - 1
        elif y >= self.height:
            y = PLAY_TOP
        self.snake[0] = Point(x, y)

    def _place_food(self) -> None:
        while True:
            candidate = Point(
                self._rng.randint(1, self.width - 2),
                self._rng.randint(PLAY_TOP, self.height - 2),
            )
            if candidate in self.snake:
                continue
            if any(obstacle.occupies(candidate) for obstacle in self.obstacles):
                continue
            self.food = candidate
            return

    def _inside(self, point: Point) -> bool:
        return 0 < point.x < self.width - 1 and PLAY_TOP - 1 < point.y < self.height - 1

    def render(self) -> list[str]:
        """Return the board as one string per screen row."""
        width, height = self.width, self.height
        grid = [[" "] * width for _ in range(height)]

        for row in (0, 2, height - 1):
            grid[row] = ["="] * width
        for row in grid:
            row[0] = "|"
            row[-1] = "|"

        score_text = f"Snake Game   SCORE: {self.score}"[: width - 2]
        for offset, ch in enumerate(score_text):
            if 5 + offset < width:
                grid[1][5 + offset] = ch

        for obstacle in self.obstacles:
            for seg in obstacle.segments:
                if self._inside(seg):
                    grid[seg.y][seg.x] = "#"

        body = "+" if self.dead else "@"
        for seg in self.snake:
            if self._inside(seg):
                grid[seg.y][seg.x] = body
        if self._inside(self.head):
            grid[self.head.y][self.head.x] = "X" if self.dead else "@"

        if self._inside(self.food):
            grid[self.food.y][self.food.x] = "%"

        return ["".join(row) for row in grid]


def init_colors() -> None:
    """Start colour support and register the colour pairs the game draws with."""
    curses.start_color()
    curses.init_pair(1, curses.COLOR_BLUE, curses.COLOR_BLACK)
    curses.init_pair(2, curses.COLOR_GREEN, curses.COLOR_GREEN)
    curses.init_pair(3, curses.COLOR_RED, curses.COLOR_RED)
    curses.init_pair(4, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(5, curses.COLOR_MAGENTA, curses.COLOR_MAGENTA)
    curses.init_pair(6, curses.COLOR_CYAN, curses.COLOR_BLACK)
    curses.init_pair(7, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(8, curses.COLOR_RED, curses.COLOR_RED)
    curses.init_pair(9, curses.COLOR_RED, curses.COLOR_BLACK)


def _pair(number: int) -> int:
    try:
        return curses.color_pair(number)
    except curses.error:
        return 0


def _put(stdscr, y: int, x: int, ch: str, attr: int) -> None:
    try:
        stdscr.addch(y, x, ch, attr)
    except curses.error:
        pass


def _cell_pair(game: Game, y: int, x: int, ch: str) -> int:
    if y in (0, 2, game.height - 1) or x in (0, game.width - 1):
        return _BORDER_PAIR
    return {"@": _SNAKE_PAIR, "%": _FOOD_PAIR, "#": _OBSTACLE_PAIR}.get(ch, _TEXT_PAIR)


def _draw(stdscr, game: Game) -> None:
    for y, row in enumerate(game.render()):
        for x, ch in enumerate(row):
            _put(stdscr, y, x, ch, _pair(_cell_pair(game, y, x, ch)))
    stdscr.refresh()


def _show_game_over(stdscr, game: Game) -> None:
    red = _pair(_GAME_OVER_PAIR)
    for y, row in enumerate(game.render()):
        for x, ch in enumerate(row):
            if ch != " ":
                _put(stdscr, y, x, ch, red)
    stdscr.refresh()

    column = max(0, (game.width - len(GAME_OVER_MESSAGE)) // 2)
    try:
        stdscr.addstr(game.height // 2, column, GAME_OVER_MESSAGE, _pair(_GAME_OVER_TEXT_PAIR))
    except curses.error:
        pass
    stdscr.refresh()

    while stdscr.getch() != ord(" "):
        pass


def run_game(stdscr, level: int, highscore: int) -> int:
    """Play one round on ``stdscr`` and return the score reached."""
    game = Game(level)
    stdscr.timeout(game.speed)
    _draw(stdscr, game)

    while not game.dead:
        started = time.monotonic()
        if game.settings.obstacles_move:
            update_obstacles(game.obstacles, game.width, game.height)

        while (time.monotonic() - started) * 1000 < game.speed:
            key = stdscr.getch()
            if key == ord("q"):
                return game.score
            direction = _KEYS.get(key)
            if direction is not None:
                game.turn(direction)

            speed_before = game.speed
            game.advance()
            if game.speed != speed_before:
                stdscr.timeout(game.speed)
            _draw(stdscr, game)

        if game.dead:
            _show_game_over(stdscr, game)

    return game.score