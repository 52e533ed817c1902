"""Creation and movement of board obstacles."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from .model import SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Obstacle, Point

_COMPLEX_OFFSETS = (
    (0, 0), (-1, 0), (-2, 0), (-3, 0),
    (-3, -1), (-3, -2), (-3, 2), (-3, 2),
    (-2, 2), (-1, 2), (0, 2), (0, 1),
    (0, -1), (0, -2), (1, -2), (2, -2),
    (3, -2), (1, 0), (2, 0), (3, 0),
    (3, 1), (3, 2),
)

_MOVING_SPEED = 3


def create_complex_obstacle(
    rng: random.Random | None = None,
    width: int = SCREEN_WIDTH,
    height: int = SCREEN_HEIGHT,
) -> list[Obstacle]:
    """Build the fixed multi-armed obstacle at a random position."""
    rng = rng or random.Random()
    start_x = rng.randint(5, width - 10)
    start_y = rng.randint(5, height - 10)
    segments = [Point(start_x + dx, start_y + dy) for dx, dy in _COMPLEX_OFFSETS]
    return [Obstacle(segments=segments)]


def _shape(kind: int, size: int) -> Iterator[tuple[int, int]]:
    half = size // 2
    if kind == 0:  # horizontal line
        yield from ((j, 0) for j in range(size))
    elif kind == 1:  # vertical line
        yield from ((0, j) for j in range(size))
    elif kind == 2:  # square
        yield from ((j, k) for j in range(half) for k in range(half))
    elif kind == 3:  # cross
        for j in range(size):
            yield j, half
            yield half, j
    elif kind == 4:  # diamond
        for j in range(half):
            yield j, half - j
            yield j, half + j
            yield size - j, half - j
            yield size - j, half + j
    elif kind == 5:  # zigzag
        yield from ((j, j % 2) for j in range(size))
    elif kind == 6:  # stairs
        for j in range(size):
            yield j, j
            yield j + 1, j
    elif kind == 7:  # alternating pattern
        rows = ((0, 1), (1, 2), (0, 2))
        for j in range(size):
            for row in rows[j % 3]:
                yield j, row
    elif kind == 8:  # L shape
        yield from ((0, j) for j in range(size))
        yield from ((j, size - 1) for j in range(1, half))
    elif kind == 9:  # U shape
        yield from ((0, j) for j in range(size))
        yield from ((half, j) for j in range(size))
        yield from ((j, size - 1) for j in range(1, half))


def generate_obstacles(
    num_obstacles: int,
    rng: random.Random | None = None,
    width: int = SCREEN_WIDTH,
    height: int = SCREEN_HEIGHT,
) -> list[Obstacle]:
    """Generate ``num_obstacles`` random obstacles.

    When exactly three are requested the stationary complex obstacle is
    placed first. Obstacles may move only when two or more are requested.
    """
    rng = rng or random.Random()
    obstacles = create_complex_obstacle(rng, width, height) if num_obstacles == 3 else []

    for _ in range(num_obstacles):
        start_x = rng.randint(5, width - 6)
        start_y = rng.randint(5, height - 6)
        kind = rng.randint(0, 9)
        size = rng.randint(3, 8)

        obstacle = Obstacle()
        if num_obstacles >= 2:
            obstacle.is_moving = rng.randint(0, 1) == 1
            if obstacle.is_moving:
                obstacle.move_direction = Direction(rng.randint(0, 3))
                obstacle.move_speed = _MOVING_SPEED
                obstacle.move_counter = 0

        obstacle.segments = [Point(start_x + dx, start_y + dy) for dx, dy in _shape(kind, size)]
        obstacles.append(obstacle)
    return obstacles


def _would_hit_border(obstacle: Obstacle, width: int, height: int) -> bool:
    direction = obstacle.move_direction
    for seg in obstacle.segments:
        if direction is Direction.UP and seg.y <= 3:
            return True
        if direction is Direction.RIGHT and seg.x >= width - 2:
            return True
        if direction is Direction.DOWN and seg.y >= height - 2:
            return True
        if direction is Direction.LEFT and seg.x <= 1:
            return True
    return False


def update_obstacles(
    obstacles: Iterable[Obstacle],
    width: int = SCREEN_WIDTH,
    height: int = SCREEN_HEIGHT,
) -> None:
    """Advance moving obstacles one tick, bouncing them off the borders."""
    for obstacle in obstacles:
        if not obstacle.is_moving:
            continue
        obstacle.move_counter += 1
        if obstacle.move_counter < obstacle.move_speed:
            continue
        obstacle.move_counter = 0
        if _would_hit_border(obstacle, width, height):
            obstacle.move_direction = obstacle.move_direction.opposite()
        step = obstacle.move_direction.step
        obstacle.segments = [step(seg) for seg in obstacle.segments]