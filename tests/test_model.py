import pytest

from snakegame.model import Direction, Obstacle, Point


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite(direction, expected):
    assert direction.opposite() is expected


@pytest.mark.parametrize("name", ["UP", "RIGHT", "DOWN", "LEFT"])
def test_opposite_is_involution(name):
    direction = Direction[name]
    assert Direction.opposite(Direction.opposite(direction)) is direction
    assert Direction.opposite(direction) is not direction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Point(5, 4)),
        (Direction.RIGHT, Point(6, 5)),
        (Direction.DOWN, Point(5, 6)),
        (Direction.LEFT, Point(4, 5)),
    ],
)
def test_step(direction, expected):
    assert direction.step(Point(5, 5)) == expected


@pytest.mark.parametrize("direction", list(Direction))
def test_step_and_back_returns_to_start(direction):
    start = Point(11, 15)
    assert direction.opposite().step(direction.step(start)) == start


def test_direction_values_follow_source_order():
    assert [Direction(value) for value in range(4)] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]


def test_obstacle_defaults():
    obstacle = Obstacle()
    assert obstacle.segments == []
    assert obstacle.is_moving is False
    assert obstacle.move_direction is Direction.UP
    assert obstacle.move_speed == 1
    assert obstacle.move_counter == 0


def test_obstacle_occupies():
    obstacle = Obstacle(segments=[Point(1, 2), Point(3, 4)])
    assert obstacle.occupies(Point(3, 4))
    assert not obstacle.occupies(Point(2, 1))