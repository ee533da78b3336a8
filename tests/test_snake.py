"""Tests for the Snake module."""

import pytest

from snake_engine.snake import Direction, Point, Snake


class TestDirection:
    def test_opposites_incompatible(self):
        assert not Direction.UP.is_compatible_with(Direction.DOWN)
        assert not Direction.DOWN.is_compatible_with(Direction.UP)
        assert not Direction.LEFT.is_compatible_with(Direction.RIGHT)
        assert not Direction.RIGHT.is_compatible_with(Direction.LEFT)

    def test_same_and_perpendicular_compatible(self):
        for direction in Direction:
            assert direction.is_compatible_with(direction)
        assert Direction.UP.is_compatible_with(Direction.LEFT)
        assert Direction.RIGHT.is_compatible_with(Direction.DOWN)

    def test_opposite_property(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT


class TestSnakeInit:
    def test_creation(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        assert snake.head == Point(4, 3)
        assert snake.body == [Point(4, 2)]
        assert snake.index == 0
        assert len(snake) == 2

    def test_accepts_plain_tuples(self):
        snake = Snake((1, 2), [(1, 1)])
        assert snake.head == Point(1, 2)
        assert snake.head.x == 1

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(Point(0, 0), [])


class TestSnakeMovement:
    def test_move_up(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        head = snake.move(Direction.UP, False, 10, 6)
        assert head == Point(4, 4)
        assert snake.body == [Point(4, 3)]
        assert snake.index == 0

    def test_move_with_growth(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        snake.move(Direction.UP, True, 10, 6)
        assert snake.head == Point(4, 4)
        assert snake.body == [Point(4, 2), Point(4, 3)]
        assert snake.index == 1
        assert len(snake) == 3

    def test_ring_buffer_overwrites_one_slot(self):
        body = [
            Point(4, 2), Point(4, 3), Point(4, 4), Point(5, 4), Point(6, 4),
        ]
        snake = Snake(Point(7, 4), body)

        snake.move(Direction.DOWN, False, 10, 6)
        assert snake.head == Point(7, 3)
        assert snake.body == [
            Point(4, 2), Point(7, 4), Point(4, 4), Point(5, 4), Point(6, 4),
        ]

        snake.move(Direction.DOWN, False, 10, 6)
        assert snake.head == Point(7, 2)
        assert snake.body == [
            Point(4, 2), Point(7, 4), Point(7, 3), Point(5, 4), Point(6, 4),
        ]
        assert snake.index == 2

    def test_wraps_left_and_right(self):
        snake = Snake(Point(0, 0), [Point(1, 0)])
        assert snake.move(Direction.LEFT, False, 10, 6) == Point(9, 0)
        assert snake.move(Direction.RIGHT, False, 10, 6) == Point(0, 0)

    def test_wraps_up_and_down(self):
        snake = Snake(Point(3, 0), [Point(3, 1)])
        assert snake.move(Direction.DOWN, False, 10, 6) == Point(3, 5)
        assert snake.move(Direction.UP, False, 10, 6) == Point(3, 0)


class TestSnakeCollision:
    def test_contains(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        assert snake.contains(Point(4, 3))
        assert snake.contains(Point(4, 2))
        assert not snake.contains(Point(0, 0))

    def test_on_body_excludes_head(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        assert snake.on_body(Point(4, 2))
        assert not snake.on_body(Point(4, 3))

    def test_segments_head_first(self):
        snake = Snake(Point(4, 3), [Point(4, 2), Point(5, 2)])
        assert snake.segments() == [Point(4, 3), Point(4, 2), Point(5, 2)]


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake(Point(4, 3), [Point(4, 2)])
        d = snake.to_dict()
        assert d["head"] == [4, 3]
        assert d["body"] == [[4, 2]]
        assert d["index"] == 0
