"""
Collision predicate tests against fixed literal boxes.
"""

import pytest

from bouncer.core import (
    InvalidDirection, Side, SpriteKind, Viewport, between, collides, is_colliding_with_any_pad,
)

from helpers import ball_at, box, pads_for


# Vertical paddle and a horizontal one, both at (100, 100)
VERTICAL = box(100, 100, 20, 80)
HORIZONTAL = box(100, 100, 80, 20)


class TestBetween:

    def test_inclusive_both_ends(self):
        assert between(0, 0, 10)
        assert between(10, 0, 10)
        assert between(5, 0, 10)

    def test_outside(self):
        assert not between(-1, 0, 10)
        assert not between(11, 0, 10)

    @pytest.mark.parametrize("value", [-5, 0, 5, 10, 15])
    def test_empty_interval_is_always_false(self, value):
        assert not between(value, 10, 0)


class TestCollidesFromWest:

    def test_leading_edge_inside(self):
        moving = box(110, 130, 10, 10, kind=SpriteKind.BALL)
        assert collides("W", moving, VERTICAL)

    def test_east_edge_not_reached(self):
        moving = box(50, 130, 10, 10, kind=SpriteKind.BALL)
        assert not collides("W", moving, VERTICAL)

    def test_east_edge_touching_west_face(self):
        moving = box(90, 130, 10, 10, kind=SpriteKind.BALL)
        assert collides(Side.WEST, moving, VERTICAL)

    def test_center_past_the_end_of_the_paddle(self):
        # Center at y=180 is still on the paddle, y=181 is not
        assert collides("W", box(105, 175, 10, 10), VERTICAL)
        assert not collides("W", box(105, 176, 10, 10), VERTICAL)


class TestCollidesFromEast:

    def test_west_edge_inside(self):
        assert collides("E", box(105, 130, 10, 10), VERTICAL)

    def test_west_edge_past(self):
        assert not collides("E", box(130, 130, 10, 10), VERTICAL)


class TestCollidesFromNorth:

    def test_south_edge_inside(self):
        assert collides("N", box(130, 110, 10, 10), HORIZONTAL)

    def test_south_edge_not_reached(self):
        assert not collides("N", box(130, 50, 10, 10), HORIZONTAL)

    def test_center_outside_horizontal_span(self):
        assert not collides("N", box(176, 110, 10, 10), HORIZONTAL)


class TestCollidesFromSouth:

    def test_north_edge_inside(self):
        assert collides("S", box(130, 115, 10, 10), HORIZONTAL)

    def test_north_edge_below(self):
        assert not collides("S", box(130, 121, 10, 10), HORIZONTAL)


class TestCollidesContract:

    def test_not_symmetric(self):
        ball = box(110, 130, 10, 10, kind=SpriteKind.BALL)
        assert collides("W", ball, VERTICAL)
        assert not collides("E", VERTICAL, ball)

    @pytest.mark.parametrize("direction", ["NE", "", "w", None])
    def test_unknown_direction(self, direction):
        with pytest.raises(InvalidDirection) as exc:
            collides(direction, box(0, 0, 1, 1), VERTICAL)
        assert "Unknown direction" in str(exc.value)

    def test_unknown_direction_is_a_value_error(self):
        with pytest.raises(ValueError):
            collides("up", box(0, 0, 1, 1), VERTICAL)


class TestAnyPad:

    def test_hits_west_pad_when_moving_left(self):
        vp = Viewport(800, 600)
        pads = pads_for(vp)
        ball = ball_at(10, 290, dx=-71, dy=0)
        assert is_colliding_with_any_pad(ball, "E", pads.values(), exclude=pads[Side.EAST])

    def test_excluded_pad_is_ignored(self):
        vp = Viewport(800, 600)
        pads = pads_for(vp)
        # Overlaps the east paddle, but the east paddle is behind a ball going left
        ball = ball_at(790, 290, dx=-71, dy=0)
        assert is_colliding_with_any_pad(ball, "E", pads.values())
        assert not is_colliding_with_any_pad(ball, "E", pads.values(), exclude=pads[Side.EAST])
