"""
Bounce rules, position update and paddle placement.
"""

from bouncer.core import (
    BounceEvent, Side, Viewport, advance_ball, create_paddle, position_paddles, resolve_bounce,
)
from bouncer.utils.physics_utils import round_px

from helpers import ball_at, pads_for

VP = Viewport(800, 600)


class TestRounding:

    def test_halves_go_up(self):
        assert round_px(2.5) == 3
        assert round_px(-2.5) == -2
        assert round_px(-113.6) == -114
        assert round_px(0.49) == 0


class TestAdvance:

    def test_exact_integer_arithmetic(self):
        ball = ball_at(500, 300, dx=-71, dy=0, speed=0.1)
        advance_ball(ball, 16)
        assert ball.next_x == 386
        assert ball.next_y == 300

    def test_zero_elapsed_time(self):
        ball = ball_at(123, 45, dx=71, dy=-71, speed=0.1)
        advance_ball(ball, 0)
        assert (ball.next_x, ball.next_y) == (123, 45)

    def test_both_axes(self):
        ball = ball_at(400, 300, dx=71, dy=-71, speed=0.003)
        advance_ball(ball, 16)
        # 71 * 0.003 * 16 = 3.408
        assert (ball.next_x, ball.next_y) == (403, 297)


class TestWallBounce:

    def test_ball_on_the_left_edge_bounces_immediately(self):
        ball = ball_at(0, 300, dx=-71, dy=0)
        events = resolve_bounce(ball, {}, VP)
        assert ball.ball.dx == 71
        assert len(events) == 1
        assert isinstance(events[0], BounceEvent)
        assert (events[0].axis, events[0].cause) == ("x", "wall")

    def test_no_bounce_one_pixel_in(self):
        ball = ball_at(1, 300, dx=-71, dy=0)
        assert resolve_bounce(ball, {}, VP) == []
        assert ball.ball.dx == -71

    def test_right_and_bottom_edges(self):
        ball = ball_at(780, 580, dx=50, dy=50)
        resolve_bounce(ball, {}, VP)
        assert (ball.ball.dx, ball.ball.dy) == (-50, -50)

    def test_corner_bounces_both_axes(self):
        ball = ball_at(0, 0, dx=-71, dy=-71)
        events = resolve_bounce(ball, {}, VP)
        assert (ball.ball.dx, ball.ball.dy) == (71, 71)
        assert sorted(e.axis for e in events) == ["x", "y"]

    def test_moving_away_from_wall_does_not_bounce(self):
        ball = ball_at(0, 300, dx=71, dy=0)
        resolve_bounce(ball, {}, VP)
        assert ball.ball.dx == 71

    def test_zero_component_is_never_flipped(self):
        ball = ball_at(0, 0, dx=0, dy=100)
        resolve_bounce(ball, {}, VP)
        assert (ball.ball.dx, ball.ball.dy) == (0, 100)

    def test_two_bounces_restore_the_sign(self):
        ball = ball_at(0, 300, dx=-71, dy=0)
        resolve_bounce(ball, {}, VP)
        ball.x = 780
        resolve_bounce(ball, {}, VP)
        assert ball.ball.dx == -71

    def test_speed_never_changes(self):
        ball = ball_at(0, 0, dx=-71, dy=-71, speed=0.004)
        resolve_bounce(ball, {}, VP)
        assert ball.ball.speed == 0.004


class TestPaddleBounce:

    def test_west_paddle(self):
        pads = pads_for(VP)
        ball = ball_at(10, 290, dx=-71, dy=0)
        events = resolve_bounce(ball, pads, VP)
        assert ball.ball.dx == 71
        assert events[0].cause == "paddle"

    def test_north_paddle(self):
        pads = pads_for(VP)
        ball = ball_at(390, 10, dx=0, dy=-71)
        events = resolve_bounce(ball, pads, VP)
        assert ball.ball.dy == 71
        assert (events[0].axis, events[0].cause) == ("y", "paddle")

    def test_paddle_behind_the_ball_is_ignored(self):
        pads = pads_for(VP)
        # Overlaps the east paddle while heading west
        ball = ball_at(790, 290, dx=-71, dy=0)
        assert resolve_bounce(ball, pads, VP) == []
        assert ball.ball.dx == -71

    def test_ball_off_the_paddle_end_passes(self):
        pads = pads_for(VP)
        # West paddle spans y 240..360; center at 400
        ball = ball_at(10, 390, dx=-71, dy=0)
        assert resolve_bounce(ball, pads, VP) == []


class TestPositionPaddles:

    def test_without_pointer_paddles_stay(self):
        pads = pads_for(VP)
        position_paddles(pads, VP)
        north = pads[Side.NORTH]
        assert (north.next_x, north.next_y) == (north.x, 0)
        east = pads[Side.EAST]
        assert (east.next_x, east.next_y) == (784, east.y)

    def test_follow_pointer_on_free_axis(self):
        pads = pads_for(VP)
        for pad in pads.values():
            pad.paddle.pointer_x = 200.0
            pad.paddle.pointer_y = 150.0
        position_paddles(pads, VP)
        assert (pads[Side.NORTH].next_x, pads[Side.NORTH].next_y) == (200.0, 0)
        assert (pads[Side.SOUTH].next_x, pads[Side.SOUTH].next_y) == (200.0, 584)
        assert (pads[Side.EAST].next_x, pads[Side.EAST].next_y) == (784, 150.0)
        assert (pads[Side.WEST].next_x, pads[Side.WEST].next_y) == (0, 150.0)

    def test_repinned_after_resize(self):
        pads = pads_for(VP)
        position_paddles(pads, Viewport(1000, 700))
        assert pads[Side.SOUTH].next_y == 684
        assert pads[Side.EAST].next_x == 984

    def test_single_paddle(self):
        pad = create_paddle("W")
        pad.width, pad.height = 16, 120
        pad.paddle.pointer_y = 42
        position_paddles({Side.WEST: pad}, VP)
        assert (pad.next_x, pad.next_y) == (0, 42)
