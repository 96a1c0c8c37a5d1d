# src/bouncer/core/physics.py

from __future__ import annotations
from typing import TYPE_CHECKING, List, Mapping

from .collision import is_colliding_with_any_pad
from .entities import Side, Sprite
from .events import BounceEvent
from bouncer.utils.physics_utils import round_px
if TYPE_CHECKING:
    from .geometry import Viewport


def _bounce_cause(wall_hit: bool) -> str:
    return "wall" if wall_hit else "paddle"


def resolve_bounce(
    ball: Sprite,
    pads: Mapping[Side, Sprite],
    viewport: Viewport,
    t: float = 0.0,
) -> List[BounceEvent]:
    """
    Flip the ball's direction components on contact with the screen edges or
    a paddle. Both axes are checked independently, so a corner hit flips both.
    """
    motion = ball.ball
    pad_list = list(pads.values())
    events: List[BounceEvent] = []

    horizontal = None
    if motion.dx < 0:
        wall = ball.W <= 0
        if wall or is_colliding_with_any_pad(ball, Side.EAST, pad_list, pads.get(Side.EAST)):
            horizontal = _bounce_cause(wall)
    elif motion.dx > 0:
        wall = ball.E >= viewport.width
        if wall or is_colliding_with_any_pad(ball, Side.WEST, pad_list, pads.get(Side.WEST)):
            horizontal = _bounce_cause(wall)

    vertical = None
    if motion.dy < 0:
        wall = ball.N <= 0
        if wall or is_colliding_with_any_pad(ball, Side.SOUTH, pad_list, pads.get(Side.SOUTH)):
            vertical = _bounce_cause(wall)
    elif motion.dy > 0:
        wall = ball.S >= viewport.height
        if wall or is_colliding_with_any_pad(ball, Side.NORTH, pad_list, pads.get(Side.NORTH)):
            vertical = _bounce_cause(wall)

    if horizontal is not None:
        motion.dx = -motion.dx
        events.append(BounceEvent(t=t, ball_id=ball.id, axis="x", cause=horizontal))
    if vertical is not None:
        motion.dy = -motion.dy
        events.append(BounceEvent(t=t, ball_id=ball.id, axis="y", cause=vertical))
    return events


def advance_ball(ball: Sprite, delta_t: float) -> None:
    motion = ball.ball
    ball.next_x = ball.x + round_px(motion.dx * motion.speed * delta_t)
    ball.next_y = ball.y + round_px(motion.dy * motion.speed * delta_t)


def position_paddles(pads: Mapping[Side, Sprite], viewport: Viewport) -> None:
    """
    Move every paddle to the latest pointer coordinate along its free axis and
    re-pin it to its edge, so paddles follow viewport resizes.

    Until the first pointer event a paddle stays where it is.
    """
    for side, pad in pads.items():
        state = pad.paddle
        if side in (Side.NORTH, Side.SOUTH):
            pad.next_x = state.pointer_x if state.pointer_x is not None else pad.x
            pad.set_y_position("top" if side is Side.NORTH else "bottom", viewport)
        else:
            pad.next_y = state.pointer_y if state.pointer_y is not None else pad.y
            pad.set_x_position("right" if side is Side.EAST else "left", viewport)
