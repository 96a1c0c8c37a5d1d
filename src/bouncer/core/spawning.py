# src/bouncer/core/spawning.py

from __future__ import annotations
from typing import TYPE_CHECKING, List
import numpy as np

from .entities import BallMotion, create_ball
from .events import BaseEvent, LaunchEvent, PrepareEvent
from bouncer.utils.physics_utils import round_px
from bouncer.utils.random import rng
if TYPE_CHECKING:
    from .geometry import GeometryProvider
    from .state import SimulationState


def launch_motion(speed: float, angle: float | None = None) -> BallMotion:
    """
    Direction for a new ball. dx/dy are NOT normalized after rounding, so a
    diagonal launch travels slightly faster than an axis-aligned one.
    """
    if angle is None:
        angle = float(rng("launch").uniform(0.0, 2 * np.pi))
    return BallMotion(
        angle=angle,
        dx=round_px(np.cos(angle) * 100),
        dy=round_px(np.sin(angle) * 100),
        speed=float(speed),
    )


def prepare_ball(state: SimulationState, provider: GeometryProvider) -> PrepareEvent:
    """Create the surface of a new ball and queue it for launch on the next tick."""
    ball_id = state.new_ball_id()
    entity_id = provider.create_ball_surface(ball_id)
    state.pending.append(entity_id)
    return PrepareEvent(t=state.timestamps.current_frame, ball_id=entity_id)


def flush_pending(state: SimulationState, provider: GeometryProvider) -> List[BaseEvent]:
    """Launch at most one prepared ball from the center of the viewport."""
    if not state.pending:
        return []
    entity_id = state.pending.popleft()
    ball = create_ball(entity_id, launch_motion(state.config.initial_ball_speed))
    ball.read_geometry(provider)
    ball.set_position("center", "center", provider.current_size())

    # The surface still sits in the top left corner; act as if it were
    # already centered so this tick moves it from the center.
    ball.x = ball.next_x
    ball.y = ball.next_y

    state.balls.append(ball)
    m = ball.ball
    return [LaunchEvent(t=state.timestamps.current_frame, ball_id=ball.id,
                        angle=m.angle, dx=m.dx, dy=m.dy, speed=m.speed)]


def spawn_due(state: SimulationState) -> bool:
    ts = state.timestamps
    if ts.current_frame - ts.latest_ball_launch < state.config.interval_between_balls:
        return False
    cap = state.config.max_balls
    if cap is not None and state.n_balls + len(state.pending) >= cap:
        return False
    return True


def maybe_prepare_ball(state: SimulationState, provider: GeometryProvider) -> List[BaseEvent]:
    if not spawn_due(state):
        return []
    event = prepare_ball(state, provider)
    state.timestamps.latest_ball_launch = state.timestamps.current_frame
    return [event]
