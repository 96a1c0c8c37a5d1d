# src/bouncer/core/world.py

from __future__ import annotations
from typing import TYPE_CHECKING, List

from .events import BaseEvent
from .input import PointerEvent, on_pointer
from .physics import advance_ball, position_paddles, resolve_bounce
from .spawning import flush_pending, maybe_prepare_ball
if TYPE_CHECKING:
    from .geometry import GeometryProvider
    from .state import SimulationState


def advance_clock(state: SimulationState, now: float) -> float:
    """Start a new frame at `now` (epoch ms) and return the elapsed time."""
    ts = state.timestamps
    if now < ts.current_frame:
        raise ValueError(f"Frame time went backwards: {now} < {ts.current_frame}")
    ts.previous_frame = ts.current_frame
    ts.current_frame = now
    return ts.delta_t


def step(
    state: SimulationState,
    provider: GeometryProvider,
    pointer: PointerEvent | None = None,
) -> List[BaseEvent]:
    """
    Run one tick against the host surface and return what happened.

    Every read from `provider` happens before the first write, so the host
    never has to lay out the same frame twice.
    """
    events: List[BaseEvent] = []
    if pointer is not None:
        on_pointer(state, pointer)

    # -------- Reads --------
    for sprite in state.sprites:
        sprite.read_geometry(provider)

    events.extend(flush_pending(state, provider))

    state.viewport = provider.current_size()
    # -------- Done reading --------

    delta_t = state.timestamps.delta_t
    t = state.timestamps.current_frame

    for ball in state.balls:
        events.extend(resolve_bounce(ball, state.pads, state.viewport, t=t))

    # Both coordinates of every paddle are recomputed so the layout survives
    # a resize or an orientation change.
    position_paddles(state.pads, state.viewport)

    for ball in state.balls:
        advance_ball(ball, delta_t)

    # -------- Writes --------
    events.extend(maybe_prepare_ball(state, provider))
    for sprite in state.sprites:
        sprite.commit_geometry(provider)

    return events
