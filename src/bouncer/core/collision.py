# src/bouncer/core/collision.py

from __future__ import annotations
from typing import Iterable

from .entities import Sprite, Side
from .errors import InvalidDirection


def between(value: float, lo: float, hi: float) -> bool:
    """Inclusive on both ends; always False when lo > hi."""
    return lo <= value <= hi


def collides(direction: Side | str, moving: Sprite, stationary: Sprite) -> bool:
    """
    Whether `moving`, approaching `stationary` from `direction`, is touching it.

    `direction` is the side of `stationary` that `moving` comes from, one of
    "N", "S", "E", "W". A ball coming from e.g. the NW quadrant is tested
    once with "N" and once with "W".

    Only the leading edge of `moving` is compared against the span of
    `stationary` on the approach axis; on the other axis the center of
    `moving` must lie within `stationary`. A ball whose center has already
    slid past a paddle's end therefore does not bounce off its corner.
    """
    try:
        direction = Side(direction)
    except ValueError:
        raise InvalidDirection(direction) from None

    st = stationary
    if direction is Side.WEST:
        return between(moving.E, st.W, st.E) and between(moving.center_y, st.N, st.S)
    if direction is Side.EAST:
        return between(moving.W, st.W, st.E) and between(moving.center_y, st.N, st.S)
    if direction is Side.NORTH:
        return between(moving.S, st.N, st.S) and between(moving.center_x, st.W, st.E)
    # Side.SOUTH
    return between(moving.N, st.N, st.S) and between(moving.center_x, st.W, st.E)


def is_colliding_with_any_pad(
    ball: Sprite,
    direction: Side | str,
    pads: Iterable[Sprite],
    exclude: Sprite | None = None,
) -> bool:
    """
    True if `ball` collides from `direction` with any pad other than `exclude`.

    `exclude` is the pad on the side the ball is heading away from, which it
    cannot reach while it is inside the field.
    """
    for pad in pads:
        if pad is exclude:
            continue
        if collides(direction, ball, pad):
            return True
    return False
