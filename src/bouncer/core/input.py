# src/bouncer/core/input.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, Sequence, Tuple
import numpy as np

from bouncer.utils.random import rng
if TYPE_CHECKING:
    from .geometry import Viewport
    from .state import SimulationState


@dataclass(frozen=True)
class PointerEvent:
    """A mouse or touch position in page pixels."""
    x: float
    y: float


def on_pointer(state: SimulationState, event: PointerEvent) -> None:
    """
    Store the latest pointer coordinate on every paddle. Nothing moves until
    the next tick reads it.
    """
    for pad in state.pads.values():
        pad.paddle.pointer_x = event.x
        pad.paddle.pointer_y = event.y


# --------- Scripted pointer sources for headless sessions ---------

class PointerSource(Protocol):
    def poll(self, t_ms: float, viewport: Viewport) -> PointerEvent | None:
        """Return the pointer event delivered since the last poll, if any."""
        ...


@dataclass
class StillPointer:
    """Never moves: paddles stay where they were set up."""

    def poll(self, t_ms: float, viewport: Viewport) -> PointerEvent | None:
        return None


@dataclass
class SweepPointer:
    """
    Lissajous sweep over the viewport, with optional gaussian jitter in
    pixels so that runs with different seeds differ.
    """
    period_x_ms: float = 3000.0
    period_y_ms: float = 4100.0
    jitter: float = 0.0

    def poll(self, t_ms: float, viewport: Viewport) -> PointerEvent | None:
        x = 0.5 * viewport.width * (1 + np.sin(2 * np.pi * t_ms / self.period_x_ms))
        y = 0.5 * viewport.height * (1 + np.sin(2 * np.pi * t_ms / self.period_y_ms))
        if self.jitter > 0:
            x += rng("pointer").normal(0.0, self.jitter)
            y += rng("pointer").normal(0.0, self.jitter)
        return PointerEvent(float(x), float(y))


@dataclass
class ReplayPointer:
    """
    Replays (t_ms, x, y) samples. Each poll delivers the most recent sample at
    or before t_ms that has not been delivered yet; intermediate samples are
    dropped, as only the latest value matters.
    """
    samples: Sequence[Tuple[float, float, float]]
    _cursor: int = field(default=0, init=False)

    def __post_init__(self):
        self.samples = sorted(self.samples, key=lambda s: s[0])

    def poll(self, t_ms: float, viewport: Viewport) -> PointerEvent | None:
        latest: Tuple[float, float, float] | None = None
        while self._cursor < len(self.samples) and self.samples[self._cursor][0] <= t_ms:
            latest = self.samples[self._cursor]
            self._cursor += 1
        if latest is None:
            return None
        return PointerEvent(float(latest[1]), float(latest[2]))
