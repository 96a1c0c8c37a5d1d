# src/bouncer/core/scheduler.py

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Protocol
import asyncio
import time

from .recording import SessionRecording, snapshot_state
from .world import advance_clock, step
if TYPE_CHECKING:
    from .events import BaseEvent
    from .geometry import GeometryProvider
    from .input import PointerSource
    from .state import SimulationState


class Clock(Protocol):
    def now(self) -> float:
        """Current time in epoch milliseconds."""
        ...

    def sleep(self, ms: float) -> None:
        ...

    async def async_sleep(self, ms: float) -> None:
        ...


class WallClock:
    def now(self) -> float:
        return time.time() * 1000.0

    def sleep(self, ms: float) -> None:
        time.sleep(max(ms, 0.0) / 1000.0)

    async def async_sleep(self, ms: float) -> None:
        await asyncio.sleep(max(ms, 0.0) / 1000.0)


@dataclass
class SimulatedClock:
    """Deterministic clock: sleeping advances time by exactly the requested amount."""
    start_ms: float = 0.0

    def __post_init__(self):
        self._now = float(self.start_ms)

    def now(self) -> float:
        return self._now

    def sleep(self, ms: float) -> None:
        self._now += max(ms, 0.0)

    async def async_sleep(self, ms: float) -> None:
        self.sleep(ms)
        await asyncio.sleep(0)


class FrameScheduler:
    """
    Drives one simulation step per display refresh.

    The first tick runs against the initial timestamps; every later tick
    first moves the frame clock forward. With a `recording`, a snapshot of
    every tick is appended to it.
    """

    def __init__(
        self,
        state: SimulationState,
        provider: GeometryProvider,
        clock: Clock | None = None,
        frame_interval_ms: float = 1000.0 / 60,
        pointer_source: PointerSource | None = None,
        recording: SessionRecording | None = None,
    ):
        self.state = state
        self.provider = provider
        self.clock = clock or WallClock()
        self.frame_interval_ms = frame_interval_ms
        self.pointer_source = pointer_source
        self.recording = recording
        self.n_frames = 0

    def tick(self) -> List[BaseEvent]:
        if self.n_frames > 0:
            advance_clock(self.state, self.clock.now())

        pointer = None
        if self.pointer_source is not None:
            ts = self.state.timestamps
            pointer = self.pointer_source.poll(ts.current_frame - ts.game_start, self.state.viewport)

        events = step(self.state, self.provider, pointer=pointer)
        self.n_frames += 1
        if self.recording is not None:
            self.recording.add_frame(snapshot_state(self.state, events))
        return events

    def _log_progress(self, log_interval: int | None) -> None:
        if log_interval and self.n_frames % log_interval == 0:
            ts = self.state.timestamps
            print(f"Frame {self.n_frames}: t = {(ts.current_frame - ts.game_start) / 1000:.3f} s")
            print(f"Number of balls: {self.state.n_balls}")

    def run(self, n_frames: int, log_interval: int | None = None) -> None:
        """Run `n_frames` ticks, waiting one frame interval between them."""
        for i in range(n_frames):
            if i > 0 or self.n_frames > 0:
                self.clock.sleep(self.frame_interval_ms)
            self.tick()
            self._log_progress(log_interval)

    async def run_async(self, n_frames: int | None = None, log_interval: int | None = None) -> None:
        """
        Same as `run` but yields to the event loop between ticks. Without
        `n_frames` it runs until cancelled.
        """
        i = 0
        while n_frames is None or i < n_frames:
            if i > 0 or self.n_frames > 0:
                await self.clock.async_sleep(self.frame_interval_ms)
            self.tick()
            self._log_progress(log_interval)
            i += 1


def run_session(
    scheduler: FrameScheduler,
    n_frames: int,
    log_interval: int | None = 60,
) -> SessionRecording:
    """
    Run `n_frames` ticks and return the recording of the session.
    """
    if scheduler.recording is None:
        scheduler.recording = SessionRecording()
    scheduler.run(n_frames, log_interval=log_interval)
    return scheduler.recording
