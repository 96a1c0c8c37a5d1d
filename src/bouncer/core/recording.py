# src/bouncer/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator
from pathlib import Path
import pickle
import lzma
if TYPE_CHECKING:
    from .events import BaseEvent
    from .state import SimulationState


@dataclass
class SpriteSnapshot:
    """Geometry of one sprite as committed at the end of a tick."""
    id: str
    kind: str               # "paddle" or "ball"
    x: float
    y: float
    width: float
    height: float
    side: str | None = None
    dx: int | None = None
    dy: int | None = None


@dataclass
class EventSnapshot:
    t: float
    type: str               # e.g. "BounceEvent", "LaunchEvent", ...
    ball_id: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrameSnapshot:
    t: float                # ms since game start
    delta_t: float
    viewport: tuple[float, float]
    sprites: list[SpriteSnapshot]
    events: list[EventSnapshot] = field(default_factory=list)

    @property
    def n_balls(self) -> int:
        return sum(1 for s in self.sprites if s.kind == "ball")


@dataclass
class SessionRecording:
    """
    Record of a headless session.

    `meta` holds config, seed, etc.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def times(self) -> list[float]:
        return [f.t for f in self.frames]

    @property
    def ball_counts(self) -> list[int]:
        return [f.n_balls for f in self.frames]

    def iter_events(self) -> Iterator[EventSnapshot]:
        """Iterate over all EventSnapshots in time order."""
        for frame in self.frames:
            for ev in frame.events:
                yield ev

    def save(self, path: str | Path) -> None:
        path = Path(path)
        with lzma.open(path, "wb") as f:
            pickle.dump(self, f, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load(cls, path: str | Path) -> "SessionRecording":
        path = Path(path)
        with lzma.open(path, "rb") as f:
            rec = pickle.load(f)
        return rec


def snapshot_state(state: SimulationState, events: list[BaseEvent]) -> FrameSnapshot:
    """
    Capture the committed geometry of every sprite (next_x / next_y, where the
    host will draw it) together with the events of the tick.
    """
    sprites: list[SpriteSnapshot] = []
    for s in state.sprites:
        sprites.append(
            SpriteSnapshot(
                id=s.id,
                kind=s.kind.value,
                x=float(s.next_x if s.next_x is not None else s.x),
                y=float(s.next_y if s.next_y is not None else s.y),
                width=float(s.width),
                height=float(s.height),
                side=s.paddle.side.value if s.paddle is not None else None,
                dx=s.ball.dx if s.ball is not None else None,
                dy=s.ball.dy if s.ball is not None else None,
            )
        )

    ts = state.timestamps
    event_snaps = [
        EventSnapshot(
            t=e.t - ts.game_start,
            type=type(e).__name__,
            ball_id=e.ball_id,
            payload=e.to_payload_dict(),
        )
        for e in events
    ]
    return FrameSnapshot(
        t=ts.current_frame - ts.game_start,
        delta_t=ts.delta_t,
        viewport=(float(state.viewport.width), float(state.viewport.height)),
        sprites=sprites,
        events=event_snaps,
    )
