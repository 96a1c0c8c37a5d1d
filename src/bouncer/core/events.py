# src/bouncer/core/events.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal
from abc import ABC


@dataclass(kw_only=True)
class BaseEvent(ABC):
    """Marker base class so you can type on 'list[BaseEvent]'."""
    t: float  # frame timestamp (epoch ms) of the tick that produced the event
    ball_id: str

    def to_payload_dict(self) -> dict:
        """Convert event-specific data to a serializable dict."""
        return {}


@dataclass(kw_only=True)
class BounceEvent(BaseEvent):
    axis: Literal["x", "y"]
    cause: Literal["wall", "paddle"]

    def to_payload_dict(self) -> dict:
        return {
            "axis": self.axis,
            "cause": self.cause,
        }


@dataclass(kw_only=True)
class PrepareEvent(BaseEvent):
    """A ball surface was created and queued for launch on the next tick."""


@dataclass(kw_only=True)
class LaunchEvent(BaseEvent):
    angle: float
    dx: int
    dy: int
    speed: float

    def to_payload_dict(self) -> dict:
        return {
            "angle": self.angle,
            "dx": self.dx,
            "dy": self.dy,
            "speed": self.speed,
        }
