# src/bouncer/core/__init__.py

from .config import GameConfig
from .errors import BouncerError, InvalidPositionMode, InvalidDirection, ConfigError
from .entities import (
    Box,
    Side,
    Sprite,
    SpriteKind,
    PaddleState,
    BallMotion,
    create_paddle,
    create_ball,
)
from .geometry import GeometryProvider, Screen, Viewport
from .collision import between, collides, is_colliding_with_any_pad
from .physics import resolve_bounce, advance_ball, position_paddles
from .spawning import launch_motion, prepare_ball, flush_pending, spawn_due, maybe_prepare_ball
from .state import SimulationState, Timestamps
from .input import PointerEvent, on_pointer, StillPointer, SweepPointer, ReplayPointer
from .world import advance_clock, step
from .scheduler import FrameScheduler, SimulatedClock, WallClock, run_session
from .recording import FrameSnapshot, SessionRecording, snapshot_state
from .events import (
    BaseEvent,
    BounceEvent,
    PrepareEvent,
    LaunchEvent,
)

__all__ = [
    "GameConfig",
    "BouncerError",
    "InvalidPositionMode",
    "InvalidDirection",
    "ConfigError",
    "Box",
    "Side",
    "Sprite",
    "SpriteKind",
    "PaddleState",
    "BallMotion",
    "create_paddle",
    "create_ball",
    "GeometryProvider",
    "Screen",
    "Viewport",
    "between",
    "collides",
    "is_colliding_with_any_pad",
    "resolve_bounce",
    "advance_ball",
    "position_paddles",
    "launch_motion",
    "prepare_ball",
    "flush_pending",
    "spawn_due",
    "maybe_prepare_ball",
    "SimulationState",
    "Timestamps",
    "PointerEvent",
    "on_pointer",
    "StillPointer",
    "SweepPointer",
    "ReplayPointer",
    "advance_clock",
    "step",
    "FrameScheduler",
    "SimulatedClock",
    "WallClock",
    "run_session",
    "FrameSnapshot",
    "SessionRecording",
    "snapshot_state",
    "BaseEvent",
    "BounceEvent",
    "PrepareEvent",
    "LaunchEvent",
]
