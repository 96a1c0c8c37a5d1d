# src/bouncer/core/state.py

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List

from .config import GameConfig
from .entities import Side, Sprite
from .geometry import Viewport


@dataclass
class Timestamps:
    """When things happened, in milliseconds since the epoch."""
    game_start: float
    previous_frame: float
    current_frame: float
    # No launch yet: the first tick prepares a ball whatever the clock origin
    latest_ball_launch: float = float("-inf")

    @classmethod
    def starting_at(cls, now: float) -> "Timestamps":
        # Pretend a frame was prepared 15 ms ago so the first tick moves things
        return cls(game_start=now, previous_frame=now - 15, current_frame=now)

    @property
    def delta_t(self) -> float:
        return self.current_frame - self.previous_frame


@dataclass
class SimulationState:
    config: GameConfig
    timestamps: Timestamps
    viewport: Viewport
    pads: Dict[Side, Sprite] = field(default_factory=dict)
    balls: List[Sprite] = field(default_factory=list)
    pending: Deque[str] = field(default_factory=deque)
    ball_counter: int = 0

    @property
    def sprites(self) -> List[Sprite]:
        """Every sprite on the field: paddles first, then balls."""
        return [*self.pads.values(), *self.balls]

    @property
    def n_balls(self) -> int:
        return len(self.balls)

    def pad(self, side: Side | str) -> Sprite:
        return self.pads[Side(side)]

    def new_ball_id(self) -> str:
        bid = f"ball_{self.ball_counter}"
        self.ball_counter += 1
        return bid
