# src/bouncer/core/config.py

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .errors import ConfigError


@dataclass(frozen=True)
class GameConfig:
    initial_ball_speed: float = 0.003    # px per ms, per unit of dx/dy
    interval_between_balls: float = 2000.0  # ms
    width: float = 800.0
    height: float = 600.0
    paddle_length: float = 120.0
    paddle_thickness: float = 16.0
    ball_size: float = 20.0
    max_balls: Optional[int] = None  # None: balls accumulate for the whole session

    def __post_init__(self):
        if self.initial_ball_speed < 0:
            raise ConfigError(f"initial_ball_speed must be >= 0, got {self.initial_ball_speed}")
        if self.interval_between_balls <= 0:
            raise ConfigError(f"interval_between_balls must be > 0, got {self.interval_between_balls}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"viewport must have a positive size, got {self.width}x{self.height}")
        if self.max_balls is not None and self.max_balls < 0:
            raise ConfigError(f"max_balls must be >= 0 or None, got {self.max_balls}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        names = {f.name for f in fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**dict(data))

    @classmethod
    def from_args(cls, args, base: Mapping[str, Any] | None = None) -> "GameConfig":
        """
        Build a config from an argparse namespace, on top of `base` (e.g. a
        loaded preset). Arguments left at None keep the base/default value.
        """
        kwargs = dict(base or {})
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                kwargs[f.name] = value
        return cls.from_dict(kwargs)

    @classmethod
    def from_preset(cls, path) -> "GameConfig":
        from bouncer.utils.preset_loader import load_preset

        return cls.from_dict(load_preset(path))
