# src/bouncer/core/geometry.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Protocol, Tuple

from .entities import Box


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


class GeometryProvider(Protocol):
    """
    The host rendering surface, seen from the simulation core.

    Reads return current post-layout boxes; writes are targets the host
    applies before the next read.
    """

    def get_bounding_box(self, entity_id: str) -> Box:
        ...

    def set_target_box(self, entity_id: str, x: float | None, y: float | None) -> None:
        ...

    def current_size(self) -> Viewport:
        ...

    def create_ball_surface(self, ball_id: str) -> str:
        ...

    def clear_spawn_style(self, entity_id: str) -> None:
        ...


@dataclass
class Surface:
    x: float
    y: float
    width: float
    height: float
    label: str | None = None
    styles: set[str] = field(default_factory=set)


@dataclass
class Screen:
    """
    Headless, in-memory host surface.

    Keeps one rectangle per entity id. Target boxes are applied as soon as
    they are set, so the next `get_bounding_box` sees them. A missing
    coordinate (None) leaves that coordinate where it was.
    """
    width: float
    height: float
    ball_size: Tuple[float, float] = (20.0, 20.0)
    surfaces: Dict[str, Surface] = field(default_factory=dict)
    n_ball_surfaces: int = 0

    def add_surface(self, entity_id: str, width: float, height: float,
                    x: float = 0.0, y: float = 0.0, label: str | None = None) -> str:
        if entity_id in self.surfaces:
            raise ValueError(f"Surface {entity_id} already exists")
        self.surfaces[entity_id] = Surface(x=x, y=y, width=width, height=height, label=label)
        return entity_id

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    # GeometryProvider

    def get_bounding_box(self, entity_id: str) -> Box:
        s = self.surfaces[entity_id]
        return Box(s.x, s.y, s.width, s.height)

    def set_target_box(self, entity_id: str, x: float | None, y: float | None) -> None:
        s = self.surfaces[entity_id]
        if x is not None:
            s.x = x
        if y is not None:
            s.y = y

    def current_size(self) -> Viewport:
        return Viewport(self.width, self.height)

    def create_ball_surface(self, ball_id: str) -> str:
        # New balls appear in the top left corner until their first commit
        self.n_ball_surfaces += 1
        w, h = self.ball_size
        self.add_surface(ball_id, w, h, label=f"B{self.n_ball_surfaces}")
        self.surfaces[ball_id].styles.update({"ball", "init"})
        return ball_id

    def clear_spawn_style(self, entity_id: str) -> None:
        self.surfaces[entity_id].styles.discard("init")

    def has_style(self, entity_id: str, style: str) -> bool:
        return style in self.surfaces[entity_id].styles

    def label_of(self, entity_id: str) -> str | None:
        return self.surfaces[entity_id].label
