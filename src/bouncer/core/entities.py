# src/bouncer/core/entities.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidPositionMode
from bouncer.utils.physics_utils import round_px
if TYPE_CHECKING:
    from .geometry import GeometryProvider, Viewport


class SpriteKind(str, Enum):
    PADDLE = "paddle"
    BALL = "ball"


class Side(str, Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def free_axis(self) -> str:
        """Axis along which a paddle on this side follows the pointer."""
        return "x" if self in (Side.NORTH, Side.SOUTH) else "y"


@dataclass(frozen=True)
class Box:
    x: int
    y: int
    width: int
    height: int


# --------- Kind-specific payloads ---------

@dataclass
class PaddleState:
    """
    Paddle payload: which edge the paddle is pinned to and the latest pointer
    coordinate received from the input stream (None until the first event).
    """
    side: Side
    pointer_x: float | None = None
    pointer_y: float | None = None


@dataclass
class BallMotion:
    """
    Ball payload.

    - dx / dy: integer direction components, roughly 100 * (cos, sin) of the
      launch angle; only their signs change after launch
    - speed: pixels per millisecond per unit of direction, fixed at spawn
    - initialized: False until the one-time spawn styling has been cleared
    """
    angle: float
    dx: int
    dy: int
    speed: float
    initialized: bool = False


# --------- Sprite (geometry + pending update) ---------

@dataclass(eq=False)
class Sprite:
    """
    An axis-aligned rectangle displayed on the screen.

    x, y, width, height mirror the host surface as of the last
    `read_geometry`; next_x / next_y are written back by `commit_geometry`.
    Identity (not value) equality: two sprites are the same only if they are
    the same object.
    """
    id: str
    kind: SpriteKind
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    next_x: float | None = None
    next_y: float | None = None
    paddle: PaddleState | None = None
    ball: BallMotion | None = None

    # Edges and centers

    @property
    def W(self) -> int:
        return self.x

    @property
    def E(self) -> int:
        return self.x + self.width

    @property
    def N(self) -> int:
        return self.y

    @property
    def S(self) -> int:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def is_ball(self) -> bool:
        return self.kind is SpriteKind.BALL

    # Host surface I/O

    def read_geometry(self, provider: GeometryProvider) -> None:
        rect = provider.get_bounding_box(self.id)
        self.x = round_px(rect.x)
        self.y = round_px(rect.y)
        self.width = round_px(rect.width)
        self.height = round_px(rect.height)

    def commit_geometry(self, provider: GeometryProvider) -> None:
        if self.ball is not None and not self.ball.initialized:
            provider.clear_spawn_style(self.id)
            self.ball.initialized = True
        provider.set_target_box(self.id, self.next_x, self.next_y)

    # Positioning helpers

    def set_x_position(self, mode: str, viewport: Viewport) -> None:
        if mode == "left":
            self.next_x = 0
        elif mode == "right":
            self.next_x = viewport.width - self.width
        elif mode == "center":
            self.next_x = (viewport.width - self.width) / 2
        else:
            raise InvalidPositionMode("x", mode)

    def set_y_position(self, mode: str, viewport: Viewport) -> None:
        if mode == "top":
            self.next_y = 0
        elif mode == "bottom":
            self.next_y = viewport.height - self.height
        elif mode == "center":
            self.next_y = (viewport.height - self.height) / 2
        else:
            raise InvalidPositionMode("y", mode)

    def set_position(self, x_mode: str, y_mode: str, viewport: Viewport) -> None:
        self.set_x_position(x_mode, viewport)
        self.set_y_position(y_mode, viewport)


def create_paddle(side: Side | str, *, id: str | None = None) -> Sprite:
    side = Side(side)
    return Sprite(
        id=id or f"pad_{side.name.lower()}",
        kind=SpriteKind.PADDLE,
        paddle=PaddleState(side=side),
    )


def create_ball(id: str, motion: BallMotion) -> Sprite:
    return Sprite(id=id, kind=SpriteKind.BALL, ball=motion)
