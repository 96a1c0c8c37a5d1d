"""Shared builders for the test suite."""

from bouncer.core import BallMotion, GameConfig, Side, Sprite, SpriteKind, Viewport, create_paddle
from bouncer.presets.basic import make_screen, make_state


def box(x, y, w, h, kind=SpriteKind.PADDLE, id="box"):
    return Sprite(id=id, kind=kind, x=x, y=y, width=w, height=h)


def ball_at(x, y, dx, dy, size=20, speed=0.1, id="ball_0"):
    return Sprite(
        id=id, kind=SpriteKind.BALL, x=x, y=y, width=size, height=size,
        ball=BallMotion(angle=0.0, dx=dx, dy=dy, speed=speed),
    )


def pads_for(viewport: Viewport, length=120, thickness=16):
    """The four paddles laid out at the middle of their edges."""
    pads = {}
    for side in Side:
        pad = create_paddle(side)
        if side in (Side.NORTH, Side.SOUTH):
            pad.width, pad.height = length, thickness
            pad.x = int((viewport.width - length) / 2)
            pad.y = 0 if side is Side.NORTH else int(viewport.height - thickness)
        else:
            pad.width, pad.height = thickness, length
            pad.y = int((viewport.height - length) / 2)
            pad.x = 0 if side is Side.WEST else int(viewport.width - thickness)
        pads[side] = pad
    return pads


def make_game(now=10_000.0, **overrides):
    config = GameConfig(**overrides)
    screen = make_screen(config)
    state = make_state(config, screen, now=now)
    return config, screen, state
