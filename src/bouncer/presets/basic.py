from __future__ import annotations
from bouncer.core import GameConfig, Screen, SimulationState, Timestamps, Side, create_paddle
from bouncer.core.geometry import GeometryProvider

# (x mode, y mode) used to lay out each paddle before the first tick
PADDLE_LAYOUT = {
    Side.NORTH: ("center", "top"),
    Side.SOUTH: ("center", "bottom"),
    Side.EAST: ("right", "center"),
    Side.WEST: ("left", "center"),
}


def make_screen(config: GameConfig) -> Screen:
    """Headless screen with one surface per paddle."""
    screen = Screen(width=config.width, height=config.height,
                    ball_size=(config.ball_size, config.ball_size))
    for side in PADDLE_LAYOUT:
        if side in (Side.NORTH, Side.SOUTH):
            w, h = config.paddle_length, config.paddle_thickness
        else:
            w, h = config.paddle_thickness, config.paddle_length
        screen.add_surface(create_paddle(side).id, w, h)
    return screen


def make_state(config: GameConfig, provider: GeometryProvider, now: float) -> SimulationState:
    viewport = provider.current_size()
    state = SimulationState(
        config=config,
        timestamps=Timestamps.starting_at(now),
        viewport=viewport,
    )
    for side, (x_mode, y_mode) in PADDLE_LAYOUT.items():
        pad = create_paddle(side)
        pad.read_geometry(provider)
        pad.set_position(x_mode, y_mode, viewport)
        state.pads[side] = pad
    for pad in state.pads.values():
        pad.commit_geometry(provider)
    return state
