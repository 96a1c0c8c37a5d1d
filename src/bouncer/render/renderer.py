# src/bouncer/render/renderer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Circle, Rectangle

from bouncer.utils.render_utils import fig_inches_from_pixels

if TYPE_CHECKING:
    from bouncer.core.recording import FrameSnapshot, SpriteSnapshot


@dataclass
class RendererConfig:
    figsize: tuple[float, float] = (8.0, 6.0)
    dpi: int = 100
    width_px: int | None = None
    height_px: int | None = None
    background_color: str | None = "black"
    screen_color: str | None = "#202020"
    paddle_color: str = "white"
    ball_color: str = "orange"
    show_labels: bool = True
    show_hud: bool = True


class MatplotlibRenderer:
    """Draws frame snapshots in screen pixels (y axis pointing down)."""

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()
        self.fig = None
        self.ax = None
        self._hud_text = None

    def _init_figure(self):
        fig, ax = plt.subplots(
            figsize=fig_inches_from_pixels(width_px=self.config.width_px,
                                           height_px=self.config.height_px,
                                           dpi=self.config.dpi,
                                           figsize_default=self.config.figsize),
            dpi=self.config.dpi,
        )
        bg = self.config.background_color if self.config.background_color is not None else "none"
        fig.patch.set_facecolor(bg)
        self._hud_text = fig.text(0.5, 0.97, "", ha="center", va="top", size=12, color="white")
        self.fig, self.ax = fig, ax

    def render_snapshot(self, snapshot: FrameSnapshot, *, ax: Axes | None = None) -> Axes:
        """
        Draw a single frame snapshot onto `ax` (the renderer's own figure if
        not given).
        """
        if ax is None:
            if self.ax is None:
                self._init_figure()
            ax = self.ax
        ax.clear()
        width, height = snapshot.viewport
        self._setup_axes(ax, width, height)

        ax.add_patch(Rectangle(
            (0.0, 0.0), width, height,
            facecolor=self.config.screen_color if self.config.screen_color is not None else "none",
            edgecolor="none",
        ))
        for sprite in snapshot.sprites:
            if sprite.kind == "ball":
                self._draw_ball(sprite, ax)
            else:
                self._draw_paddle(sprite, ax)

        if self._hud_text is not None:
            text = f"t = {snapshot.t / 1000:6.2f} s   balls: {snapshot.n_balls}" if self.config.show_hud else ""
            self._hud_text.set_text(text)
        return ax

    # --- helpers ---

    def _setup_axes(self, ax: Axes, width: float, height: float) -> None:
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()

    def _draw_paddle(self, sprite: SpriteSnapshot, ax: Axes) -> None:
        ax.add_patch(Rectangle(
            (sprite.x, sprite.y), sprite.width, sprite.height,
            facecolor=self.config.paddle_color, edgecolor="none",
        ))

    def _draw_ball(self, sprite: SpriteSnapshot, ax: Axes) -> None:
        cx = sprite.x + sprite.width / 2
        cy = sprite.y + sprite.height / 2
        ax.add_patch(Circle((cx, cy), min(sprite.width, sprite.height) / 2,
                            facecolor=self.config.ball_color, edgecolor="none"))
        if self.config.show_labels:
            # ball_<n> is labelled B<n+1>
            n = sprite.id.rsplit("_", 1)[-1]
            label = f"B{int(n) + 1}" if n.isdigit() else sprite.id
            ax.text(cx, cy, label, ha="center", va="center", size=6, color="black")
