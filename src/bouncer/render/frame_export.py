from __future__ import annotations

from pathlib import Path
from typing import Iterable, List
import matplotlib.pyplot as plt

from .renderer import MatplotlibRenderer, RendererConfig
from bouncer.core import SessionRecording


def export_frame(
    recording: SessionRecording,
    *,
    out_path: str | Path,
    frame_index: int | None = None,
    t: float | None = None,
    renderer: MatplotlibRenderer | None = None,
) -> Path:
    """
    Render a single frame from `recording` to a PNG (or whatever extension you provide).

    Provide either:
      - frame_index (index into recording.frames, negative counts from the end)
      - t (ms since game start; the closest frame is used)
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig())

    if (frame_index is None) == (t is None):
        raise ValueError("Provide exactly one of frame_index or t")

    frames = recording.frames
    if not frames:
        raise ValueError("Recording has no frames")

    if frame_index is not None:
        if frame_index < -len(frames) or frame_index >= len(frames):
            raise IndexError(f"frame_index {frame_index} out of range (0..{len(frames)-1})")
        frame = frames[frame_index]
    else:
        frame = min(frames, key=lambda f: abs(float(f.t) - float(t)))

    renderer._init_figure()
    renderer.render_snapshot(frame, ax=renderer.ax)
    renderer.fig.savefig(out_path, dpi=renderer.config.dpi, facecolor=renderer.fig.get_facecolor())
    plt.close(renderer.fig)
    renderer.fig, renderer.ax = None, None
    return out_path


def export_frames(
    recording: SessionRecording,
    frame_indices: Iterable[int],
    *,
    exp_dir: str | Path,
    renderer: MatplotlibRenderer | None = None,
) -> List[Path]:
    exp_dir = Path(exp_dir)
    paths = []
    for idx in frame_indices:
        resolved = idx if idx >= 0 else len(recording.frames) + idx
        paths.append(export_frame(
            recording,
            out_path=exp_dir / f"frame_{resolved:05d}.png",
            frame_index=idx,
            renderer=renderer,
        ))
    return paths
