# src/bouncer/main.py

from __future__ import annotations

from pathlib import Path
from dataclasses import asdict

from bouncer.core import FrameScheduler, GameConfig, SimulatedClock, SweepPointer, StillPointer, run_session
from bouncer.presets.basic import make_screen, make_state
from bouncer.utils.cli import build_parser
from bouncer.utils.preset_loader import load_preset
from bouncer.utils.random import seed_all


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    base = load_preset(args.preset) if args.preset is not None else None
    config = GameConfig.from_args(args, base=base)
    seed_all(args.seed)

    # 1. Build screen, paddles and scheduler
    clock = SimulatedClock()
    screen = make_screen(config)
    state = make_state(config, screen, now=clock.now())
    if args.pointer == "sweep":
        pointer_source = SweepPointer(jitter=args.pointer_jitter)
    else:
        pointer_source = StillPointer()
    scheduler = FrameScheduler(state, screen, clock=clock,
                               frame_interval_ms=args.frame_ms,
                               pointer_source=pointer_source)

    # 2. Run the session and record it
    recording = run_session(scheduler, args.frames, log_interval=args.log_interval or None)
    print(f"Session completed: {len(recording.frames)} frames, {state.n_balls} balls.")

    recording.meta = {
        "config": asdict(config),
        "seed": args.seed,
        "frame_ms": args.frame_ms,
        "pointer": args.pointer,
    }

    # 3. Output
    exp_dir = Path(args.outdir) / args.exp_name
    exp_dir.mkdir(exist_ok=True, parents=True)
    recording_path = exp_dir / "recording.pkl.xz"
    recording.save(recording_path)
    print(f"Recording saved to {recording_path}")

    if args.export_frames is not None:
        from bouncer.render.frame_export import export_frames
        from bouncer.render.renderer import MatplotlibRenderer, RendererConfig

        indices = args.export_frames or [-1]
        renderer = MatplotlibRenderer(RendererConfig(dpi=args.dpi))
        for path in export_frames(recording, indices, exp_dir=exp_dir, renderer=renderer):
            print(f"Exported {path}")
    return recording


if __name__ == "__main__":
    main()
