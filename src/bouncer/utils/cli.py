import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Headless bouncing-ball session')
    parser.add_argument('--exp_name', type=str, default='', metavar='N',
                        help='experiment name, used as output subdirectory')
    parser.add_argument('--seed', type=int, default=1, metavar='N',
                        help='random seed for launch angles (default: 1)')
    parser.add_argument('--frames', type=int, default=600, metavar='N',
                        help='number of ticks to simulate (default: 600)')
    parser.add_argument('--frame_ms', type=float, default=1000.0 / 60, metavar='MS',
                        help='simulated time between ticks in ms (default: 16.67)')
    parser.add_argument('--outdir', type=str, default='results', metavar='DIR',
                        help='directory to save the recording (default: results)')
    parser.add_argument('--preset', type=str, default=None, metavar='PATH',
                        help='YAML game preset; command line values override it')
    parser.add_argument('--initial_ball_speed', type=float, default=None, metavar='PX_PER_MS',
                        help='ball speed per unit of direction (default: from preset or 0.003)')
    parser.add_argument('--interval_between_balls', type=float, default=None, metavar='MS',
                        help='time between two ball launches (default: from preset or 2000)')
    parser.add_argument('--width', type=float, default=None, metavar='PX',
                        help='viewport width (default: from preset or 800)')
    parser.add_argument('--height', type=float, default=None, metavar='PX',
                        help='viewport height (default: from preset or 600)')
    parser.add_argument('--max_balls', type=int, default=None, metavar='N',
                        help='stop launching balls past this count (default: unbounded)')
    parser.add_argument(
        "--pointer",
        type=str,
        default="sweep",
        choices=["still", "sweep"],
        help="scripted pointer driving the paddles",
    )
    parser.add_argument(
        "--pointer_jitter",
        type=float,
        default=0.0,
        help="gaussian jitter (px) added to the sweep pointer",
    )
    parser.add_argument(
        "--log_interval",
        type=int,
        default=60,
        help="print progress every N ticks (0 to disable)",
    )
    parser.add_argument(
        "--export_frames",
        type=int,
        nargs="*",
        default=None,
        help="indices of frames to export as PNG (no value: the last frame)",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=100,
        help="dpi of exported frames",
    )
    return parser

'''
usage: python scripts/main.py --exp_name demo --seed 42 --frames 1200 \
    --preset configs/rush.yaml --pointer sweep --export_frames 0 600 1199
'''
