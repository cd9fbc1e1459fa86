#!/usr/bin/env python3
"""
bendmaze command line.

Image:
  python -m bendmaze image --dimension 20 --difficulty 0.4 --seed 42 --out maze.png
  # Optional: --solution (overlay the path), --figure (draw with matplotlib)

SVG:
  python -m bendmaze svg --dimension 20 --seed 42 --out maze.svg

Solve (print the path, bends and attempts taken):
  python -m bendmaze solve --dimension 10 --difficulty 0.2 --seed 7

Batch (zip of JPEGs grouped into easy/medium/hard + info_labels.jsonl):
  python -m bendmaze batch --out mazes.zip --total 100 --dimension 40 --workers 4
  # or: --config config/batch.json; --enforce-difficulty to require each band's ratio
"""

import argparse
import random
import sys

from bendmaze.config import (
    DEF_DIMENSION, DEF_DIFFICULTY, DEF_METHOD, DEF_CELL_PX, DEF_MAX_ITERATIONS,
    BatchConfig, load_batch_config, setup_logging,
)
from bendmaze.errors import MazeError
from bendmaze.export import export_batch
from bendmaze.generator import METHODS
from bendmaze.render import plot_maze
from bendmaze.session import MazeSession


def _add_maze_args(p):
    p.add_argument("--dimension", type=int, default=DEF_DIMENSION)
    p.add_argument("--difficulty", type=float, default=DEF_DIFFICULTY, help="minimum bend ratio, 0 <= d < 1")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--method", choices=METHODS, default=DEF_METHOD)
    p.add_argument("--max-iterations", type=int, default=DEF_MAX_ITERATIONS,
                   help="give up after this many attempts (0 = never)")

def _session(args) -> MazeSession:
    rng = random.Random(args.seed) if args.seed is not None else None
    session = MazeSession(args.dimension, args.difficulty, rng=rng, method=args.method,
                          max_iterations=args.max_iterations or None)
    session.generate()
    return session


def build_parser():
    parser = argparse.ArgumentParser(description="Perfect maze generator with bend-ratio difficulty.")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_img = sub.add_parser("image", help="Generate a single maze PNG.")
    _add_maze_args(p_img)
    p_img.add_argument("--cell_px", type=int, default=DEF_CELL_PX)
    p_img.add_argument("--margin", type=int, default=2)
    p_img.add_argument("--solution", action="store_true", help="Overlay the solution path.")
    p_img.add_argument("--figure", action="store_true", help="Draw with matplotlib instead of the raw canvas.")
    p_img.add_argument("--out", type=str, required=True)

    p_svg = sub.add_parser("svg", help="Generate a single maze SVG.")
    _add_maze_args(p_svg)
    p_svg.add_argument("--out", type=str, required=True)

    p_sol = sub.add_parser("solve", help="Generate a maze and print its solution.")
    _add_maze_args(p_sol)

    p_b = sub.add_parser("batch", help="Export a zip of JPEG mazes grouped by difficulty band.")
    p_b.add_argument("--out", type=str, default="mazes.zip")
    p_b.add_argument("--config", type=str, default=None, help="JSON file with a 'batch' section")
    p_b.add_argument("--total", type=int, default=None)
    p_b.add_argument("--dimension", type=int, default=None)
    p_b.add_argument("--base-seed", type=int, default=None)
    p_b.add_argument("--workers", type=int, default=None)
    p_b.add_argument("--max-iterations", type=int, default=None)
    p_b.add_argument("--enforce-difficulty", action="store_true",
                     help="regenerate each maze until it reaches its band's bend ratio")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.cmd == "image":
            session = _session(args)
            if args.figure:
                import matplotlib.pyplot as plt
                fig, _ = plot_maze(session.grid, session.solve() if args.solution else None)
                fig.savefig(args.out)
                plt.close(fig)
            else:
                if args.solution:
                    session.toggle_solution()
                session.save_png(args.out, args.cell_px, margin=args.margin)
            print(f"Wrote {args.out} ({args.dimension}x{args.dimension}, {session.iterations} attempts).")

        elif args.cmd == "svg":
            session = _session(args)
            session.save_svg(args.out)
            print(f"Wrote {args.out} ({args.dimension}x{args.dimension}, {session.iterations} attempts).")

        elif args.cmd == "solve":
            session = _session(args)
            path = session.solve()
            res = session.result
            print(" ".join(f"{r},{c}" for (r, c) in path))
            print(f"cells: {len(path)}  bends: {res.bends}  bend ratio: {res.bend_ratio:.4f}  attempts: {res.iterations}")

        elif args.cmd == "batch":
            config = load_batch_config(args.config) if args.config else BatchConfig()
            for key in ("total", "dimension", "base_seed", "workers", "max_iterations"):
                value = getattr(args, key)
                if value is not None:
                    setattr(config, key, value)
            if args.enforce_difficulty:
                config.enforce_difficulty = True
            report = export_batch(args.out, config)
            print(f"Wrote {len(report.written)} mazes to {args.out}.")
            for failure in report.failures:
                print(f"  failed {failure.unit.arcname}: {failure.error}", file=sys.stderr)
            return 0 if report.ok else 1

    except MazeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
