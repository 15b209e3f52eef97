"""Command line entry point: pygame window by default, text with --headless."""

import argparse
import asyncio
import logging
import sys

from stepsort import settings
from stepsort.catalog import ALGORITHMS, describe
from stepsort.engine import SortSession
from stepsort.errors import StepSortError


def build_parser():
    keys = [k for _, k in ALGORITHMS]
    p = argparse.ArgumentParser(
        description="Step-by-step sorting visualizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # window, random array
  python main.py --values "5, 2, 8, 1, 9" -a insertion
  python main.py --headless -a merge --pace 0 --seed 7
""")
    p.add_argument("--values", type=str, help="Comma/space separated numbers (max %d)"
                   % settings.MAX_INPUT_SIZE)
    p.add_argument("--algorithm", "-a", choices=keys, default="bubble",
                   help="Algorithm (default: bubble)")
    p.add_argument("--pace", type=int, default=settings.DEFAULT_PACE_MS,
                   help=f"Pause between steps in ms (default: {settings.DEFAULT_PACE_MS})")
    p.add_argument("--seed", type=int, help="Seed for the random array")
    p.add_argument("--headless", action="store_true", help="Print steps instead of opening a window")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p


async def run_headless(session, algorithm, pace_ms, out=sys.stdout):
    from stepsort.viewer import format_event

    info = describe(algorithm)
    print(f"{info.name}  best {info.best}  worst {info.worst}  space {info.space}  "
          f"stable {'yes' if info.stable else 'no'}", file=out)
    print(f"Recommendation: {session.recommend()}", file=out)
    last = None
    async for event in session.stream(algorithm, pace_ms):
        print(format_event(event), file=out)
        last = event
    print(f"Comparisons: {last.comparisons}  Swaps: {last.swaps}  "
          f"Execution Time: {last.elapsed_ms:.2f}ms", file=out)
    return last


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    session = SortSession()
    try:
        if args.values:
            session.set_text_input(args.values)
        else:
            session.randomize(seed=args.seed)
    except StepSortError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.pace < 0:
        print("Error: --pace must be non-negative", file=sys.stderr)
        return 2

    if args.headless:
        asyncio.run(run_headless(session, args.algorithm, args.pace))
    else:
        from stepsort.viewer import run_window
        run_window(session, args.pace, args.algorithm)
    return 0


if __name__ == "__main__":
    sys.exit(main())
