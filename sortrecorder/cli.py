"""Command-line front end: record a sort and print its animation log."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from . import constants
from .arrays import generate_random_array
from .catalog import get_algorithm_info
from .dispatcher import record_animation
from .errors import UnsupportedInputError
from .replay import apply_steps, highlighted_lines, iter_frames
from .run_types import RecordedRun
from .strategies import SUPPORTED_ALGORITHMS


def _parse_number(text: str):
    try:
        return int(text)
    except ValueError:
        return float(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortrecorder",
        description="Record a sorting algorithm run as replayable animation steps",
    )
    parser.add_argument("algorithm", choices=SUPPORTED_ALGORITHMS,
                        help="Sorting algorithm to record")
    parser.add_argument("values", nargs="*", type=_parse_number,
                        help="Values to sort (default: a random array)")
    parser.add_argument("--random", "-r", type=int, default=None, metavar="N",
                        help=f"Sort N random values (default: {constants.DEFAULT_ARRAY_SIZE})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random array")
    parser.add_argument("--format", "-f", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("--frames", action="store_true",
                        help="Print the array state after every step")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def _print_text(values: list, recorded: RecordedRun, show_frames: bool) -> None:
    info = get_algorithm_info(recorded.algorithm)
    print(f"═══ {info.title} ═══")
    print(f"  Input:  {values}")
    print(f"  Steps:  {len(recorded.steps)} "
          f"({recorded.comparison_count} comparisons, {recorded.write_count} writes)")
    print()

    print("═══ Steps ═══")
    if show_frames:
        for frame in iter_frames(values, recorded):
            print(f"  {frame.step_index:>5}  {str(frame.step):<24} {list(frame.array)}")
    else:
        for i, step in enumerate(recorded.steps):
            print(f"  {i:>5}  {step}")
    print()

    print("═══ Pseudocode trace ═══")
    for index, line in zip(recorded.pseudocode_trace, highlighted_lines(recorded)):
        print(f"  [{index}] {line}")
    print()

    print("═══ Result ═══")
    print(f"  {apply_steps(values, recorded.steps)}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.values:
        values = list(args.values)
    else:
        size = args.random if args.random is not None else constants.DEFAULT_ARRAY_SIZE
        values = generate_random_array(size, rng=random.Random(args.seed))

    try:
        recorded = record_animation(args.algorithm, values)
    except UnsupportedInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        payload = {"input": values, **recorded.to_dict()}
        print(json.dumps(payload, indent=2))
    else:
        _print_text(values, recorded, args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
