"""
Main entry point for tombcrawler.

Usage:
    python -m src.main check levels/tutorial.ttc solutions/tutorial.txt
    python -m src.main batch batch.yaml --output results/run1.json --verbose
    python -m src.main play levels/tutorial.ttc
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .checker import check_solution, load_level, WallGrid
from .harness import BatchConfig, BatchRunner, PlaySession, run_play_loop
from .utils.board_renderer import render_solution
from .utils.logger import configure_logging


def load_config(config_path: str) -> BatchConfig:
    """Load a batch configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return BatchConfig(**(data or {}))


def run_check(args: argparse.Namespace) -> int:
    try:
        level = load_level(Path(args.level).read_text())
        solution = WallGrid.from_text(Path(args.solution).read_text())
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print(render_solution(level, solution))
        print()

    failure = check_solution(level.puzzle, solution)
    if failure is None:
        print("Solved!")
        return 0

    print(f"{failure.reason} at {failure.pos}")
    return 1


def run_batch(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"batch_{timestamp}.json"

    runner = BatchRunner.create(config=config, base_dir=Path(args.config).parent)
    result = runner.run(verbose=args.verbose)
    runner.save_result(output_path)

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    # Print summary
    print()
    print("=== Batch Summary ===")
    print(f"Cases: {result.total_cases}")
    print(f"Solved: {result.solved_count}")
    print(f"Matched expectation: {result.matched_count}")
    if result.error_count:
        print(f"Unreadable: {result.error_count}")

    return 0 if result.matched_count == result.total_cases else 1


def run_play(args: argparse.Namespace) -> int:
    try:
        level = load_level(Path(args.level).read_text())
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    session = run_play_loop(PlaySession.create(level))
    return 0 if session.solved == "SUCCESS" else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check and play dungeon diagram puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example batch.yaml:
  cases:
    - name: tutorial
      level: levels/tutorial.ttc
      solution: solutions/tutorial.txt
    - name: two-doors
      level: levels/tutorial.ttc
      solution: solutions/two_doors.txt
      expect: NO_TREASURE_ROOM
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check a solution against a level")
    check.add_argument("level", help="Path to a .ttc level file")
    check.add_argument("solution", help="Path to a solution file ('#' marks a wall)")
    check.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Render the board and trace the checker"
    )
    check.set_defaults(handler=run_check)

    batch = subparsers.add_parser("batch", help="Check every case listed in a YAML config")
    batch.add_argument("config", help="Path to YAML batch configuration")
    batch.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/batch_<timestamp>.json)"
    )
    batch.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )
    batch.set_defaults(handler=run_batch)

    play = subparsers.add_parser("play", help="Play a level in the terminal")
    play.add_argument("level", help="Path to a .ttc level file")
    play.set_defaults(handler=run_play, verbose=False)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
