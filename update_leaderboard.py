import argparse
import logging
import sys
from pathlib import Path

from seller_ranking.logger import setup_logger
from seller_ranking.pipelines.leaderboard import LeaderboardPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the seller leaderboard report.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Path to a sales data JSON file (default: newest file in INPUT_DIR).",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Test mode: write the report files but skip the webhook post.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(log_level=logging.DEBUG if args.verbose else logging.INFO)

    pipeline = LeaderboardPipeline(input_path=args.input, test_mode=args.test)
    return 0 if pipeline.run() else 1


if __name__ == "__main__":
    sys.exit(main())
