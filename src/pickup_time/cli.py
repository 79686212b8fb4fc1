"""Command-line argument parsing for the GitHub PR pickup-time generator."""

from __future__ import annotations

import argparse
from typing import List, Optional


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for pickup-time generation.

    Returns:
        Parsed CLI arguments containing the repository, optional days of
        history, output format and resolution options.
    """
    parser = argparse.ArgumentParser(
        prog="gh-pr-pickup-time",
        description=(
            "Compute GitHub pull-request pickup time (time from ready for review "
            "to first review, excluding weekends) for a repository."
        ),
    )

    parser.add_argument(
        "--repo",
        required=True,
        help="GitHub repository to analyze, as OWNER/NAME.",
    )
    parser.add_argument(
        "--days",
        type=_positive_int,
        default=None,
        help="Only analyze PRs created in the last N days (default: all PRs).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json"),
        default="text",
        help="Output a percentile report (text) or per-PR records (json).",
    )
    parser.add_argument(
        "--ignore-ready-after-review",
        action="store_true",
        help="Ignore ready_for_review events recorded after the first review.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable informational logging on stderr.",
    )

    return parser.parse_args(argv)
