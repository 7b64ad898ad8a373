"""Helper functions for analyze_article CLI."""

from __future__ import annotations

import argparse


def parse_analyze_article_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for analyze_article."""

    parser = argparse.ArgumentParser(
        description="Score the sentiment of a news article and list the organizations it mentions.",
    )

    # Input options
    parser.add_argument("--url", required=True, help="Article URL to analyze")

    # Config options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under analyzer_api/configs (default: $ANALYZER_API_CONFIG or prod)",
    )

    # Output options
    parser.add_argument(
        "--output",
        default=None,
        help="Write the JSON result to this file instead of stdout",
    )

    return parser.parse_args(argv)
