"""Common CLI helper utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools and the API server."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def write_json_output(record: dict[str, Any], output: str | None = None) -> Path | None:
    """Write a JSON record to a file, or print it to stdout.

    Args:
        record: Dictionary to serialize.
        output: Destination file path. Prints to stdout when None.

    Returns:
        Path to the created file, or None when printed.
    """
    payload = json.dumps(record, default=str, ensure_ascii=False, indent=2)
    if output is None:
        print(payload)
        return None
    filepath = Path(output)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(payload + "\n")
    return filepath
