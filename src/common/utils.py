"""Common utility functions."""

from typing import Any, Iterable


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute (None when absent)."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def dedupe_preserving_order(values: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))
