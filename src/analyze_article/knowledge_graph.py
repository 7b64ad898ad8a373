"""Client for the Google Knowledge Graph Search API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from analyze_article.errors import KnowledgeGraphError
from common.utils import get_value

logger = logging.getLogger(__name__)

KG_SEARCH_URL = "https://kgsearch.googleapis.com/v1/entities:search"
DEFAULT_TYPES = "Organization"
DEFAULT_LIMIT = 3
DEFAULT_TIMEOUT_SECONDS = 10


class KnowledgeGraphClient:
    """Look up canonical organization names by free-text query."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = KG_SEARCH_URL,
        types: str = DEFAULT_TYPES,
        limit: int = DEFAULT_LIMIT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.types = types
        self.limit = limit
        self.timeout = timeout

    def search(self, query: str) -> list[dict[str, Any]]:
        """Return the ranked ``result`` records for a query."""
        if not self.api_key:
            raise KnowledgeGraphError("Knowledge Graph API key is not configured")

        try:
            response = requests.get(
                self.base_url,
                params={
                    "query": query,
                    "key": self.api_key,
                    "types": self.types,
                    "limit": self.limit,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise KnowledgeGraphError(f"Search failed for {query!r}: {e}") from e
        except ValueError as e:
            raise KnowledgeGraphError(f"Invalid JSON for {query!r}") from e

        return _parse_results(data, query)

    def lookup_name(self, query: str) -> str | None:
        """Canonical name of the top result, or None when nothing matches."""
        results = self.search(query)
        if not results:
            return None
        name = get_value(results[0], "name")
        if name is not None and not isinstance(name, str):
            raise KnowledgeGraphError(f"Non-string name for {query!r}: {name!r}")
        return name


def _parse_results(data: Any, query: str) -> list[dict[str, Any]]:
    if not isinstance(data, dict):
        raise KnowledgeGraphError(f"Unexpected response for {query!r}")

    items = data.get("itemListElement")
    if items is None:
        return []
    if not isinstance(items, list):
        raise KnowledgeGraphError(f"Unexpected itemListElement for {query!r}")

    results = []
    for item in items:
        result = get_value(item, "result") if isinstance(item, dict) else None
        if not isinstance(result, dict):
            raise KnowledgeGraphError(f"Malformed result for {query!r}")
        results.append(result)
    return results
