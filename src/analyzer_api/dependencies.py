"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Query

from analyze_article.errors import MissingUrlError
from analyze_article.knowledge_graph import KnowledgeGraphClient
from analyze_article.language_client import LanguageClient, build_language_client
from analyzer_api.config import AnalyzerConfig, get_config
from common.config import LazySingleton


def _load_language_client() -> LanguageClient:
    return build_language_client(get_config().google.to_service_account_info())


_language_client: LazySingleton[LanguageClient] = LazySingleton(_load_language_client)


def require_url(
    url: Annotated[str | None, Query(description="Article URL to analyze")] = None,
) -> str:
    """Dependency that rejects requests without an article URL."""
    if url is None or not url.strip():
        raise MissingUrlError()
    return url.strip()


def get_language_client() -> LanguageClient:
    """Dependency returning the process-wide language client."""
    return _language_client.get()


def get_knowledge_graph_client(
    config: Annotated[AnalyzerConfig, Depends(get_config)],
) -> KnowledgeGraphClient:
    """Dependency to get a knowledge graph client."""
    kg = config.knowledge_graph
    return KnowledgeGraphClient(
        api_key=kg.api_key,
        base_url=kg.base_url,
        types=kg.types,
        limit=kg.limit,
        timeout=config.http.timeout_seconds,
    )
