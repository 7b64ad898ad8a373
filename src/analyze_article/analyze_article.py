"""Fetch an article and summarise its sentiment and the organizations it mentions."""

from __future__ import annotations

import logging

from analyze_article.confirm_organizations import confirm_organizations
from analyze_article.fetch_article_text import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    fetch_article_text,
)
from analyze_article.filter_entities import filter_entities
from analyze_article.knowledge_graph import KnowledgeGraphClient
from analyze_article.language_client import LanguageClient
from analyze_article.models import AnalysisResult
from analyze_article.sentiment import sentiment_label

logger = logging.getLogger(__name__)


def analyze_article(
    url: str,
    language_client: LanguageClient,
    knowledge_graph_client: KnowledgeGraphClient,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AnalysisResult:
    """
    Analyze the article at ``url``.

    Args:
        url: Article URL.
        language_client: Shared entity/sentiment analysis client.
        knowledge_graph_client: Client used to confirm organizations.
        timeout: Timeout in seconds for the article download.
        user_agent: User-Agent header sent with the article download.

    Returns:
        AnalysisResult with sentiment label, score and confirmed organizations.
    """
    logger.info("Analyzing %s", url)
    text = fetch_article_text(url, timeout=timeout, user_agent=user_agent)
    return analyze_text(text, language_client, knowledge_graph_client)


def analyze_text(
    text: str,
    language_client: LanguageClient,
    knowledge_graph_client: KnowledgeGraphClient,
) -> AnalysisResult:
    """Run sentiment analysis and organization confirmation on extracted text."""
    analysis = language_client.analyze(text)
    candidates = filter_entities(analysis.entities, text)
    organizations = confirm_organizations(candidates, text, knowledge_graph_client)

    return AnalysisResult(
        sentiment=sentiment_label(analysis.score),
        score=analysis.score,
        organizations=organizations,
    )
