"""Confirm candidate names against the knowledge base."""

from __future__ import annotations

import logging

import requests

from analyze_article.errors import KnowledgeGraphError
from analyze_article.filter_entities import is_organization_in_article
from analyze_article.knowledge_graph import KnowledgeGraphClient
from common.utils import dedupe_preserving_order

logger = logging.getLogger(__name__)


def confirm_organizations(
    candidates: list[str],
    article_text: str,
    client: KnowledgeGraphClient,
) -> list[str]:
    """
    Resolve each candidate to a canonical organization name.

    Candidates are looked up one at a time in rank order. A failed lookup
    is logged and the candidate skipped. The canonical name is kept only if
    it also occurs in the article. Duplicates are removed at the end.
    """
    confirmed: list[str] = []
    for candidate in candidates:
        try:
            canonical = client.lookup_name(candidate)
            if canonical is None:
                logger.debug("No knowledge graph match for %s", candidate)
                continue
            if not is_organization_in_article(canonical, article_text):
                logger.debug("Discarding %s (%s): not mentioned in article", canonical, candidate)
                continue
        except (KnowledgeGraphError, requests.RequestException, TypeError, AttributeError) as e:
            logger.warning("Knowledge Graph error for %s: %s", candidate, e)
            continue

        confirmed.append(canonical)

    organizations = dedupe_preserving_order(confirmed)
    logger.info("Confirmed %d organizations from %d candidates", len(organizations), len(candidates))
    return organizations
