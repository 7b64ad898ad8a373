"""Article analysis endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from analyze_article.analyze_article import analyze_article
from analyze_article.errors import AnalyzerError
from analyze_article.knowledge_graph import KnowledgeGraphClient
from analyze_article.language_client import LanguageClient
from analyzer_api.config import AnalyzerConfig, get_config
from analyzer_api.dependencies import get_knowledge_graph_client, get_language_client, require_url
from analyzer_api.models.analysis import AnalysisResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


@router.get(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(
    # require_url must stay first so a missing URL fails before any client is built
    url: Annotated[str, Depends(require_url)],
    config: Annotated[AnalyzerConfig, Depends(get_config)],
    language_client: Annotated[LanguageClient, Depends(get_language_client)],
    knowledge_graph_client: Annotated[KnowledgeGraphClient, Depends(get_knowledge_graph_client)],
):
    """Analyze a news article.

    Downloads the article, scores its sentiment and returns the
    organizations it mentions that the knowledge graph confirms.
    """
    try:
        result = analyze_article(
            url,
            language_client,
            knowledge_graph_client,
            timeout=config.http.timeout_seconds,
            user_agent=config.http.user_agent,
        )
    except AnalyzerError:
        raise
    except Exception as e:
        raise AnalyzerError(str(e)) from e

    return AnalysisResponse(**result.to_dict())
