"""CLI for analyzing a single news article."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from analyze_article.analyze_article import analyze_article
from analyze_article.errors import AnalyzerError
from analyze_article.helpers import parse_analyze_article_args
from analyze_article.knowledge_graph import KnowledgeGraphClient
from analyze_article.language_client import build_language_client
from analyzer_api.config import load_config
from common.cli_helpers import setup_logging, write_json_output

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_analyze_article_args(argv)
    setup_logging()

    try:
        config = load_config(args.config)
        kg = config.knowledge_graph
        language_client = build_language_client(config.google.to_service_account_info())
        knowledge_graph_client = KnowledgeGraphClient(
            api_key=kg.api_key,
            base_url=kg.base_url,
            types=kg.types,
            limit=kg.limit,
            timeout=config.http.timeout_seconds,
        )
        result = analyze_article(
            args.url,
            language_client,
            knowledge_graph_client,
            timeout=config.http.timeout_seconds,
            user_agent=config.http.user_agent,
        )
    except AnalyzerError as e:
        logger.error("Analysis failed for %s: %s", args.url, e)
        write_json_output({"error": str(e)})
        return 1
    except Exception as e:
        logger.exception("Unexpected error analyzing %s", args.url)
        write_json_output({"error": str(e) or "Internal server error"})
        return 1

    filepath = write_json_output(result.to_dict(), args.output)
    if filepath is not None:
        logger.info("Saved analysis to %s", filepath)
    return 0


if __name__ == "__main__":
    sys.exit(main())
