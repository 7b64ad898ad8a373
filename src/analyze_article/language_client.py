"""Entity and sentiment analysis through Google Cloud Natural Language."""

from __future__ import annotations

import logging
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from google.cloud import language_v1
from google.oauth2 import service_account

from analyze_article.errors import ConfigError, SentimentAnalysisError
from analyze_article.models import Entity, TextAnalysis

logger = logging.getLogger(__name__)

REQUIRED_CREDENTIAL_FIELDS = ("type", "project_id", "private_key", "client_email", "token_uri")


class LanguageClient:
    """Thin wrapper over ``LanguageServiceClient``.

    Holds no per-request state, so a single instance is shared by every
    request for the lifetime of the process.
    """

    def __init__(self, service_client: Any):
        self._client = service_client

    def analyze(self, text: str) -> TextAnalysis:
        """Run entity analysis then document sentiment analysis on ``text``."""
        document = language_v1.Document(
            content=text,
            type_=language_v1.Document.Type.PLAIN_TEXT,
        )
        try:
            entity_response = self._client.analyze_entities(
                request={
                    "document": document,
                    "encoding_type": language_v1.EncodingType.UTF8,
                }
            )
            sentiment_response = self._client.analyze_sentiment(
                request={"document": document}
            )
        except google_exceptions.GoogleAPIError as e:
            raise SentimentAnalysisError(str(e)) from e

        entities = [_to_entity(entity) for entity in entity_response.entities]
        score = _document_score(sentiment_response)
        logger.info("Language service returned %d entities, sentiment score %.3f", len(entities), score)
        return TextAnalysis(entities=entities, score=score)


def build_language_client(credentials_info: dict[str, str | None]) -> LanguageClient:
    """Create a client from service-account credential fields."""
    missing = [name for name in REQUIRED_CREDENTIAL_FIELDS if not credentials_info.get(name)]
    if missing:
        raise ConfigError(f"Missing Google credential fields: {', '.join(missing)}")

    info = {key: value for key, value in credentials_info.items() if value is not None}
    try:
        credentials = service_account.Credentials.from_service_account_info(info)
    except (ValueError, google_auth_exceptions.GoogleAuthError) as e:
        raise ConfigError(f"Invalid Google credentials: {e}") from e
    logger.info("Creating language client for project %s", info["project_id"])
    return LanguageClient(language_v1.LanguageServiceClient(credentials=credentials))


def _to_entity(entity: Any) -> Entity:
    entity_type = getattr(entity.type_, "name", None) or "UNKNOWN"
    return Entity(
        name=entity.name or None,
        type=entity_type,
        salience=entity.salience,
    )


def _document_score(response: Any) -> float:
    if "document_sentiment" not in response:
        return 0.0
    return response.document_sentiment.score
