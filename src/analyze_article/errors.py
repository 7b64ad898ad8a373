"""Exceptions raised while analyzing an article."""


class AnalyzerError(Exception):
    """Base class for article analysis failures."""


class MissingUrlError(AnalyzerError):
    """The request did not carry an article URL."""

    def __init__(self) -> None:
        super().__init__("Missing URL parameter")


class ContentExtractionError(AnalyzerError):
    """No paragraph text could be extracted from the article."""

    def __init__(self) -> None:
        super().__init__("Unable to extract article content")


class ArticleFetchError(AnalyzerError):
    """The article could not be downloaded as text."""


class SentimentAnalysisError(AnalyzerError):
    """The entity or sentiment analysis call failed."""


class KnowledgeGraphError(AnalyzerError):
    """A knowledge-base lookup failed or returned a malformed payload."""


class ConfigError(AnalyzerError):
    """Required configuration is missing."""
