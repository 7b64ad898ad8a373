"""Data models for the analyze_article pipeline."""

from dataclasses import dataclass, field

ORGANIZATION = "ORGANIZATION"
PERSON = "PERSON"

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"


@dataclass
class Entity:
    """Named entity returned by the entity analysis service.

    ``name`` and ``salience`` are optional on the service response.
    """
    name: str | None
    type: str
    salience: float | None = None


@dataclass
class TextAnalysis:
    """Raw output of the language service for one text."""
    entities: list[Entity]
    score: float


@dataclass
class AnalysisResult:
    """Simplified analysis returned to callers."""
    sentiment: str
    score: float
    organizations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "organizations": list(self.organizations),
            "sentiment": self.sentiment,
            "score": self.score,
        }
