"""Analysis Pydantic models."""

from typing import Literal

from pydantic import BaseModel, Field


class AnalysisResponse(BaseModel):
    """Sentiment and confirmed organizations for one article."""

    organizations: list[str] = Field(default_factory=list)
    sentiment: Literal["positive", "neutral", "negative"]
    score: float


class ErrorResponse(BaseModel):
    """Error payload returned for failed requests."""

    error: str
