"""Pydantic schemas for API request/response."""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from database import StoredAnalysis
from models import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    url: str

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        normalized = str(value or "").strip()
        if not normalized:
            raise ValueError("Please provide a valid URL")
        return normalized


class AnalysisHistoryItem(BaseModel):
    """Summary row for the history list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    url: str
    title: str | None = None
    overall_score: int
    analyzed_at: str

    @classmethod
    def from_stored(cls, stored: StoredAnalysis) -> "AnalysisHistoryItem":
        return cls(
            id=stored.id,
            url=stored.url,
            title=stored.title,
            overall_score=stored.overall_score,
            analyzed_at=stored.analyzed_at,
        )


class StoredAnalysisResponse(AnalysisHistoryItem):
    """A stored analysis with its full result."""

    result: AnalysisResult

    @classmethod
    def from_stored(cls, stored: StoredAnalysis) -> "StoredAnalysisResponse":
        summary = AnalysisHistoryItem.from_stored(stored)
        return cls(**summary.model_dump(), result=stored.result)


class ErrorResponse(BaseModel):
    detail: str
