"""Data models shared by the scoring engine, the scraper and the API.

All engine types are frozen pydantic models. Attributes are snake_case in
Python and serialise with camelCase names (``metaTagsPoints``,
``relatedField``, ``ogTitle`` ...) on the wire and in stored history.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Status = Literal["excellent", "good", "needs-work", "critical"]
PerformanceLabel = Literal["Fast", "Average", "Slow"]
RecommendationKind = Literal["error", "warning", "success"]
Priority = Literal["high", "medium", "low"]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MetaTags(_FrozenModel):
    """SEO-relevant metadata of one page. Every field is optional."""

    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    canonical: str | None = None
    viewport: str | None = None
    robots: str | None = None

    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_url: str | None = None
    og_type: str | None = None

    twitter_card: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    twitter_site: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def drop_blank_values(cls, value: object) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class CategoryResult(_FrozenModel):
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    status: Status
    summary: str


class CategoryScores(_FrozenModel):
    basic_seo: CategoryResult = Field(alias="basicSEO")
    technical_seo: CategoryResult = Field(alias="technicalSEO")
    social_seo: CategoryResult = Field(alias="socialSEO")
    content_optimization: CategoryResult = Field(alias="contentOptimization")


class ScoreReport(_FrozenModel):
    overall: int = Field(ge=0, le=100)
    meta_tags_points: int = Field(ge=0, le=15)
    social_tags_points: int = Field(ge=0, le=12)
    performance_label: PerformanceLabel
    categories: CategoryScores


class Recommendation(_FrozenModel):
    """One actionable suggestion.

    ``kind == "success"`` marks a low-priority optional improvement, not a
    passed check.
    """

    kind: RecommendationKind
    priority: Priority
    title: str
    description: str
    related_field: str | None = None


class AnalysisResult(_FrozenModel):
    """Everything produced for one analysed URL; the unit stored and served."""

    url: str
    meta_tags: MetaTags
    score: ScoreReport
    recommendations: list[Recommendation]
    load_time: int = Field(ge=0)
