"""Scoring of extracted meta tags.

Two parallel views are computed over the same tags:

- four category scores (basic, technical, social, content), each with a
  status label and a summary sentence, telling *what kind* of SEO is weak;
- ``metaTagsPoints`` / ``socialTagsPoints`` combined into the 0-100
  ``overall`` score, telling *how much*.

Everything here is a pure function of its arguments.
"""

import math

from models import CategoryResult, CategoryScores, MetaTags, PerformanceLabel, ScoreReport, Status

MAX_BASIC_SEO = 10
MAX_TECHNICAL_SEO = 6
MAX_SOCIAL_SEO = 12
MAX_CONTENT_OPTIMIZATION = 8

MAX_META_TAGS_POINTS = 15
MAX_SOCIAL_TAGS_POINTS = 12

FAST_LOAD_MS = 2000
AVERAGE_LOAD_MS = 4000

# (minimum percentage, status), checked top-down.
STATUS_THRESHOLDS: list[tuple[int, Status]] = [
    (90, "excellent"),
    (70, "good"),
    (40, "needs-work"),
]

SUMMARIES: dict[str, dict[str, str]] = {
    "basic": {
        "excellent": "Your page has excellent basic SEO foundation with {percentage}% completion",
        "good": "Good basic SEO setup, but {remaining}% needs attention",
        "needs-work": "Basic SEO needs significant improvement ({percentage}% complete)",
        "critical": "Critical: Basic SEO elements are mostly missing ({percentage}% complete)",
    },
    "technical": {
        "excellent": "Technical SEO is excellently configured",
        "good": "Good technical foundation with room for improvement",
        "needs-work": "Technical SEO needs attention for better performance",
        "critical": "Critical technical SEO issues need immediate attention",
    },
    "social": {
        "excellent": "Excellent social media optimization ({percentage}% complete)",
        "good": "Good social sharing setup, minor improvements possible",
        "needs-work": "Social sharing could be significantly improved",
        "critical": "Critical: Missing essential social media tags",
    },
    "content": {
        "excellent": "Content is well-optimized for search engines",
        "good": "Content optimization is on track with minor tweaks needed",
        "needs-work": "Content needs optimization for better search visibility",
        "critical": "Content requires significant SEO improvements",
    },
}

# Social tags carry the same weights in the social category and in
# socialTagsPoints.
SOCIAL_WEIGHTS: dict[str, int] = {
    "og_title": 2,
    "og_description": 2,
    "og_image": 3,
    "og_url": 1,
    "og_type": 1,
    "twitter_card": 1,
    "twitter_title": 1,
    "twitter_description": 1,
}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def percentage(score: int, max_score: int) -> int:
    return round_half_up(score / max_score * 100)


def classify_status(score: int, max_score: int) -> Status:
    """Map a score to its status label by the share of ``max_score`` reached."""
    for threshold, status in STATUS_THRESHOLDS:
        if score * 100 >= threshold * max_score:
            return status
    return "critical"


def summarize_category(category: str, score: int, max_score: int) -> str:
    pct = percentage(score, max_score)
    templates = SUMMARIES.get(category)
    if templates is None:
        return f"{pct}% optimized"
    template = templates[classify_status(score, max_score)]
    return template.format(percentage=pct, remaining=100 - pct)


def _length_between(value: str | None, low: int, high: int) -> bool:
    return value is not None and low <= len(value) <= high


def _title_length_points(title: str | None) -> int:
    if _length_between(title, 50, 60):
        return 2
    if _length_between(title, 30, 70):
        return 1
    return 0


def basic_seo_points(meta: MetaTags) -> int:
    points = 0
    if meta.title:
        points += 3 + _title_length_points(meta.title)
    if meta.description:
        points += 3
        if _length_between(meta.description, 150, 160):
            points += 1
    if meta.keywords:
        points += 1
    return points


def technical_seo_points(meta: MetaTags) -> int:
    return sum(2 for value in (meta.canonical, meta.viewport, meta.robots) if value)


def social_seo_points(meta: MetaTags) -> int:
    return sum(weight for name, weight in SOCIAL_WEIGHTS.items() if getattr(meta, name))


def content_optimization_points(meta: MetaTags) -> int:
    points = 0
    if _length_between(meta.title, 30, 70):
        points += 3
    if _length_between(meta.description, 120, 160):
        points += 3
    if meta.og_title and meta.title and meta.og_title != meta.title:
        points += 1
    if meta.og_description and meta.description and meta.og_description != meta.description:
        points += 1
    return points


def _category(category: str, score: int, max_score: int) -> CategoryResult:
    return CategoryResult(
        score=score,
        max_score=max_score,
        status=classify_status(score, max_score),
        summary=summarize_category(category, score, max_score),
    )


def score_categories(meta: MetaTags) -> CategoryScores:
    return CategoryScores(
        basic_seo=_category("basic", basic_seo_points(meta), MAX_BASIC_SEO),
        technical_seo=_category("technical", technical_seo_points(meta), MAX_TECHNICAL_SEO),
        social_seo=_category("social", social_seo_points(meta), MAX_SOCIAL_SEO),
        content_optimization=_category(
            "content", content_optimization_points(meta), MAX_CONTENT_OPTIMIZATION
        ),
    )


def meta_tags_points(meta: MetaTags) -> int:
    points = 0
    if meta.title:
        points += 3
    if meta.description:
        points += 3
    if meta.keywords:
        points += 1
    if meta.canonical:
        points += 2
    if meta.viewport:
        points += 2
    if meta.robots:
        points += 1
    points += _title_length_points(meta.title)
    if _length_between(meta.description, 150, 160):
        points += 1
    return points


def social_tags_points(meta: MetaTags) -> int:
    return social_seo_points(meta)


def overall_score(meta_points: int, social_points: int) -> int:
    meta_pct = percentage(meta_points, MAX_META_TAGS_POINTS)
    social_pct = percentage(social_points, MAX_SOCIAL_TAGS_POINTS)
    return round_half_up((meta_pct + social_pct) / 2)


def performance_label(load_time_ms: int) -> PerformanceLabel:
    if load_time_ms < 0:
        raise ValueError(f"load time must be non-negative, got {load_time_ms}")
    if load_time_ms < FAST_LOAD_MS:
        return "Fast"
    if load_time_ms < AVERAGE_LOAD_MS:
        return "Average"
    return "Slow"


def calculate_score(meta: MetaTags, load_time_ms: int) -> ScoreReport:
    """Build the full score report for ``meta`` fetched in ``load_time_ms``."""
    meta_points = meta_tags_points(meta)
    social_points = social_tags_points(meta)
    return ScoreReport(
        overall=overall_score(meta_points, social_points),
        meta_tags_points=meta_points,
        social_tags_points=social_points,
        performance_label=performance_label(load_time_ms),
        categories=score_categories(meta),
    )
