"""Analysis pipeline: validate URL -> fetch page -> extract tags -> score.

``analyze_meta_tags`` is the pure scoring step; ``analyze_url`` wraps it
with the network and parsing stages. Either a complete AnalysisResult is
returned or an AnalysisError is raised.
"""

import logging

from models import AnalysisResult, MetaTags
from recommendations import generate_recommendations
from scorer import calculate_score
from scraper import AnalysisError, extract_meta_tags, fetch_page, validate_url

logger = logging.getLogger(__name__)


def analyze_meta_tags(url: str, meta: MetaTags, load_time_ms: int) -> AnalysisResult:
    return AnalysisResult(
        url=url,
        meta_tags=meta,
        score=calculate_score(meta, load_time_ms),
        recommendations=generate_recommendations(meta),
        load_time=load_time_ms,
    )


def analyze_url(url: str) -> AnalysisResult:
    valid_url = validate_url(url)

    try:
        page = fetch_page(valid_url)
        meta = extract_meta_tags(page.html)
        result = analyze_meta_tags(valid_url, meta, page.load_time_ms)
    except AnalysisError as exc:
        raise AnalysisError(f"Failed to analyze URL: {exc}") from exc

    logger.info(
        "Analyzed %s: overall=%s performance=%s recommendations=%d",
        valid_url,
        result.score.overall,
        result.score.performance_label,
        len(result.recommendations),
    )
    return result
