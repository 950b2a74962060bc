"""Actionable recommendations derived from extracted meta tags.

Checks run per field in a fixed order (title, description, og:image,
og:title, twitter:card, canonical) and the output keeps that order. A field
that passes its check contributes nothing.
"""

from pydantic.alias_generators import to_camel

from models import MetaTags, Recommendation


def _title_recommendations(meta: MetaTags) -> list[Recommendation]:
    if not meta.title:
        return [
            Recommendation(
                kind="error",
                priority="high",
                title="Missing Title Tag",
                description="Add a descriptive title tag to improve search engine visibility.",
                related_field="title",
            )
        ]
    if len(meta.title) < 30 or len(meta.title) > 70:
        return [
            Recommendation(
                kind="warning",
                priority="medium",
                title="Optimize Title Length",
                description="Title should be 50-60 characters for optimal display in search results.",
                related_field="title",
            )
        ]
    return []


def _description_recommendations(meta: MetaTags) -> list[Recommendation]:
    if not meta.description:
        return [
            Recommendation(
                kind="error",
                priority="high",
                title="Missing Meta Description",
                description="Add a meta description to improve click-through rates from search results.",
                related_field="description",
            )
        ]
    if len(meta.description) < 120 or len(meta.description) > 160:
        return [
            Recommendation(
                kind="warning",
                priority="medium",
                title="Optimize Meta Description Length",
                description="Meta description should be 150-160 characters for optimal display.",
                related_field="description",
            )
        ]
    return []


# (field, kind, priority, title, description) for checks that only test presence.
PRESENCE_CHECKS = [
    (
        "og_image",
        "error",
        "high",
        "Add Open Graph Image",
        "Include an og:image meta tag for better social media sharing. Recommended size: 1200x630px.",
    ),
    (
        "og_title",
        "warning",
        "medium",
        "Add Open Graph Title",
        "Include og:title for better social media preview appearance.",
    ),
    (
        "twitter_card",
        "success",
        "low",
        "Add Twitter Card Tags",
        "Include Twitter-specific meta tags for enhanced Twitter sharing appearance.",
    ),
    (
        "canonical",
        "warning",
        "medium",
        "Add Canonical URL",
        "Include a canonical URL to prevent duplicate content issues.",
    ),
]


def generate_recommendations(meta: MetaTags) -> list[Recommendation]:
    recommendations = _title_recommendations(meta) + _description_recommendations(meta)
    for field, kind, priority, title, description in PRESENCE_CHECKS:
        if not getattr(meta, field):
            recommendations.append(
                Recommendation(
                    kind=kind,
                    priority=priority,
                    title=title,
                    description=description,
                    related_field=to_camel(field),
                )
            )
    return recommendations


def count_by_kind(recommendations: list[Recommendation]) -> dict[str, int]:
    """Tally recommendations as shown on the dashboard: errors, warnings, improvements."""
    counts = {"error": 0, "warning": 0, "success": 0}
    for rec in recommendations:
        counts[rec.kind] += 1
    return counts
