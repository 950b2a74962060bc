"""Shared fixtures: a fully optimised page and its meta tags."""

import pytest

from models import MetaTags

TITLE = "T" * 55
DESCRIPTION = "D" * 155

FULL_TAGS = {
    "title": TITLE,
    "description": DESCRIPTION,
    "keywords": "widgets, tools",
    "canonical": "https://example.com/",
    "viewport": "width=device-width, initial-scale=1",
    "robots": "index, follow",
    "og_title": "Example widgets on social",
    "og_description": "Shareable description of example widgets",
    "og_image": "https://example.com/og.png",
    "og_url": "https://example.com/",
    "og_type": "website",
    "twitter_card": "summary_large_image",
    "twitter_title": "Example widgets",
    "twitter_description": "Widgets for Twitter",
    "twitter_image": "https://example.com/tw.png",
    "twitter_site": "@example",
}

FULL_HTML = f"""<!doctype html>
<html>
<head>
  <title>{TITLE}</title>
  <meta name="description" content="{DESCRIPTION}">
  <meta name="keywords" content="widgets, tools">
  <link rel="canonical" href="https://example.com/">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="robots" content="index, follow">
  <meta property="og:title" content="Example widgets on social">
  <meta property="og:description" content="Shareable description of example widgets">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:url" content="https://example.com/">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Example widgets">
  <meta name="twitter:description" content="Widgets for Twitter">
  <meta name="twitter:image" content="https://example.com/tw.png">
  <meta name="twitter:site" content="@example">
</head>
<body><h1>Widgets</h1></body>
</html>
"""


@pytest.fixture
def full_meta() -> MetaTags:
    return MetaTags(**FULL_TAGS)


@pytest.fixture
def empty_meta() -> MetaTags:
    return MetaTags()


@pytest.fixture
def full_html() -> str:
    return FULL_HTML


@pytest.fixture
def full_tags() -> dict:
    return dict(FULL_TAGS)
