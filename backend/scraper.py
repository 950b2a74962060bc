"""Page fetcher and meta-tag extractor.

Fetches a single URL (no crawling, no JavaScript rendering) and reads the
SEO-relevant <meta>/<link> tags from its HTML. Failures are raised as
typed errors; nothing is retried.
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse, urlunparse

import requests
from bs4 import BeautifulSoup
from dotenv import load_dotenv

from models import MetaTags

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "10"))
FETCH_USER_AGENT = os.getenv(
    "FETCH_USER_AGENT",
    "Mozilla/5.0 (compatible; SEOAnalyzer/1.0; +https://seoanalyzer.com)",
)

_REQUEST_HEADERS = {
    "User-Agent": FETCH_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# MetaTags field -> (tag name, attribute to match, attribute value, attribute to read)
_TAG_LOOKUPS: dict[str, tuple[str, str, str, str]] = {
    "description": ("meta", "name", "description", "content"),
    "keywords": ("meta", "name", "keywords", "content"),
    "canonical": ("link", "rel", "canonical", "href"),
    "viewport": ("meta", "name", "viewport", "content"),
    "robots": ("meta", "name", "robots", "content"),
    "og_title": ("meta", "property", "og:title", "content"),
    "og_description": ("meta", "property", "og:description", "content"),
    "og_image": ("meta", "property", "og:image", "content"),
    "og_url": ("meta", "property", "og:url", "content"),
    "og_type": ("meta", "property", "og:type", "content"),
    "twitter_card": ("meta", "name", "twitter:card", "content"),
    "twitter_title": ("meta", "name", "twitter:title", "content"),
    "twitter_description": ("meta", "name", "twitter:description", "content"),
    "twitter_image": ("meta", "name", "twitter:image", "content"),
    "twitter_site": ("meta", "name", "twitter:site", "content"),
}


class AnalysisError(Exception):
    """A URL could not be analysed. The message is shown to the caller."""


class InvalidURLError(AnalysisError):
    pass


class FetchError(AnalysisError):
    pass


@dataclass(frozen=True)
class FetchedPage:
    url: str
    html: str
    load_time_ms: int


def validate_url(url: str) -> str:
    """Return the normalised form of ``url`` or raise InvalidURLError.

    Only absolute http/https URLs with a host are accepted.
    """
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as exc:
        raise InvalidURLError("Invalid URL format") from exc

    if parsed.scheme.lower() not in {"http", "https"} or not parsed.hostname:
        raise InvalidURLError("Invalid URL format")

    path = parsed.path or "/"
    return urlunparse(
        (parsed.scheme.lower(), parsed.netloc.lower(), path, parsed.params, parsed.query, parsed.fragment)
    )


def fetch_page(url: str) -> FetchedPage:
    """GET ``url`` and return its HTML with the time the request took."""
    logger.info("Fetching %s", url)
    started = time.perf_counter()
    try:
        response = requests.get(url, headers=_REQUEST_HEADERS, timeout=FETCH_TIMEOUT_SECONDS)
    except requests.Timeout as exc:
        logger.warning("Timed out fetching %s after %ss", url, FETCH_TIMEOUT_SECONDS)
        raise FetchError(f"Failed to fetch URL: timed out after {FETCH_TIMEOUT_SECONDS:g}s") from exc
    except requests.RequestException as exc:
        logger.warning("Network error fetching %s: %s", url, exc)
        raise FetchError(f"Failed to fetch URL: {exc}") from exc
    load_time_ms = int((time.perf_counter() - started) * 1000)

    if not 200 <= response.status_code < 300:
        logger.warning("Fetching %s returned HTTP %s", url, response.status_code)
        raise FetchError(f"Failed to fetch URL: HTTP {response.status_code}: {response.reason}")

    content_type = response.headers.get("Content-Type", "")
    if "text/html" not in content_type.lower():
        logger.warning("Fetching %s returned non-HTML content type %r", url, content_type)
        raise FetchError("Failed to fetch URL: URL does not return HTML content")

    html = _decode_body(response, content_type)

    logger.info("Fetched %s in %dms (%d bytes)", url, load_time_ms, len(response.content))
    return FetchedPage(url=url, html=html, load_time_ms=load_time_ms)


def _decode_body(response: requests.Response, content_type: str) -> str:
    """Decode with the header charset when one is declared, else UTF-8, else a guess.

    requests assumes ISO-8859-1 for text/html without a charset, which garbles UTF-8 pages.
    """
    if "charset=" in content_type.lower():
        return response.text
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError:
        response.encoding = response.apparent_encoding or "utf-8"
        return response.text


def _attribute_of_first(soup: BeautifulSoup, tag: str, match_attr: str, match_value: str, read_attr: str) -> str | None:
    element = soup.find(tag, attrs={match_attr: match_value})
    if element is None:
        return None
    value = element.get(read_attr)
    if isinstance(value, list):
        value = " ".join(value)
    return value


def extract_meta_tags(html: str) -> MetaTags:
    """Read the title and the SEO meta/link tags from ``html``.

    The first matching element wins; blank values count as missing.
    """
    soup = BeautifulSoup(html, "html.parser")

    values: dict[str, str | None] = {}
    title_tag = soup.find("title")
    values["title"] = title_tag.get_text() if title_tag else None

    for field, (tag, match_attr, match_value, read_attr) in _TAG_LOOKUPS.items():
        values[field] = _attribute_of_first(soup, tag, match_attr, match_value, read_attr)

    return MetaTags(**values)
