"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import analyzer
import main
from database import AnalysisRepository
from scraper import FetchedPage, FetchError


@pytest.fixture
def repository(tmp_path) -> AnalysisRepository:
    repo = AnalysisRepository(tmp_path / "api.db")
    repo.init_db()
    return repo


@pytest.fixture
def client(repository: AnalysisRepository):
    main.app.dependency_overrides[main.get_repository] = lambda: repository
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture
def page_html(monkeypatch: pytest.MonkeyPatch, full_html: str) -> str:
    monkeypatch.setattr(
        analyzer,
        "fetch_page",
        lambda url: FetchedPage(url=url, html=full_html, load_time_ms=800),
    )
    return full_html


def test_analyze_returns_and_stores_result(client: TestClient, page_html: str) -> None:
    response = client.post("/api/analyze", json={"url": "https://example.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["url"] == "https://example.com/"
    assert body["score"]["overall"] == 100
    assert body["score"]["performanceLabel"] == "Fast"
    assert body["score"]["categories"]["basicSEO"]["status"] == "excellent"
    assert body["recommendations"] == []
    assert body["loadTime"] == 800

    history = client.get("/api/analyses").json()
    assert len(history) == 1
    assert history[0]["url"] == "https://example.com/"
    assert history[0]["overallScore"] == 100
    assert "analyzedAt" in history[0]


def test_get_and_lookup_stored_analysis(client: TestClient, page_html: str) -> None:
    client.post("/api/analyze", json={"url": "https://example.com"})

    by_id = client.get("/api/analyses/1")
    assert by_id.status_code == 200
    assert by_id.json()["result"]["score"]["metaTagsPoints"] == 15
    assert by_id.json()["url"] == "https://example.com/"
    assert by_id.json()["overallScore"] == 100

    by_url = client.get("/api/analyses/lookup", params={"url": "https://example.com"})
    assert by_url.status_code == 200
    assert by_url.json()["id"] == 1


def test_missing_analysis_returns_404(client: TestClient) -> None:
    assert client.get("/api/analyses/42").status_code == 404
    response = client.get("/api/analyses/lookup", params={"url": "https://nowhere.example"})
    assert response.status_code == 404
    assert response.json()["detail"] == "No analysis found for this URL"


def test_lookup_with_malformed_url_returns_400(client: TestClient) -> None:
    response = client.get("/api/analyses/lookup", params={"url": "not a url"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid URL format"


def test_invalid_url_returns_400(client: TestClient) -> None:
    response = client.post("/api/analyze", json={"url": "ftp://example.com/file"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid URL format"


def test_blank_url_fails_validation(client: TestClient) -> None:
    response = client.post("/api/analyze", json={"url": "   "})

    assert response.status_code == 422


def test_fetch_failure_returns_502_and_stores_nothing(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_fetch(url: str) -> FetchedPage:
        raise FetchError("Failed to fetch URL: URL does not return HTML content")

    monkeypatch.setattr(analyzer, "fetch_page", failing_fetch)

    response = client.post("/api/analyze", json={"url": "https://example.com/data.json"})

    assert response.status_code == 502
    assert response.json()["detail"] == (
        "Failed to analyze URL: Failed to fetch URL: URL does not return HTML content"
    )
    assert client.get("/api/analyses").json() == []


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
