"""SEO meta tag analyzer API - FastAPI app and endpoints."""

import logging
import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from analyzer import analyze_url
from database import DB_PATH, HISTORY_LIMIT, AnalysisRepository
from models import AnalysisResult
from schemas import AnalysisHistoryItem, AnalyzeRequest, ErrorResponse, StoredAnalysisResponse
from scraper import AnalysisError, InvalidURLError, validate_url

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Meta Tag Analyzer API",
    description="Scores a page's SEO meta tags and recommends fixes",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_repository() -> AnalysisRepository:
    return AnalysisRepository(DB_PATH)


@app.on_event("startup")
def startup() -> None:
    get_repository().init_db()
    logger.info("Analysis history stored in %s", DB_PATH)


@app.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def analyze(
    body: AnalyzeRequest,
    repository: AnalysisRepository = Depends(get_repository),
) -> AnalysisResult:
    """
    Pipeline: validate URL -> fetch page -> extract meta tags -> score -> store -> return result.
    """
    logger.info("Analysis requested for %s", body.url)
    try:
        result = analyze_url(body.url)
    except InvalidURLError as exc:
        logger.warning("Rejected URL %r: %s", body.url, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AnalysisError as exc:
        logger.error("Analysis of %s failed: %s", body.url, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    try:
        repository.create(result)
    except sqlite3.Error as exc:
        logger.exception("Could not store analysis for %s", result.url)
        raise HTTPException(status_code=500, detail="Failed to store analysis") from exc

    return result


@app.get("/api/analyses", response_model=list[AnalysisHistoryItem])
def get_analyses(
    limit: int = Query(default=HISTORY_LIMIT, ge=1, le=100),
    repository: AnalysisRepository = Depends(get_repository),
) -> list[AnalysisHistoryItem]:
    """Return recent analyses, newest first."""
    return [AnalysisHistoryItem.from_stored(row) for row in repository.list_analyses(limit=limit)]


@app.get(
    "/api/analyses/lookup",
    response_model=StoredAnalysisResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def lookup_analysis(
    url: str,
    repository: AnalysisRepository = Depends(get_repository),
) -> StoredAnalysisResponse:
    """Return the latest stored analysis of ``url``."""
    try:
        normalized = validate_url(url)
    except InvalidURLError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    stored = repository.find_by_url(normalized)
    if stored is None:
        raise HTTPException(status_code=404, detail="No analysis found for this URL")
    return StoredAnalysisResponse.from_stored(stored)


@app.get(
    "/api/analyses/{analysis_id}",
    response_model=StoredAnalysisResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_analysis(
    analysis_id: int,
    repository: AnalysisRepository = Depends(get_repository),
) -> StoredAnalysisResponse:
    stored = repository.get(analysis_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return StoredAnalysisResponse.from_stored(stored)


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
