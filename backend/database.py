"""SQLite storage for analysis history.

Table: seo_analyses
- id (integer, primary key)
- url (text)
- title, meta_description, meta_keywords, canonical_url (text, nullable)
- og_tags, twitter_tags (JSON text)
- overall_score (integer)
- recommendations (JSON text)
- result_json (JSON text, the full AnalysisResult)
- analyzed_at (datetime)

Rows are append-only: an analysis is inserted once and never updated.
"""

import json
import logging
import os
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

from models import AnalysisResult

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

DB_PATH = Path(os.getenv("SEO_DB_PATH", str(Path(__file__).parent / "seo_analyzer.db")))
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "50"))


@dataclass(frozen=True)
class StoredAnalysis:
    id: int
    url: str
    title: str | None
    overall_score: int
    analyzed_at: str
    result: AnalysisResult


class AnalysisRepository:
    """Analysis history backed by one SQLite file."""

    def __init__(self, db_path: Path | str = DB_PATH) -> None:
        self.db_path = Path(db_path)

    def get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the seo_analyses table if it does not exist."""
        conn = self.get_connection()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS seo_analyses (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    url TEXT NOT NULL,
                    title TEXT,
                    meta_description TEXT,
                    meta_keywords TEXT,
                    canonical_url TEXT,
                    og_tags TEXT NOT NULL,
                    twitter_tags TEXT NOT NULL,
                    overall_score INTEGER NOT NULL,
                    recommendations TEXT NOT NULL,
                    result_json TEXT NOT NULL,
                    analyzed_at TEXT NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_seo_analyses_url ON seo_analyses (url)")
            conn.commit()
        finally:
            conn.close()

    def create(self, result: AnalysisResult) -> StoredAnalysis:
        """Store ``result`` and return the new record."""
        meta = result.meta_tags
        og_tags = {
            "title": meta.og_title,
            "description": meta.og_description,
            "image": meta.og_image,
            "url": meta.og_url,
            "type": meta.og_type,
        }
        twitter_tags = {
            "card": meta.twitter_card,
            "title": meta.twitter_title,
            "description": meta.twitter_description,
            "image": meta.twitter_image,
            "site": meta.twitter_site,
        }
        recommendations = [rec.model_dump(mode="json", by_alias=True) for rec in result.recommendations]
        analyzed_at = datetime.now(timezone.utc).isoformat()

        conn = self.get_connection()
        try:
            cursor = conn.execute(
                """
                INSERT INTO seo_analyses (
                    url, title, meta_description, meta_keywords, canonical_url,
                    og_tags, twitter_tags, overall_score, recommendations,
                    result_json, analyzed_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    result.url,
                    meta.title,
                    meta.description,
                    meta.keywords,
                    meta.canonical,
                    json.dumps(og_tags),
                    json.dumps(twitter_tags),
                    result.score.overall,
                    json.dumps(recommendations),
                    result.model_dump_json(by_alias=True),
                    analyzed_at,
                ),
            )
            conn.commit()
            analysis_id = cursor.lastrowid
        finally:
            conn.close()

        logger.info("Stored analysis %s for %s", analysis_id, result.url)
        return StoredAnalysis(
            id=analysis_id,
            url=result.url,
            title=meta.title,
            overall_score=result.score.overall,
            analyzed_at=analyzed_at,
            result=result,
        )

    def get(self, analysis_id: int) -> StoredAnalysis | None:
        """Fetch an analysis by id. Returns None when it does not exist."""
        return self._fetch_one("SELECT * FROM seo_analyses WHERE id = ?", (analysis_id,))

    def find_by_url(self, url: str) -> StoredAnalysis | None:
        """Return the most recent analysis of ``url``, if any."""
        return self._fetch_one(
            "SELECT * FROM seo_analyses WHERE url = ? ORDER BY id DESC LIMIT 1",
            (url,),
        )

    def list_analyses(self, limit: int = HISTORY_LIMIT) -> list[StoredAnalysis]:
        """Return recent analyses, newest first."""
        safe_limit = max(1, min(100, int(limit)))
        conn = self.get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM seo_analyses ORDER BY id DESC LIMIT ?",
                (safe_limit,),
            ).fetchall()
        finally:
            conn.close()
        return [self._from_row(row) for row in rows]

    def _fetch_one(self, query: str, params: tuple) -> StoredAnalysis | None:
        conn = self.get_connection()
        try:
            row = conn.execute(query, params).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return self._from_row(row)

    @staticmethod
    def _from_row(row: sqlite3.Row) -> StoredAnalysis:
        return StoredAnalysis(
            id=row["id"],
            url=row["url"],
            title=row["title"],
            overall_score=row["overall_score"],
            analyzed_at=row["analyzed_at"],
            result=AnalysisResult.model_validate_json(row["result_json"]),
        )
