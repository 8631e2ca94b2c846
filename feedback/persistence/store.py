"""SQLite-backed persistence for enriched review records.

One long-lived aiosqlite connection per process, opened by the application
lifespan (``init_db``) and released at shutdown (``close``). Records are
insert-only; there is no update or delete path.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from datetime import datetime, timezone

import aiosqlite

from feedback.analytics import compute_analytics
from feedback.errors import DatabaseError
from feedback.schemas.reviews import Analytics, ReviewRecord

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "/app/data/feedback.db"

_COLUMNS = (
    "id, rating, review, ai_response, ai_summary, "
    "ai_recommended_actions, created_at, processed_at"
)
# Newest first; rowid breaks created_at ties so later inserts come first
_ORDER_BY = "ORDER BY created_at DESC, rowid DESC"


class ReviewStore:
    """Async SQLite-backed review store."""

    def __init__(
        self, db_path: str = DEFAULT_DB_PATH, analytics_ttl_seconds: float = 0.0
    ) -> None:
        self.db_path = db_path
        self.analytics_ttl_seconds = analytics_ttl_seconds
        self._conn: aiosqlite.Connection | None = None
        self._analytics_cache: tuple[float, Analytics] | None = None
        self._open_lock = asyncio.Lock()

    async def init_db(self) -> None:
        """Open the connection and create tables if they don't exist."""
        async with self._open_lock:
            await self._open()

    async def _open(self) -> None:
        # Caller holds _open_lock
        if self._conn is not None:
            return
        if not self.db_path:
            raise DatabaseError("Database path is not configured")
        conn: aiosqlite.Connection | None = None
        try:
            conn = await aiosqlite.connect(self.db_path)
            await conn.execute(
                """
                CREATE TABLE IF NOT EXISTS reviews (
                    id TEXT PRIMARY KEY,
                    rating INTEGER NOT NULL CHECK (rating BETWEEN 1 AND 5),
                    review TEXT NOT NULL,
                    ai_response TEXT NOT NULL,
                    ai_summary TEXT NOT NULL,
                    ai_recommended_actions TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    processed_at TEXT
                )
                """
            )
            await conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_reviews_created_at "
                "ON reviews (created_at)"
            )
            await conn.commit()
        except aiosqlite.Error as e:
            logger.exception("Could not open review database at %s", self.db_path)
            if conn is not None:
                await conn.close()
            raise DatabaseError("Failed to connect to database") from e
        self._conn = conn

    async def _ensure_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            await self.init_db()
        assert self._conn is not None
        return self._conn

    async def save(self, record: ReviewRecord) -> ReviewRecord:
        """Insert a new review. Raises DatabaseError on any write failure."""
        conn = await self._ensure_conn()
        try:
            await conn.execute(
                f"INSERT INTO reviews ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    record.id,
                    record.rating,
                    record.review,
                    record.ai_response,
                    record.ai_summary,
                    json.dumps(record.ai_recommended_actions),
                    record.created_at,
                    record.processed_at,
                ),
            )
            await conn.commit()
        except aiosqlite.Error as e:
            logger.exception("Error saving review %s", record.id)
            raise DatabaseError("Failed to save review to database") from e
        self._analytics_cache = None
        return record

    async def list_all(self) -> list[ReviewRecord]:
        """All reviews, newest first."""
        return await self._select(f"SELECT {_COLUMNS} FROM reviews {_ORDER_BY}", ())

    async def list_filtered(
        self,
        rating: int | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ReviewRecord]:
        """Reviews matching an exact rating and/or an inclusive created_at range."""
        clauses: list[str] = []
        params: list[object] = []
        if rating is not None:
            clauses.append("rating = ?")
            params.append(rating)
        if start is not None:
            clauses.append("created_at >= ?")
            params.append(_to_utc_iso(start))
        if end is not None:
            clauses.append("created_at <= ?")
            params.append(_to_utc_iso(end))
        where = f"WHERE {' AND '.join(clauses)} " if clauses else ""
        return await self._select(
            f"SELECT {_COLUMNS} FROM reviews {where}{_ORDER_BY}", tuple(params)
        )

    async def compute_analytics(self) -> Analytics:
        """Full-scan analytics, optionally served from a short-lived cache."""
        if self._analytics_cache is not None:
            cached_at, analytics = self._analytics_cache
            if time.monotonic() - cached_at < self.analytics_ttl_seconds:
                return analytics
        analytics = compute_analytics(await self.list_all())
        if self.analytics_ttl_seconds > 0:
            self._analytics_cache = (time.monotonic(), analytics)
        return analytics

    async def health_check(self) -> bool:
        """Liveness probe against the database. Never raises."""
        try:
            conn = await self._ensure_conn()
            cursor = await conn.execute("SELECT 1")
            row = await cursor.fetchone()
            return row is not None and row[0] == 1
        except Exception:
            logger.exception("Database health check failed")
            return False

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def _select(
        self, query: str, params: tuple[object, ...]
    ) -> list[ReviewRecord]:
        conn = await self._ensure_conn()
        try:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            logger.exception("Error fetching reviews")
            raise DatabaseError("Failed to fetch reviews from database") from e
        return [_row_to_record(r) for r in rows]


def _row_to_record(row: tuple) -> ReviewRecord:
    return ReviewRecord(
        id=row[0],
        rating=row[1],
        review=row[2],
        ai_response=row[3],
        ai_summary=row[4],
        ai_recommended_actions=json.loads(row[5]),
        created_at=row[6],
        processed_at=row[7],
    )


def _to_utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")
