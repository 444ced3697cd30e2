"""SQLite store for activities, chat sessions and chat messages."""
import sqlite3
import uuid
from dataclasses import replace
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator, List, Optional
import logging

from progress_tracker import ActivityRecord

from .config import get_settings

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS user_activities (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    activity_type TEXT NOT NULL,
    duration_minutes INTEGER,
    mood_rating INTEGER,
    notes TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_activities_user ON user_activities (user_id, created_at);

CREATE TABLE IF NOT EXISTS chat_sessions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    title TEXT NOT NULL,
    therapy_type TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS chat_messages (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    session_id TEXT NOT NULL REFERENCES chat_sessions (id),
    user_id TEXT NOT NULL,
    message_type TEXT NOT NULL,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_messages_session ON chat_messages (session_id, seq);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_activity(row) -> ActivityRecord:
    """Convert SQLite row to ActivityRecord."""
    return ActivityRecord(
        id=row["id"],
        user_id=row["user_id"],
        activity_type=row["activity_type"],
        duration_minutes=row["duration_minutes"],
        mood_rating=row["mood_rating"],
        notes=row["notes"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class DatabaseManager:
    """
    SQLite store for the companion app.

    Activities and messages are append-only. A connection is opened per
    operation so the manager can be shared across requests.
    """

    def __init__(self, settings=None, db_path: Optional[str] = None):
        self.settings = settings or get_settings()
        self.db_path = db_path or self.settings.database_path
        self._initialized = False

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a connection that commits on success and rolls back on error."""
        if not self._initialized:
            self.init_schema()
        yield from self._connect()

    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create tables if they do not exist yet."""
        conn = sqlite3.connect(self.db_path)
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()
        self._initialized = True
        log.info(f"[DB] Schema ready at {self.db_path}")

    # Activities

    def add_activity(self, record: ActivityRecord) -> ActivityRecord:
        activity_id = record.id or uuid.uuid4().hex
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO user_activities
                    (id, user_id, activity_type, duration_minutes, mood_rating, notes, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    activity_id,
                    record.user_id,
                    record.activity_type.value,
                    record.duration_minutes,
                    record.mood_rating,
                    record.notes,
                    record.created_at.isoformat(),
                ),
            )
        return replace(record, id=activity_id)

    def list_activities(self, user_id: str) -> List[ActivityRecord]:
        with self.connection() as conn:
            rows = conn.execute(
                """
                SELECT * FROM user_activities
                WHERE user_id = ?
                ORDER BY created_at DESC
                """,
                (user_id,),
            ).fetchall()
        return [_row_to_activity(row) for row in rows]

    # Chat sessions

    def create_session(self, user_id: str, therapy_type: str, title: str) -> dict:
        now = _now()
        session = {
            "id": uuid.uuid4().hex,
            "title": title,
            "therapy_type": therapy_type,
            "created_at": now,
            "updated_at": now,
        }
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO chat_sessions (id, user_id, title, therapy_type, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (session["id"], user_id, title, therapy_type, now, now),
            )
        log.info(f"[DB] Created {therapy_type} session {session['id']}")
        return session

    def list_sessions(self, user_id: str) -> List[dict]:
        with self.connection() as conn:
            rows = conn.execute(
                """
                SELECT id, title, therapy_type, created_at, updated_at
                FROM chat_sessions
                WHERE user_id = ?
                ORDER BY updated_at DESC
                """,
                (user_id,),
            ).fetchall()
        return [dict(row) for row in rows]

    def get_session(self, user_id: str, session_id: str) -> Optional[dict]:
        with self.connection() as conn:
            row = conn.execute(
                """
                SELECT id, title, therapy_type, created_at, updated_at
                FROM chat_sessions
                WHERE id = ? AND user_id = ?
                """,
                (session_id, user_id),
            ).fetchone()
        return dict(row) if row else None

    # Chat messages

    def add_message(self, user_id: str, session_id: str, message_type: str, content: str) -> dict:
        """Append a message and bump the session's updated_at."""
        now = _now()
        message = {
            "id": uuid.uuid4().hex,
            "session_id": session_id,
            "message_type": message_type,
            "content": content,
            "created_at": now,
        }
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO chat_messages (id, session_id, user_id, message_type, content, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (message["id"], session_id, user_id, message_type, content, now),
            )
            conn.execute(
                "UPDATE chat_sessions SET updated_at = ? WHERE id = ?",
                (now, session_id),
            )
        return message

    def list_messages(self, session_id: str, limit: Optional[int] = None) -> List[dict]:
        """Messages in creation order; with a limit, the most recent ones."""
        query = """
            SELECT id, session_id, message_type, content, created_at
            FROM chat_messages
            WHERE session_id = ?
            ORDER BY seq DESC
        """
        params: tuple = (session_id,)
        if limit is not None:
            query += " LIMIT ?"
            params = (session_id, limit)

        with self.connection() as conn:
            rows = conn.execute(query, params).fetchall()
        return [dict(row) for row in reversed(rows)]


# Singleton instance
db_manager = DatabaseManager()


def get_db() -> DatabaseManager:
    return db_manager
