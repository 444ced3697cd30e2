"""
Pytest fixtures for Wellness Companion tests.
"""
import random
import sys
import pytest
from datetime import datetime, timedelta
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ and the project root are on sys.path so tests can import
# therapy_engine, progress_tracker and server.companion_api.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from progress_tracker.models import ActivityRecord, ActivityType  # noqa: E402


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def rng():
    """Seeded random source for reproducible pool picks."""
    return random.Random(42)


@pytest.fixture
def now():
    """Fixed local reference time, mid-afternoon so hour offsets stay on the same day."""
    return datetime(2024, 6, 15, 15, 0, 0)


@pytest.fixture
def make_activity(now):
    """
    Factory fixture for activity records relative to `now`.

    Returns a function accepting the activity type and an age
    (days/hours before now) plus any ActivityRecord fields.
    """
    def _make(
        activity_type: ActivityType = ActivityType.LOGIN,
        days_ago: float = 0,
        hours_ago: float = 0,
        **fields,
    ) -> ActivityRecord:
        created_at = now - timedelta(days=days_ago, hours=hours_ago)
        return ActivityRecord(
            user_id=fields.pop("user_id", "user-1"),
            activity_type=activity_type,
            created_at=created_at,
            **fields,
        )

    return _make


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def db_manager(tmp_path):
    """DatabaseManager backed by a temporary SQLite file."""
    from server.companion_api.database import DatabaseManager

    return DatabaseManager(db_path=str(tmp_path / "companion_test.db"))


@pytest.fixture
def api_client(db_manager):
    """TestClient with the database and responder swapped for test instances."""
    from fastapi.testclient import TestClient
    from server.companion_api.main import app
    from server.companion_api.database import get_db
    from server.companion_api.dependencies import get_responder
    from therapy_engine import TherapyResponder

    app.dependency_overrides[get_db] = lambda: db_manager
    app.dependency_overrides[get_responder] = lambda: TherapyResponder(rng=random.Random(7))

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    return {"X-User-Id": "user-1"}
