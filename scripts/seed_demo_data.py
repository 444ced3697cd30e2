#!/usr/bin/env python3
"""
Seed the companion SQLite database with a demo user's history.

Writes two weeks of activities (logins, therapy sessions, journal
entries, meditation) plus one chat session, so the progress dashboard
has something to show.

Usage:
    python scripts/seed_demo_data.py
    python scripts/seed_demo_data.py --user demo-user --days 14
"""
import argparse
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))
sys.path.insert(0, str(BASE_DIR))

from progress_tracker import ActivityRecord, ActivityType  # noqa: E402
from server.companion_api.database import DatabaseManager  # noqa: E402
from therapy_engine import select_response  # noqa: E402

DEMO_MESSAGES = [
    "Hi there",
    "I've been so stressed about work deadlines this week",
    "I'm feeling a bit more hopeful after talking it through",
]


def build_activities(user_id: str, days: int, rng: random.Random) -> list[ActivityRecord]:
    """One login per day plus a random mix of practice activities."""
    now = datetime.now(timezone.utc)
    activities = []

    for offset in range(days):
        day = now - timedelta(days=offset, hours=rng.randint(0, 3))
        activities.append(ActivityRecord(user_id, ActivityType.LOGIN, created_at=day))

        if rng.random() < 0.5:
            activities.append(ActivityRecord(
                user_id,
                ActivityType.THERAPY_SESSION,
                duration_minutes=rng.choice([20, 30, 45]),
                mood_rating=rng.randint(4, 8),
                created_at=day,
            ))
        if rng.random() < 0.4:
            activities.append(ActivityRecord(
                user_id,
                ActivityType.JOURNAL_ENTRY,
                mood_rating=rng.randint(3, 9),
                notes="Daily reflection",
                created_at=day,
            ))
        if rng.random() < 0.6:
            activities.append(ActivityRecord(
                user_id,
                ActivityType.MEDITATION,
                duration_minutes=rng.choice([5, 10, 15]),
                created_at=day,
            ))

    return activities


def seed_chat(db: DatabaseManager, user_id: str, rng: random.Random) -> int:
    """Create one general session with a short scripted exchange."""
    session = db.create_session(user_id, "general", "Demo Session")
    for text in DEMO_MESSAGES:
        db.add_message(user_id, session["id"], "user", text)
        db.add_message(user_id, session["id"], "ai", select_response(text, "general", rng=rng))
    return len(DEMO_MESSAGES) * 2


def main():
    """Seed the demo user."""
    parser = argparse.ArgumentParser(description="Seed demo data for the companion API")
    parser.add_argument("--user", default="demo-user", help="User id to seed")
    parser.add_argument("--days", type=int, default=14, help="Days of history")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    db = DatabaseManager()

    print("=" * 60)
    print("Wellness Companion Demo Data")
    print("=" * 60)
    print(f"\nDatabase: {db.db_path}\n")

    activities = build_activities(args.user, args.days, rng)
    for record in activities:
        db.add_activity(record)
    print(f"  Activities inserted: {len(activities)}")

    message_count = seed_chat(db, args.user, rng)
    print(f"  Chat messages inserted: {message_count}")

    print("\n" + "=" * 60)
    print(f"Complete! Send requests with header X-User-Id: {args.user}")
    print("=" * 60)


if __name__ == "__main__":
    main()
