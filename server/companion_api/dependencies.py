"""Shared request dependencies."""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException

from progress_tracker import ProgressTracker
from therapy_engine import HttpTextGenerator, TherapyResponder

from .config import get_settings
from .database import DatabaseManager, get_db


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Current user id, supplied by the auth provider in front of the API."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


def get_tracker(db: DatabaseManager = Depends(get_db)) -> ProgressTracker:
    return ProgressTracker(db)


@lru_cache
def get_responder() -> TherapyResponder:
    """Responder wired to the configured generator, if any."""
    settings = get_settings()
    generator = None
    if settings.generator_url:
        generator = HttpTextGenerator(
            settings.generator_url,
            token=settings.generator_token,
            timeout=settings.generator_timeout_seconds,
        )
    return TherapyResponder(generator=generator, timeout=settings.generator_timeout_seconds)
