"""Chat session API routes."""
import logging
import sqlite3
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from progress_tracker import ProgressTracker
from therapy_engine import TherapyResponder, classify, summarize_session

from ..config import get_settings
from ..database import DatabaseManager, get_db
from ..dependencies import get_responder, get_tracker, get_user_id
from ..models.chat import (
    AnalyzeRequest,
    ChatExchange,
    ChatMessage,
    ChatSession,
    ClassificationResult,
    MessageCreate,
    SessionAnalytics,
    SessionComplete,
    SessionCreate,
)
from ..models.progress import Activity

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])

SPEAKER_LABELS = {"user": "Client", "ai": "Therapist"}


def _session_or_404(db: DatabaseManager, user_id: str, session_id: str) -> dict:
    session = db.get_session(user_id, session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return session


def _format_history(messages: list[dict]) -> list[str]:
    """Prior turns as speaker-labelled lines, oldest first."""
    return [
        f"{SPEAKER_LABELS.get(m['message_type'], 'Client')}: {m['content']}"
        for m in messages
    ]


@router.post("/chat/sessions", response_model=ChatSession, status_code=201)
async def create_session(
    body: SessionCreate,
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """Start a new chat session."""
    title = body.title or f"{body.therapy_type.upper()} Session - {date.today().isoformat()}"
    try:
        session = db.create_session(user_id, body.therapy_type, title)
    except sqlite3.Error as e:
        log.error(f"[CHAT] Failed to create session: {e}")
        raise HTTPException(status_code=503, detail="Failed to create chat session")
    return ChatSession(**session)


@router.get("/chat/sessions", response_model=list[ChatSession])
async def list_sessions(
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """List the user's sessions, most recently active first."""
    try:
        sessions = db.list_sessions(user_id)
    except sqlite3.Error as e:
        log.error(f"[CHAT] Failed to fetch sessions: {e}")
        raise HTTPException(status_code=503, detail="Failed to fetch chat sessions")
    return [ChatSession(**s) for s in sessions]


@router.get("/chat/sessions/{session_id}/messages", response_model=list[ChatMessage])
async def get_messages(
    session_id: str,
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """Messages of a session in creation order."""
    _session_or_404(db, user_id, session_id)
    return [ChatMessage(**m) for m in db.list_messages(session_id)]


@router.post("/chat/sessions/{session_id}/messages", response_model=ChatExchange)
async def send_message(
    session_id: str,
    body: MessageCreate,
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
    responder: TherapyResponder = Depends(get_responder),
):
    """
    Send a user message and get the therapist reply.

    The user message is stored before the reply is requested and the
    reply is stored once it resolves, so display order follows
    append order even when generation is slow.
    """
    session = _session_or_404(db, user_id, session_id)
    settings = get_settings()

    try:
        history = _format_history(db.list_messages(session_id, limit=settings.history_turns))
        user_message = db.add_message(user_id, session_id, "user", body.content)
    except sqlite3.Error as e:
        log.error(f"[CHAT] Failed to save user message: {e}")
        raise HTTPException(status_code=503, detail="Failed to save message")

    reply = await responder.respond(body.content, session["therapy_type"], history)
    log.info(f"[CHAT] Session {session_id}: {reply.source} reply")

    try:
        ai_message = db.add_message(user_id, session_id, "ai", reply.text)
    except sqlite3.Error as e:
        log.error(f"[CHAT] Failed to save reply: {e}")
        raise HTTPException(status_code=503, detail="Failed to save reply")

    return ChatExchange(
        user_message=ChatMessage(**user_message),
        ai_message=ChatMessage(**ai_message),
        source=reply.source,
        classification=ClassificationResult(**reply.classification.to_dict()),
    )


@router.post("/chat/sessions/{session_id}/complete", response_model=Activity, status_code=201)
async def complete_session(
    session_id: str,
    body: SessionComplete,
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
    tracker: ProgressTracker = Depends(get_tracker),
):
    """Record a finished therapy session in the activity log."""
    _session_or_404(db, user_id, session_id)
    try:
        record = tracker.track_therapy_session(user_id, body.duration_minutes, body.mood_rating)
    except sqlite3.Error as e:
        log.error(f"[CHAT] Failed to track therapy session: {e}")
        raise HTTPException(status_code=503, detail="Failed to record session")
    return Activity(**record.to_dict())


@router.get(
    "/chat/sessions/{session_id}/analytics",
    response_model=SessionAnalytics,
    response_model_by_alias=True,
)
async def get_session_analytics(
    session_id: str,
    user_id: str = Depends(get_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """Emotion summary of the user's messages in a session."""
    _session_or_404(db, user_id, session_id)
    user_turns = [m["content"] for m in db.list_messages(session_id) if m["message_type"] == "user"]
    summary = summarize_session(classify(text).emotions for text in user_turns)
    return SessionAnalytics(session_id=session_id, **summary)


@router.post("/analyze", response_model=ClassificationResult)
async def analyze_text(body: AnalyzeRequest):
    """Classify a piece of text without storing anything."""
    return ClassificationResult(**classify(body.text).to_dict())
