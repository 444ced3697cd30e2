"""API route modules."""
from .chat import router as chat_router
from .journal import router as journal_router
from .progress import router as progress_router

__all__ = [
    "chat_router",
    "journal_router",
    "progress_router",
]
