"""Wellness Companion API - FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import chat, journal, progress

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Wellness Companion API",
    description="Therapist chat replies, journaling and progress statistics",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(chat.router)
app.include_router(journal.router)
app.include_router(progress.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "companion-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.companion_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
