"""
FastAPI Application: StatusVault.

Architecture:
  - SQLite (dev) / PostgreSQL (prod) document vault
  - Keyword classifier + per-kind field extraction rules
  - Lifecycle, status and timeline derived on every read
  - Gemini assistant grounded in the vault context
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from statusvault.api.dependencies import get_ask_use_case, get_repository
from statusvault.api.routes.documents import router as documents_router
from statusvault.api.routes.status import router as status_router
from statusvault.api.schemas.requests import ChatRequest
from statusvault.api.schemas.responses import ChatResponse
from statusvault.config.settings import get_settings
from statusvault.core.interfaces.assistant import ChatMessage
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.use_cases.ask_assistant import AskAssistantUseCase
from statusvault.infrastructure.db.database import init_db

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="StatusVault",
    description="Immigration document vault: classification, field extraction, expiry tracking and status.",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Startup ──
@app.on_event("startup")
async def startup():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    logger.info("StatusVault started")


# Register routes
app.include_router(documents_router, prefix="/api/v1", tags=["Documents"])
app.include_router(status_router, prefix="/api/v1", tags=["Status"])


# ── Assistant Chat ──
@app.post("/api/v1/chat", response_model=ChatResponse)
async def chat(
    req: ChatRequest,
    use_case: AskAssistantUseCase | None = Depends(get_ask_use_case),
):
    """Ask the assistant about your documents and status."""
    if use_case is None:
        return ChatResponse(reply="Assistant not configured. Set ASSISTANT_ENABLED=true in .env", model="none")

    history = [ChatMessage(role=t.role, content=t.content) for t in req.history]
    result = use_case.execute(req.message, history=history)
    if result.error:
        logger.warning(f"Chat failed: {result.error}")

    return ChatResponse(
        reply=result.reply or result.error or "",
        model=result.model,
        latency_ms=result.latency_ms,
        error=result.error,
    )


# ── Health ──
@app.get("/health")
async def health(repository: IDocumentRepository = Depends(get_repository)):
    settings = get_settings()
    db_type = "PostgreSQL" if "postgres" in settings.database_url else "SQLite"
    return {
        "status": "ok",
        "version": VERSION,
        "database": db_type,
        "documents_stored": len(repository.list_all()),
        "assistant_enabled": settings.assistant_enabled and bool(settings.gemini_api_key),
    }
