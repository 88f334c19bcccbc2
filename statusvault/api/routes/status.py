"""
Routes: /status and /timeline, derived views over the whole vault.
"""

from fastapi import APIRouter, Depends, Query

from statusvault.api.dependencies import get_refresh_use_case
from statusvault.api.schemas.responses import (
    DocumentResponse,
    StatusResponse,
    TimelineEventResponse,
)
from statusvault.core.use_cases.refresh_status import RefreshStatusUseCase

router = APIRouter()


@router.get("/status", response_model=StatusResponse)
async def current_status(use_case: RefreshStatusUseCase = Depends(get_refresh_use_case)):
    """Work/study authorization derived from the live documents."""
    return StatusResponse.from_snapshot(use_case.snapshot())


@router.get("/status/expiring", response_model=list[DocumentResponse])
async def expiring_documents(
    days: int = Query(30, ge=0, description="Look-ahead window in days"),
    use_case: RefreshStatusUseCase = Depends(get_refresh_use_case),
):
    return [DocumentResponse.from_document(d) for d in use_case.expiring(days)]


@router.get("/timeline", response_model=list[TimelineEventResponse])
async def full_timeline(use_case: RefreshStatusUseCase = Depends(get_refresh_use_case)):
    """Events of every document, oldest first."""
    return [TimelineEventResponse.from_event(e) for e in use_case.full_timeline()]
