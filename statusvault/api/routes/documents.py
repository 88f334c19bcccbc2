"""
Routes: /documents. Ingest, browse, supersede and delete vault documents.
Also /classify, a dry run of classification + extraction.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from statusvault.api.dependencies import (
    get_ingest_use_case,
    get_refresh_use_case,
    get_repository,
    get_supersede_use_case,
)
from statusvault.api.schemas.requests import ClassifyRequest, IngestRequest, SupersedeRequest
from statusvault.api.schemas.responses import (
    ClassificationResponse,
    DocumentResponse,
    FieldRecordResponse,
    TimelineEventResponse,
)
from statusvault.core.exceptions import DocumentNotFoundError, InvalidSupersedeError
from statusvault.core.interfaces.document_repository import IDocumentRepository
from statusvault.core.use_cases.ingest_document import IngestDocumentUseCase
from statusvault.core.use_cases.refresh_status import RefreshStatusUseCase
from statusvault.core.use_cases.supersede_document import SupersedeDocumentUseCase

router = APIRouter()


def _not_found(e: DocumentNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


@router.post("/documents", response_model=DocumentResponse, status_code=201)
async def ingest_document(
    req: IngestRequest,
    use_case: IngestDocumentUseCase = Depends(get_ingest_use_case),
):
    """Classify recognized text, extract its fields and store it in the vault."""
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="Document text is empty")
    document = use_case.execute(req.text, image_ref=req.image_ref)
    return DocumentResponse.from_document(document)


@router.get("/documents", response_model=list[DocumentResponse])
async def list_documents(use_case: RefreshStatusUseCase = Depends(get_refresh_use_case)):
    return [DocumentResponse.from_document(d) for d in use_case.refresh()]


@router.get("/documents/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    use_case: RefreshStatusUseCase = Depends(get_refresh_use_case),
):
    try:
        return DocumentResponse.from_document(use_case.document(document_id))
    except DocumentNotFoundError as e:
        raise _not_found(e)


@router.delete("/documents/{document_id}", status_code=204)
async def delete_document(
    document_id: str,
    repository: IDocumentRepository = Depends(get_repository),
):
    if not repository.delete(document_id):
        raise HTTPException(status_code=404, detail=f"Document not found: {document_id}")
    return Response(status_code=204)


@router.post("/documents/{document_id}/supersede", response_model=DocumentResponse)
async def supersede_document(
    document_id: str,
    req: SupersedeRequest,
    use_case: SupersedeDocumentUseCase = Depends(get_supersede_use_case),
):
    """Mark a document as replaced by a newer one."""
    try:
        document = use_case.execute(document_id, req.superseded_by)
    except DocumentNotFoundError as e:
        raise _not_found(e)
    except InvalidSupersedeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DocumentResponse.from_document(document)


@router.get("/documents/{document_id}/timeline", response_model=list[TimelineEventResponse])
async def document_timeline(
    document_id: str,
    use_case: RefreshStatusUseCase = Depends(get_refresh_use_case),
):
    try:
        events = use_case.timeline(document_id)
    except DocumentNotFoundError as e:
        raise _not_found(e)
    return [TimelineEventResponse.from_event(e) for e in events]


@router.post("/classify", response_model=ClassificationResponse)
async def classify_text(
    req: ClassifyRequest,
    use_case: IngestDocumentUseCase = Depends(get_ingest_use_case),
):
    """Classify and extract without storing anything."""
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="Document text is empty")
    parsed = use_case.parse(req.text)
    return ClassificationResponse(
        kind=parsed.kind.value,
        fields=FieldRecordResponse.from_record(parsed.fields),
        fields_found=sorted(parsed.fields.present()),
        stage_latencies=parsed.stage_latencies,
    )
