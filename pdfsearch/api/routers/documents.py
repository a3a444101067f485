"""
Document API endpoints.

Routes:
- GET /documents - List the caller's documents
- GET /documents/{document_id} - Get one document
- DELETE /documents/{document_id} - Delete document and its vectors
- POST /documents/search - Semantic search over the caller's documents

Dependencies: pdfsearch.application.services, pdfsearch.models
System role: Document HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from pdfsearch.api.deps import get_document_service, get_user_id
from pdfsearch.application.services.document_service import DocumentService
from pdfsearch.core.exceptions import (
    DocumentNotFoundError,
    FilterOnlyUnsupportedError,
    VectorStoreError,
)
from pdfsearch.models.document import (
    DocumentListResponse,
    DocumentResponse,
    SearchRequest,
    SearchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    user_id: str = Depends(get_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List the caller's documents, most recently updated first."""
    return await document_service.list_documents(user_id)


@router.post("/search", response_model=SearchResponse)
async def search_documents(
    request: SearchRequest,
    user_id: str = Depends(get_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> SearchResponse:
    """
    Semantic search restricted to the caller's chunks.

    Raises:
        HTTPException(400): Invalid parameters or filter-only search unsupported
        HTTPException(502): Vector store failure
    """
    try:
        return await document_service.search_documents(
            query=request.query,
            user_id=user_id,
            top_k=request.top_k,
            document_id=request.document_id,
            filters=request.filters,
        )
    except (ValueError, FilterOnlyUnsupportedError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except VectorStoreError as e:
        logger.error(f"{__name__}:search_documents - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail=f"Search failed: {e.message}")


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: UUID,
    user_id: str = Depends(get_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    try:
        return await document_service.get_document(document_id, user_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: UUID,
    user_id: str = Depends(get_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> None:
    """
    Delete a document. Vector cleanup failures are logged, not surfaced.

    Raises:
        HTTPException(404): Document not found
    """
    try:
        await document_service.delete_document(document_id, user_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
