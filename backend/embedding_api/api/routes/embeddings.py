"""Embedding store endpoints: store, compare, and clear."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from embedding_api.core.errors import EmbeddingFailure, MalformedLogError, NoResultsError
from embedding_api.deps import get_embedding_service
from embedding_api.schemas import (
    ClearResponse,
    CompareRequest,
    CompareResponse,
    EmbeddingRequest,
    StoreResponse,
)
from embedding_api.services import EmbeddingService

router = APIRouter(tags=["embeddings"])


@router.post("/store", response_model=StoreResponse)
async def store_embedding(
    payload: EmbeddingRequest,
    service: EmbeddingService = Depends(get_embedding_service),
) -> StoreResponse:
    """Store a new text embedding; ``stored`` is false when the text is already stored for the type."""
    try:
        return await service.store_embedding(payload)
    except EmbeddingFailure as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except MalformedLogError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post("/compare", response_model=CompareResponse, response_model_exclude_none=True)
async def compare_embedding(
    payload: CompareRequest,
    service: EmbeddingService = Depends(get_embedding_service),
) -> CompareResponse:
    """Compare text with stored embeddings, most similar first."""
    try:
        return await service.compare_embeddings(payload)
    except NoResultsError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except EmbeddingFailure as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except MalformedLogError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post("/clear", response_model=ClearResponse)
async def clear_embeddings(service: EmbeddingService = Depends(get_embedding_service)) -> ClearResponse:
    """Clear all stored embeddings."""
    return await service.clear()
