"""Service coordinating embedding generation, persistence, and similarity search."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Optional, Protocol

from embedding_api.core.errors import DuplicateRecordError
from embedding_api.schemas import (
    ClearResponse,
    CompareRequest,
    CompareResponse,
    EmbeddingRequest,
    StoreResponse,
)
from embedding_api.services.openai_client import EmbeddingResult
from embedding_api.services.ranker import SimilarityRanker
from embedding_api.services.store import RecordStore

_LOGGER = logging.getLogger(__name__)


class Embedder(Protocol):
    async def embed_text(self, text: str, model: Optional[str] = None) -> EmbeddingResult: ...


class EmbeddingService:
    """Embed text, store it once per ``(text, category)``, and rank stored records.

    Appends and clears on the same store are serialised through one lock, so two concurrent
    requests for the same key cannot both pass the duplicate check. Ranking does not lock.
    """

    def __init__(self, embedder: Embedder, store: RecordStore) -> None:
        self._embedder = embedder
        self._store = store
        self._ranker = SimilarityRanker(store)
        self._write_lock = threading.Lock()

    async def store_embedding(self, payload: EmbeddingRequest) -> StoreResponse:
        embedding = await self._embedder.embed_text(payload.text, payload.model)
        stored = await asyncio.to_thread(
            self._save, payload.text, embedding.vector, embedding.model, payload.embedding_type
        )
        return StoreResponse(embedding=embedding.vector, stored=stored)

    async def compare_embeddings(self, payload: CompareRequest) -> CompareResponse:
        embedding = await self._embedder.embed_text(payload.text, payload.model)
        results = await asyncio.to_thread(
            self._ranker.rank,
            payload.text,
            embedding.vector,
            top_k=payload.top_k,
            include_vectors=payload.include_embeddings,
            category_filter=payload.embedding_type,
        )
        return CompareResponse(results=results)

    async def clear(self) -> ClearResponse:
        try:
            await asyncio.to_thread(self._clear)
        except OSError:
            _LOGGER.exception("Failed to clear record log %s", self._store.path)
            return ClearResponse(success=False)
        return ClearResponse(success=True)

    def _save(self, text: str, vector: list[float], model: str, category: str) -> bool:
        with self._write_lock:
            try:
                self._store.append(text, vector, model, category)
            except DuplicateRecordError:
                return False
        _LOGGER.info("Stored embedding for category %r using %s", category, model)
        return True

    def _clear(self) -> None:
        with self._write_lock:
            self._store.clear()
