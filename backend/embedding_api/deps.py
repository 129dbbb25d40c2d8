"""Dependency providers for request handlers.

Functions:
    get_embedding_service(): Return the process-wide EmbeddingService bound to the configured log path.
"""

from __future__ import annotations

from functools import lru_cache

from embedding_api.core.config import get_settings
from embedding_api.services import EmbeddingService, OpenAIService, RecordStore


@lru_cache(maxsize=1)
def get_embedding_service() -> EmbeddingService:
    settings = get_settings()
    return EmbeddingService(OpenAIService(), RecordStore(settings.data_path))
