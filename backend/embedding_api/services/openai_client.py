"""Async OpenAI embeddings client.

Classes:
    EmbeddingResult: A single embedding vector plus the model that produced it.
    OpenAIService: Turns text into an embedding vector with retry and fallback-model semantics.

Functions:
    resolve_embedding_model(model): Map a requested model name onto the allow-list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from openai import AsyncOpenAI
from tenacity import RetryError, retry, stop_after_attempt, wait_exponential

from embedding_api.core.config import get_settings
from embedding_api.core.errors import EmbeddingFailure

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EmbeddingResult:
    vector: list[float]
    model: str


def resolve_embedding_model(model: Optional[str]) -> str:
    """Return ``model`` when it is allowed, otherwise the configured default."""

    settings = get_settings()
    if model and model in settings.allowed_embedding_models:
        return model
    if model:
        _LOGGER.info("Unsupported embedding model %r, using %s", model, settings.openai_embedding_model)
    return settings.openai_embedding_model


class OpenAIService:
    def __init__(self, client: Optional[AsyncOpenAI] = None) -> None:
        settings = get_settings()
        api_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
        if client is not None:
            self._client = client
        elif api_key:
            self._client = AsyncOpenAI(api_key=api_key)
        else:
            self._client = None
        self._settings = settings

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def embed_text(self, text: str, model: Optional[str] = None) -> EmbeddingResult:
        if self._client is None:
            raise EmbeddingFailure("OpenAI client not configured. Set OPENAI_API_KEY.")

        payload = dict(model=resolve_embedding_model(model), input=text)
        try:
            response = await _retry_embeddings(
                self._client, payload, fallback_model=self._settings.openai_embedding_fallback_model
            )
        except RetryError as exc:
            cause = exc.last_attempt.exception()
            raise EmbeddingFailure(f"Embedding request failed: {cause}") from cause

        data = getattr(response, "data", None) or []
        if not data or not getattr(data[0], "embedding", None):
            raise EmbeddingFailure("Failed to parse embedding response")

        # payload["model"] reflects the fallback when the primary model failed
        return EmbeddingResult(
            vector=[float(value) for value in data[0].embedding],
            model=payload["model"],
        )


@retry(wait=wait_exponential(multiplier=1, min=1, max=20), stop=stop_after_attempt(5))
async def _retry_embeddings(client: AsyncOpenAI, payload: dict[str, Any], *, fallback_model: str):
    try:
        return await client.embeddings.create(**payload)
    except Exception:
        _LOGGER.warning("Embedding call with %s failed, retrying with %s", payload["model"], fallback_model)
        payload["model"] = fallback_model
        return await client.embeddings.create(**payload)
