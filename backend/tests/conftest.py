import hashlib
from collections.abc import AsyncGenerator
from typing import Optional

import numpy as np
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from embedding_api.deps import get_embedding_service
from embedding_api.main import app
from embedding_api.services import EmbeddingService, RecordStore
from embedding_api.services.openai_client import EmbeddingResult, resolve_embedding_model

_DIM = 8


class FakeEmbedder:
    """Deterministic stand-in for the OpenAI client.

    Texts registered in ``vectors`` embed to that vector; any other text gets a pseudo-random
    unit vector seeded from its hash, so repeated calls agree.
    """

    def __init__(self, vectors: Optional[dict[str, list[float]]] = None) -> None:
        self.vectors = dict(vectors or {})
        self.calls: list[tuple[str, str]] = []

    async def embed_text(self, text: str, model: Optional[str] = None) -> EmbeddingResult:
        chosen = resolve_embedding_model(model)
        self.calls.append((text, chosen))
        if text in self.vectors:
            return EmbeddingResult(vector=list(self.vectors[text]), model=chosen)
        seed = int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "big")
        vector = np.random.default_rng(seed).normal(size=_DIM)
        vector /= np.linalg.norm(vector)
        return EmbeddingResult(vector=[float(v) for v in vector], model=chosen)


@pytest.fixture()
def store(tmp_path) -> RecordStore:
    return RecordStore(tmp_path / "data" / "embeddings.jsonl")


@pytest.fixture()
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture()
def service(embedder: FakeEmbedder, store: RecordStore) -> EmbeddingService:
    return EmbeddingService(embedder, store)


@pytest_asyncio.fixture()
async def client(service: EmbeddingService) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_embedding_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()
