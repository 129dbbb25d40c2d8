"""Typed failures raised by the record store, ranker, and embedding client.

Classes:
    EmbeddingStoreError: Base class so callers can catch every domain failure at once.
    DuplicateRecordError: Append rejected because ``(text, category)`` is already stored.
    NoResultsError: Ranking found nothing to compare against in an unfiltered query.
    MalformedLogError: A persisted log line could not be parsed as a record.
    ZeroNormError: Cosine similarity requested for a zero-magnitude vector.
    EmbeddingFailure: The embedding provider could not produce a vector.
"""

from __future__ import annotations

from pathlib import Path


class EmbeddingStoreError(Exception):
    """Root of the embedding store error taxonomy."""


class DuplicateRecordError(EmbeddingStoreError):
    def __init__(self, text: str, category: str) -> None:
        super().__init__(f"duplicate text entry for type {category}")
        self.text = text
        self.category = category


class NoResultsError(EmbeddingStoreError):
    def __init__(self, message: str = "No similar embeddings found") -> None:
        super().__init__(message)


class MalformedLogError(EmbeddingStoreError):
    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: malformed record ({reason})")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class ZeroNormError(EmbeddingStoreError, ValueError):
    def __init__(self) -> None:
        super().__init__("cosine similarity is undefined for a zero-magnitude vector")


class EmbeddingFailure(EmbeddingStoreError):
    """Raised when text cannot be turned into a vector."""
