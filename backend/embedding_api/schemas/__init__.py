"""Convenience exports for API schemas.

Re-exports the pydantic models used across the backend so consumers can import from one module.
"""

from .embeddings import (
    ClearResponse,
    CompareRequest,
    CompareResponse,
    ComparisonResult,
    EmbeddingRequest,
    StoreResponse,
)

__all__ = [
    "EmbeddingRequest",
    "StoreResponse",
    "CompareRequest",
    "CompareResponse",
    "ComparisonResult",
    "ClearResponse",
]
