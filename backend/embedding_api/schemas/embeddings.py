"""Schemas for the embedding store endpoints.

Classes:
    EmbeddingRequest: Payload for embedding and storing a piece of text.
    StoreResponse: Generated vector plus whether it was newly persisted.
    CompareRequest: Payload for ranking stored records against a text query.
    ComparisonResult: One ranked match; the vector is only present when requested.
    CompareResponse: Ranked matches, most similar first.
    ClearResponse: Outcome of removing the record log.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class EmbeddingRequest(BaseModel):
    text: str = Field(min_length=1, description="The text to generate an embedding for")
    model: Optional[str] = Field(default=None, description="Embedding model, defaults to text-embedding-3-large")
    embedding_type: str = Field(description="The category of the embedding (e.g. 'user', 'title')")


class StoreResponse(BaseModel):
    embedding: list[float]
    stored: bool


class CompareRequest(BaseModel):
    text: str = Field(min_length=1, description="The text to compare with stored embeddings")
    model: Optional[str] = None
    top_k: Optional[int] = Field(default=None, ge=0, description="Number of results to return, defaults to all")
    include_embeddings: bool = False
    embedding_type: Optional[str] = Field(default=None, description="Only compare against this category")


class ComparisonResult(BaseModel):
    text: str
    similarity: float
    embedding: Optional[list[float]] = None
    embedding_type: str


class CompareResponse(BaseModel):
    results: list[ComparisonResult]


class ClearResponse(BaseModel):
    success: bool
