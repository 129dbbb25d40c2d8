"""Cosine-similarity ranking over the record log.

Functions:
    cosine_similarity(a, b, strict=False): Cosine of the angle between two vectors.
    rank_records(records, query_text, query_vector, ...): Filter, score, and order records.

Classes:
    SimilarityRanker: Reads through a RecordStore and ranks its contents for a query.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from embedding_api.core.errors import NoResultsError, ZeroNormError
from embedding_api.models.record import Record
from embedding_api.schemas.embeddings import ComparisonResult
from embedding_api.services.store import RecordStore

_LOGGER = logging.getLogger(__name__)

_EPS = 1e-12


def _unit(vector: np.ndarray) -> Optional[np.ndarray]:
    """Scale ``vector`` to unit length, or ``None`` when it has no direction."""

    scale = float(np.max(np.abs(vector))) if vector.size else 0.0
    if not np.isfinite(scale) or scale == 0.0:
        return None
    # pre-scaling keeps the norm finite for components beyond ~1e154
    scaled = vector / scale
    norm = float(np.linalg.norm(scaled))
    if not np.isfinite(norm) or norm < _EPS:
        return None
    return scaled / norm


def cosine_similarity(a: Sequence[float], b: Sequence[float], *, strict: bool = False) -> float:
    """Return ``dot(a, b) / (|a| * |b|)`` clipped to [-1, 1].

    A zero-magnitude input has no direction; the similarity is then ``0.0``, or
    ``ZeroNormError`` is raised when ``strict`` is set.
    """

    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != right.shape:
        raise ValueError(f"Vector dimensions differ: {left.shape[0]} != {right.shape[0]}")

    left_unit = _unit(left)
    right_unit = _unit(right)
    if left_unit is None or right_unit is None:
        if strict:
            raise ZeroNormError()
        return 0.0
    return float(np.clip(np.dot(left_unit, right_unit), -1.0, 1.0))


def rank_records(
    records: Iterable[Record],
    query_text: str,
    query_vector: Sequence[float],
    *,
    top_k: Optional[int] = None,
    include_vectors: bool = False,
    category_filter: Optional[str] = None,
) -> list[ComparisonResult]:
    """Rank ``records`` by similarity to ``query_vector``, most similar first.

    Only the first record for each ``(text, category)`` pair is scored. When a category
    filter is given, the record matching the query text in that category is skipped.
    Equal similarities keep their log order.

    Raises:
        NoResultsError: the truncated list is empty and no category filter was supplied.
    """

    if top_k is not None and top_k < 0:
        raise ValueError("top_k must be non-negative")

    query = np.asarray(query_vector, dtype=np.float64)
    seen: set[tuple[str, str]] = set()
    results: list[ComparisonResult] = []

    for record in records:
        if record.key in seen:
            continue
        seen.add(record.key)

        if category_filter is not None:
            if record.category != category_filter:
                continue
            if record.text == query_text:
                continue

        if len(record.vector) != query.shape[0]:
            _LOGGER.warning(
                "Skipping record in category %r: dimension %d does not match query dimension %d",
                record.category,
                len(record.vector),
                query.shape[0],
            )
            continue

        results.append(
            ComparisonResult(
                text=record.text,
                similarity=cosine_similarity(query, record.vector),
                embedding=list(record.vector) if include_vectors else None,
                embedding_type=record.category,
            )
        )

    results.sort(key=lambda item: item.similarity, reverse=True)

    if top_k is not None:
        results = results[:top_k]

    if not results and category_filter is None:
        raise NoResultsError()
    return results


class SimilarityRanker:
    """Rank the current contents of a record store against a query vector."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def rank(
        self,
        query_text: str,
        query_vector: Sequence[float],
        *,
        top_k: Optional[int] = None,
        include_vectors: bool = False,
        category_filter: Optional[str] = None,
    ) -> list[ComparisonResult]:
        return rank_records(
            self._store.read_all(),
            query_text,
            query_vector,
            top_k=top_k,
            include_vectors=include_vectors,
            category_filter=category_filter,
        )
