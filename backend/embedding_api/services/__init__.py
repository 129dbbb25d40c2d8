"""Service layer exports.

Expose the record store, ranker, OpenAI client, and the service composing them for easy importing.
"""

from .store import RecordStore
from .ranker import SimilarityRanker
from .openai_client import OpenAIService
from .embeddings import EmbeddingService

__all__ = ["RecordStore", "SimilarityRanker", "OpenAIService", "EmbeddingService"]
