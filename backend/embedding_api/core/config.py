"""Runtime configuration helpers.

Classes:
    Settings: Pydantic settings model capturing environment-driven defaults.

Functions:
    get_settings(): Return a cached Settings instance for dependency injection.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Embeddings API"
    data_path: str = "data/embeddings.jsonl"
    openai_api_key: SecretStr | None = None
    openai_embedding_model: str = "text-embedding-3-large"
    openai_embedding_fallback_model: str = "text-embedding-3-small"
    allowed_embedding_models: list[str] = Field(
        default_factory=lambda: [
            "text-embedding-3-large",
            "text-embedding-3-small",
            "text-embedding-3-base",
        ]
    )
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
