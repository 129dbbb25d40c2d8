"""Stored embedding record and its JSONL line codec.

Classes:
    Record: One persisted embedding keyed by ``(text, category)``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class Record(BaseModel):
    """A single line of the record log.

    On disk the vector is stored as ``embedding`` and the category as ``embedding_type``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    text: str = Field(min_length=1)
    vector: list[FiniteFloat] = Field(alias="embedding")
    model: str
    category: str = Field(alias="embedding_type")

    @property
    def key(self) -> tuple[str, str]:
        return (self.text, self.category)

    def to_line(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_line(cls, line: str) -> "Record":
        return cls.model_validate_json(line)
