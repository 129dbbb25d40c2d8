"""Convenience exports for persisted models."""

from .record import Record

__all__ = ["Record"]
