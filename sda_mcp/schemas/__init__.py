"""Shared pydantic bases."""

from .base import BaseSchema, WireSchema

__all__ = ["BaseSchema", "WireSchema"]
