"""Pydantic base schema utilities for SDA tool models.

Provides :class:`BaseSchema` for tool arguments (strict, camelCase-aware) and
:class:`WireSchema` for payloads returned by the archive API (lenient).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _to_camel(s: str) -> str:
    """Convert snake_case to camelCase for JSON aliasing."""
    parts = s.split("_")
    return parts[0] + "".join(p.capitalize() or "_" for p in parts[1:])


class BaseSchema(BaseModel):
    """Shared base for tool argument models.

    - Rejects unknown fields so typos surface as validation errors
    - Enables ``populate_by_name`` so both ``per_page`` and ``perPage`` work
    - Uses a snake->camel alias generator for the published input schema
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        alias_generator=_to_camel,
    )


class WireSchema(BaseModel):
    """Base for response DTOs. Field names match the archive API (snake_case).

    Unknown fields are ignored so additive server changes do not break parsing.
    """

    model_config = ConfigDict(extra="ignore")
