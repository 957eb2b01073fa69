"""Argument normalization

Turns the validated argument model of one invocation into a pruned mapping
that holds only the fields that must be serialized, each in its canonical wire
form (``int``, ``bool``, ``str`` or ``list[int]``).

Rules per :class:`FieldKind`:

- ``PAGINATION``: dropped when unset (``None`` or the ``-1`` sentinel).
- ``LANGUAGE``: ``none`` is dropped; other variants become ``"english"`` /
  ``"arabic"``.
- ``REQUIRED_LANGUAGE``: ``none`` becomes :data:`DEFAULT_LANGUAGE`.
- ``TEXT``: dropped when empty. ``REQUIRED_TEXT`` is always kept.
- ``FLAG``: kept only when true. ``EXPLICIT_FLAG`` is always kept.
- ``ID_LIST``: dropped when empty. ``REQUIRED_ID_LIST`` is always kept.
- ``ENUM``: dropped when unset, otherwise its value.
- ``PATH_ID``: kept when present; the builder rejects it when absent.

The output uses the same vocabulary as the input, so normalizing an already
normalized mapping returns an equal mapping.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from ..archive_api.models.domain import DEFAULT_LANGUAGE, MetadataLanguage
from .descriptor import FieldKind, FieldSpec, OperationDescriptor

UNSET_PAGINATION = -1

_OMIT = object()


def collect_fields(descriptor: OperationDescriptor, arguments: BaseModel) -> Dict[str, Any]:
    """Read the raw value of every declared field from the argument model.

    Fields declared with a ``source`` are read from the nested request object
    (e.g. ``arguments.request.metadata_title``).
    """
    values: Dict[str, Any] = {}
    for spec in descriptor.fields:
        holder: Any = arguments if spec.source is None else getattr(arguments, spec.source, None)
        if holder is None:
            continue
        values[spec.name] = getattr(holder, spec.name, None)
    return values


def _language(value: Any) -> Optional[MetadataLanguage]:
    if value is None:
        return None
    if isinstance(value, MetadataLanguage):
        return value
    return MetadataLanguage(value)


def _ids(value: Optional[Iterable[Any]]) -> List[int]:
    return [int(v) for v in (value or [])]


def _normalize_value(kind: FieldKind, value: Any) -> Any:
    if kind is FieldKind.PAGINATION:
        if value is None or value == UNSET_PAGINATION:
            return _OMIT
        return int(value)
    if kind is FieldKind.LANGUAGE:
        lang = _language(value)
        if lang is None or lang is MetadataLanguage.NONE:
            return _OMIT
        return lang.value
    if kind is FieldKind.REQUIRED_LANGUAGE:
        lang = _language(value)
        if lang is None or lang is MetadataLanguage.NONE:
            lang = DEFAULT_LANGUAGE
        return lang.value
    if kind is FieldKind.TEXT:
        if value is None or value == "":
            return _OMIT
        return str(value)
    if kind is FieldKind.REQUIRED_TEXT:
        return _OMIT if value is None else str(value)
    if kind is FieldKind.FLAG:
        return True if value else _OMIT
    if kind is FieldKind.EXPLICIT_FLAG:
        return bool(value)
    if kind is FieldKind.ID_LIST:
        ids = _ids(value)
        return ids if ids else _OMIT
    if kind is FieldKind.REQUIRED_ID_LIST:
        return _ids(value)
    if kind is FieldKind.ENUM:
        if value is None:
            return _OMIT
        return value.value if isinstance(value, Enum) else str(value)
    if kind is FieldKind.PATH_ID:
        return _OMIT if value is None else value
    raise AssertionError(f"unhandled field kind: {kind}")


def normalize(fields: Iterable[FieldSpec], values: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the subset of ``values`` that must be serialized, canonicalized.

    Args:
        fields: Field specs of the operation.
        values: Raw field values keyed by field name. Missing keys count as unset.

    Returns:
        A new dict; ``values`` is not modified.
    """
    normalized: Dict[str, Any] = {}
    for spec in fields:
        value = _normalize_value(spec.kind, values.get(spec.name))
        if value is not _OMIT:
            normalized[spec.name] = value
    return normalized


def normalize_arguments(descriptor: OperationDescriptor, arguments: BaseModel) -> Dict[str, Any]:
    """Collect and normalize the fields of a validated argument model."""
    return normalize(descriptor.fields, collect_fields(descriptor, arguments))
