"""Request building

Turns a normalized field mapping into an :class:`ApiRequest`: HTTP method,
resolved path, ordered query pairs and optional JSON body. Pure; no I/O.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..errors import ValidationError
from .descriptor import FieldLocation, OperationDescriptor

API_PREFIX = "/api/v1"

QueryParams = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class ApiRequest:
    method: str
    path: str
    params: QueryParams = ()
    body: Optional[Dict[str, Any]] = None

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{self.path}"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _path_placeholders(template: str) -> List[str]:
    return [name for _, name, _, _ in string.Formatter().parse(template) if name]


def resolve_path(template: str, normalized: Mapping[str, Any]) -> str:
    """Substitute path parameters into ``template`` and prefix ``/api/v1``.

    Raises:
        ValidationError: If a placeholder has no value.
    """
    values: Dict[str, str] = {}
    for name in _path_placeholders(template):
        if name not in normalized or normalized[name] is None:
            raise ValidationError(f"missing required path parameter '{name}'")
        values[name] = str(normalized[name])
    return API_PREFIX + template.format(**values)


def build_query(descriptor: OperationDescriptor, normalized: Mapping[str, Any]) -> QueryParams:
    """Emit query pairs in declaration order. Lists become repeated pairs."""
    pairs: List[Tuple[str, str]] = []
    for spec in descriptor.fields_at(FieldLocation.QUERY):
        if spec.name not in normalized:
            continue
        value = normalized[spec.name]
        if isinstance(value, (list, tuple)):
            pairs.extend((spec.name, _query_value(v)) for v in value)
        else:
            pairs.append((spec.name, _query_value(value)))
    return tuple(pairs)


def build_body(descriptor: OperationDescriptor, normalized: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    if not descriptor.has_body:
        return None
    return {
        spec.name: normalized[spec.name]
        for spec in descriptor.fields_at(FieldLocation.BODY)
        if spec.name in normalized
    }


def build_request(descriptor: OperationDescriptor, normalized: Mapping[str, Any]) -> ApiRequest:
    """Build the HTTP request for one invocation.

    Args:
        descriptor: The operation being invoked.
        normalized: Output of :func:`sda_mcp.tools.normalizer.normalize`.

    Returns:
        The :class:`ApiRequest` to send.

    Raises:
        ValidationError: If a required path parameter is missing.
    """
    return ApiRequest(
        method=descriptor.method,
        path=resolve_path(descriptor.path, normalized),
        params=build_query(descriptor, normalized),
        body=build_body(descriptor, normalized),
    )
