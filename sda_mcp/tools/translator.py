"""Response translation

Maps a :class:`~sda_mcp.archive_api.client.RawResponse` to the operation's
result, or raises the matching error:

- 2xx + ``MODEL`` → validated pydantic model
- 2xx + ``JSON_OBJECT`` → ``dict``
- 2xx + ``TEXT`` → body text unchanged (e.g. an identifier returned by create)
- 2xx + ``EMPTY`` → ``None``
- 2xx body that does not fit the shape → :class:`SerializationError`
- anything else → :class:`ServerError` with the body verbatim
"""

from __future__ import annotations

import json
from typing import Any

import pydantic

from ..archive_api.client import RawResponse
from ..errors import SerializationError, ServerError
from .descriptor import ResultKind, ResultShape

SNIPPET_LENGTH = 200


def _snippet(text: str) -> str:
    if len(text) <= SNIPPET_LENGTH:
        return text
    return text[:SNIPPET_LENGTH] + "..."


def _serialization_error(problem: str, text: str) -> SerializationError:
    snippet = _snippet(text)
    return SerializationError(
        f"unexpected response body ({problem}); body starts with: {snippet!r}",
        details=snippet,
    )


def translate(shape: ResultShape, raw: RawResponse) -> Any:
    """Translate a raw response according to ``shape``.

    Raises:
        ServerError: For non-2xx statuses.
        SerializationError: When a 2xx body cannot be parsed into ``shape``.
    """
    if not raw.is_success:
        raise ServerError(raw.status_code, raw.text)

    if shape.kind is ResultKind.TEXT:
        return raw.text
    if shape.kind is ResultKind.EMPTY:
        return None
    if shape.kind is ResultKind.JSON_OBJECT:
        try:
            data = json.loads(raw.text)
        except ValueError as e:
            raise _serialization_error(f"invalid JSON: {e}", raw.text) from e
        if not isinstance(data, dict):
            raise _serialization_error(f"expected a JSON object, got {type(data).__name__}", raw.text)
        return data

    model = shape.model
    if model is None:
        raise SerializationError(f"no response model declared for result kind {shape.kind.value!r}")
    try:
        return model.model_validate_json(raw.text)
    except pydantic.ValidationError as e:
        raise _serialization_error(
            f"{model.__name__}: {e.error_count()} validation error(s), first: {e.errors()[0]['msg']}",
            raw.text,
        ) from e
