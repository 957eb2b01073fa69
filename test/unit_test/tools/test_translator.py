from __future__ import annotations

import json

import pytest

from sda_mcp.archive_api.client import RawResponse
from sda_mcp.archive_api.models.dto import ListSubjectsResponse, MetadataSubjectResponse
from sda_mcp.errors import ErrorKind, SerializationError, ServerError
from sda_mcp.tools.descriptor import ResultKind, ResultShape
from sda_mcp.tools.translator import SNIPPET_LENGTH, translate


def test_not_found_keeps_status_and_body() -> None:
    with pytest.raises(ServerError) as ei:
        translate(ResultShape.of(MetadataSubjectResponse), RawResponse(404, "Not found"))
    err = ei.value
    assert "404" in str(err)
    assert "Not found" in str(err)
    assert err.status_code == 404
    assert err.body == "Not found"
    assert err.kind is ErrorKind.SERVER


def test_server_error_with_empty_body_mentions_only_status() -> None:
    with pytest.raises(ServerError) as ei:
        translate(ResultShape.text(), RawResponse(503, ""))
    assert str(ei.value) == "HTTP 503"


def test_server_errors_are_raised_for_every_shape() -> None:
    with pytest.raises(ServerError):
        translate(ResultShape.empty("done"), RawResponse(500, "boom"))


def test_model_is_parsed() -> None:
    body = json.dumps({"items": [{"id": 1, "subject": "Protests"}], "num_pages": 1, "page": 0, "per_page": 20})
    result = translate(ResultShape.of(ListSubjectsResponse), RawResponse(200, body))
    assert isinstance(result, ListSubjectsResponse)
    assert result.items[0].subject == "Protests"


def test_wrong_shape_is_a_serialization_error_not_a_default() -> None:
    with pytest.raises(SerializationError) as ei:
        translate(ResultShape.of(ListSubjectsResponse), RawResponse(200, json.dumps({"items": "nope"})))
    assert ei.value.kind is ErrorKind.SERIALIZATION
    assert "ListSubjectsResponse" in str(ei.value)
    assert ei.value.__cause__ is not None


def test_non_json_body_is_a_serialization_error() -> None:
    with pytest.raises(SerializationError) as ei:
        translate(ResultShape.of(MetadataSubjectResponse), RawResponse(200, "<html>oops</html>"))
    assert "<html>oops</html>" in str(ei.value)


def test_snippet_is_truncated() -> None:
    body = "x" * (SNIPPET_LENGTH * 3)
    with pytest.raises(SerializationError) as ei:
        translate(ResultShape.json_object(), RawResponse(200, body))
    assert ei.value.details == "x" * SNIPPET_LENGTH + "..."


def test_json_object_shape() -> None:
    assert translate(ResultShape.json_object(), RawResponse(201, '{"id": 9}')) == {"id": 9}
    with pytest.raises(SerializationError):
        translate(ResultShape.json_object(), RawResponse(200, "[1, 2]"))


def test_text_is_returned_unchanged() -> None:
    assert translate(ResultShape.text(), RawResponse(201, "  17\n")) == "  17\n"


def test_empty_shape_ignores_body() -> None:
    assert translate(ResultShape.empty("deleted"), RawResponse(204, "")) is None


def test_model_shape_without_model_is_rejected_up_front() -> None:
    with pytest.raises(ValueError, match="requires a model"):
        ResultShape(kind=ResultKind.MODEL)
