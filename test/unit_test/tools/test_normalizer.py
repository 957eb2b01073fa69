from __future__ import annotations

import pytest

from sda_mcp.archive_api.models.domain import BrowserProfile, MetadataLanguage
from sda_mcp.tools.arguments import (
    CreateAccessionCrawlArgs,
    ListAccessionsArgs,
    UpdateAccessionArgs,
)
from sda_mcp.tools.descriptor import FieldKind, FieldLocation, FieldSpec
from sda_mcp.tools.normalizer import (
    UNSET_PAGINATION,
    collect_fields,
    normalize,
    normalize_arguments,
)
from sda_mcp.tools.registry import OPERATIONS


def _one(kind: FieldKind, value) -> dict:
    return normalize([FieldSpec("f", kind)], {"f": value})


@pytest.mark.parametrize("value", [None, UNSET_PAGINATION])
def test_pagination_unset_is_omitted(value) -> None:
    assert _one(FieldKind.PAGINATION, value) == {}


def test_pagination_zero_is_a_real_page() -> None:
    assert _one(FieldKind.PAGINATION, 0) == {"f": 0}


def test_optional_language() -> None:
    assert _one(FieldKind.LANGUAGE, MetadataLanguage.NONE) == {}
    assert _one(FieldKind.LANGUAGE, None) == {}
    assert _one(FieldKind.LANGUAGE, MetadataLanguage.ARABIC) == {"f": "arabic"}
    assert _one(FieldKind.LANGUAGE, MetadataLanguage.ENGLISH) == {"f": "english"}


def test_required_language_falls_back_to_english() -> None:
    assert _one(FieldKind.REQUIRED_LANGUAGE, MetadataLanguage.NONE) == {"f": "english"}
    assert _one(FieldKind.REQUIRED_LANGUAGE, None) == {"f": "english"}
    assert _one(FieldKind.REQUIRED_LANGUAGE, MetadataLanguage.ARABIC) == {"f": "arabic"}


def test_strings_flags_and_lists() -> None:
    assert _one(FieldKind.TEXT, "") == {}
    assert _one(FieldKind.TEXT, "sudan") == {"f": "sudan"}
    assert _one(FieldKind.REQUIRED_TEXT, "") == {"f": ""}
    assert _one(FieldKind.FLAG, False) == {}
    assert _one(FieldKind.FLAG, True) == {"f": True}
    assert _one(FieldKind.EXPLICIT_FLAG, False) == {"f": False}
    assert _one(FieldKind.ID_LIST, []) == {}
    assert _one(FieldKind.ID_LIST, [3, 1]) == {"f": [3, 1]}
    assert _one(FieldKind.REQUIRED_ID_LIST, []) == {"f": []}
    assert _one(FieldKind.ENUM, None) == {}
    assert _one(FieldKind.ENUM, BrowserProfile.FACEBOOK) == {"f": "facebook"}


def test_normalize_does_not_mutate_input() -> None:
    values = {"page": UNSET_PAGINATION, "lang": MetadataLanguage.NONE}
    snapshot = dict(values)
    normalize(OPERATIONS["list_accessions"].fields, values)
    assert values == snapshot


def test_list_accessions_defaults_normalize_to_nothing() -> None:
    descriptor = OPERATIONS["list_accessions"]
    assert normalize_arguments(descriptor, ListAccessionsArgs()) == {}


def test_normalization_is_idempotent() -> None:
    descriptor = OPERATIONS["list_accessions"]
    args = ListAccessionsArgs(
        page=2,
        per_page=25,
        lang=MetadataLanguage.ARABIC,
        metadata_subjects=[4, 9],
        metadata_subjects_inclusive_filter=True,
        query_term="khartoum",
        date_from="2023-04-15",
        is_private=False,
    )
    once = normalize_arguments(descriptor, args)
    twice = normalize(descriptor.fields, once)
    assert twice == once
    assert once == {
        "page": 2,
        "per_page": 25,
        "lang": "arabic",
        "metadata_subjects": [4, 9],
        "metadata_subjects_inclusive_filter": True,
        "query_term": "khartoum",
        "date_from": "2023-04-15",
    }


def test_crawl_body_idempotent_with_defaults_applied() -> None:
    descriptor = OPERATIONS["create_accession_crawl"]
    args = CreateAccessionCrawlArgs.model_validate(
        {
            "request": {
                "url": "https://example.org",
                "metadata_title": "Sit-in",
                "metadata_time": "2019-06-03T00:00:00",
            }
        }
    )
    once = normalize_arguments(descriptor, args)
    assert once == {
        "url": "https://example.org",
        "metadata_language": "english",
        "metadata_title": "Sit-in",
        "metadata_time": "2019-06-03T00:00:00",
        "metadata_subjects": [],
        "is_private": False,
        "metadata_format": "wacz",
    }
    assert normalize(descriptor.fields, once) == once


def test_collect_fields_reads_nested_request() -> None:
    descriptor = OPERATIONS["update_accession"]
    args = UpdateAccessionArgs.model_validate(
        {
            "id": 42,
            "request": {
                "is_private": True,
                "metadata_subjects": [],
                "metadata_time": "2020-01-01",
                "metadata_title": "Title",
            },
        }
    )
    values = collect_fields(descriptor, args)
    assert values["id"] == 42
    assert values["metadata_title"] == "Title"
    assert values["metadata_language"] is MetadataLanguage.NONE
    body_names = {f.name for f in descriptor.fields if f.location is FieldLocation.BODY}
    assert body_names <= set(values)
