"""Tool argument models

One pydantic model per tool input. The raw MCP argument object is validated
into these before anything else happens, so type mismatches and missing
required fields never reach the network.

Field names are accepted in snake_case or camelCase (``per_page`` /
``perPage``). Pagination accepts ``-1`` as "not set" for agents that cannot
omit a field; it is converted to ``None`` here and never travels further.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from ..archive_api.models.domain import MetadataLanguage
from ..archive_api.models.dto import (
    CollectionRequest,
    CreateAccessionCrawlRequest,
    SubjectRequest,
    UpdateAccessionRequest,
    UpdateCollectionRequest,
)
from ..schemas.base import BaseSchema
from .normalizer import UNSET_PAGINATION


class PaginationArgs(BaseSchema):
    page: Optional[int] = Field(default=None, ge=0, description="Page number. Omit (or -1) for the server default.")
    per_page: Optional[int] = Field(
        default=None, ge=1, description="Number of items per page. Omit (or -1) for the server default."
    )

    @field_validator("page", "per_page", mode="before")
    @classmethod
    def _unset_sentinel(cls, value: Any) -> Any:
        if value == UNSET_PAGINATION:
            return None
        return value


class ListAccessionsArgs(PaginationArgs):
    lang: MetadataLanguage = Field(default=MetadataLanguage.NONE, description="Language filter for metadata.")
    metadata_subjects: List[int] = Field(default_factory=list, description="Filter by metadata subject IDs.")
    metadata_subjects_inclusive_filter: bool = Field(
        default=False, description="Match accessions having any (instead of all) of the subjects."
    )
    query_term: str = Field(default="", description="Full-text search term.")
    url_filter: str = Field(default="", description="Filter by crawled URL.")
    date_from: str = Field(default="", description="Start date filter (ISO 8601).")
    date_to: str = Field(default="", description="End date filter (ISO 8601).")
    is_private: bool = Field(default=False, description="Whether to include private accessions.")


class ListSubjectsArgs(PaginationArgs):
    lang: MetadataLanguage = Field(default=MetadataLanguage.NONE, description="Language filter for subjects.")


class ListCollectionsArgs(PaginationArgs):
    lang: MetadataLanguage = Field(default=MetadataLanguage.NONE, description="Language filter for collections.")
    is_public: bool = Field(default=True, description="Visibility filter; always sent to the server.")


class IdArgs(BaseSchema):
    id: int = Field(..., description="The unique identifier.")


class IdWithLanguageArgs(IdArgs):
    lang: MetadataLanguage = Field(
        default=MetadataLanguage.NONE, description="Language of the record. Defaults to english."
    )


class UpdateAccessionArgs(IdArgs):
    request: UpdateAccessionRequest = Field(..., description="The updated accession data.")


class CreateAccessionCrawlArgs(BaseSchema):
    request: CreateAccessionCrawlRequest = Field(..., description="The parameters for the new crawl.")


class CreateSubjectArgs(BaseSchema):
    request: SubjectRequest = Field(..., description="The subject to create.")


class UpdateSubjectArgs(IdArgs):
    request: SubjectRequest = Field(..., description="The updated subject.")


class DeleteSubjectArgs(IdWithLanguageArgs):
    pass


class CreateCollectionArgs(BaseSchema):
    request: CollectionRequest = Field(..., description="The collection to create.")


class UpdateCollectionArgs(IdArgs):
    request: UpdateCollectionRequest = Field(..., description="The updated collection.")
