"""Archive API DTO models

Overview
--------
Pydantic DTOs for the Sudan Digital Archive REST API (``/api/v1``). Request
bodies are built from agent input and therefore use the strict
:class:`BaseSchema`; responses come from the server and use the lenient
:class:`WireSchema`.

Endpoint mapping
----------------
- ``GET /accessions[/private]`` → ``ListAccessionsResponse``
- ``GET /accessions[/private]/{id}`` → ``GetOneAccessionResponse``
- ``PUT /accessions/{id}`` (``UpdateAccessionRequest``) → ``GetOneAccessionResponse``
- ``POST /accessions/crawl`` (``CreateAccessionCrawlRequest``) → JSON object
- ``GET /metadata-subjects`` → ``ListSubjectsResponse``
- ``GET|PUT /metadata-subjects/{id}`` → ``MetadataSubjectResponse``
- ``POST /metadata-subjects`` (``SubjectRequest``) → identifier text
- ``GET /collections[/private]`` → ``ListCollectionsResponse``
- ``GET /collections[/private]/{id}`` → ``CollectionResponse``
- ``PUT /collections/{id}`` (``UpdateCollectionRequest``) → ``CollectionResponse``
- ``POST /collections`` (``CollectionRequest``) → identifier text
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ...schemas.base import BaseSchema, WireSchema
from .domain import BrowserProfile, CrawlStatus, DublinMetadataFormat, MetadataLanguage

# -----------------------------
# Request bodies
# -----------------------------


class UpdateAccessionRequest(BaseSchema):
    is_private: bool = Field(..., description="Whether the accession is private.")
    metadata_description: str = Field(default="", description="Description of the accession.")
    metadata_language: MetadataLanguage = Field(
        default=MetadataLanguage.NONE,
        description="Language of the metadata. Defaults to english when not specified.",
    )
    metadata_subjects: List[int] = Field(
        ..., description="Metadata subject IDs. Replaces the current subjects; an empty list clears them."
    )
    metadata_time: str = Field(..., description="Time period related to the accession (ISO 8601).")
    metadata_title: str = Field(..., min_length=1, description="Title of the accession.")


class CreateAccessionCrawlRequest(BaseSchema):
    url: str = Field(..., min_length=1, description="The URL to crawl.", examples=["https://example.org/page"])
    metadata_language: MetadataLanguage = Field(
        default=MetadataLanguage.NONE,
        description="Language of the metadata. Defaults to english when not specified.",
    )
    metadata_title: str = Field(..., min_length=1, description="Title of the accession.")
    metadata_time: str = Field(..., description="Time period related to the accession (ISO 8601).")
    metadata_subjects: List[int] = Field(default_factory=list, description="Metadata subject IDs.")
    is_private: bool = Field(default=False, description="Whether the accession is private.")
    metadata_format: DublinMetadataFormat = Field(
        default=DublinMetadataFormat.WACZ, description="Archive format of the crawl output."
    )
    browser_profile: Optional[BrowserProfile] = Field(
        default=None, description="Browser profile for hard to archive sites."
    )
    metadata_description: Optional[str] = Field(default=None, description="Description of the accession.")
    s3_filename: Optional[str] = Field(default=None, description="Optional S3 filename for the crawl output.")


class SubjectRequest(BaseSchema):
    lang: MetadataLanguage = Field(
        default=MetadataLanguage.NONE, description="Language of the subject. Defaults to english."
    )
    metadata_subject: str = Field(..., min_length=1, description="The subject name/term.")


class CollectionRequest(BaseSchema):
    lang: MetadataLanguage = Field(
        default=MetadataLanguage.NONE, description="Language of the collection. Defaults to english."
    )
    title: str = Field(..., min_length=1, description="Title of the collection.")
    description: Optional[str] = Field(default=None, description="Description of the collection.")
    is_public: bool = Field(default=False, description="Whether the collection is publicly visible.")
    subject_ids: List[int] = Field(default_factory=list, description="Metadata subject IDs in the collection.")


class UpdateCollectionRequest(CollectionRequest):
    """Full replacement of a collection; visibility must be stated explicitly."""

    is_public: bool = Field(..., description="Whether the collection is publicly visible.")
    subject_ids: List[int] = Field(
        ..., description="Metadata subject IDs. Replaces the current subjects; an empty list clears them."
    )


# -----------------------------
# Responses
# -----------------------------


class AccessionWithMetadata(WireSchema):
    id: int
    is_private: bool
    crawl_status: CrawlStatus
    crawl_timestamp: str
    seed_url: str
    dublin_metadata_date: str
    dublin_metadata_format: DublinMetadataFormat
    has_english_metadata: bool
    has_arabic_metadata: bool
    description_ar: Optional[str] = None
    description_en: Optional[str] = None
    subjects_ar: Optional[List[str]] = None
    subjects_ar_ids: Optional[List[int]] = None
    subjects_en: Optional[List[str]] = None
    subjects_en_ids: Optional[List[int]] = None
    title_ar: Optional[str] = None
    title_en: Optional[str] = None


class ListAccessionsResponse(WireSchema):
    items: List[AccessionWithMetadata]
    num_pages: int
    page: int
    per_page: int


class GetOneAccessionResponse(WireSchema):
    accession: AccessionWithMetadata
    wacz_url: str


class MetadataSubjectResponse(WireSchema):
    id: int
    subject: str


class ListSubjectsResponse(WireSchema):
    items: List[MetadataSubjectResponse]
    num_pages: int
    page: int
    per_page: int


class CollectionResponse(WireSchema):
    id: int
    title: str
    description: Optional[str] = None
    is_public: bool
    subjects: Optional[List[str]] = None
    subject_ids: Optional[List[int]] = None


class ListCollectionsResponse(WireSchema):
    items: List[CollectionResponse]
    num_pages: int
    page: int
    per_page: int
