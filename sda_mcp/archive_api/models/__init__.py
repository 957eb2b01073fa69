"""Archive API models: enums and DTOs."""

from .domain import (
    DEFAULT_LANGUAGE,
    BrowserProfile,
    CrawlStatus,
    DublinMetadataFormat,
    MetadataLanguage,
)
from .dto import (
    AccessionWithMetadata,
    CollectionRequest,
    CollectionResponse,
    CreateAccessionCrawlRequest,
    GetOneAccessionResponse,
    ListAccessionsResponse,
    ListCollectionsResponse,
    ListSubjectsResponse,
    MetadataSubjectResponse,
    SubjectRequest,
    UpdateAccessionRequest,
    UpdateCollectionRequest,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "AccessionWithMetadata",
    "BrowserProfile",
    "CollectionRequest",
    "CollectionResponse",
    "CrawlStatus",
    "CreateAccessionCrawlRequest",
    "DublinMetadataFormat",
    "GetOneAccessionResponse",
    "ListAccessionsResponse",
    "ListCollectionsResponse",
    "ListSubjectsResponse",
    "MetadataLanguage",
    "MetadataSubjectResponse",
    "SubjectRequest",
    "UpdateAccessionRequest",
    "UpdateCollectionRequest",
]
