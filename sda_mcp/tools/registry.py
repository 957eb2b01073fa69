"""Operation table

Static mapping from tool name to :class:`OperationDescriptor`, built once at
import time. The dispatcher resolves tools here and nowhere else.

Language policy: list operations treat ``lang`` as an optional filter and omit
it when unspecified. Operations that address or write a single language-specific
record (subjects, collections, accession metadata) require a language and fall
back to english when it is unspecified.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..archive_api.models.dto import (
    CollectionResponse,
    GetOneAccessionResponse,
    ListAccessionsResponse,
    ListCollectionsResponse,
    ListSubjectsResponse,
    MetadataSubjectResponse,
)
from . import arguments as args
from .descriptor import FieldKind as K
from .descriptor import FieldLocation as L
from .descriptor import FieldSpec, OperationDescriptor, ResultShape

SUBJECT_DELETED_MESSAGE = "Subject deleted successfully"

_PATH_ID = FieldSpec("id", K.PATH_ID, L.PATH)
_PAGE = FieldSpec("page", K.PAGINATION)
_PER_PAGE = FieldSpec("per_page", K.PAGINATION)

_ACCESSION_QUERY: Tuple[FieldSpec, ...] = (
    _PAGE,
    _PER_PAGE,
    FieldSpec("lang", K.LANGUAGE),
    FieldSpec("metadata_subjects", K.ID_LIST),
    FieldSpec("metadata_subjects_inclusive_filter", K.FLAG),
    FieldSpec("query_term", K.TEXT),
    FieldSpec("url_filter", K.TEXT),
    FieldSpec("date_from", K.TEXT),
    FieldSpec("date_to", K.TEXT),
    FieldSpec("is_private", K.FLAG),
)

_UPDATE_ACCESSION_BODY: Tuple[FieldSpec, ...] = (
    FieldSpec("is_private", K.EXPLICIT_FLAG, L.BODY, "request"),
    FieldSpec("metadata_description", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("metadata_language", K.REQUIRED_LANGUAGE, L.BODY, "request"),
    FieldSpec("metadata_subjects", K.REQUIRED_ID_LIST, L.BODY, "request"),
    FieldSpec("metadata_time", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("metadata_title", K.REQUIRED_TEXT, L.BODY, "request"),
)

_CRAWL_BODY: Tuple[FieldSpec, ...] = (
    FieldSpec("url", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("metadata_language", K.REQUIRED_LANGUAGE, L.BODY, "request"),
    FieldSpec("metadata_title", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("metadata_time", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("metadata_subjects", K.REQUIRED_ID_LIST, L.BODY, "request"),
    FieldSpec("is_private", K.EXPLICIT_FLAG, L.BODY, "request"),
    FieldSpec("metadata_format", K.ENUM, L.BODY, "request"),
    FieldSpec("browser_profile", K.ENUM, L.BODY, "request"),
    FieldSpec("metadata_description", K.TEXT, L.BODY, "request"),
    FieldSpec("s3_filename", K.TEXT, L.BODY, "request"),
)

_SUBJECT_BODY: Tuple[FieldSpec, ...] = (
    FieldSpec("lang", K.REQUIRED_LANGUAGE, L.BODY, "request"),
    FieldSpec("metadata_subject", K.REQUIRED_TEXT, L.BODY, "request"),
)

_COLLECTION_QUERY: Tuple[FieldSpec, ...] = (
    _PAGE,
    _PER_PAGE,
    FieldSpec("lang", K.LANGUAGE),
    FieldSpec("is_public", K.EXPLICIT_FLAG),
)

_COLLECTION_BODY: Tuple[FieldSpec, ...] = (
    FieldSpec("lang", K.REQUIRED_LANGUAGE, L.BODY, "request"),
    FieldSpec("title", K.REQUIRED_TEXT, L.BODY, "request"),
    FieldSpec("description", K.TEXT, L.BODY, "request"),
    FieldSpec("is_public", K.EXPLICIT_FLAG, L.BODY, "request"),
    FieldSpec("subject_ids", K.REQUIRED_ID_LIST, L.BODY, "request"),
)

_REQUIRED_LANG_QUERY = FieldSpec("lang", K.REQUIRED_LANGUAGE)


_DESCRIPTORS: List[OperationDescriptor] = [
    # -----------------------------
    # Accessions
    # -----------------------------
    OperationDescriptor(
        name="list_accessions",
        description="List public accessions, with optional pagination, language and search filters.",
        method="GET",
        path="/accessions",
        arguments=args.ListAccessionsArgs,
        fields=_ACCESSION_QUERY,
        result=ResultShape.of(ListAccessionsResponse),
        action="list accessions",
    ),
    OperationDescriptor(
        name="list_private_accessions",
        description="List private accessions, with optional pagination, language and search filters.",
        method="GET",
        path="/accessions/private",
        arguments=args.ListAccessionsArgs,
        fields=_ACCESSION_QUERY,
        result=ResultShape.of(ListAccessionsResponse),
        action="list private accessions",
    ),
    OperationDescriptor(
        name="get_accession",
        description="Get a single public accession and its WACZ download URL.",
        method="GET",
        path="/accessions/{id}",
        arguments=args.IdArgs,
        fields=(_PATH_ID,),
        result=ResultShape.of(GetOneAccessionResponse),
        action="get accession",
        subject_field="id",
    ),
    OperationDescriptor(
        name="get_private_accession",
        description="Get a single private accession and its WACZ download URL.",
        method="GET",
        path="/accessions/private/{id}",
        arguments=args.IdArgs,
        fields=(_PATH_ID,),
        result=ResultShape.of(GetOneAccessionResponse),
        action="get private accession",
        subject_field="id",
    ),
    OperationDescriptor(
        name="update_accession",
        description="Update the metadata and visibility of an accession.",
        method="PUT",
        path="/accessions/{id}",
        arguments=args.UpdateAccessionArgs,
        fields=(_PATH_ID,) + _UPDATE_ACCESSION_BODY,
        result=ResultShape.of(GetOneAccessionResponse),
        action="update accession",
        subject_field="id",
    ),
    OperationDescriptor(
        name="create_accession_crawl",
        description="Start a web crawl that creates a new accession.",
        method="POST",
        path="/accessions/crawl",
        arguments=args.CreateAccessionCrawlArgs,
        fields=_CRAWL_BODY,
        result=ResultShape.json_object(),
        action="create accession crawl",
    ),
    # -----------------------------
    # Metadata subjects
    # -----------------------------
    OperationDescriptor(
        name="list_subjects",
        description="List metadata subjects, with optional pagination and language filter.",
        method="GET",
        path="/metadata-subjects",
        arguments=args.ListSubjectsArgs,
        fields=(_PAGE, _PER_PAGE, FieldSpec("lang", K.LANGUAGE)),
        result=ResultShape.of(ListSubjectsResponse),
        action="list subjects",
    ),
    OperationDescriptor(
        name="get_subject",
        description="Get a single metadata subject.",
        method="GET",
        path="/metadata-subjects/{id}",
        arguments=args.IdWithLanguageArgs,
        fields=(_PATH_ID, _REQUIRED_LANG_QUERY),
        result=ResultShape.of(MetadataSubjectResponse),
        action="get subject",
        subject_field="id",
    ),
    OperationDescriptor(
        name="create_subject",
        description="Create a metadata subject. Returns the new subject's identifier.",
        method="POST",
        path="/metadata-subjects",
        arguments=args.CreateSubjectArgs,
        fields=_SUBJECT_BODY,
        result=ResultShape.text(),
        action="create subject",
    ),
    OperationDescriptor(
        name="update_subject",
        description="Rename a metadata subject.",
        method="PUT",
        path="/metadata-subjects/{id}",
        arguments=args.UpdateSubjectArgs,
        fields=(_PATH_ID,) + _SUBJECT_BODY,
        result=ResultShape.of(MetadataSubjectResponse),
        action="update subject",
        subject_field="id",
    ),
    OperationDescriptor(
        name="delete_subject",
        description="Delete a metadata subject.",
        method="DELETE",
        path="/metadata-subjects/{id}",
        arguments=args.DeleteSubjectArgs,
        fields=(_PATH_ID, FieldSpec("lang", K.REQUIRED_LANGUAGE, L.BODY)),
        result=ResultShape.empty(SUBJECT_DELETED_MESSAGE),
        action="delete subject",
        subject_field="id",
    ),
    # -----------------------------
    # Collections
    # -----------------------------
    OperationDescriptor(
        name="list_collections",
        description="List public collections, with optional pagination and language filter.",
        method="GET",
        path="/collections",
        arguments=args.ListCollectionsArgs,
        fields=_COLLECTION_QUERY,
        result=ResultShape.of(ListCollectionsResponse),
        action="list collections",
    ),
    OperationDescriptor(
        name="list_private_collections",
        description="List private collections, with optional pagination and language filter.",
        method="GET",
        path="/collections/private",
        arguments=args.ListCollectionsArgs,
        fields=_COLLECTION_QUERY,
        result=ResultShape.of(ListCollectionsResponse),
        action="list private collections",
    ),
    OperationDescriptor(
        name="get_collection",
        description="Get a single public collection.",
        method="GET",
        path="/collections/{id}",
        arguments=args.IdWithLanguageArgs,
        fields=(_PATH_ID, _REQUIRED_LANG_QUERY),
        result=ResultShape.of(CollectionResponse),
        action="get collection",
        subject_field="id",
    ),
    OperationDescriptor(
        name="get_private_collection",
        description="Get a single private collection.",
        method="GET",
        path="/collections/private/{id}",
        arguments=args.IdWithLanguageArgs,
        fields=(_PATH_ID, _REQUIRED_LANG_QUERY),
        result=ResultShape.of(CollectionResponse),
        action="get private collection",
        subject_field="id",
    ),
    OperationDescriptor(
        name="create_collection",
        description="Create a collection. Returns the new collection's identifier.",
        method="POST",
        path="/collections",
        arguments=args.CreateCollectionArgs,
        fields=_COLLECTION_BODY,
        result=ResultShape.text(),
        action="create collection",
    ),
    OperationDescriptor(
        name="update_collection",
        description="Update a collection's title, description, visibility and subjects.",
        method="PUT",
        path="/collections/{id}",
        arguments=args.UpdateCollectionArgs,
        fields=(_PATH_ID,) + _COLLECTION_BODY,
        result=ResultShape.of(CollectionResponse),
        action="update collection",
        subject_field="id",
    ),
]


def _index(descriptors: Iterable[OperationDescriptor]) -> Mapping[str, OperationDescriptor]:
    table: Dict[str, OperationDescriptor] = {}
    for d in descriptors:
        if d.name in table:
            raise ValueError(f"duplicate operation name: {d.name}")
        names = [f.name for f in d.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"operation {d.name} declares a field twice")
        table[d.name] = d
    return MappingProxyType(table)


OPERATIONS: Mapping[str, OperationDescriptor] = _index(_DESCRIPTORS)
