"""Operation descriptors

Overview
--------
An :class:`OperationDescriptor` is the static description of one tool: the
HTTP method and path template it maps to, the ordered list of fields it
serializes (and where each goes), and the shape of its result. Descriptors are
declared once in :mod:`sda_mcp.tools.registry` and never mutated.

Field order matters: the request builder emits query parameters and body keys
in the order the :class:`FieldSpec` entries are declared, independent of the
order the caller supplied them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type

from pydantic import BaseModel


class FieldKind(str, Enum):
    """Serialization rule applied to a field by the normalizer."""

    PAGINATION = "pagination"
    LANGUAGE = "language"
    REQUIRED_LANGUAGE = "required_language"
    TEXT = "text"
    REQUIRED_TEXT = "required_text"
    FLAG = "flag"
    EXPLICIT_FLAG = "explicit_flag"
    ID_LIST = "id_list"
    REQUIRED_ID_LIST = "required_id_list"
    ENUM = "enum"
    PATH_ID = "path_id"


class FieldLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    BODY = "body"


class ResultKind(str, Enum):
    MODEL = "model"
    JSON_OBJECT = "json_object"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class FieldSpec:
    """One serializable field of an operation.

    Attributes:
        name: Wire name; also the attribute name on the argument model.
        kind: Normalization rule.
        location: Where the builder places the value.
        source: Attribute of the argument model holding a nested request
            object to read ``name`` from (e.g. ``"request"``). ``None`` reads
            from the argument model itself.
    """

    name: str
    kind: FieldKind
    location: FieldLocation = FieldLocation.QUERY
    source: Optional[str] = None


@dataclass(frozen=True)
class ResultShape:
    kind: ResultKind
    model: Optional[Type[BaseModel]] = None
    confirmation: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ResultKind.MODEL and self.model is None:
            raise ValueError("a MODEL result shape requires a model")

    @classmethod
    def of(cls, model: Type[BaseModel]) -> "ResultShape":
        return cls(kind=ResultKind.MODEL, model=model)

    @classmethod
    def json_object(cls) -> "ResultShape":
        return cls(kind=ResultKind.JSON_OBJECT)

    @classmethod
    def text(cls) -> "ResultShape":
        return cls(kind=ResultKind.TEXT)

    @classmethod
    def empty(cls, confirmation: str) -> "ResultShape":
        return cls(kind=ResultKind.EMPTY, confirmation=confirmation)


@dataclass(frozen=True)
class OperationDescriptor:
    """Static description of a tool.

    Attributes:
        name: Tool name exposed to the agent.
        description: Tool description shown to the agent.
        method: HTTP method.
        path: Path template relative to ``/api/v1``, e.g. ``/accessions/{id}``.
        arguments: Pydantic model the raw argument payload is validated into.
        fields: Ordered field specs.
        result: Result shape for the translator.
        action: Phrase used in error messages, e.g. ``"update accession"``.
        subject_field: Argument whose value is appended to the action phrase
            (``"update accession with ID 42"``).
    """

    name: str
    description: str
    method: str
    path: str
    arguments: Type[BaseModel]
    fields: Tuple[FieldSpec, ...]
    result: ResultShape
    action: str
    subject_field: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return any(f.location is FieldLocation.BODY for f in self.fields)

    @property
    def paginated(self) -> bool:
        return any(f.kind is FieldKind.PAGINATION for f in self.fields)

    @property
    def mutating(self) -> bool:
        return self.method != "GET"

    def fields_at(self, location: FieldLocation) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.location is location)

    def describe_action(self, subject: object = None) -> str:
        """Render the action phrase, optionally naming the target record."""
        if self.subject_field is not None and subject is not None:
            return f"{self.action} with ID {subject}"
        return self.action
