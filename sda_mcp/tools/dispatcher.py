"""Tool dispatcher

Single entry point for tool invocations. For one ``(name, arguments)`` pair it
runs the linear pipeline::

    Received -> Normalized -> Built -> Sent -> Succeeded | Failed

1. resolve the :class:`OperationDescriptor` (unknown name → ``UnknownOperationError``)
2. validate the raw arguments into the operation's model (→ ``ValidationError``)
3. normalize, build the request, send it, translate the response

Every failure, whatever stage produced it, is wrapped into a
:class:`ToolInvocationError` naming the action attempted, and returned inside a
:class:`ToolOutcome`. ``dispatch`` itself never raises for expected failures.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import pydantic

from ..archive_api.client import SdaApiClient
from ..errors import (
    ErrorKind,
    OperationCancelledError,
    SdaMcpError,
    ToolInvocationError,
    UnknownOperationError,
    ValidationError,
)
from .descriptor import OperationDescriptor, ResultKind
from .normalizer import normalize_arguments
from .registry import OPERATIONS
from .request_builder import build_request
from .translator import translate


@dataclass(frozen=True)
class ToolOutcome:
    """Result of one dispatch cycle.

    Attributes:
        operation: Tool name as requested.
        ok: Whether the invocation succeeded.
        content: Text handed back to the agent on success.
        result: Parsed result (model, dict, str or ``None``) on success.
        error: The wrapped failure when ``ok`` is false.
    """

    operation: str
    ok: bool
    content: Optional[str] = None
    result: Any = None
    error: Optional[ToolInvocationError] = None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, operation: str, content: str, result: Any) -> "ToolOutcome":
        return cls(operation=operation, ok=True, content=content, result=result)

    @classmethod
    def failure(cls, operation: str, error: ToolInvocationError) -> "ToolOutcome":
        return cls(operation=operation, ok=False, error=error)


def render_result(descriptor: OperationDescriptor, result: Any) -> str:
    """Serialize a translated result into the text returned to the agent."""
    kind = descriptor.result.kind
    if kind is ResultKind.EMPTY:
        return descriptor.result.confirmation or ""
    if kind is ResultKind.TEXT:
        return result
    if isinstance(result, pydantic.BaseModel):
        return result.model_dump_json(indent=2)
    return json.dumps(result, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Maps tool names to the normalize/build/send/translate pipeline.

    Holds only the archive client, whose configuration is immutable, so one
    dispatcher serves concurrent invocations.
    """

    def __init__(
        self,
        client: SdaApiClient,
        *,
        operations: Mapping[str, OperationDescriptor] = OPERATIONS,
    ) -> None:
        self._client = client
        self._operations = operations
        self._logger = logging.getLogger(__name__)

    @property
    def operations(self) -> Mapping[str, OperationDescriptor]:
        return self._operations

    def resolve(self, name: str) -> OperationDescriptor:
        """Return the descriptor for ``name``.

        Raises:
            UnknownOperationError: If no tool has that name.
        """
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    @staticmethod
    def parse_arguments(descriptor: OperationDescriptor, arguments: Optional[Mapping[str, Any]]) -> pydantic.BaseModel:
        """Validate the raw payload into the operation's argument model.

        Raises:
            ValidationError: On type mismatch, unknown or missing fields.
        """
        try:
            return descriptor.arguments.model_validate(dict(arguments or {}))
        except pydantic.ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(f"invalid arguments: {problems}", details=e.errors()) from e

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolOutcome:
        """Run one tool invocation end to end.

        Args:
            name: Tool name.
            arguments: Raw JSON-like argument object from the agent.

        Returns:
            A :class:`ToolOutcome`. Failures are reported through
            ``outcome.error``, never raised.
        """
        raw_args = dict(arguments or {})
        action = name.replace("_", " ")
        self._logger.info("Tool call: %s args_keys=%s", name, sorted(raw_args))
        try:
            descriptor = self.resolve(name)
            action = descriptor.describe_action()
            parsed = self.parse_arguments(descriptor, raw_args)
            # Only a validated identifier is named in messages.
            if descriptor.subject_field:
                action = descriptor.describe_action(getattr(parsed, descriptor.subject_field, None))
            normalized = normalize_arguments(descriptor, parsed)
            request = build_request(descriptor, normalized)
            raw = await self._client.send(request)
            result = translate(descriptor.result, raw)
            content = render_result(descriptor, result)
        except SdaMcpError as e:
            return self._failed(name, action, e)
        except asyncio.CancelledError:
            # The in-flight httpx request has already been aborted at this point.
            return self._failed(name, action, OperationCancelledError("invocation was cancelled"))

        self._logger.info("Tool call succeeded: %s", name)
        return ToolOutcome.success(name, content, result)

    def _failed(self, name: str, action: str, cause: SdaMcpError) -> ToolOutcome:
        error = ToolInvocationError(name, action, cause)
        self._logger.warning("Tool call failed: %s kind=%s error=%s", name, error.kind.value, error)
        return ToolOutcome.failure(name, error)
