"""Sudan Digital Archive API client

Overview
--------
Thin async HTTP client for the Sudan Digital Archive REST API. It executes one
already-built :class:`~sda_mcp.tools.request_builder.ApiRequest` per call and
returns the raw response; interpreting the status and body is the translator's
job.

Authentication
--------------
Every request carries the static header ``x-api-key: <credential>`` taken from
the immutable :class:`~sda_mcp.core.config.ClientConfig`.

Errors
------
Connection, read, timeout, decoding and redirect failures are raised as
:class:`~sda_mcp.errors.TransportError` chained to the underlying
``httpx`` exception. HTTP error statuses are *not* raised here.

Usage
-----
>>> config = ClientConfig(base_url="https://api.example.org/sda-api", api_key="secret")
>>> async with SdaApiClient(config) as client:
...     raw = await client.send(ApiRequest(method="GET", path="/api/v1/accessions"))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from ..core.config import ClientConfig
from ..errors import TransportError
from ..tools.request_builder import ApiRequest

API_KEY_HEADER = "x-api-key"


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class SdaApiClient:
    """Async transport for the archive API.

    Design
    ------
    - Holds no per-call state: concurrent ``send`` calls only share the frozen
      config and the underlying ``httpx.AsyncClient``.
    - Exactly one round trip per ``send``. No retry, cache or rate limiting.
    """

    def __init__(self, config: ClientConfig, *, client: Optional[httpx.AsyncClient] = None) -> None:
        """Create an archive API client.

        Args:
            config: Base URL, credential and timeout.
            client: Optional preconfigured ``httpx.AsyncClient`` (tests inject a
                ``MockTransport``-backed one). When omitted one is created from
                ``config.timeout`` and closed by :meth:`aclose`.
        """
        self._config = config
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout), follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.normalized_base_url

    def _headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self._config.api_key}

    async def send(self, request: ApiRequest) -> RawResponse:
        """Execute ``request`` and return the raw response.

        Raises:
            TransportError: If the request could not be completed.
        """
        url = request.url(self.base_url)
        self._logger.debug(
            "SdaApiClient.send: %s %s params=%s body_keys=%s",
            request.method,
            url,
            list(request.params),
            list((request.body or {}).keys()),
        )
        try:
            r = await self._http.request(
                request.method,
                url,
                params=list(request.params) or None,
                json=request.body,
                headers=self._headers(),
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"request timed out: {request.method} {request.path}") from e
        except httpx.RequestError as e:
            # Connection failures, undecodable bodies and redirect loops alike.
            raise TransportError(f"request failed: {request.method} {request.path}: {e}") from e
        self._logger.debug("SdaApiClient.send: %s %s -> %s", request.method, request.path, r.status_code)
        return RawResponse(status_code=r.status_code, text=r.text, headers=dict(r.headers))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "SdaApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
