from __future__ import annotations

from typing import Callable, Iterable, List

import httpx
import pytest

from sda_mcp.archive_api.client import SdaApiClient
from sda_mcp.core.config import ClientConfig
from sda_mcp.tools.dispatcher import ToolDispatcher

MOCK_BASE_URL = "http://mock/sda-api"
MOCK_API_KEY = "test-key"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture()
def client_config() -> ClientConfig:
    return ClientConfig(base_url=MOCK_BASE_URL, api_key=MOCK_API_KEY)


@pytest.fixture()
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture()
def make_dispatcher(client_config: ClientConfig, recorded_requests: List[httpx.Request]):
    """Factory building a dispatcher whose HTTP traffic goes to ``handler``.

    Every request is appended to ``recorded_requests`` before the handler runs.
    """

    def factory(handler: Handler) -> ToolDispatcher:
        def recording(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        return ToolDispatcher(SdaApiClient(client_config, client=http))

    return factory
