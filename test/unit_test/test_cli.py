from __future__ import annotations

from typing import List

import pytest
from typer.testing import CliRunner

import sda_mcp.cli as cli
from sda_mcp.core.config import ClientConfig

runner = CliRunner()


@pytest.fixture()
def served(monkeypatch: pytest.MonkeyPatch) -> List[ClientConfig]:
    configs: List[ClientConfig] = []

    async def fake_serve(config: ClientConfig) -> None:
        configs.append(config)

    monkeypatch.setattr(cli, "serve", fake_serve)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    for name in ("API_KEY", "SDA_BASE_URL", "SDA_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return configs


def test_run_with_options(served: List[ClientConfig]) -> None:
    result = runner.invoke(cli.app, ["--api-key", "k", "--base-url", "http://mock/sda-api/", "--timeout", "3"])

    assert result.exit_code == 0, result.output
    assert served == [ClientConfig(base_url="http://mock/sda-api/", api_key="k", timeout=3.0)]


def test_api_key_from_environment(served: List[ClientConfig], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_KEY", "env-key")

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0, result.output
    assert served[0].api_key == "env-key"
    assert served[0].timeout is None


def test_missing_api_key_is_a_usage_error(served: List[ClientConfig]) -> None:
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 2
    assert served == []


def test_load_settings_ignores_unset_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDA_LOG_LEVEL", "WARNING")

    settings = cli.load_settings(api_key="k")

    assert settings.log_level == "WARNING"
    assert settings.api_key == "k"
