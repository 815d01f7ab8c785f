"""Tests for settings configuration loading."""

from __future__ import annotations

from textwrap import dedent

import pytest
from pydantic import ValidationError

from silicon_tvl.constants import DEFAULT_ARBITRUM_RPC_URL
from silicon_tvl.settings import OutputFormat, TvlSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in (
        "SILICON_TVL_CONFIG",
        "SILICON_TVL_RPC_URL",
        "SILICON_TVL_BLOCK_NUMBER",
        "SILICON_TVL_HTTP_TIMEOUT",
        "SILICON_TVL_LOG_LEVEL",
        "SILICON_TVL_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = TvlSettings()

    assert settings.rpc_url == DEFAULT_ARBITRUM_RPC_URL
    assert settings.block_number is None
    assert settings.http_timeout is None
    assert settings.log_level == "INFO"
    assert settings.output_format == OutputFormat.TABLE


def test_loads_toml_file(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        dedent(
            """
            [silicon_tvl]
            rpc_url = "https://rpc.example"
            block_number = 123
            http_timeout = 7.5
            output_format = "json"
            """
        ).strip()
    )
    monkeypatch.setenv("SILICON_TVL_CONFIG", str(config_path))

    settings = TvlSettings()

    assert settings.rpc_url == "https://rpc.example"
    assert settings.block_number == 123
    assert settings.http_timeout == 7.5
    assert settings.output_format == OutputFormat.JSON


def test_local_config_file_is_discovered(tmp_path):
    (tmp_path / "silicon-tvl.toml").write_text('log_level = "debug"\n')

    assert TvlSettings().log_level == "DEBUG"


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text('rpc_url = "https://file.example"\nblock_number = 1\n')
    monkeypatch.setenv("SILICON_TVL_CONFIG", str(config_path))
    monkeypatch.setenv("SILICON_TVL_RPC_URL", "https://env.example")
    monkeypatch.setenv("SILICON_TVL_BLOCK_NUMBER", "2")

    settings = TvlSettings(block_number=3)

    assert settings.rpc_url == "https://env.example"
    assert settings.block_number == 3


def test_missing_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("SILICON_TVL_CONFIG", str(tmp_path / "nope.toml"))

    assert TvlSettings().rpc_url == DEFAULT_ARBITRUM_RPC_URL


def test_fixed_listing_values_are_not_settings(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text('page_size = 5\npool_token = "0xabc"\n')
    monkeypatch.setenv("SILICON_TVL_CONFIG", str(config_path))

    settings = TvlSettings()

    assert not hasattr(settings, "page_size")
    assert not hasattr(settings, "pool_token")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"http_timeout": 0},
        {"http_timeout": -1.0},
        {"block_number": -5},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        TvlSettings(**kwargs)


def test_as_safe_dict_is_json_ready():
    data = TvlSettings(output_format="json").as_safe_dict()

    assert data["output_format"] == "json"
    assert data["rpc_url"] == DEFAULT_ARBITRUM_RPC_URL


@pytest.mark.parametrize(
    "rpc_url,shown",
    [
        (
            "https://arb-mainnet.g.alchemy.com/v2/abc123secret",
            "https://arb-mainnet.g.alchemy.com/***redacted***",
        ),
        ("https://user:pw@rpc.example:8545", "https://rpc.example:8545/***redacted***"),
        ("https://rpc.example/?apikey=xyz", "https://rpc.example/***redacted***"),
        ("https://rpc.example", "https://rpc.example"),
    ],
)
def test_as_safe_dict_redacts_rpc_credentials(rpc_url, shown):
    assert TvlSettings(rpc_url=rpc_url).as_safe_dict()["rpc_url"] == shown
