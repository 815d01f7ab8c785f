"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import DEFAULT_ARBITRUM_RPC_URL

load_dotenv()

CONFIG_ENV_VAR = "SILICON_TVL_CONFIG"
LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


class TomlConfigSource(PydanticBaseSettingsSource):
    """Lowest-precedence source reading a TOML file.

    The file may hold settings at the top level or under a ``[silicon_tvl]``
    table. Without an explicit path, ``./silicon-tvl.toml`` and then
    ``~/.config/silicon-tvl/config.toml`` are tried.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
        super().__init__(settings_cls)
        self._path = path

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return None, "", False

    def _resolve_path(self) -> Path | None:
        if self._path:
            return self._path
        local_config = Path("silicon-tvl.toml")
        user_config = Path.home() / ".config" / "silicon-tvl" / "config.toml"
        if local_config.exists():
            return local_config
        if user_config.exists():
            return user_config
        return None

    def __call__(self) -> dict[str, Any]:
        path = self._resolve_path()
        if path is None or not path.exists():
            return {}

        with path.open("rb") as f:
            data = tomllib.load(f)
        body = data.get("silicon_tvl", data)
        if not isinstance(body, dict):
            return {}
        return body


class TvlSettings(BaseSettings):
    """Runtime configuration. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with SILICON_TVL_)
    - Config file (TOML), lowest precedence

    The GPU listing endpoint, its page size and query, the price table and
    the pool token address are fixed constants and cannot be set here.
    """

    # --- chain access ---
    rpc_url: str = DEFAULT_ARBITRUM_RPC_URL
    block_number: int | None = Field(default=None, ge=0)

    # --- transport ---
    http_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait on each GPU listing request. Unset uses the transport default.",
    )

    # --- output ---
    log_level: str = "INFO"
    output_format: OutputFormat = OutputFormat.TABLE

    model_config = SettingsConfigDict(
        env_prefix="SILICON_TVL_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}, got {v!r}"
            )
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Explicit precedence: CLI > ENV > .env > FILE."""
        env_cfg = os.environ.get(CONFIG_ENV_VAR)
        cfg_path = Path(env_cfg) if env_cfg else None

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSource(settings_cls, cfg_path),
        )

    def as_safe_dict(self) -> dict[str, Any]:
        """Return the config as a dict with RPC credentials redacted.

        Hosted RPC endpoints carry their API key in the path, query or
        userinfo, so anything past the host of a non-default ``rpc_url`` is
        masked.
        """
        data = self.model_dump(mode="json")
        if self.rpc_url != DEFAULT_ARBITRUM_RPC_URL:
            parts = urlsplit(self.rpc_url)
            if parts.path.strip("/") or parts.query or parts.username:
                host = parts.netloc.rpartition("@")[2]
                data["rpc_url"] = f"{parts.scheme}://{host}/***redacted***"
        return data
