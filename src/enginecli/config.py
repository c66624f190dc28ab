"""Centralized configuration: Pydantic BaseSettings with TOML + dotenv sources.

Settings live in ``enginecli.toml``. Environment variables override it using
the ``ENGINECLI_`` prefix and ``__`` as the nested delimiter
(e.g. ``ENGINECLI_ENGINE__TIMEOUT=60``).

Priority (highest wins): init args > env vars > .env > enginecli.toml

Usage::

    from enginecli.config import get_settings

    s = get_settings()
    print(s.engine.cli)
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

# ---------------------------------------------------------------------------
# Sub-models (each maps to a [section] in enginecli.toml)
# ---------------------------------------------------------------------------


class _StrictModel(BaseModel):
    """Base for all config sub-models; reject unknown keys so typos fail loudly."""

    model_config = {"extra": "forbid"}


class EngineConfig(_StrictModel):
    cli: str = "docker"
    timeout: float = 180.0  # seconds, shared by every engine call
    platform: Literal["auto", "windows", "posix"] = "auto"

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


class ProbeConfig(_StrictModel):
    service_query: list[str] = ["sc.exe", "query", "cexecsvc"]
    hostname: list[str] = ["hostname"]
    whoami: list[str] = ["whoami"]


class LoggingConfig(_StrictModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        toml_file="enginecli.toml",
        env_file=".env",
        env_prefix="ENGINECLI_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    engine: EngineConfig = EngineConfig()
    probes: ProbeConfig = ProbeConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init > env vars > .env > enginecli.toml > file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Lazy cached singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached singleton (for tests)."""
    global _settings
    _settings = None
