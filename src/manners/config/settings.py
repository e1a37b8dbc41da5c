"""MannersSettings — what the cache and the CLI read at startup.

Highest priority first: CLI flags, ``MANNERS_*`` env vars (``__`` for
nesting, e.g. ``MANNERS_CACHE__ENABLED``), ``manners.toml``, defaults.
Only :meth:`MannersSettings.from_cli` reads the TOML file; the library's
default cache uses plain ``MannersSettings()`` and never touches disk.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from manners.config.discovery import find_config
from manners.config.models import CacheConfig
from manners.errors import ConfigError

_toml_data: ContextVar[dict[str, Any] | None] = ContextVar("_toml_data", default=None)


def read_toml(path: Path | None) -> dict[str, Any]:
    """Parse *path*; a missing or absent file reads as empty."""
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


class MannersSettings(BaseSettings):
    """Frozen settings object.

    Attributes:
        config_path: The ``manners.toml`` the values came from, if any.
        cache: ``[cache]`` section, consumed by ``CoachCache.from_settings``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MANNERS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    cache: CacheConfig = Field(default_factory=CacheConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_settings = InitSettingsSource(settings_cls, _toml_data.get() or {})
        return init_settings, env_settings, toml_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> MannersSettings:
        """Build settings for one CLI run.

        Uses *config_path* when given, else the ``manners.toml`` found from
        *start*. CLI flags override everything else.

        Raises:
            ConfigError: The TOML file does not parse.
        """
        toml_path = Path(config_path) if config_path else find_config(start)
        if toml_path is not None and not toml_path.is_file():
            toml_path = None

        token = _toml_data.set(read_toml(toml_path))
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _toml_data.reset(token)
