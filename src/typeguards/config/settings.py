"""Settings for the embedding application: env vars and TOML in one model.

Priority chain (highest to lowest):
  1. Init kwargs (``TypeGuardSettings.load(**overrides)``)
  2. ``TYPEGUARDS_*`` env vars, ``__`` for nested sections
  3. ``typeguards.toml`` discovered via walk-up
  4. Section model defaults
"""

from __future__ import annotations

import functools
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from typeguards.config.discovery import find_config, read_config
from typeguards.config.models import LoggingConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``typeguards.toml`` file.

    A missing file contributes nothing; a malformed one raises
    :class:`~typeguards.domain.errors.ConfigError` at construction.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._tables: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            self._tables = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._tables.get(field_name), field_name, field_name in self._tables

    def __call__(self) -> dict[str, Any]:
        return dict(self._tables)


# TOML path handed from load() to settings_customise_sources().
_tls = threading.local()


class TypeGuardSettings(BaseSettings):
    """Settings for the typeguards package, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        logging: ``[logging]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPEGUARDS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> TypeGuardSettings:
        """Build settings from *config_path*, or the file found above *start*.

        An explicit path that does not exist is treated as no file at all.
        *overrides* take priority over env vars and the TOML file.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


@functools.cache
def get_settings() -> TypeGuardSettings:
    """Process-wide settings, loaded once from the working directory."""
    return TypeGuardSettings.load()
