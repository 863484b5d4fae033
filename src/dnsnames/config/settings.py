"""``DnsNamesSettings``: CLI flags, env vars and TOML config in one object.

Sources, highest priority first:

1. init kwargs, i.e. the CLI flags passed by click
2. ``DNSNAMES_*`` env vars (``DNSNAMES_ZONE__ORIGIN`` for nested fields)
3. the ``dnsnames.toml`` located by :func:`dnsnames.config.discovery.find_config`
4. defaults baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dnsnames.config.discovery import find_config, read_toml
from dnsnames.config.models import ZoneConfig

# The TOML path chosen by from_cli(), visible to settings_customise_sources().
_pending = threading.local()


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file; no file contributes nothing."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values: dict[str, Any] = (
            read_toml(path) if path is not None and path.is_file() else {}
        )

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return self._values


class DnsNamesSettings(BaseSettings):
    """Frozen, fully resolved settings for one CLI invocation.

    Attributes:
        config_path: The TOML file in effect, or None.
        zone: The ``[zone]`` section; ``zone.origin`` resolves ``@`` in
            patterns and is the default origin for ``relativize``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DNSNAMES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    zone: ZoneConfig = Field(default_factory=ZoneConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> DnsNamesSettings:
        """Resolve settings for a CLI run.

        An explicit *config_path* that does not exist is ignored rather than
        treated as an error; without one, the file is discovered from *cwd*.

        Raises:
            ConfigFileError: If the config file is not valid TOML.
            pydantic.ValidationError: If a value (e.g. ``zone.origin``) is invalid.
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(cwd)

        _pending.path = path
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _pending.path = None
