"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dnsnames.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from dnsnames.domain.names import FullyQualifiedDomainName


class ZoneConfig(BaseModel):
    """[zone] section.

    ``origin`` is validated as a fully qualified name on load, so a
    malformed origin fails at startup rather than on first use.
    """

    model_config = {"frozen": True}

    origin: FullyQualifiedDomainName | None = None

