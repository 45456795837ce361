"""Plugin configuration for the context7 tool.

The host runtime supplies configuration as a camelCase mapping::

    {"mcporterConfigPath": "~/.config/mcporter.json", "serverName": "context7", "maxChars": 40000}

snake_case keys are accepted as well. Outside a host, the same values can be
read from the environment (``.env`` files are loaded on package import).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from context7_mcporter.errors import ConfigurationError

__all__ = [
    "DEFAULT_MAX_CHARS",
    "DEFAULT_SERVER_NAME",
    "ENV_CONFIG_PATH",
    "ENV_MAX_CHARS",
    "ENV_SERVER_NAME",
    "Context7Config",
]

DEFAULT_SERVER_NAME = "context7"
DEFAULT_MAX_CHARS = 40_000

ENV_CONFIG_PATH = "CONTEXT7_MCPORTER_CONFIG"
ENV_SERVER_NAME = "CONTEXT7_SERVER_NAME"
ENV_MAX_CHARS = "CONTEXT7_MAX_CHARS"


class Context7Config(BaseModel):
    """Configuration for the context7 tool.

    Attributes:
        mcporter_config_path: Path to the mcporter config that defines the
            Context7 MCP server. Without it the tool reports itself as
            unconfigured instead of calling the bridge.
        server_name: Name of the Context7 server inside the mcporter config.
        max_chars: Clip bound for documentation text and resolver output.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    mcporter_config_path: str | None = Field(default=None, alias="mcporterConfigPath")
    server_name: str = Field(default=DEFAULT_SERVER_NAME, alias="serverName", min_length=1)
    max_chars: int = Field(default=DEFAULT_MAX_CHARS, alias="maxChars", gt=0)

    @field_validator("mcporter_config_path")
    @classmethod
    def _expand_path(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return os.path.expanduser(v) if v else None

    @property
    def is_configured(self) -> bool:
        """True when a bridge config path is available."""
        return bool(self.mcporter_config_path)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Context7Config:
        """Validate host-supplied configuration.

        Raises:
            ConfigurationError: If a value has the wrong type or range.
        """
        try:
            return cls.model_validate(dict(data or {}))
        except PydanticValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(p) for p in first.get("loc", ())) or None
            raise ConfigurationError(
                f"Invalid context7 plugin config: {first.get('msg', e)}",
                config_key=key,
                hint="Expected {mcporterConfigPath: str, serverName?: str, maxChars?: int > 0}",
            ) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Context7Config:
        """Build configuration from ``CONTEXT7_*`` environment variables."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        if env.get(ENV_CONFIG_PATH):
            data["mcporterConfigPath"] = env[ENV_CONFIG_PATH]
        if env.get(ENV_SERVER_NAME):
            data["serverName"] = env[ENV_SERVER_NAME]
        if env.get(ENV_MAX_CHARS):
            data["maxChars"] = env[ENV_MAX_CHARS]
        return cls.from_mapping(data)

    def merged(self, **overrides: Any) -> Context7Config:
        """Return a copy with non-None overrides applied (snake_case keys)."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return self.from_mapping({**self.model_dump(), **values})
