"""Types for the mcporter command bridge.

- BridgeSettings: process contract (executable, timeout, output ceiling)
- BridgeTransport: the ``call(operation, arguments)`` capability the lookup
  orchestrator depends on
- build_call_args: argument list for ``mcporter call``
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "DEFAULT_EXECUTABLE",
    "DEFAULT_MAX_OUTPUT_BYTES",
    "DEFAULT_TIMEOUT",
    "BridgeSettings",
    "BridgeTransport",
    "build_call_args",
]

DEFAULT_EXECUTABLE = "mcporter"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_OUTPUT_BYTES = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class BridgeSettings:
    """Process contract for bridge calls.

    Attributes:
        executable: Bridge executable name or path.
        timeout: Wall-clock seconds allowed per call.
        max_output_bytes: Ceiling applied to stdout and to stderr.
        env: Extra environment variables (merged with os.environ).

    Example:
        >>> settings = BridgeSettings(timeout=30.0)
        >>> settings.executable
        'mcporter'
    """

    executable: str = DEFAULT_EXECUTABLE
    timeout: float = DEFAULT_TIMEOUT
    max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES
    env: Mapping[str, str] | None = None

    def get_env(self) -> dict[str, str]:
        """Get environment variables, merged with os.environ."""
        base_env = dict(os.environ)
        if self.env:
            base_env.update(self.env)
        return base_env


@runtime_checkable
class BridgeTransport(Protocol):
    """Remote-call capability used by the lookup orchestrator.

    Implementations return the decoded JSON response and raise a BridgeError
    on any transport failure.
    """

    async def call(self, operation: str, arguments: Mapping[str, Any]) -> Any:
        """Invoke ``operation`` on the documentation server."""
        ...


def build_call_args(
    server_name: str,
    operation: str,
    config_path: str,
    arguments: Mapping[str, Any],
) -> list[str]:
    """Build the argument list for ``mcporter call``.

    Example:
        >>> build_call_args("context7", "resolve-library-id", "/cfg.json", {"query": "fastapi"})
        ['call', 'context7.resolve-library-id', '--config', '/cfg.json', '--args', '{"query":"fastapi"}', '--output', 'json']
    """
    return [
        "call",
        f"{server_name}.{operation}",
        "--config",
        config_path,
        "--args",
        json.dumps(dict(arguments), separators=(",", ":"), ensure_ascii=False),
        "--output",
        "json",
    ]
