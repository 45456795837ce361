"""The ``context7`` agent tool.

Wraps Context7Lookup as an async LangChain StructuredTool so it can be
handed to any agent runtime that accepts LangChain tools.

Example:
    ```python
    from context7_mcporter import create_context7_tool

    tool = create_context7_tool({"mcporterConfigPath": "~/.config/mcporter.json"})
    result = await tool.ainvoke({"library": "FastAPI", "query": "how to add middleware"})
    print(result["content"][0]["text"])
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ConfigDict, Field

from context7_mcporter.bridge.types import BridgeTransport
from context7_mcporter.lookup.models import LookupRequest
from context7_mcporter.lookup.orchestrator import Context7Lookup
from context7_mcporter.settings import Context7Config

__all__ = ["TOOL_DESCRIPTION", "TOOL_NAME", "Context7ToolInput", "create_context7_tool"]

TOOL_NAME = "context7"
TOOL_DESCRIPTION = (
    "Look up official library documentation via Context7 (MCP). Uses mcporter under the hood. "
    "Callers should provide a library name or direct Context7 libraryId, and a query."
)


class Context7ToolInput(BaseModel):
    """Input schema for the context7 tool (field names as the host sends them)."""

    model_config = ConfigDict(extra="forbid")

    library: str | None = Field(
        default=None, description=LookupRequest.model_fields["library"].description
    )
    query: str = Field(description=LookupRequest.model_fields["query"].description)
    versionHint: str | None = Field(  # noqa: N815
        default=None, description=LookupRequest.model_fields["version_hint"].description
    )


def _resolve_config(config: Context7Config | Mapping[str, Any] | None) -> Context7Config:
    if config is None:
        return Context7Config.from_env()
    if isinstance(config, Context7Config):
        return config
    return Context7Config.from_mapping(config)


def create_context7_tool(
    config: Context7Config | Mapping[str, Any] | None = None,
    *,
    transport: BridgeTransport | None = None,
) -> StructuredTool:
    """Create the ``context7`` documentation lookup tool.

    Args:
        config: Plugin configuration: a Context7Config, the host's camelCase
            mapping, or None to read ``CONTEXT7_*`` environment variables.
        transport: Bridge override (mainly for tests). Defaults to mcporter.

    Returns:
        An async StructuredTool returning ``{"content": [{"type": "text", "text": ...}]}``.

    Raises:
        ConfigurationError: If ``config`` has invalid values.
    """
    lookup = Context7Lookup(_resolve_config(config), transport=transport)

    async def context7(
        query: str,
        library: str | None = None,
        versionHint: str | None = None,  # noqa: N803
    ) -> dict[str, Any]:
        """Look up library documentation through Context7."""
        result = await lookup.lookup(query, library=library, version_hint=versionHint)
        return result.to_dict()

    return StructuredTool.from_function(
        coroutine=context7,
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        args_schema=Context7ToolInput,
    )
