"""Resolve-then-query workflow behind the context7 tool.

One lookup makes at most two bridge calls, in order:

1. ``resolve-library-id`` turns a library name into a Context7 library id
   (skipped when the caller already passed an id such as "/tiangolo/fastapi")
2. ``query-docs`` fetches documentation for that id and the query

Missing configuration, a blank query and an unresolvable library name are
answered with an explanatory text result. Bridge failures are raised.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from context7_mcporter.bridge.client import McporterBridge
from context7_mcporter.bridge.types import BridgeTransport
from context7_mcporter.logging import get_logger
from context7_mcporter.lookup.content import extract_text
from context7_mcporter.lookup.models import LookupRequest, ToolResult
from context7_mcporter.lookup.text import (
    RESOLVER_SUMMARY_MAX_CHARS,
    clip,
    extract_library_id,
    looks_like_library_id,
)
from context7_mcporter.settings import Context7Config

__all__ = [
    "MISSING_QUERY_MESSAGE",
    "NOT_CONFIGURED_MESSAGE",
    "QUERY_DOCS",
    "RESOLVE_LIBRARY_ID",
    "UNRESOLVED_PREFIX",
    "Context7Lookup",
]

logger = get_logger("lookup")

RESOLVE_LIBRARY_ID = "resolve-library-id"
QUERY_DOCS = "query-docs"

NOT_CONFIGURED_MESSAGE = (
    "Context7 tool is not configured: missing mcporterConfigPath in plugin config."
)
MISSING_QUERY_MESSAGE = "Missing required field: query"
UNRESOLVED_PREFIX = (
    "Context7: could not confidently resolve a libraryId. Here is the resolver output:\n\n"
)


class Context7Lookup:
    """Documentation lookup through the Context7 MCP server.

    Args:
        config: Plugin configuration.
        transport: Bridge used for remote calls. Defaults to a McporterBridge
            built from ``config`` when it is configured.

    Example:
        ```python
        lookup = Context7Lookup(Context7Config(mcporter_config_path="~/mcporter.json"))
        result = await lookup.lookup("how to add middleware", library="FastAPI")
        print(result.text)
        ```
    """

    def __init__(
        self,
        config: Context7Config | None = None,
        transport: BridgeTransport | None = None,
    ) -> None:
        self.config = config or Context7Config()
        if transport is None and self.config.is_configured:
            transport = McporterBridge.from_config(self.config)
        self._transport = transport

    async def lookup(
        self,
        query: str,
        library: str | None = None,
        version_hint: str | None = None,
    ) -> ToolResult:
        """Keyword form of run()."""
        return await self.run(
            LookupRequest(query=query, library=library, version_hint=version_hint)
        )

    async def execute(self, params: Mapping[str, Any]) -> ToolResult:
        """Run a lookup from raw host parameters (``library``, ``query``, ``versionHint``).

        Raises:
            ValidationError: If ``params`` does not match the tool input schema.
            BridgeError: If a bridge call fails.
        """
        return await self.run(LookupRequest.from_params(params))

    async def run(self, request: LookupRequest) -> ToolResult:
        """Run one lookup.

        Raises:
            BridgeError: If a bridge call fails.
        """
        if not self.config.is_configured or self._transport is None:
            return ToolResult.from_text(NOT_CONFIGURED_MESSAGE)

        query = request.query.strip()
        if not query:
            return ToolResult.from_text(MISSING_QUERY_MESSAGE)

        library = (request.library or "").strip()
        direct = looks_like_library_id(library)
        library_id = library if direct else None
        resolved_summary = ""

        if library_id is None:
            search_term = library or query
            logger.debug("Resolving library id", search_term=search_term)
            resolved = await self._transport.call(RESOLVE_LIBRARY_ID, {"query": search_term})
            resolved_summary = extract_text(resolved)
            library_id = extract_library_id(resolved_summary)

            if library_id is None:
                logger.info("No library id in resolver output", search_term=search_term)
                return ToolResult.from_text(
                    UNRESOLVED_PREFIX + clip(resolved_summary, self.config.max_chars)
                )

        logger.debug("Querying docs", library_id=library_id)
        docs = await self._transport.call(QUERY_DOCS, {"libraryId": library_id, "query": query})
        docs_text = extract_text(docs)

        return ToolResult.from_text(
            self._format(library_id, direct, resolved_summary, docs_text)
        )

    def _format(
        self,
        library_id: str,
        direct: bool,
        resolved_summary: str,
        docs_text: str,
    ) -> str:
        if direct:
            header = f"Context7 docs for {library_id}\n\n"
        else:
            header = f"Context7 resolved libraryId: {library_id}\n\n"

        resolver_block = ""
        if resolved_summary:
            resolver_block = (
                "---\nResolver output (truncated)\n---\n"
                f"{clip(resolved_summary, RESOLVER_SUMMARY_MAX_CHARS)}\n\n"
            )

        return header + resolver_block + clip(docs_text, self.config.max_chars)
