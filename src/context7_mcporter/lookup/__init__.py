"""Context7 documentation lookup.

- **Context7Lookup**: resolve-then-query workflow
- **create_context7_tool**: the ``context7`` agent tool
- **extract_text / parse_content**: best-effort reading of bridge responses
- **clip / extract_library_id**: text helpers
"""

from context7_mcporter.lookup.content import (
    ContentBlock,
    OtherBlock,
    TextBlock,
    extract_text,
    parse_content,
)
from context7_mcporter.lookup.models import LookupRequest, TextContent, ToolResult
from context7_mcporter.lookup.orchestrator import (
    MISSING_QUERY_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    QUERY_DOCS,
    RESOLVE_LIBRARY_ID,
    UNRESOLVED_PREFIX,
    Context7Lookup,
)
from context7_mcporter.lookup.text import (
    RESOLVER_SUMMARY_MAX_CHARS,
    clip,
    extract_library_id,
    looks_like_library_id,
)
from context7_mcporter.lookup.tool import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    Context7ToolInput,
    create_context7_tool,
)

__all__ = [
    # Workflow
    "Context7Lookup",
    "QUERY_DOCS",
    "RESOLVE_LIBRARY_ID",
    "MISSING_QUERY_MESSAGE",
    "NOT_CONFIGURED_MESSAGE",
    "UNRESOLVED_PREFIX",
    # Models
    "LookupRequest",
    "TextContent",
    "ToolResult",
    # Content
    "ContentBlock",
    "OtherBlock",
    "TextBlock",
    "extract_text",
    "parse_content",
    # Text
    "RESOLVER_SUMMARY_MAX_CHARS",
    "clip",
    "extract_library_id",
    "looks_like_library_id",
    # Tool
    "Context7ToolInput",
    "TOOL_DESCRIPTION",
    "TOOL_NAME",
    "create_context7_tool",
]
