"""Content blocks of a bridge response.

mcporter prints the MCP tool response envelope, roughly::

    {"content": [{"type": "text", "text": "..."}, ...], "isError": false}

Nothing about that shape is guaranteed, so parsing never fails: items that
are not text blocks become OtherBlock, and a response with no text block is
rendered as pretty-printed JSON.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

__all__ = ["ContentBlock", "OtherBlock", "TextBlock", "extract_text", "parse_content"]


@dataclass(frozen=True, slots=True)
class TextBlock:
    """A content item with ``type == "text"``."""

    text: str


@dataclass(frozen=True, slots=True)
class OtherBlock:
    """Any other content item (image, resource, malformed entry)."""

    raw: Any


ContentBlock = Union[TextBlock, OtherBlock]


def _is_text_item(item: Any) -> bool:
    return isinstance(item, Mapping) and item.get("type") == "text"


def _to_block(item: Any) -> ContentBlock:
    if _is_text_item(item) and item.get("text") is not None:
        text = item["text"]
        return TextBlock(text if isinstance(text, str) else str(text))
    return OtherBlock(item)


def parse_content(response: Any) -> list[ContentBlock]:
    """Parse the ``content`` list of a response envelope.

    Returns an empty list when ``response`` has no list-valued ``content``.
    """
    if not isinstance(response, Mapping):
        return []
    content = response.get("content")
    if not isinstance(content, list):
        return []
    return [_to_block(item) for item in content]


def extract_text(response: Any) -> str:
    """Text of the first text-typed item, else the whole response as indented JSON.

    Only the first text-typed item is considered: if it carries no text, the
    JSON fallback is used even when later items do.
    """
    for block in parse_content(response):
        if isinstance(block, TextBlock):
            return block.text
        if _is_text_item(block.raw):
            break
    return json.dumps(response, indent=2, ensure_ascii=False, default=str)
