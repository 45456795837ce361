"""Text helpers for lookup results: clipping and library id extraction."""

from __future__ import annotations

import re

from context7_mcporter.settings import DEFAULT_MAX_CHARS

__all__ = [
    "DEFAULT_MAX_CHARS",
    "LIBRARY_ID_PATTERN",
    "RESOLVER_SUMMARY_MAX_CHARS",
    "clip",
    "extract_library_id",
    "looks_like_library_id",
]

RESOLVER_SUMMARY_MAX_CHARS = 4_000

# "/org/project" or "/org/project/version". A slash right after a word
# character or another slash (and/or, URL paths) does not start a token.
# Parentheses end a token: "(format: /org/project)".
LIBRARY_ID_PATTERN = re.compile(r"(?<![\w/])/[^\s\"'`/()]+(?:/[^\s\"'`/()]+)*")


def clip(text: str, max_chars: int) -> str:
    """Cut ``text`` to ``max_chars`` characters and note the truncation.

    Example:
        >>> clip("abcdef", 3)
        'abc\\n\\n[clipped to 3 chars]'
        >>> clip("abc", 3)
        'abc'
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + f"\n\n[clipped to {max_chars} chars]"


def extract_library_id(text: str) -> str | None:
    """Find the first Context7-style library id in free text.

    This is a heuristic: any absolute path-like token in resolver prose
    matches, not only library ids.

    Example:
        >>> extract_library_id("- Context7-compatible library ID: /tiangolo/fastapi")
        '/tiangolo/fastapi'
    """
    match = LIBRARY_ID_PATTERN.search(text)
    return match.group(0) if match else None


def looks_like_library_id(value: str) -> bool:
    """Caller-supplied values starting with "/" are used as ids without resolving."""
    return value.startswith("/")
