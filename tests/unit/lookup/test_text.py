"""Tests for lookup text helpers.

Tests cover:
- clip(): bound, marker format, idempotence
- extract_library_id(): matches in resolver prose, non-matches
- looks_like_library_id()
"""

from __future__ import annotations

import pytest

from context7_mcporter.lookup.text import (
    DEFAULT_MAX_CHARS,
    RESOLVER_SUMMARY_MAX_CHARS,
    clip,
    extract_library_id,
    looks_like_library_id,
)

# =============================================================================
# clip()
# =============================================================================


class TestClip:
    """Tests for clip()."""

    def test_defaults(self):
        """Default bounds match the plugin defaults."""
        assert DEFAULT_MAX_CHARS == 40_000
        assert RESOLVER_SUMMARY_MAX_CHARS == 4_000

    @pytest.mark.parametrize("text", ["", "a", "abcde", "hello\nworld"])
    def test_short_text_unchanged(self, text: str):
        """Text at or under the bound is returned as-is."""
        assert clip(text, 11) == text

    def test_exact_length_unchanged(self):
        """Text exactly at the bound is not clipped."""
        assert clip("abcde", 5) == "abcde"

    def test_long_text_is_cut_and_marked(self):
        """Text over the bound keeps N chars plus the marker."""
        assert clip("abcdefgh", 5) == "abcde\n\n[clipped to 5 chars]"

    def test_marker_mentions_bound(self):
        """The marker reports the bound, not the original length."""
        result = clip("x" * 50_000, 40_000)
        assert result.startswith("x" * 40_000)
        assert result.endswith("\n\n[clipped to 40000 chars]")
        assert len(result) == 40_000 + len("\n\n[clipped to 40000 chars]")

    @pytest.mark.parametrize("bound", [1, 3, 10])
    def test_idempotent_at_same_bound(self, bound: int):
        """Clipping clipped output at the same bound changes nothing."""
        once = clip("The quick brown fox jumps over the lazy dog", bound)
        assert clip(once, bound) == once


# =============================================================================
# extract_library_id()
# =============================================================================


class TestExtractLibraryId:
    """Tests for extract_library_id()."""

    def test_context7_resolver_listing(self):
        """Finds the id in a typical resolver listing."""
        text = (
            "Available Libraries (top matches):\n\n"
            "- Title: FastAPI\n"
            "- Context7-compatible library ID: /tiangolo/fastapi\n"
            "- Description: FastAPI framework, high performance\n"
            "----------\n"
            "- Title: FastAPI Users\n"
            "- Context7-compatible library ID: /fastapi-users/fastapi-users\n"
        )
        assert extract_library_id(text) == "/tiangolo/fastapi"

    def test_versioned_id(self):
        """Ids with a version segment are kept whole."""
        assert extract_library_id("Use /vercel/next.js/v14.3.0 here") == "/vercel/next.js/v14.3.0"

    def test_single_segment(self):
        """A single segment after the slash still matches."""
        assert extract_library_id("id: /react") == "/react"

    def test_stops_at_quotes_and_backticks(self):
        """Quotes and backticks delimit the token."""
        assert extract_library_id('libraryId: "/mongodb/docs"') == "/mongodb/docs"
        assert extract_library_id("libraryId: `/tiangolo/fastapi`") == "/tiangolo/fastapi"
        assert extract_library_id("libraryId: '/supabase/supabase'") == "/supabase/supabase"

    def test_stops_at_parentheses(self):
        """A closing parenthesis is not part of the id."""
        text = (
            "Each result includes:\n"
            "- Library ID: Context7-compatible identifier (format: /org/project)\n"
            "- Name: Library or package name\n"
        )
        assert extract_library_id(text) == "/org/project"
        assert extract_library_id("(/tiangolo/fastapi) trust 9") == "/tiangolo/fastapi"

    def test_at_start_of_text(self):
        """A token at the very beginning matches."""
        assert extract_library_id("/org/project") == "/org/project"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "No libraries found matching your query.",
            "Try FastAPI and/or Starlette instead.",
            "See https://context7.com/docs for details",
            "a lone slash / in prose",
        ],
    )
    def test_no_match(self, text: str):
        """Prose without a standalone slash token yields None."""
        assert extract_library_id(text) is None

    def test_filesystem_paths_match(self):
        """Absolute paths in prose are indistinguishable from ids."""
        assert extract_library_id("config at /etc/mcporter.json") == "/etc/mcporter.json"


# =============================================================================
# looks_like_library_id()
# =============================================================================


class TestLooksLikeLibraryId:
    """Tests for looks_like_library_id()."""

    @pytest.mark.parametrize("value", ["/tiangolo/fastapi", "/vercel/next.js/v14", "/"])
    def test_leading_slash(self, value: str):
        assert looks_like_library_id(value) is True

    @pytest.mark.parametrize("value", ["", "FastAPI", "tiangolo/fastapi", " /x"])
    def test_no_leading_slash(self, value: str):
        assert looks_like_library_id(value) is False
