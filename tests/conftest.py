"""
Root conftest.py for context7-mcporter tests.

This file provides:
1. Common pytest markers for test categorization
2. A fake bridge transport that records calls and returns canned JSON
3. Config fixtures and logging isolation
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pytest

from context7_mcporter.logging import ROOT_LOGGER_NAME
from context7_mcporter.settings import ENV_CONFIG_PATH, ENV_MAX_CHARS, ENV_SERVER_NAME, Context7Config

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if "/bridge/" in norm:
            item.add_marker(pytest.mark.bridge)
        if "/lookup/" in norm:
            item.add_marker(pytest.mark.lookup)
        if "/cli/" in norm:
            item.add_marker(pytest.mark.cli)


def pytest_configure(config):
    """Register custom markers."""
    for name, desc in [
        ("bridge", "mcporter subprocess bridge tests"),
        ("lookup", "Resolve/query workflow and tool tests"),
        ("cli", "Command line tests"),
        ("slow", "Slow-running tests"),
    ]:
        config.addinivalue_line("markers", f"{name}: {desc}")


# =============================================================================
# FAKE TRANSPORT
# =============================================================================


def text_response(text: str, **extra: Any) -> dict[str, Any]:
    """Build an mcporter tool envelope holding one text block."""
    return {"content": [{"type": "text", "text": text}], **extra}


class FakeTransport:
    """BridgeTransport stand-in returning canned responses per operation.

    A response that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: Mapping[str, Any] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def call(self, operation: str, arguments: Mapping[str, Any]) -> Any:
        self.calls.append((operation, dict(arguments)))
        response = self.responses[operation]
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def operations(self) -> list[str]:
        return [op for op, _ in self.calls]


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_text_response():
    """Factory for text envelopes."""
    return text_response


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def config() -> Context7Config:
    """A configured Context7Config with default server name and clip bound."""
    return Context7Config(mcporter_config_path="/tmp/mcporter.json")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CONTEXT7_* configuration from the environment."""
    for name in (ENV_CONFIG_PATH, ENV_SERVER_NAME, ENV_MAX_CHARS):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# LOGGING ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog keeps seeing package records."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
