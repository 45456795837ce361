import os

from dotenv import find_dotenv, load_dotenv

if not os.environ.get("CONTEXT7_MCPORTER_ENV_LOADED"):
    load_dotenv(find_dotenv(usecwd=True))
    os.environ["CONTEXT7_MCPORTER_ENV_LOADED"] = "1"

from context7_mcporter.bridge import BridgeSettings, BridgeTransport, McporterBridge, run_mcporter
from context7_mcporter.errors import (
    BridgeDecodeError,
    BridgeError,
    BridgeOutputLimitError,
    BridgeProcessError,
    BridgeTimeoutError,
    ConfigurationError,
    Context7Error,
    ValidationError,
)
from context7_mcporter.logging import configure_logging, get_logger
from context7_mcporter.lookup import (
    Context7Lookup,
    LookupRequest,
    ToolResult,
    clip,
    create_context7_tool,
    extract_library_id,
    extract_text,
)
from context7_mcporter.settings import Context7Config

__version__ = "0.1.0"

__all__ = [
    # Lookup
    "Context7Lookup",
    "LookupRequest",
    "ToolResult",
    "create_context7_tool",
    "clip",
    "extract_library_id",
    "extract_text",
    # Config
    "Context7Config",
    # Bridge
    "BridgeSettings",
    "BridgeTransport",
    "McporterBridge",
    "run_mcporter",
    # Errors
    "Context7Error",
    "ConfigurationError",
    "ValidationError",
    "BridgeError",
    "BridgeTimeoutError",
    "BridgeProcessError",
    "BridgeOutputLimitError",
    "BridgeDecodeError",
    # Logging
    "configure_logging",
    "get_logger",
]
