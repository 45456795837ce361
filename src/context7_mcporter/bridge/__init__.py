"""mcporter command bridge.

- **run_mcporter**: run the bridge executable and decode its JSON output
- **McporterBridge**: ``call(operation, arguments)`` transport bound to one server
- **BridgeTransport**: protocol the lookup orchestrator depends on
- **BridgeSettings**: timeout, output ceiling and executable
"""

from context7_mcporter.bridge.client import McporterBridge, run_mcporter
from context7_mcporter.bridge.types import (
    DEFAULT_EXECUTABLE,
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_TIMEOUT,
    BridgeSettings,
    BridgeTransport,
    build_call_args,
)

__all__ = [
    "BridgeSettings",
    "BridgeTransport",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_MAX_OUTPUT_BYTES",
    "DEFAULT_TIMEOUT",
    "McporterBridge",
    "build_call_args",
    "run_mcporter",
]
