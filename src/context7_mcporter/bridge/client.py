"""Subprocess client for the mcporter bridge.

Each call spawns one ``mcporter`` process, waits for it under a hard
timeout and output ceiling, and decodes its stdout as JSON. Any failure is
raised as a BridgeError subclass; there are no retries.

Example:
    ```python
    from context7_mcporter.bridge import McporterBridge

    bridge = McporterBridge("~/.config/mcporter.json")
    response = await bridge.call("resolve-library-id", {"query": "fastapi"})
    ```
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import time
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from context7_mcporter.bridge.types import BridgeSettings, build_call_args
from context7_mcporter.errors import (
    BridgeDecodeError,
    BridgeOutputLimitError,
    BridgeProcessError,
    BridgeTimeoutError,
    ConfigurationError,
)
from context7_mcporter.logging import get_logger
from context7_mcporter.settings import DEFAULT_SERVER_NAME

if TYPE_CHECKING:
    from context7_mcporter.settings import Context7Config

__all__ = ["McporterBridge", "run_mcporter"]

logger = get_logger("bridge")

_READ_CHUNK_SIZE = 64 * 1024
_STDERR_TAIL_CHARS = 2_000
_OUTPUT_HEAD_CHARS = 500
_DRAIN_TIMEOUT = 5.0


# =============================================================================
# Process execution
# =============================================================================


async def _read_bounded(
    stream: asyncio.StreamReader,
    limit: int,
    label: str,
    error_context: dict[str, Any],
) -> bytes:
    """Read a pipe to EOF, failing as soon as it grows past ``limit`` bytes."""
    buf = bytearray()
    while True:
        chunk = await stream.read(_READ_CHUNK_SIZE)
        if not chunk:
            return bytes(buf)
        buf.extend(chunk)
        if len(buf) > limit:
            raise BridgeOutputLimitError(
                f"mcporter {label} exceeded {limit} bytes",
                limit=limit,
                **error_context,
            )


async def _communicate(
    proc: asyncio.subprocess.Process,
    limit: int,
    error_context: dict[str, Any],
) -> tuple[bytes, bytes]:
    assert proc.stdout is not None and proc.stderr is not None
    try:
        async with asyncio.TaskGroup() as tg:
            stdout_task = tg.create_task(_read_bounded(proc.stdout, limit, "stdout", error_context))
            stderr_task = tg.create_task(_read_bounded(proc.stderr, limit, "stderr", error_context))
    except ExceptionGroup as group:
        # The readers only raise BridgeOutputLimitError; report the first overflow.
        raise group.exceptions[0] from None
    await proc.wait()
    return stdout_task.result(), stderr_task.result()


async def _kill_and_drain(proc: asyncio.subprocess.Process) -> None:
    """Kill the child and reap it once its pipes reach EOF.

    A reader that stopped early leaves its pipe transport paused, and the
    process is not reaped until every pipe is closed.
    """
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
    try:
        await asyncio.wait_for(proc.communicate(), timeout=_DRAIN_TIMEOUT)
    except TimeoutError:
        logger.warning("Bridge pipes still open after kill", pid=proc.pid)


async def run_mcporter(
    args: Sequence[str],
    settings: BridgeSettings | None = None,
    *,
    operation: str | None = None,
) -> Any:
    """Run the bridge executable with ``args`` and return its decoded JSON output.

    Args:
        args: Arguments passed to the executable (not through a shell).
        settings: Process contract. Defaults to BridgeSettings().
        operation: Operation name, attached to errors for context.

    Returns:
        The JSON value printed on stdout.

    Raises:
        BridgeTimeoutError: The process ran longer than ``settings.timeout``.
        BridgeOutputLimitError: stdout or stderr exceeded ``settings.max_output_bytes``.
        BridgeProcessError: The process could not start or exited non-zero.
        BridgeDecodeError: stdout was not valid JSON.
    """
    settings = settings or BridgeSettings()
    command = [settings.executable, *args]
    error_context: dict[str, Any] = {"operation": operation, "command": command}
    target = args[1] if len(args) > 1 else settings.executable
    start_time = time.perf_counter()

    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=settings.get_env(),
        )
    except OSError as e:
        logger.warning("Could not start bridge process", executable=settings.executable)
        raise BridgeProcessError(
            f"Could not start {settings.executable}: {e}",
            hint="Install mcporter (npm i -g mcporter) and make sure it is on PATH",
            **error_context,
        ) from e

    finished = False
    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            _communicate(proc, settings.max_output_bytes, error_context),
            timeout=settings.timeout,
        )
        finished = True
    except TimeoutError as e:
        logger.warning("Bridge call timed out", target=target, timeout=settings.timeout)
        raise BridgeTimeoutError(
            f"mcporter call {target} timed out after {settings.timeout} seconds",
            timeout=settings.timeout,
            **error_context,
        ) from e
    except BridgeOutputLimitError:
        logger.warning("Bridge output over limit", target=target)
        raise
    finally:
        # Timeout, output overflow and task cancellation all leave the child unreaped.
        if not finished:
            await _kill_and_drain(proc)

    duration_ms = (time.perf_counter() - start_time) * 1000
    stderr = stderr_bytes.decode(errors="replace").strip()

    if proc.returncode != 0:
        logger.warning(
            "Bridge call failed",
            target=target,
            exit_code=proc.returncode,
            duration_ms=round(duration_ms, 1),
        )
        raise BridgeProcessError(
            f"mcporter call {target} exited with status {proc.returncode}",
            exit_code=proc.returncode,
            stderr=stderr[-_STDERR_TAIL_CHARS:],
            **error_context,
        )

    stdout = stdout_bytes.decode(errors="replace")
    try:
        result = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise BridgeDecodeError(
            f"mcporter call {target} did not print valid JSON: {e.msg}",
            output=stdout[:_OUTPUT_HEAD_CHARS],
            **error_context,
        ) from e

    logger.debug("Bridge call finished", target=target, duration_ms=round(duration_ms, 1))
    return result


# =============================================================================
# Transport
# =============================================================================


class McporterBridge:
    """BridgeTransport that forwards calls to one MCP server through mcporter.

    Args:
        config_path: mcporter config file defining the server.
        server_name: Server name inside that config.
        settings: Process contract for each call.
    """

    def __init__(
        self,
        config_path: str,
        server_name: str = DEFAULT_SERVER_NAME,
        settings: BridgeSettings | None = None,
    ) -> None:
        self.config_path = config_path
        self.server_name = server_name
        self.settings = settings or BridgeSettings()

    @classmethod
    def from_config(
        cls,
        config: Context7Config,
        settings: BridgeSettings | None = None,
    ) -> McporterBridge:
        if not config.mcporter_config_path:
            raise ConfigurationError(
                "mcporterConfigPath is not set",
                config_key="mcporterConfigPath",
            )
        return cls(config.mcporter_config_path, config.server_name, settings)

    async def call(self, operation: str, arguments: Mapping[str, Any]) -> Any:
        """Call ``{server_name}.{operation}`` with ``arguments``."""
        args = build_call_args(self.server_name, operation, self.config_path, arguments)
        return await run_mcporter(args, self.settings, operation=operation)

    def __repr__(self) -> str:
        return f"McporterBridge(server_name={self.server_name!r}, config_path={self.config_path!r})"
