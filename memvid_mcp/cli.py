"""
Async runner for the memvid CLI.

Each call spawns its own process with its own pipes, so concurrent tool
calls never share state. Arguments go straight to exec, never through a
shell.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from .config import MemvidConfig
from .errors import CliTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliResult:
    """Captured outcome of one memvid invocation."""
    success: bool
    stdout: str
    stderr: str
    # False when the binary could not be started at all
    launched: bool = True


class Runner(Protocol):
    """Anything that can execute a memvid argument vector."""

    async def run(self, args: Sequence[str]) -> CliResult:
        ...


class CliRunner:
    """
    Executes the memvid binary named in the configuration.

    A missing or non-executable binary is reported as a failed CliResult
    carrying the OS error message; it is never raised. A non-zero exit is
    likewise just `success=False`.
    """

    def __init__(self, config: MemvidConfig):
        self.cli_path = config.cli_path
        self.timeout = config.timeout

    async def run(self, args: Sequence[str]) -> CliResult:
        """
        Run `memvid <args...>` and capture its output.

        Raises:
            CliTimeoutError: If a timeout is configured and the process outlives it
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                self.cli_path,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.warning(f"Failed to start {self.cli_path}: {e}")
            return CliResult(success=False, stdout="", stderr=str(e), launched=False)

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise CliTimeoutError(f"{self.cli_path} timed out after {self.timeout:g} seconds")
        finally:
            # Timed out or cancelled: never leave the child behind
            if proc.returncode is None:
                await _kill(proc)

        logger.debug(f"{self.cli_path} {args[0] if args else ''} exited with {proc.returncode}")
        return CliResult(
            success=proc.returncode == 0,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )


async def _kill(proc: asyncio.subprocess.Process) -> None:
    try:
        proc.kill()
    except ProcessLookupError:
        # exited on its own between the check and the kill
        pass
    await proc.wait()


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace").strip()
