"""
Configuration for the memvid MCP server.

Everything the server needs from its environment is read once, at startup,
into an immutable MemvidConfig which is then handed to the path resolver,
the CLI runner and the dispatcher.

Environment:
    MEMVID_DEFAULT_PATH   Memory file used when a tool call omits 'path'
    MEMVID_CLI_PATH       memvid binary (default: "memvid" from PATH)
    MEMVID_CLI_TIMEOUT    Seconds to wait for one CLI call (default: no limit)
    MEMVID_LOG_LEVEL      Logging level name (default: INFO)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PATH_ENV = "MEMVID_DEFAULT_PATH"
CLI_PATH_ENV = "MEMVID_CLI_PATH"
CLI_TIMEOUT_ENV = "MEMVID_CLI_TIMEOUT"
LOG_LEVEL_ENV = "MEMVID_LOG_LEVEL"

DEFAULT_CLI = "memvid"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class MemvidConfig:
    """Process-wide settings, fixed for the lifetime of the server."""
    default_path: str = ""
    cli_path: str = DEFAULT_CLI
    timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MemvidConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ConfigurationError: If MEMVID_CLI_TIMEOUT is not a non-negative number
        """
        env = os.environ if environ is None else environ
        return cls(
            default_path=env.get(DEFAULT_PATH_ENV, "").strip(),
            cli_path=env.get(CLI_PATH_ENV, "").strip() or DEFAULT_CLI,
            timeout=_parse_timeout(env.get(CLI_TIMEOUT_ENV, "")),
            log_level=(env.get(LOG_LEVEL_ENV, "").strip() or "INFO").upper(),
        )


def _parse_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        seconds = float(raw)
    except ValueError:
        raise ConfigurationError(f"{CLI_TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    if seconds < 0:
        raise ConfigurationError(f"{CLI_TIMEOUT_ENV} must not be negative, got {raw!r}")
    # 0 keeps the unbounded wait
    return seconds or None


def resolve_path(input_path: Optional[str], config: MemvidConfig) -> str:
    """
    Pick the memory file for a tool call.

    An explicit path always wins; otherwise the configured default is used.

    Raises:
        ConfigurationError: If neither is set
    """
    if input_path:
        return input_path
    if config.default_path:
        return config.default_path
    raise ConfigurationError(
        f"No memory file path provided. Set {DEFAULT_PATH_ENV} or provide 'path' parameter."
    )


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to stderr; stdout carries the JSON-RPC stream."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    if isinstance(logging.getLevelName(level), int):
        root.setLevel(level)
    else:
        root.setLevel(logging.INFO)
        logger.warning(f"Unknown log level {level!r}, using INFO")
