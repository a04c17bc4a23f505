"""
Tool dispatcher for memvid memory.

Every call runs the same three steps: compile the arguments into a memvid
command line, run it, and interpret the JSON it prints. Nothing is kept
between calls apart from the startup configuration.

Usage:
    memory = MemvidMemory(MemvidConfig.from_env())
    text = await memory.dispatch("memory_recall", {"query": "rust lifetimes"})
"""

import logging
from typing import Any, Mapping, Optional

from .cli import CliRunner, Runner
from .config import MemvidConfig
from .errors import MemvidError, SchemaMismatchError
from .formatting import interpret
from .tool_requests import parse_request

__all__ = ["MemvidMemory"]

logger = logging.getLogger(__name__)


class MemvidMemory:
    """
    Stateless gateway from MCP tool calls to the memvid CLI.

    Args:
        config: Startup configuration (default: read from the environment)
        runner: CLI runner (default: CliRunner for `config`)

    dispatch() never raises: unknown tools come back as "Unknown tool: ..."
    and every other failure as "Error: ...".
    """

    def __init__(self, config: Optional[MemvidConfig] = None, runner: Optional[Runner] = None):
        self.config = config if config is not None else MemvidConfig.from_env()
        self.runner = runner if runner is not None else CliRunner(self.config)

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Handle one tool call and return its response text."""
        try:
            request = parse_request(name, arguments)
            args = request.cli_args(self.config)
            logger.debug(f"{name} -> memvid {args[0]} ({len(args) - 1} args)")
            result = await self.runner.run(args)
            return interpret(request, result)
        except SchemaMismatchError as e:
            logger.warning(f"Rejected call to unknown tool {e.tool_name!r}")
            return e.message
        except MemvidError as e:
            logger.warning(f"{name} failed ({e.kind}): {e.message}")
            return f"Error: {e.message}"
        except Exception as e:
            logger.exception(f"Unexpected failure in {name}")
            return f"Error: {e}"
