"""
memvid MCP Package
Exposes memvid memory files to MCP clients by wrapping the memvid CLI.

Tools:
- memory_remember: store content (memvid put)
- memory_recall: full-text search (memvid search)
- memory_list: chronological browse (memvid timeline)
- memory_stats: file statistics (memvid stats)
- memory_create: create a new memory file (memvid create)

Usage:
    from memvid_mcp import MemvidMemory, MemvidConfig

    memory = MemvidMemory(MemvidConfig(default_path="/data/memory.mv2"))
    text = await memory.dispatch("memory_stats", {})
"""

from .cli import (
    CliResult,
    CliRunner,
)

from .config import (
    MemvidConfig,
    resolve_path,
    configure_logging,
)

from .errors import (
    MemvidError,
    ConfigurationError,
    ArgumentError,
    SchemaMismatchError,
    ProcessLaunchError,
    ProcessExecutionError,
    OutputParseError,
    CliTimeoutError,
)

from .memory import MemvidMemory

from .tools import TOOLS, list_tools

__all__ = [
    # Core
    "MemvidMemory",
    "MemvidConfig",
    "resolve_path",
    "configure_logging",
    "TOOLS",
    "list_tools",
    # CLI
    "CliResult",
    "CliRunner",
    # Errors
    "MemvidError",
    "ConfigurationError",
    "ArgumentError",
    "SchemaMismatchError",
    "ProcessLaunchError",
    "ProcessExecutionError",
    "OutputParseError",
    "CliTimeoutError",
]
