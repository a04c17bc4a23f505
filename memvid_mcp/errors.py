"""
Error types for the memvid MCP server.

Every failure a tool call can hit is a MemvidError. The dispatcher turns
them all into a single "Error: ..." text response; `kind` only shows up in
the logs.
"""


class MemvidError(Exception):
    """Base class for failures reported back to the calling agent."""
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(MemvidError):
    """No memory file could be resolved, or the environment is invalid."""
    kind = "configuration"


class ArgumentError(MemvidError):
    """A tool argument is missing or has the wrong type."""
    kind = "argument"


class SchemaMismatchError(MemvidError):
    """The requested tool is not registered."""
    kind = "unknown_tool"

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ProcessLaunchError(MemvidError):
    """The memvid binary could not be found or started."""
    kind = "launch"


class ProcessExecutionError(MemvidError):
    """memvid ran and exited non-zero."""
    kind = "execution"


class OutputParseError(MemvidError):
    """memvid printed something that is not a JSON object."""
    kind = "parse"


class CliTimeoutError(MemvidError):
    """memvid did not finish within the configured timeout."""
    kind = "timeout"
