"""Tool definitions advertised to the agent on list_tools."""

from mcp.types import Tool

PATH_DESCRIPTION = "Path to memory file (.mv2). Uses MEMVID_DEFAULT_PATH if not provided."

TOOLS = [
    Tool(
        name="memory_remember",
        description=(
            "Store knowledge in memory. Use this to save insights, solutions, or "
            "information for later recall. Content is indexed for full-text search."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": PATH_DESCRIPTION},
                "content": {"type": "string", "description": "The knowledge to store"},
                "uri": {
                    "type": "string",
                    "description": "Hierarchical identifier (e.g., mv2://topics/rust, mv2://projects/satori)",
                },
                "title": {"type": "string", "description": "Short title for the content"},
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Tags for categorization",
                },
            },
            "required": ["content"],
        },
    ),
    Tool(
        name="memory_recall",
        description=(
            "Search memory for relevant knowledge. Returns matching content with "
            "snippets. Use scope to filter by URI prefix."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": PATH_DESCRIPTION},
                "query": {"type": "string", "description": "Search query"},
                "scope": {"type": "string", "description": "URI prefix filter (e.g., mv2://topics/)"},
                "limit": {"type": "number", "description": "Maximum results (default: 10)"},
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="memory_list",
        description=(
            "Browse memory chronologically. Returns recent entries with previews. "
            "Use to see what knowledge is stored."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": PATH_DESCRIPTION},
                "limit": {"type": "number", "description": "Maximum entries (default: 20)"},
                "since": {"type": "number", "description": "Unix timestamp - entries after this time"},
                "until": {"type": "number", "description": "Unix timestamp - entries before this time"},
            },
        },
    ),
    Tool(
        name="memory_stats",
        description="Get statistics about the memory file. Shows frame count, size, and index status.",
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": PATH_DESCRIPTION},
            },
        },
    ),
    Tool(
        name="memory_create",
        description=(
            "Create a new memory file. Only needed if starting fresh - "
            "memory_remember auto-creates if file doesn't exist."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "Path to create the memory file (.mv2)"},
            },
            "required": ["path"],
        },
    ),
]


def list_tools() -> list[Tool]:
    """Return the registry in its fixed order."""
    return list(TOOLS)
