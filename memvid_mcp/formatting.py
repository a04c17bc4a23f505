"""
Turns memvid's JSON output into text for the agent.

memvid prints exactly one JSON object per call: an operation-specific
payload on success, {"error": "..."} on failure. Failures are raised as
MemvidError subclasses; the dispatcher renders them.
"""

import json
import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional

from .cli import CliResult
from .errors import OutputParseError, ProcessExecutionError, ProcessLaunchError
from .tool_requests import ToolRequest

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 100


def parse_output(result: CliResult) -> dict[str, Any]:
    """
    Decode memvid's stdout, raising the matching error for failed runs.

    Raises:
        ProcessLaunchError: The binary never started
        ProcessExecutionError: memvid exited non-zero
        OutputParseError: memvid succeeded but stdout is not a JSON object
    """
    if not result.launched:
        raise ProcessLaunchError(result.stderr or "memvid could not be started")

    data = _load_json(result.stdout)

    if not result.success:
        message = (data or {}).get("error") or result.stderr or "memvid exited with an error"
        raise ProcessExecutionError(str(message))

    if data is None:
        raise OutputParseError(f"Invalid JSON output from memvid: {_excerpt(result.stdout)}")
    return data


def _load_json(text: str) -> Optional[dict[str, Any]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"memvid output is not JSON: {e}")
        return None
    return data if isinstance(data, dict) else None


def _excerpt(text: str, limit: int = 200) -> str:
    if not text:
        return "<empty>"
    return text if len(text) <= limit else text[:limit] + "..."


# === PER-TOOL FORMATTERS ===

def format_remember(data: dict, request: ToolRequest) -> str:
    return f"Stored in frame {data.get('frame_id')}"


def format_recall(data: dict, request: ToolRequest) -> str:
    query = data.get("query", getattr(request, "query", ""))
    text = f'Found {data.get("total_hits", 0)} results for "{query}":\n\n'
    for hit in data.get("hits") or []:
        text += f"**{hit.get('title') or hit.get('uri')}** (frame {hit.get('frame_id')})\n"
        text += f"{hit.get('snippet', '')}\n\n"
    return text


def format_list(data: dict, request: ToolRequest) -> str:
    text = f"Memory contains {data.get('total', 0)} entries:\n\n"
    for entry in data.get("entries") or []:
        label = entry.get("uri") or f"frame-{entry.get('frame_id')}"
        text += f"**{label}** ({iso_timestamp(entry.get('timestamp'))})\n"
        text += f"{(entry.get('preview') or '')[:PREVIEW_CHARS]}...\n\n"
    return text


def format_stats(data: dict, request: ToolRequest) -> str:
    # half-up, so 256 bytes is 0.3 KB
    size_kb = (Decimal(data.get("size_bytes") or 0) / 1024).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return (
        f"Memory: {data.get('path')}\n"
        f"Frames: {data.get('active_frame_count')} active / {data.get('frame_count')} total\n"
        f"Size: {size_kb} KB\n"
        f"Full-text search: {'enabled' if data.get('has_lex_index') else 'disabled'}\n"
        f"Vector search: {'enabled' if data.get('has_vec_index') else 'disabled'}"
    )


def format_create(data: dict, request: ToolRequest) -> str:
    return f"Created memory file: {data.get('path') or request.path}"


FORMATTERS: dict[str, Callable[[dict, ToolRequest], str]] = {
    "memory_remember": format_remember,
    "memory_recall": format_recall,
    "memory_list": format_list,
    "memory_stats": format_stats,
    "memory_create": format_create,
}


def interpret(request: ToolRequest, result: CliResult) -> str:
    """Render a finished memvid call as the response text for `request`."""
    data = parse_output(result)
    return FORMATTERS[request.tool](data, request)


def iso_timestamp(seconds: Any) -> str:
    """Unix seconds -> ISO-8601 UTC with milliseconds, e.g. 2024-01-01T00:00:00.000Z"""
    if seconds is None:
        return "unknown time"
    moment = datetime.fromtimestamp(float(seconds), tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
