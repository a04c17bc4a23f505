"""
Typed tool requests and their memvid command lines.

parse_request() is the only place raw MCP arguments are inspected. It
validates the argument bag once and returns one frozen dataclass per tool,
so compiling the CLI arguments never has to re-check what is present.

Command lines (the binary itself is prepended by the runner):
    memory_remember -> put <path> [--content S] [--uri S] [--title S] [-t TAG]...
    memory_recall   -> search <path> <query> [--scope S] [--limit N]
    memory_list     -> timeline <path> [--limit N] [--since N] [--until N]
    memory_stats    -> stats <path>
    memory_create   -> create <path>
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .config import MemvidConfig, resolve_path
from .errors import ArgumentError, SchemaMismatchError

Number = Union[int, float]


@dataclass(frozen=True)
class RememberRequest:
    content: str
    path: Optional[str] = None
    uri: Optional[str] = None
    title: Optional[str] = None
    tags: tuple[str, ...] = ()

    tool = "memory_remember"

    def cli_args(self, config: MemvidConfig) -> list[str]:
        args = ["put", resolve_path(self.path, config), "--content", self.content]
        if self.uri:
            args += ["--uri", self.uri]
        if self.title:
            args += ["--title", self.title]
        for tag in self.tags:
            args += ["-t", tag]
        return args


@dataclass(frozen=True)
class RecallRequest:
    query: str
    path: Optional[str] = None
    scope: Optional[str] = None
    limit: Optional[Number] = None

    tool = "memory_recall"

    def cli_args(self, config: MemvidConfig) -> list[str]:
        args = ["search", resolve_path(self.path, config), self.query]
        if self.scope:
            args += ["--scope", self.scope]
        if self.limit is not None:
            args += ["--limit", str(self.limit)]
        return args


@dataclass(frozen=True)
class ListRequest:
    path: Optional[str] = None
    limit: Optional[Number] = None
    since: Optional[Number] = None
    until: Optional[Number] = None

    tool = "memory_list"

    def cli_args(self, config: MemvidConfig) -> list[str]:
        args = ["timeline", resolve_path(self.path, config)]
        for flag, value in (("--limit", self.limit), ("--since", self.since), ("--until", self.until)):
            if value is not None:
                args += [flag, str(value)]
        return args


@dataclass(frozen=True)
class StatsRequest:
    path: Optional[str] = None

    tool = "memory_stats"

    def cli_args(self, config: MemvidConfig) -> list[str]:
        return ["stats", resolve_path(self.path, config)]


@dataclass(frozen=True)
class CreateRequest:
    # Never falls back to MEMVID_DEFAULT_PATH: creating a file needs an explicit target
    path: str

    tool = "memory_create"

    def cli_args(self, config: MemvidConfig) -> list[str]:
        return ["create", self.path]


ToolRequest = Union[RememberRequest, RecallRequest, ListRequest, StatsRequest, CreateRequest]


def parse_request(name: str, arguments: Optional[Mapping[str, Any]]) -> ToolRequest:
    """
    Validate raw tool arguments into a typed request.

    Raises:
        SchemaMismatchError: If `name` is not a registered tool
        ArgumentError: If a required field is missing or a field has the wrong type
    """
    if arguments is None:
        arguments = {}
    elif not isinstance(arguments, Mapping):
        raise ArgumentError("arguments must be an object")

    if name == "memory_remember":
        return RememberRequest(
            content=_required_string(arguments, "content"),
            path=_string(arguments, "path"),
            uri=_string(arguments, "uri"),
            title=_string(arguments, "title"),
            tags=_string_list(arguments, "tags"),
        )
    elif name == "memory_recall":
        return RecallRequest(
            query=_required_string(arguments, "query"),
            path=_string(arguments, "path"),
            scope=_string(arguments, "scope"),
            limit=_number(arguments, "limit"),
        )
    elif name == "memory_list":
        return ListRequest(
            path=_string(arguments, "path"),
            limit=_number(arguments, "limit"),
            since=_number(arguments, "since"),
            until=_number(arguments, "until"),
        )
    elif name == "memory_stats":
        return StatsRequest(path=_string(arguments, "path"))
    elif name == "memory_create":
        return CreateRequest(path=_required_string(arguments, "path"))

    raise SchemaMismatchError(name)


# === FIELD COERCION ===

def _string(arguments: Mapping[str, Any], field: str) -> Optional[str]:
    """Empty strings count as absent."""
    value = arguments.get(field)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ArgumentError(f"{field} must be a string")
    return value


def _required_string(arguments: Mapping[str, Any], field: str) -> str:
    value = _string(arguments, field)
    if value is None:
        raise ArgumentError(f"{field} is required")
    return value


def _number(arguments: Mapping[str, Any], field: str) -> Optional[Number]:
    value = arguments.get(field)
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentError(f"{field} must be a number")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _string_list(arguments: Mapping[str, Any], field: str) -> tuple[str, ...]:
    value = arguments.get(field)
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ArgumentError(f"{field} must be an array of strings")
    return tuple(value)
