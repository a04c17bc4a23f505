#!/usr/bin/env python3
"""
MCP Server for memvid memory
Exposes memvid CLI operations as tools for MCP clients.

Setup:
1. Install the memvid CLI and this package:
   pipx install memvid-mcp

2. Add to the client's MCP config:
   {
     "mcpServers": {
       "memvid": {
         "command": "memvid-mcp",
         "env": {"MEMVID_DEFAULT_PATH": "/home/me/.memvid/memory.mv2"}
       }
     }
   }
"""

import asyncio
import logging
import sys
from typing import Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .cli import Runner
from .config import MemvidConfig, configure_logging
from .errors import ConfigurationError
from .memory import MemvidMemory
from .tools import list_tools as registered_tools

SERVER_NAME = "memvid-mcp"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def create_server(config: Optional[MemvidConfig] = None, runner: Optional[Runner] = None) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)
    memory = MemvidMemory(config, runner)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return registered_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        text = await memory.dispatch(name, arguments)
        return [TextContent(type="text", text=text)]

    return server


async def serve(config: MemvidConfig) -> None:
    server = create_server(config)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{SERVER_NAME} server started")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        config = MemvidConfig.from_env()
    except ConfigurationError as e:
        print(f"{SERVER_NAME}: {e.message}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)
    if not config.default_path:
        logger.info("MEMVID_DEFAULT_PATH not set; tools will require a 'path' argument")
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
