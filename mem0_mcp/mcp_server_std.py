#!/usr/bin/env python3
"""
Mem0 Memory MCP Server - Standard MCP Protocol Implementation (stdio)

Exposes add-memory, search-memories, get-process-tree and execute-command to
MCP clients such as Claude Desktop or Cursor.

Usage:
    mem0-mcp
    python -m mem0_mcp.mcp_server_std

Configuration:
    MEM0_API_KEY must be set in the environment (or a local .env file).
"""

import sys
import asyncio
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, LoggingLevel, ServerResult, Tool

from . import SERVER_NAME, SERVER_VERSION
from .logging_utils import configure_logging, get_logger, set_level, to_logging_level
from .mcp_handlers import Dispatcher, ToolContext, verify_tool_registry
from .mcp_handlers.utils import result_text
from .server_config import ServerConfig, load_config
from .tool_schemas import get_tool_definitions

logger = get_logger(__name__)


async def safe_log(server: Server, level: LoggingLevel, data: Any) -> None:
    """
    Log to stderr and, inside a request, forward to the client as a
    notifications/message. Forwarding is best effort.
    """
    logger.log(to_logging_level(level), str(data))
    try:
        ctx = server.request_context
    except LookupError:
        return
    try:
        await ctx.session.send_log_message(level=level, data=data, logger=SERVER_NAME)
    except Exception as e:
        logger.debug(f"Could not forward log message to client: {e}")


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server and register its request handlers."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available MCP tools"""
        return get_tool_definitions()

    verify_tool_registry([tool.name for tool in get_tool_definitions()])

    # Registered directly rather than via @server.call_tool(), which replaces
    # absent arguments with {} before the Dispatcher can reject them
    async def call_tool(req: CallToolRequest) -> ServerResult:
        """Handle tool calls from MCP client"""
        name = req.params.name
        result = await dispatcher.dispatch(name, req.params.arguments)
        if result.isError:
            await safe_log(server, "warning", f"{name} failed: {result_text(result)}")
        return ServerResult(result)

    server.request_handlers[CallToolRequest] = call_tool

    @server.set_logging_level()
    async def set_logging_level(level: LoggingLevel) -> None:
        set_level(level)
        logger.info(f"Log level set to {level}")

    return server


async def run_server(config: ServerConfig) -> None:
    """Serve over stdio until the client disconnects."""
    dispatcher = Dispatcher(ToolContext.from_config(config))
    server = build_server(dispatcher)

    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{SERVER_NAME} v{SERVER_VERSION} running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> None:
    """Main entry point for MCP server"""
    config = load_config()
    configure_logging(config.log_level)
    logger.info("Initializing Mem0 Memory MCP Server...")
    if not config.api_key:
        logger.warning("MEM0_API_KEY is not set; memory tools will fail until it is provided")

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.critical(f"Fatal error running server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
