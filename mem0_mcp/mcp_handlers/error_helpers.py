"""
Standard error responses for MCP handlers.

Each helper returns a CallToolResult with isError=True and a single
human-readable text block.
"""

from typing import Sequence

from mcp.types import CallToolResult

from .utils import error_response, sanitize_error_message


def missing_arguments_error() -> CallToolResult:
    """The request carried no arguments object at all."""
    return error_response("Error: No arguments provided")


def tool_not_found_error(tool_name: str) -> CallToolResult:
    return error_response(f"Unknown tool: {tool_name}")


def invalid_parameters_error(tool_name: str, problems: Sequence[str]) -> CallToolResult:
    """Required fields missing or of the wrong type."""
    detail = "; ".join(problems) if problems else "invalid input"
    return error_response(f"Invalid arguments for {tool_name}: {detail}")


def system_error(error: BaseException) -> CallToolResult:
    """Last-resort conversion of an exception that escaped a handler."""
    message = sanitize_error_message(error) or type(error).__name__
    return error_response(f"Error: {message}")


def timeout_error(tool_name: str, timeout: float) -> CallToolResult:
    return error_response(f"Error: Tool '{tool_name}' timed out after {timeout:g} seconds")


def command_error(label: str, message: str) -> CallToolResult:
    """A child process exited non-zero or failed to spawn."""
    return error_response(f"Error executing {label}: {message}")


def memory_add_failed_error() -> CallToolResult:
    return error_response("Error adding memory: the memory service rejected the request")
