"""
Common utilities for MCP tool handlers.

Every tool call answers with a CallToolResult holding text blocks; these
helpers are the only place that envelope is built.
"""

import re
from typing import Any

from mcp.types import CallToolResult, TextContent

from ..server_config import MAX_ERROR_MESSAGE_LENGTH


def text_response(text: str) -> CallToolResult:
    """Successful result with a single text block."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_response(message: str) -> CallToolResult:
    """Failed result with a single text block."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def sanitize_error_message(message: Any) -> str:
    """
    Trim exception text before it reaches the client.

    Drops directory components of source paths and caps the length. Only
    applied to unexpected exceptions; command output is passed through.
    """
    message = str(message)
    message = re.sub(r'/[^\s"\']+/([^/\s"\']+\.py)', r"\1", message)
    message = re.sub(r'File "([^"]+)", line \d+', r'File "\1"', message)
    if len(message) > MAX_ERROR_MESSAGE_LENGTH:
        message = message[:MAX_ERROR_MESSAGE_LENGTH] + "..."
    return message


def normalize_result(result: Any) -> CallToolResult:
    """
    Coerce a handler return value into a CallToolResult.

    Handlers should return CallToolResult; bare TextContent or a list of
    content blocks is accepted as a success.
    """
    if isinstance(result, CallToolResult):
        return result
    if isinstance(result, TextContent):
        return CallToolResult(content=[result], isError=False)
    if isinstance(result, (list, tuple)) and all(isinstance(block, TextContent) for block in result):
        return CallToolResult(content=list(result), isError=False)
    raise TypeError(f"Handler returned unsupported result type: {type(result).__name__}")


def result_text(result: CallToolResult) -> str:
    """Concatenate the text blocks of a result."""
    return "\n".join(block.text for block in result.content if isinstance(block, TextContent))
