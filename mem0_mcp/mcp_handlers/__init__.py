"""
MCP Tool Handlers

Handler registry pattern for tool dispatch. Each tool handler is a separate
function registered by @mcp_tool; the Dispatcher validates a call, routes it
and guarantees exactly one CallToolResult per request.
"""

from typing import Any, Dict, Optional, Sequence
import asyncio
import difflib
import time

from mcp.types import CallToolResult

# Import handler modules so their decorators register the tools
from . import memory, process  # noqa: F401

from ..logging_utils import get_logger
from .context import ToolContext
from .decorators import (
    ToolDefinition,
    get_tool_definition,
    get_tool_registry,
    get_tool_timeout,
    list_registered_tools,
)
from .error_helpers import missing_arguments_error, system_error, tool_not_found_error
from .utils import normalize_result
from .validators import validate_params

_logger = get_logger(__name__)

# Populated from the decorator registry; read-only once imported
TOOL_HANDLERS: Dict[str, ToolDefinition] = get_tool_registry()


class Dispatcher:
    """
    Routes tool calls to their handlers.

    Failures of any kind (no arguments, unknown tool, bad fields, handler
    errors, exceptions) come back as a CallToolResult with isError=True;
    nothing but cancellation propagates out of dispatch().
    """

    def __init__(self, context: ToolContext, handlers: Optional[Dict[str, ToolDefinition]] = None):
        self.context = context
        self.handlers = dict(TOOL_HANDLERS if handlers is None else handlers)

    @property
    def tool_names(self) -> list[str]:
        return list(self.handlers)

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        start_time = time.monotonic()
        try:
            result = normalize_result(await self._dispatch(name, arguments))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            _logger.error(f"Tool '{name}' raised: {e}", exc_info=True)
            result = system_error(e)
        _logger.debug(
            f"Tool '{name}' finished in {time.monotonic() - start_time:.3f}s (isError={result.isError})"
        )
        return result

    async def _dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        if arguments is None:
            return missing_arguments_error()

        definition = self.handlers.get(name)
        if definition is None:
            similar = difflib.get_close_matches(str(name), self.tool_names, n=3, cutoff=0.4)
            _logger.warning(f"Unknown tool requested: {name!r} (similar: {similar or 'none'})")
            return tool_not_found_error(name)

        params, validation_error = validate_params(name, definition.params, arguments)
        if validation_error is not None:
            return validation_error

        return await definition.handler(self.context, params)


def verify_tool_registry(advertised: Sequence[str]) -> None:
    """
    Check at startup that every advertised tool has a handler and vice versa.

    Raises RuntimeError naming the tools on either side of a mismatch.
    """
    registered = list_registered_tools()
    missing = [name for name in advertised if name not in registered]
    unadvertised = [name for name in registered if name not in advertised]
    if missing or unadvertised:
        raise RuntimeError(
            f"Tool registry mismatch: no handler for {missing or 'none'}, "
            f"not advertised: {unadvertised or 'none'}"
        )
    for name in registered:
        definition = get_tool_definition(name)
        timeout = get_tool_timeout(name)
        _logger.debug(
            f"Registered tool '{name}': {definition.description or 'no description'} "
            f"(timeout: {f'{timeout}s' if timeout is not None else 'server default'})"
        )


__all__ = ["Dispatcher", "ToolContext", "TOOL_HANDLERS", "verify_tool_registry"]
