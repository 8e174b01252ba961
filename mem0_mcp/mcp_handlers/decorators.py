"""
MCP Tool Decorators - Auto-registration and utilities

@mcp_tool records each handler in a module-level table at import time. The
table is only read after startup.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type
from functools import wraps
import asyncio
import time

from mcp.types import CallToolResult
from pydantic import BaseModel

from ..logging_utils import get_logger
from .error_helpers import timeout_error
from .schemas import ToolParams
from .utils import normalize_result

logger = get_logger(__name__)


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool handler and its metadata."""
    name: str
    handler: Callable
    params: Type[BaseModel] = ToolParams
    timeout: Optional[float] = None
    description: str = ""


_TOOL_DEFINITIONS: Dict[str, ToolDefinition] = {}


def mcp_tool(
    name: Optional[str] = None,
    params: Type[BaseModel] = ToolParams,
    timeout: Optional[float] = None,
    description: Optional[str] = None,
):
    """
    Decorator for MCP tool handlers with auto-registration.

    The wrapped handler is called as ``handler(context, params)`` where
    params is an instance of the ``params`` model. It always returns a
    CallToolResult.

    Deadlines are opt-in: ``timeout`` here, or ServerConfig.tool_timeout
    for every tool. With neither set the handler runs until it finishes.

    Usage:
        @mcp_tool("execute-command", params=ExecuteCommandParams)
        async def handle_execute_command(context, params) -> CallToolResult:
            ...

    Args:
        name: Tool name (defaults to the function name without 'handle_',
            underscores turned into dashes)
        params: pydantic model validating the call arguments
        timeout: Deadline in seconds, overriding the server-wide setting
        description: Defaults to the first docstring line
    """
    def decorator(func: Callable) -> Callable:
        tool_name = name or func.__name__.replace("handle_", "", 1).replace("_", "-")
        tool_description = description or (func.__doc__ and func.__doc__.strip().split("\n")[0].strip()) or ""

        @wraps(func)
        async def wrapper(context: Any, call_params: BaseModel) -> CallToolResult:
            deadline = timeout if timeout is not None else getattr(context.config, "tool_timeout", None)
            start_time = time.monotonic()
            if deadline is None:
                result = await func(context, call_params)
            else:
                try:
                    result = await asyncio.wait_for(func(context, call_params), timeout=deadline)
                except asyncio.TimeoutError:
                    logger.warning(f"Tool '{tool_name}' timed out after {deadline}s")
                    return timeout_error(tool_name, deadline)
                elapsed = time.monotonic() - start_time
                if elapsed > deadline * 0.8:
                    logger.warning(
                        f"Tool '{tool_name}' took {elapsed:.2f}s "
                        f"({elapsed / deadline * 100:.1f}% of {deadline}s timeout)"
                    )
            return normalize_result(result)

        _TOOL_DEFINITIONS[tool_name] = ToolDefinition(
            name=tool_name,
            handler=wrapper,
            params=params,
            timeout=timeout,
            description=tool_description,
        )
        return wrapper
    return decorator


def get_tool_registry() -> Dict[str, ToolDefinition]:
    """Snapshot of registered tools, in registration order."""
    return dict(_TOOL_DEFINITIONS)


def get_tool_definition(tool_name: str) -> Optional[ToolDefinition]:
    return _TOOL_DEFINITIONS.get(tool_name)


def get_tool_timeout(tool_name: str) -> Optional[float]:
    """Per-tool deadline, or None when the tool defers to the server setting."""
    td = _TOOL_DEFINITIONS.get(tool_name)
    return td.timeout if td else None


def list_registered_tools() -> list[str]:
    return list(_TOOL_DEFINITIONS)
