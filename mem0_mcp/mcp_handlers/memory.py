"""
Memory tool handlers: add-memory, search-memories.
"""

from mcp.types import CallToolResult

from ..memory_client import format_memories
from ..tool_schemas import ADD_MEMORY, SEARCH_MEMORIES
from .decorators import mcp_tool
from .error_helpers import memory_add_failed_error
from .schemas import AddMemoryParams, SearchMemoriesParams
from .utils import text_response


@mcp_tool(ADD_MEMORY, params=AddMemoryParams)
async def handle_add_memory(context, params: AddMemoryParams) -> CallToolResult:
    """Store a memory for a user."""
    added = await context.memory.add_memory(params.content, params.user_id)
    if not added:
        return memory_add_failed_error()
    return text_response("Memory added successfully")


@mcp_tool(SEARCH_MEMORIES, params=SearchMemoriesParams)
async def handle_search_memories(context, params: SearchMemoriesParams) -> CallToolResult:
    """Search a user's memories. Service failures read as no results."""
    records = await context.memory.search_memories(params.query, params.user_id)
    return text_response(format_memories(records))
