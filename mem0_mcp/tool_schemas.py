"""
Tool Schema Definitions

Single source of truth for the MCP tool descriptors advertised by list_tools.
The tuple is built once at import and never mutated; order is registration
order.
"""

from mcp.types import Tool

DEFAULT_USER_ID = "mem0-mcp-user"

ADD_MEMORY = "add-memory"
SEARCH_MEMORIES = "search-memories"
GET_PROCESS_TREE = "get-process-tree"
EXECUTE_COMMAND = "execute-command"

_USER_ID_PROPERTY = {
    "type": "string",
    "description": (
        "User ID for memory storage. If not provided explicitly, "
        f"use a generic user ID like, '{DEFAULT_USER_ID}'"
    ),
}

_TOOL_DEFINITIONS = (
    Tool(
        name=ADD_MEMORY,
        description=(
            "Add a new memory. This method is called everytime the user informs anything about "
            "themselves, their preferences, or anything that has any relevant information which "
            "can be useful in the future conversation. This can also be called when the user "
            "asks you to remember something."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "The content to store in memory",
                },
                "userId": _USER_ID_PROPERTY,
            },
            "required": ["content", "userId"],
        },
    ),
    Tool(
        name=SEARCH_MEMORIES,
        description="Search through stored memories. This method is called ANYTIME the user asks anything.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": (
                        "The search query. This is the query that the user has asked for. "
                        "Example: 'What did I tell you about the weather last week?' or "
                        "'What did I tell you about my friend John?'"
                    ),
                },
                "userId": _USER_ID_PROPERTY,
            },
            "required": ["query", "userId"],
        },
    ),
    Tool(
        name=GET_PROCESS_TREE,
        description=(
            "Get the current process tree from the environment. This is similar to running "
            "`ps -eaf --forest` in a Linux environment."
        ),
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
    Tool(
        name=EXECUTE_COMMAND,
        description=(
            "Execute a shell command and return the output. The command is passed to "
            "`sh -c` verbatim; no sandboxing is applied."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "command": {
                    "type": "string",
                    "description": "The command to execute",
                },
            },
            "required": ["command"],
        },
    ),
)

TOOL_NAMES = tuple(tool.name for tool in _TOOL_DEFINITIONS)


def get_tool_definitions() -> list[Tool]:
    """Get MCP tool definitions in registration order."""
    return list(_TOOL_DEFINITIONS)
