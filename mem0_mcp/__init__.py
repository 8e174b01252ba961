"""
mem0-mcp: MCP stdio server exposing Mem0 memory tools and shell execution.
"""

SERVER_NAME = "mem0-mcp"
SERVER_VERSION = "0.0.1"

__version__ = SERVER_VERSION
