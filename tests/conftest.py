"""
Pytest configuration and fixtures for mem0-mcp tests.
"""
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mem0_mcp.mcp_handlers import Dispatcher, ToolContext
from mem0_mcp.memory_client import MemoryAdapter
from mem0_mcp.process_executor import ProcessExecutor
from mem0_mcp.server_config import ServerConfig


@pytest.fixture
def mem0_client():
    """
    Stand-in for mem0.AsyncMemoryClient.

    add() succeeds and search() finds nothing unless a test says otherwise.
    """
    client = AsyncMock()
    client.add.return_value = {"results": []}
    client.search.return_value = []
    return client


@pytest.fixture
def ps_tree_script(tmp_path):
    """A ps-tree replacement that does not depend on procps being installed."""
    script = tmp_path / "ps-tree"
    script.write_text("#!/bin/sh\necho 'UID PID PPID CMD'\necho 'root 1 0 init'\n")
    return script


@pytest.fixture
def server_config(ps_tree_script):
    return ServerConfig(api_key="test-key", ps_tree_path=ps_tree_script)


@pytest.fixture
def tool_context(mem0_client, server_config):
    return ToolContext(
        memory=MemoryAdapter(client=mem0_client),
        processes=ProcessExecutor(ps_tree_path=server_config.ps_tree_path),
        config=server_config,
    )


@pytest.fixture
def dispatcher(tool_context):
    return Dispatcher(tool_context)
