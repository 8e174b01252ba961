"""
Tool context passed to every handler.

Built once at startup and handed to the Dispatcher, so handlers never reach
for module-level clients.
"""

from dataclasses import dataclass, field

from ..memory_client import MemoryAdapter
from ..process_executor import ProcessExecutor
from ..server_config import ServerConfig


@dataclass(frozen=True)
class ToolContext:
    memory: MemoryAdapter
    processes: ProcessExecutor
    config: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_config(cls, config: ServerConfig) -> "ToolContext":
        return cls(
            memory=MemoryAdapter(api_key=config.api_key),
            processes=ProcessExecutor(ps_tree_path=config.ps_tree_path),
            config=config,
        )
