"""
Server Configuration

Environment-driven settings for the mem0-mcp server. A local .env file is
loaded first; variables already present in the environment take precedence.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .logging_utils import get_logger

logger = get_logger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PS_TREE_PATH = PACKAGE_DIR / "bin" / "ps-tree"

# Length cap for exception text echoed back to the client
MAX_ERROR_MESSAGE_LENGTH = 500


@dataclass(frozen=True)
class ServerConfig:
    """Settings resolved once at startup."""
    api_key: str = ""
    log_level: str = "INFO"
    tool_timeout: Optional[float] = None  # None = no deadline
    ps_tree_path: Path = field(default=DEFAULT_PS_TREE_PATH)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring MEM0_MCP_TOOL_TIMEOUT={raw!r}: not a number")
        return None
    if value <= 0:
        logger.warning(f"Ignoring MEM0_MCP_TOOL_TIMEOUT={raw!r}: must be positive")
        return None
    return value


def load_config(environ: Optional[Mapping[str, str]] = None, use_dotenv: bool = True) -> ServerConfig:
    """
    Build a ServerConfig from the process environment.

    MEM0_API_KEY is not validated here; requests fail at the service boundary
    if it is missing.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ

    ps_tree = environ.get("MEM0_MCP_PS_TREE", "").strip()

    return ServerConfig(
        api_key=environ.get("MEM0_API_KEY", ""),
        log_level=environ.get("MEM0_MCP_LOG_LEVEL", "INFO").strip() or "INFO",
        tool_timeout=_parse_timeout(environ.get("MEM0_MCP_TOOL_TIMEOUT")),
        ps_tree_path=Path(ps_tree) if ps_tree else DEFAULT_PS_TREE_PATH,
    )
