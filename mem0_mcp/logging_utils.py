"""
Standardized logging for the mem0-mcp server.

stdout carries MCP protocol frames, so every handler writes to stderr.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "mem0_mcp"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# MCP logging levels (RFC 5424 names) -> stdlib levels
MCP_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "emergency": logging.CRITICAL,
}

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger by module name."""
    return logging.getLogger(name)


def to_logging_level(level: Union[str, int]) -> int:
    """Map an MCP or stdlib level name (or number) to a stdlib level."""
    if isinstance(level, int):
        return level
    key = str(level).strip().lower()
    if key in MCP_LEVELS:
        return MCP_LEVELS[key]
    resolved = logging.getLevelName(key.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once: later calls only change the level.
    """
    global _handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(to_logging_level(level))
    return root


def set_level(level: Union[str, int]) -> None:
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(to_logging_level(level))
