"""
Parameter validation for tool calls.

Runs the handler's pydantic model over the raw arguments and turns a
ValidationError into a readable per-field error response.
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from mcp.types import CallToolResult
from pydantic import BaseModel, ValidationError

from .error_helpers import invalid_parameters_error


def describe_validation_error(error: ValidationError) -> List[str]:
    """One line per failing field, e.g. "userId: Field required"."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
        problems.append(f"{location}: {item.get('msg', 'invalid value')}")
    return problems


def validate_params(
    tool_name: str,
    model: Type[BaseModel],
    arguments: Dict[str, Any],
) -> Tuple[Optional[BaseModel], Optional[CallToolResult]]:
    """
    Validate arguments against model.

    Returns:
        (params, None) on success, (None, error_response) on failure.
    """
    if not isinstance(arguments, dict):
        return None, invalid_parameters_error(
            tool_name, [f"arguments must be an object, got {type(arguments).__name__}"]
        )
    try:
        return model.model_validate(arguments), None
    except ValidationError as e:
        return None, invalid_parameters_error(tool_name, describe_validation_error(e))
