"""
Tests for mem0_mcp/mcp_handlers/validators.py and schemas.py - argument
validation.
"""

import pytest

from mem0_mcp.mcp_handlers.schemas import (
    AddMemoryParams,
    ExecuteCommandParams,
    GetProcessTreeParams,
    SearchMemoriesParams,
)
from mem0_mcp.mcp_handlers.validators import validate_params


class TestValidateParams:

    def test_valid_add_memory(self):
        params, error = validate_params("add-memory", AddMemoryParams, {"content": "c", "userId": "u"})
        assert error is None
        assert params.content == "c"
        assert params.user_id == "u"

    def test_missing_field_named(self):
        params, error = validate_params("search-memories", SearchMemoriesParams, {"userId": "u"})
        assert params is None
        assert error.isError is True
        assert error.content[0].text == "Invalid arguments for search-memories: query: Field required"

    def test_multiple_problems_listed(self):
        _, error = validate_params("add-memory", AddMemoryParams, {})
        text = error.content[0].text
        assert "content: Field required" in text
        assert "userId: Field required" in text

    @pytest.mark.parametrize("value", [42, None, ["ls"], {"cmd": "ls"}, True])
    def test_non_string_rejected(self, value):
        params, error = validate_params("execute-command", ExecuteCommandParams, {"command": value})
        assert params is None
        assert "command" in error.content[0].text

    def test_numeric_string_not_coerced(self):
        params, _ = validate_params("add-memory", AddMemoryParams, {"content": "42", "userId": "7"})
        assert params.content == "42"

    def test_empty_model_accepts_anything(self):
        params, error = validate_params("get-process-tree", GetProcessTreeParams, {"verbose": True})
        assert error is None
        assert isinstance(params, GetProcessTreeParams)

    def test_non_dict_arguments(self):
        params, error = validate_params("execute-command", ExecuteCommandParams, ["echo hi"])
        assert params is None
        assert "must be an object" in error.content[0].text

    def test_error_does_not_leak_internals(self):
        _, error = validate_params("execute-command", ExecuteCommandParams, {"command": 1})
        text = error.content[0].text
        assert "Traceback" not in text
        assert "pydantic" not in text.lower()
