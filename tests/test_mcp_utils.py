"""
Tests for mem0_mcp/mcp_handlers/utils.py and error_helpers.py - response
envelope builders.
"""

import pytest
from mcp.types import CallToolResult, ImageContent, TextContent

from mem0_mcp.mcp_handlers.error_helpers import (
    command_error,
    invalid_parameters_error,
    memory_add_failed_error,
    missing_arguments_error,
    system_error,
    timeout_error,
    tool_not_found_error,
)
from mem0_mcp.mcp_handlers.utils import (
    error_response,
    normalize_result,
    result_text,
    sanitize_error_message,
    text_response,
)
from mem0_mcp.server_config import MAX_ERROR_MESSAGE_LENGTH


class TestEnvelope:

    def test_text_response(self):
        result = text_response("hello")
        assert result.isError is False
        assert result.content == [TextContent(type="text", text="hello")]

    def test_error_response(self):
        result = error_response("bad")
        assert result.isError is True
        assert result.content[0].text == "bad"

    def test_result_text_joins_blocks(self):
        result = CallToolResult(
            content=[TextContent(type="text", text="a"), TextContent(type="text", text="b")],
            isError=False,
        )
        assert result_text(result) == "a\nb"


class TestNormalizeResult:

    def test_passthrough(self):
        result = error_response("x")
        assert normalize_result(result) is result

    def test_single_text_content(self):
        result = normalize_result(TextContent(type="text", text="x"))
        assert result.isError is False
        assert result.content[0].text == "x"

    def test_list_of_text_content(self):
        result = normalize_result([TextContent(type="text", text="a"), TextContent(type="text", text="b")])
        assert len(result.content) == 2

    @pytest.mark.parametrize("value", [None, "plain string", {"text": "x"}, 3])
    def test_rejects_other_types(self, value):
        with pytest.raises(TypeError):
            normalize_result(value)

    def test_rejects_non_text_blocks(self):
        with pytest.raises(TypeError):
            normalize_result([ImageContent(type="image", data="AAAA", mimeType="image/png")])


class TestSanitizeErrorMessage:

    def test_strips_source_directories(self):
        message = sanitize_error_message('File "/opt/app/lib/mem0_mcp/secret_module.py", line 42, in run')
        assert "/opt/app" not in message
        assert "secret_module.py" in message
        assert "line 42" not in message

    def test_truncates(self):
        message = sanitize_error_message("x" * (MAX_ERROR_MESSAGE_LENGTH + 100))
        assert len(message) == MAX_ERROR_MESSAGE_LENGTH + 3
        assert message.endswith("...")

    def test_accepts_exceptions(self):
        assert sanitize_error_message(ValueError("boom")) == "boom"


class TestErrorHelpers:

    def test_missing_arguments(self):
        result = missing_arguments_error()
        assert result.isError is True
        assert result.content[0].text == "Error: No arguments provided"

    def test_tool_not_found(self):
        assert tool_not_found_error("frobnicate").content[0].text == "Unknown tool: frobnicate"

    def test_invalid_parameters(self):
        result = invalid_parameters_error("add-memory", ["content: Field required", "userId: Field required"])
        assert result.content[0].text == (
            "Invalid arguments for add-memory: content: Field required; userId: Field required"
        )

    def test_system_error_uses_message(self):
        assert system_error(RuntimeError("boom")).content[0].text == "Error: boom"

    def test_system_error_without_message(self):
        assert system_error(RuntimeError()).content[0].text == "Error: RuntimeError"

    def test_timeout(self):
        assert timeout_error("execute-command", 30.0).content[0].text == (
            "Error: Tool 'execute-command' timed out after 30 seconds"
        )

    def test_command_error(self):
        result = command_error("ps command", "Command failed with exit code 1: ps")
        assert result.content[0].text == "Error executing ps command: Command failed with exit code 1: ps"

    def test_memory_add_failed(self):
        result = memory_add_failed_error()
        assert result.isError is True
        assert result.content[0].text.startswith("Error adding memory")

    def test_all_helpers_set_is_error(self):
        results = [
            missing_arguments_error(),
            tool_not_found_error("x"),
            invalid_parameters_error("x", []),
            system_error(Exception("e")),
            timeout_error("x", 1),
            command_error("command", "m"),
            memory_add_failed_error(),
        ]
        assert all(r.isError for r in results)
