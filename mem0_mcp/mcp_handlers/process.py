"""
Process tool handlers: get-process-tree, execute-command.

Exit status is the only failure signal. Output on stderr from a command that
exits 0 is returned alongside stdout, not treated as an error.
"""

from mcp.types import CallToolResult

from ..logging_utils import get_logger
from ..process_executor import ProcessResult
from ..tool_schemas import EXECUTE_COMMAND, GET_PROCESS_TREE
from .decorators import mcp_tool
from .error_helpers import command_error
from .schemas import ExecuteCommandParams, GetProcessTreeParams
from .utils import text_response

logger = get_logger(__name__)

PS_COMMAND_LABEL = "ps command"
SHELL_COMMAND_LABEL = "command"


def process_response(result: ProcessResult, label: str) -> CallToolResult:
    """Map a finished child process onto the response envelope."""
    if result.exit_error is not None:
        logger.error(f"Error executing {label}: {result.exit_error}")
        return command_error(label, str(result.exit_error))
    if result.stderr:
        logger.warning(f"{label} stderr: {result.stderr.rstrip()}")
        return text_response(f"Output:\n{result.stdout}\nStderr:\n{result.stderr}")
    return text_response(result.stdout)


@mcp_tool(GET_PROCESS_TREE, params=GetProcessTreeParams)
async def handle_get_process_tree(context, params: GetProcessTreeParams) -> CallToolResult:
    """Forest-style listing of running processes."""
    result = await context.processes.run_fixed_diagnostic()
    return process_response(result, PS_COMMAND_LABEL)


@mcp_tool(EXECUTE_COMMAND, params=ExecuteCommandParams)
async def handle_execute_command(context, params: ExecuteCommandParams) -> CallToolResult:
    """Run a shell command verbatim (trusted caller, no sandbox)."""
    result = await context.processes.run_shell_command(params.command)
    return process_response(result, SHELL_COMMAND_LABEL)
