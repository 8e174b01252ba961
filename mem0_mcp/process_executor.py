"""
Process Executor

Runs the bundled ps-tree helper or a caller-supplied shell command as a child
process and captures stdout, stderr and the exit outcome.

execute-command is a raw shell capability for a trusted caller: the command
string goes to `sh -c` unmodified and shell metacharacters are interpreted by
the shell. No sandboxing, quoting or filtering is applied.
"""

import asyncio
import os
import signal
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .logging_utils import get_logger
from .server_config import DEFAULT_PS_TREE_PATH

logger = get_logger(__name__)

SHELL = "/bin/sh"


class CommandError(Exception):
    """A child process exited non-zero or could not be spawned."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


@dataclass
class ProcessResult:
    stdout: str = ""
    stderr: str = ""
    exit_error: Optional[CommandError] = None
    returncode: Optional[int] = None

    @property
    def failed(self) -> bool:
        return self.exit_error is not None


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    # The child leads its own session, so its pid is also the group id
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        return
    logger.info(f"Killed process group {proc.pid}")


def _failure_message(returncode: int, display: str, stderr: str) -> str:
    if returncode < 0:
        message = f"Command terminated by signal {-returncode}: {display}"
    else:
        message = f"Command failed with exit code {returncode}: {display}"
    if stderr.strip():
        message += f"\n{stderr.strip()}"
    return message


class ProcessExecutor:
    """Spawns shell children and collects their output."""

    def __init__(self, ps_tree_path: Path = DEFAULT_PS_TREE_PATH, shell: str = SHELL):
        self.ps_tree_path = Path(ps_tree_path)
        self.shell = shell

    async def run(self, argv: Sequence[str], display: str) -> ProcessResult:
        """
        Run argv to completion.

        Spawn failures and non-zero exits are reported through
        ProcessResult.exit_error, never raised. If the awaiting task is
        cancelled the child and anything it started are killed before the
        cancellation propagates.
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            logger.error(f"Failed to spawn {display!r}: {e}")
            return ProcessResult(exit_error=CommandError(str(e)))

        try:
            out, err = await proc.communicate()
        except asyncio.CancelledError:
            _kill_process_group(proc)
            if proc.returncode is None:
                await proc.wait()
            raise

        stdout, stderr = _decode(out), _decode(err)
        if proc.returncode != 0:
            return ProcessResult(
                stdout=stdout,
                stderr=stderr,
                exit_error=CommandError(_failure_message(proc.returncode, display, stderr), proc.returncode),
                returncode=proc.returncode,
            )
        return ProcessResult(stdout=stdout, stderr=stderr, returncode=proc.returncode)

    async def run_shell_command(self, command: str) -> ProcessResult:
        """Run `command` through `sh -c` exactly as given."""
        return await self.run([self.shell, "-c", "--", command], display=command)

    async def run_fixed_diagnostic(self) -> ProcessResult:
        """Run the ps-tree helper shipped next to this module."""
        return await self.run([self.shell, str(self.ps_tree_path)], display=str(self.ps_tree_path))
