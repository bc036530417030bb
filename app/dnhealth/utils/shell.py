"""Shell execution utilities.

Provides asynchronous subprocess execution with proper error handling.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


async def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a command and return its standard output.

    Standard error is discarded.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for the command.

    Returns:
        CommandResult with stdout and returncode.

    Raises:
        TimeoutError: If command exceeds timeout (the process is killed).
        FileNotFoundError: If command executable is not found.
        OSError: If the command cannot be executed.
    """
    process = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )

    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except TimeoutError:
        process.kill()
        await process.wait()
        raise

    return CommandResult(
        stdout=stdout.decode("utf-8", errors="replace"),
        returncode=process.returncode if process.returncode is not None else -1,
    )


def is_executable_file(path: Path) -> bool:
    """Check if a path is an existing file the current user may execute.

    Args:
        path: Path to check.

    Returns:
        True if path is an executable file, False otherwise.
    """
    return path.is_file() and os.access(path, os.X_OK)
