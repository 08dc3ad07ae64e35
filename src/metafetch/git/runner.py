"""Subprocess execution for git commands."""
import logging
import subprocess
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Captured output and exit status of one command."""

    output: str
    success: bool


def run_command(
    args: List[str],
    silent: bool = False,
    cwd: Optional[Union[str, Path]] = None,
) -> CommandResult:
    """Run a command without a shell and capture its output.

    Any callable with this signature can stand in for it, which is how the
    fetchers are exercised without network access.

    Args:
        args: Argument vector, e.g. ["git", "show", "HEAD:metadata.json"]
        silent: Discard stdout and return only stderr
        cwd: Working directory for the command

    Returns:
        CommandResult with the decoded output and whether the exit status was 0
    """
    logger.debug(f"Running {' '.join(args)}")
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.DEVNULL if silent else subprocess.PIPE,
            stderr=subprocess.PIPE if silent else subprocess.STDOUT,
        )
    except OSError as e:
        return CommandResult(str(e), False)

    captured = result.stderr if silent else result.stdout
    output = (captured or b"").decode("utf-8", errors="replace")
    return CommandResult(output, result.returncode == 0)
