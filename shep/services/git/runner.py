"""Synchronous external command execution."""

import os
from typing import Optional, Sequence

import git

from shep.models.command import CommandResult
from shep.logging_config import get_logger

logger = get_logger(__name__)

# Exit status reported when the command could not be started at all
COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs external commands as argument vectors and captures their result.

    Output is stdout followed by stderr, not interleaved in the order the
    process wrote them. Never raises for a non-zero exit; callers check
    ``CommandResult.ok``.
    There is no timeout: a hung command blocks the caller.
    """

    def __init__(self, cwd: Optional[str] = None):
        """Initialize the runner.

        Args:
            cwd: Directory git commands are run against (default: current directory)
        """
        self.cwd = os.path.abspath(cwd or os.getcwd())

    def run(self, args: Sequence[str]) -> CommandResult:
        """Execute a command and return merged output and exit status."""
        command = [str(arg) for arg in args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            status, stdout, stderr = git.cmd.Git().execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except git.exc.GitCommandNotFound as e:
            logger.debug(f"Could not start {command[0]}: {e}")
            return CommandResult(output=str(e), exit_code=COMMAND_NOT_FOUND)

        output = "\n".join(part for part in (stdout, stderr) if part)
        if status != 0:
            logger.debug(f"Command exited with {status}: {output}")
        return CommandResult(output=output, exit_code=status)

    def git(self, *args: str) -> CommandResult:
        """Run a git sub-command against this runner's directory."""
        return self.run(["git", "-C", self.cwd, *args])
