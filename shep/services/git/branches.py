"""Branch operations service for shep."""

from shep.logging_config import get_logger
from shep.services.git.runner import CommandRunner

logger = get_logger(__name__)


class BranchLifecycle:
    """Service for checking and creating local branches."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def branch_exists(self, name: str) -> bool:
        result = self.runner.git("show-ref", "--verify", "--quiet", f"refs/heads/{name}")
        return result.ok

    def is_valid_branch_name(self, name: str) -> bool:
        """Check a branch name before it reaches any mutating git command.

        Names starting with ``-`` are rejected outright so they can never be
        read as options. ``@{`` is rejected too, since check-ref-format would
        expand ``@{-N}`` to another branch instead of judging the literal name.
        Everything else is judged by ``git check-ref-format``.
        """
        if not name or not name.strip() or name.startswith("-") or "@{" in name:
            return False
        result = self.runner.git("check-ref-format", "--branch", name)
        return result.ok

    def create_branch(self, name: str) -> bool:
        """Create a branch at the current HEAD.

        Returns:
            True if git created the branch
        """
        result = self.runner.git("branch", name)
        if result.ok:
            logger.info(f"Created branch {name}")
        else:
            logger.warning(f"git branch failed (exit {result.exit_code}): {result.output}")
        return result.ok
