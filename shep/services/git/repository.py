"""Repository location and worktree path resolution."""

import os
from typing import Optional

from shep.exceptions import NotARepositoryError
from shep.logging_config import get_logger
from shep.services.git.runner import CommandRunner

logger = get_logger(__name__)


class RepoLocator:
    """Finds the controlling repository for a runner's directory."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def get_repo_root(self) -> Optional[str]:
        """Return the repository top-level directory, or None outside a repository."""
        result = self.runner.git("rev-parse", "--show-toplevel")
        if not result.ok:
            logger.debug(f"No repository at {self.runner.cwd}")
            return None
        return result.output.strip()

    def is_repository(self) -> bool:
        return self.get_repo_root() is not None

    def get_current_branch(self) -> Optional[str]:
        """Return the checked-out branch, or None when detached or unknown."""
        result = self.runner.git("rev-parse", "--abbrev-ref", "HEAD")
        branch = result.output.strip()
        if not result.ok or not branch or branch == "HEAD":
            return None
        return branch


class PathResolver:
    """Maps branch names to worktree directories under the repository root.

    A worktree "exists" when its directory exists on disk. git's own
    worktree bookkeeping is not consulted.
    """

    def __init__(self, locator: RepoLocator, worktrees_dir: str = ".worktrees"):
        self.locator = locator
        self.worktrees_dir = worktrees_dir

    def worktree_path(self, branch: str) -> str:
        """Return ``<root>/<worktrees_dir>/<branch>``.

        Raises:
            NotARepositoryError: If no repository root can be resolved
        """
        repo_root = self.locator.get_repo_root()
        if repo_root is None:
            raise NotARepositoryError(self.locator.runner.cwd)
        return os.path.join(repo_root, self.worktrees_dir, branch)

    def worktree_exists(self, branch: str) -> bool:
        return os.path.isdir(self.worktree_path(branch))
