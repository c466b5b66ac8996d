"""Core functionality for shep"""

import os
from contextlib import contextmanager
from typing import Callable, List, Optional, Union

from shep.config import Config
from shep.exceptions import (
    BranchCreationError,
    InvalidBranchNameError,
    NotARepositoryError,
    UserAbort,
    WorktreeAlreadyExistsError,
    WorktreeCreationError,
    WorktreeListError,
    WorktreeNotFoundError,
    WorktreeRemovalError,
)
from shep.logging_config import get_logger
from shep.models.worktree import Worktree
from shep.services.environment_service import EnvironmentBootstrapper
from shep.services.git import (
    BranchLifecycle,
    CommandRunner,
    PathResolver,
    RepoLocator,
    WorktreeCatalog,
    WorktreeLifecycle,
)

logger = get_logger(__name__)

# confirm(prompt, default) -> bool
ConfirmCallback = Callable[[str, bool], bool]


class ProgressReporter:
    """Receives progress notifications from long-running steps.

    The default implementation only logs; front ends override it to show
    spinners or messages.
    """

    @contextmanager
    def step(self, message: str):
        logger.info(message)
        yield

    def warn(self, message: str) -> None:
        logger.warning(message)


class Shep:
    """Main class for managing branch worktrees of one repository."""

    def __init__(
        self,
        start_dir: str,
        config: Union[Config, dict, None] = None,
        runner: Optional[CommandRunner] = None,
        progress: Optional[ProgressReporter] = None,
        confirm: Optional[ConfirmCallback] = None,
    ):
        """Initialize Shep.

        Args:
            start_dir: Directory used to locate the repository
            config: Configuration dict or Config object
            runner: Command runner (default: one rooted at start_dir)
            progress: Progress hook for long-running steps
            confirm: Confirmation callback; without one every prompt takes
                its default answer
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config or Config()

        self.start_dir = start_dir
        self.runner = runner or CommandRunner(start_dir)
        self.progress = progress or ProgressReporter()
        self._confirm = confirm

        self.locator = RepoLocator(self.runner)
        self.paths = PathResolver(self.locator, self.config.worktrees_dir)
        self.branches = BranchLifecycle(self.runner)
        self.catalog = WorktreeCatalog(self.runner)
        self.worktrees = WorktreeLifecycle(self.runner, self.paths)
        self.bootstrapper = EnvironmentBootstrapper(self.paths, self.config)

    def confirm(self, prompt: str, default: bool) -> bool:
        if self.config.assume_yes:
            return True
        if self._confirm is None:
            return default
        return self._confirm(prompt, default)

    def ensure_repository(self) -> str:
        """Return the repository root.

        Raises:
            NotARepositoryError: If start_dir is not inside a repository
        """
        repo_root = self.locator.get_repo_root()
        if repo_root is None:
            raise NotARepositoryError()
        return repo_root

    def new_worktree(self, branch: str) -> str:
        """Create a worktree for ``branch`` and provision its environment.

        The branch is created first when it does not exist yet (after
        confirmation). Environment problems are reported as warnings and
        never undo the created worktree.

        Returns:
            The worktree path
        """
        self.ensure_repository()

        if not self.branches.is_valid_branch_name(branch):
            raise InvalidBranchNameError(branch)

        if self.paths.worktree_exists(branch):
            raise WorktreeAlreadyExistsError(branch)

        if not self.branches.branch_exists(branch):
            if not self.confirm(f"Branch '{branch}' does not exist. Create it?", True):
                raise UserAbort()
            with self.progress.step(f"Creating branch '{branch}'..."):
                created = self.branches.create_branch(branch)
            if not created:
                raise BranchCreationError(branch)

        with self.progress.step(f"Creating worktree for '{branch}'..."):
            created = self.worktrees.create_worktree(branch)
        if not created:
            raise WorktreeCreationError(branch)

        with self.progress.step("Setting up environment..."):
            provisioned = self.bootstrapper.setup(branch)
        if not provisioned:
            self.progress.warn(f"Environment setup for '{branch}' did not complete.")

        return self.paths.worktree_path(branch)

    def remove_worktree(self, branch: str) -> str:
        """Remove the worktree of ``branch`` after confirmation.

        Returns:
            The path that was removed
        """
        self.ensure_repository()

        if not self.paths.worktree_exists(branch):
            raise WorktreeNotFoundError(branch)

        worktree_path = self.paths.worktree_path(branch)
        if not self.confirm(f"Remove worktree at '{worktree_path}'?", False):
            raise UserAbort()

        with self.progress.step(f"Removing worktree '{branch}'..."):
            removed = self.worktrees.remove_worktree(branch)
        if not removed:
            raise WorktreeRemovalError(branch)

        return worktree_path

    def list_worktrees(self) -> List[Worktree]:
        """Return every worktree git knows about for this repository."""
        self.ensure_repository()

        listing = self.catalog.query()
        if not listing.ok:
            raise WorktreeListError(listing.error)
        return listing.worktrees

    def provision(self, branch: Optional[str] = None) -> str:
        """Re-run environment setup for an existing worktree.

        Without a branch, the worktree containing start_dir is provisioned.

        Returns:
            The provisioned path
        """
        repo_root = self.ensure_repository()

        if branch is None:
            worktree_path = repo_root
            current = self.locator.get_current_branch() or "(detached)"
            message = f"Provisioning current worktree '{current}'..."
        else:
            if not self.paths.worktree_exists(branch):
                raise WorktreeNotFoundError(branch)
            worktree_path = self.paths.worktree_path(branch)
            message = f"Provisioning worktree '{branch}'..."

        with self.progress.step(message):
            provisioned = self.bootstrapper.setup_path(worktree_path)
        if not provisioned:
            self.progress.warn(f"Environment setup for '{worktree_path}' did not complete.")

        return os.path.abspath(worktree_path)
