"""Custom exceptions for shep"""

from typing import Optional


class ShepError(Exception):
    """Base exception for all shep errors."""
    pass


class NotARepositoryError(ShepError):
    """Exception raised when no controlling git repository can be found."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        error_msg = "Not in a git repository"
        if path:
            error_msg += f": {path}"
        super().__init__(error_msg)


class WorktreeOperationError(ShepError):
    """Exception raised when a branch or worktree operation fails."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        if message:
            error_msg = message
        else:
            error_msg = f"Operation '{operation}' failed"
            if branch:
                error_msg += f" for branch '{branch}'"

        super().__init__(error_msg)


class WorktreeAlreadyExistsError(WorktreeOperationError):
    """Exception raised when the worktree directory for a branch is already present."""

    def __init__(self, branch: str):
        super().__init__("new", branch, f"Worktree for branch '{branch}' already exists.")


class WorktreeNotFoundError(WorktreeOperationError):
    """Exception raised when the worktree directory for a branch is missing."""

    def __init__(self, branch: str):
        super().__init__("find_worktree", branch, f"Worktree for branch '{branch}' does not exist.")


class InvalidBranchNameError(WorktreeOperationError):
    """Exception raised when git rejects a branch name."""

    def __init__(self, branch: str):
        super().__init__("validate_branch", branch, f"'{branch}' is not a valid branch name.")


class BranchCreationError(WorktreeOperationError):
    """Exception raised when `git branch` fails."""

    def __init__(self, branch: str):
        super().__init__("create_branch", branch, f"Failed to create branch '{branch}'.")


class WorktreeCreationError(WorktreeOperationError):
    """Exception raised when `git worktree add` fails."""

    def __init__(self, branch: str):
        super().__init__("create_worktree", branch, f"Failed to create worktree for '{branch}'.")


class WorktreeRemovalError(WorktreeOperationError):
    """Exception raised when `git worktree remove` fails."""

    def __init__(self, branch: str):
        super().__init__("remove_worktree", branch, f"Failed to remove worktree '{branch}'.")


class WorktreeListError(WorktreeOperationError):
    """Exception raised when the worktree listing cannot be obtained."""

    def __init__(self, message: Optional[str] = None):
        error_msg = "Failed to list worktrees"
        if message:
            error_msg += f": {message}"
        super().__init__("list_worktrees", message=error_msg)


class UserAbort(ShepError):
    """Raised when the user declines a confirmation."""

    def __init__(self):
        super().__init__("Aborted.")
