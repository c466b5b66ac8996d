"""Data models for shep."""

from .command import CommandResult
from .worktree import Worktree, WorktreeListing

__all__ = ["CommandResult", "Worktree", "WorktreeListing"]
