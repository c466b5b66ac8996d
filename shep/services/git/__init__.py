"""Git-related services for shep."""

from .runner import CommandRunner
from .repository import RepoLocator, PathResolver
from .branches import BranchLifecycle
from .worktrees import WorktreeCatalog, WorktreeLifecycle, parse_porcelain

__all__ = [
    "CommandRunner",
    "RepoLocator",
    "PathResolver",
    "BranchLifecycle",
    "WorktreeCatalog",
    "WorktreeLifecycle",
    "parse_porcelain",
]
