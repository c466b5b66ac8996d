"""Worktree data models."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Worktree:
    """One entry of `git worktree list --porcelain`."""

    path: str
    head_commit: str = ""
    branch: Optional[str] = None  # None when detached or bare
    is_bare: bool = False
    is_detached: bool = False
    is_locked: bool = False
    is_prunable: bool = False

    @property
    def ref_label(self) -> str:
        """Branch name, or a placeholder describing the ref state."""
        if self.branch:
            return self.branch
        if self.is_bare:
            return "(bare)"
        if self.is_detached:
            return "(detached)"
        return "N/A"

    @property
    def short_head(self) -> str:
        return self.head_commit[:8]

    def __str__(self) -> str:
        """String representation of worktree."""
        flags = []
        if self.is_locked:
            flags.append("locked")
        if self.is_prunable:
            flags.append("prunable")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{self.ref_label} @ {self.path}{suffix}"


@dataclass
class WorktreeListing:
    """Result of a catalog query.

    Separates "the listing command failed" (ok=False) from "there are no
    worktrees" (ok=True, empty list).
    """

    worktrees: List[Worktree] = field(default_factory=list)
    ok: bool = True
    error: Optional[str] = None
