"""Worktree operations service for shep."""

from typing import Dict, Any, List

from shep.models.worktree import Worktree, WorktreeListing
from shep.logging_config import get_logger
from shep.services.git.repository import PathResolver
from shep.services.git.runner import CommandRunner

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _build_worktree(record: Dict[str, Any]) -> Worktree:
    return Worktree(
        path=record["path"],
        head_commit=record.get("HEAD", ""),
        branch=record.get("branch"),
        is_bare=record.get("bare", False),
        is_detached=record.get("detached", False),
        is_locked=record.get("locked", False),
        is_prunable=record.get("prunable", False),
    )


def parse_porcelain(output: str) -> List[Worktree]:
    """Parse ``git worktree list --porcelain`` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name    (or a bare "detached" / "bare" line)
        (blank line between worktrees)

    Records are returned in input order. Unknown keys are ignored and a
    record without a ``worktree`` line is dropped.
    """
    worktrees: List[Worktree] = []
    current: Dict[str, Any] = {}

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if not line.strip():
            # Empty line marks end of worktree entry
            if current.get("path"):
                worktrees.append(_build_worktree(current))
            current = {}
            continue

        key, _, value = line.partition(" ")
        if key == "worktree":
            current["path"] = value
        elif key == "HEAD":
            current["HEAD"] = value
        elif key == "branch":
            # Extract branch name from "branch refs/heads/branch-name"
            if value.startswith(BRANCH_REF_PREFIX):
                value = value[len(BRANCH_REF_PREFIX):]
            if value:
                current["branch"] = value
        elif key in ("bare", "detached", "locked", "prunable"):
            current[key] = True

    # Handle last entry if no trailing blank line
    if current.get("path"):
        worktrees.append(_build_worktree(current))

    return worktrees


class WorktreeCatalog:
    """Reads the worktree list that git maintains for a repository."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def query(self) -> WorktreeListing:
        """List worktrees, reporting failure separately from an empty result."""
        result = self.runner.git("worktree", "list", "--porcelain")
        if not result.ok:
            logger.debug(f"Could not list worktrees: {result.output}")
            return WorktreeListing(ok=False, error=result.output.strip() or f"exit {result.exit_code}")

        worktrees = parse_porcelain(result.output)
        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return WorktreeListing(worktrees=worktrees)

    def list(self) -> List[Worktree]:
        """List worktrees; an empty list if the listing command fails."""
        return self.query().worktrees


class WorktreeLifecycle:
    """Creates and removes the worktree that belongs to a branch."""

    def __init__(self, runner: CommandRunner, paths: PathResolver):
        self.runner = runner
        self.paths = paths

    def create_worktree(self, branch: str) -> bool:
        """Check out an existing branch into its worktree directory.

        The branch must already exist; it is not created here.
        """
        path = self.paths.worktree_path(branch)
        result = self.runner.git("worktree", "add", path, branch)
        if not result.ok:
            logger.warning(f"git worktree add failed (exit {result.exit_code}): {result.output}")
            return False

        logger.info(f"Created worktree at {path} for branch {branch}")
        return True

    def remove_worktree(self, branch: str) -> bool:
        """Force-remove a branch's worktree, then prune stale metadata.

        Prune only runs after a successful removal and its outcome does not
        change the return value.
        """
        path = self.paths.worktree_path(branch)
        result = self.runner.git("worktree", "remove", path, "--force")
        if not result.ok:
            logger.warning(f"git worktree remove failed (exit {result.exit_code}): {result.output}")
            return False

        logger.info(f"Removed worktree at {path}")
        self.prune()
        return True

    def prune(self) -> None:
        result = self.runner.git("worktree", "prune")
        if result.ok:
            logger.info("Pruned orphaned worktree metadata")
        else:
            logger.debug(f"git worktree prune failed (exit {result.exit_code}): {result.output}")
