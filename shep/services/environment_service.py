"""Local environment provisioning for freshly created worktrees."""

import os
import shutil
from typing import Iterable, List, Optional

from shep.config import Config, DEFAULT_DISABLED_DB_KEYS, MANAGED_DB_KEYS
from shep.logging_config import get_logger
from shep.services.git.repository import PathResolver

logger = get_logger(__name__)


def _set_key(lines: List[str], key: str, value: str) -> None:
    """Replace every ``KEY=`` line with ``KEY=value``, or append one."""
    prefix = f"{key}="
    found = False
    for index, line in enumerate(lines):
        if line.startswith(prefix):
            lines[index] = prefix + value
            found = True
    if not found:
        lines.append(prefix + value)


def _comment_out(lines: List[str], key: str) -> None:
    prefix = f"{key}="
    for index, line in enumerate(lines):
        if line.startswith(prefix):
            lines[index] = f"# {line}"


def rewrite_env(
    content: str,
    database_path: str,
    connection: str = "sqlite",
    disabled_keys: Optional[Iterable[str]] = None,
) -> str:
    """Point a .env file's contents at a local sqlite database.

    Sets ``DB_CONNECTION`` and ``DB_DATABASE`` (replaced in place when present,
    appended otherwise) and comments out the server connection keys. All
    other lines, and whether the file ends with a newline, are left alone.
    Applying the rewrite to its own output changes nothing.
    """
    if disabled_keys is None:
        disabled_keys = DEFAULT_DISABLED_DB_KEYS

    trailing_newline = content.endswith("\n")
    body = content[:-1] if trailing_newline else content
    lines = body.split("\n") if content else []

    _set_key(lines, "DB_CONNECTION", connection)
    _set_key(lines, "DB_DATABASE", database_path)
    for key in disabled_keys:
        if key not in MANAGED_DB_KEYS:
            _comment_out(lines, key)

    result = "\n".join(lines)
    if trailing_newline:
        result += "\n"
    return result


class EnvironmentBootstrapper:
    """Provisions the secrets file and sqlite database of a worktree."""

    def __init__(self, paths: PathResolver, config: Optional[Config] = None):
        self.paths = paths
        self.config = config or Config()

    def setup(self, branch: str) -> bool:
        """Provision the worktree that belongs to ``branch``."""
        return self.setup_path(self.paths.worktree_path(branch))

    def setup_path(self, worktree_path: str) -> bool:
        """Provision the worktree at ``worktree_path``.

        Returns:
            True if every step succeeded. Failures are logged, never raised,
            and nothing already on disk is removed.
        """
        worktree_path = os.path.abspath(worktree_path)
        env_path = os.path.join(worktree_path, self.config.env_file)
        env_example_path = os.path.join(worktree_path, self.config.env_template)
        database_dir = os.path.join(worktree_path, self.config.database_dir)
        database_path = os.path.join(database_dir, self.config.database_file)

        try:
            if not os.path.exists(env_path) and os.path.exists(env_example_path):
                shutil.copyfile(env_example_path, env_path)
                logger.info(f"Copied {self.config.env_template} to {self.config.env_file}")

            os.makedirs(database_dir, exist_ok=True)
            # Append mode creates the file without truncating an existing database
            with open(database_path, "a"):
                pass
            logger.debug(f"Database file ready at {database_path}")

            if os.path.exists(env_path):
                self._update_env_file(env_path, database_path)
        except (OSError, ValueError) as e:
            logger.warning(f"Environment setup failed for {worktree_path}: {e}")
            return False

        return True

    def _update_env_file(self, env_path: str, database_path: str) -> None:
        # Undecodable bytes (e.g. Latin-1 passwords) are carried through unchanged
        with open(env_path, encoding="utf-8", errors="surrogateescape", newline="") as f:
            content = f.read()

        updated = rewrite_env(
            content,
            database_path,
            connection=self.config.db_connection,
            disabled_keys=self.config.disabled_db_keys,
        )

        with open(env_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(updated)
        logger.info(f"Updated {env_path} for {self.config.db_connection}")
