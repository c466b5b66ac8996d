"""Configuration handling for shep"""

from dataclasses import dataclass, field
from typing import List


DEFAULT_DISABLED_DB_KEYS = ["DB_HOST", "DB_PORT", "DB_USERNAME", "DB_PASSWORD"]

# Keys the rewrite always sets; they can never be commented out
MANAGED_DB_KEYS = ["DB_CONNECTION", "DB_DATABASE"]


@dataclass
class Config:
    """Configuration for shep with validation."""

    # Layout
    worktrees_dir: str = ".worktrees"

    # Environment bootstrapping
    env_file: str = ".env"
    env_template: str = ".env.example"
    database_dir: str = "database"
    database_file: str = "database.sqlite"
    db_connection: str = "sqlite"
    disabled_db_keys: List[str] = field(default_factory=lambda: list(DEFAULT_DISABLED_DB_KEYS))

    # Execution modes
    assume_yes: bool = False  # Skip confirmations
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_relative_names()
        self._validate_db_connection()
        self._validate_disabled_db_keys()

    def _validate_relative_names(self):
        """Validate layout names are non-empty relative names."""
        for name in ("worktrees_dir", "env_file", "env_template", "database_dir", "database_file"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")
            if value.startswith("/"):
                raise ValueError(f"{name} must be relative, got '{value}'")

    def _validate_db_connection(self):
        """Validate db_connection is not empty."""
        if not self.db_connection or not self.db_connection.strip():
            raise ValueError("db_connection cannot be empty")
        self.db_connection = self.db_connection.strip()

    def _validate_disabled_db_keys(self):
        """Validate disabled_db_keys list."""
        if not isinstance(self.disabled_db_keys, list):
            raise ValueError("disabled_db_keys must be a list")
        for key in self.disabled_db_keys:
            if not key or "=" in key:
                raise ValueError(f"Invalid env key '{key}'")
            if key in MANAGED_DB_KEYS:
                raise ValueError(f"{key} is set by shep and cannot be disabled")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "worktrees_dir": self.worktrees_dir,
            "env_file": self.env_file,
            "env_template": self.env_template,
            "database_dir": self.database_dir,
            "database_file": self.database_file,
            "db_connection": self.db_connection,
            "disabled_db_keys": self.disabled_db_keys,
            "assume_yes": self.assume_yes,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "worktrees_dir",
            "env_file",
            "env_template",
            "database_dir",
            "database_file",
            "db_connection",
            "disabled_db_keys",
            "assume_yes",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
