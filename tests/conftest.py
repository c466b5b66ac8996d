"""Pytest fixtures for shep tests"""
import tempfile
from pathlib import Path
import pytest
import git

from shep.config import Config
from shep.models.command import CommandResult


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolve symlinks so paths compare equal to what git reports
        yield Path(tmpdir).resolve()


@pytest.fixture
def config():
    """Create a default configuration with confirmations skipped."""
    return Config(assume_yes=True)


def _init_repo(repo_path: Path) -> git.Repo:
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo = _init_repo(temp_dir / "test_repo")

    yield repo

    repo.close()


ENV_EXAMPLE = """APP_NAME=Laravel
APP_ENV=local

DB_CONNECTION=mysql
DB_HOST=127.0.0.1
DB_PORT=3306
DB_DATABASE=laravel
DB_USERNAME=root
DB_PASSWORD=
"""


@pytest.fixture
def laravel_repo(temp_dir):
    """Create a Git repository that ships a committed .env.example."""
    repo = _init_repo(temp_dir / "laravel_repo")
    repo_path = Path(repo.working_dir)

    (repo_path / ".env.example").write_text(ENV_EXAMPLE)
    repo.index.add([".env.example"])
    repo.index.commit("Add env example")

    yield repo

    repo.close()


class FakeRunner:
    """Records git invocations and answers them from a prefix table.

    ``responses`` maps an argument-tuple prefix to the CommandResult returned
    for matching calls; the first matching prefix wins. Unmatched calls
    succeed with empty output.
    """

    def __init__(self, responses=None, cwd="/r"):
        self.cwd = cwd
        self.responses = dict(responses or {})
        self.calls = []

    def git(self, *args):
        self.calls.append(args)
        for prefix, result in self.responses.items():
            if args[:len(prefix)] == prefix:
                return result
        return CommandResult(output="", exit_code=0)

    def run(self, args):
        return self.git(*args)

    def commands(self):
        """Return calls as space-joined strings for readable assertions."""
        return [" ".join(call) for call in self.calls]


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    def _make(responses=None, cwd="/r"):
        return FakeRunner(responses, cwd)
    return _make


@pytest.fixture
def ok():
    """Factory for successful command results."""
    return lambda output="": CommandResult(output=output, exit_code=0)


@pytest.fixture
def failed():
    """Factory for failed command results."""
    return lambda output="fatal: error", exit_code=128: CommandResult(output=output, exit_code=exit_code)
