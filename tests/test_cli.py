"""Tests for the command-line interface"""
import os
from unittest.mock import patch

import pytest

from shep.cli import main, parse_args


class TestParseArgs:
    """Test argument parsing."""

    def test_new(self):
        args = parse_args(["new", "feature-x"])
        assert args.command == "new"
        assert args.branch == "feature-x"
        assert args.yes is False

    def test_global_flags(self):
        args = parse_args(["-y", "-v", "remove", "feature-x"])
        assert args.yes is True
        assert args.verbose is True
        assert args.command == "remove"

    def test_list_aliases(self):
        for name in ("worktrees", "list", "ls"):
            assert parse_args([name]).command == name

    def test_init_branch_is_optional(self):
        assert parse_args(["init"]).branch is None
        assert parse_args(["init", "feature-x"]).branch == "feature-x"

    def test_new_requires_branch(self):
        with pytest.raises(SystemExit):
            parse_args(["new"])


class TestMain:
    """Test commands end to end."""

    def test_new_prints_path_last(self, laravel_repo, monkeypatch, capsys):
        """Test the worktree path is the final line of stdout."""
        monkeypatch.chdir(laravel_repo.working_dir)

        assert main(["--yes", "new", "feature-x"]) == 0

        out = capsys.readouterr().out
        expected = os.path.join(laravel_repo.working_dir, ".worktrees", "feature-x")
        assert out.strip().splitlines()[-1] == expected
        assert os.path.isfile(os.path.join(expected, ".env"))

    def test_new_with_latin1_env_example(self, git_repo, monkeypatch, capsys):
        """Test a non-UTF-8 .env.example still yields the path and exit 0."""
        repo_path = git_repo.working_dir
        with open(os.path.join(repo_path, ".env.example"), "wb") as f:
            f.write(b"APP_NAME=Caf\xe9\nDB_PASSWORD=s\xe9cret\n")
        git_repo.index.add([".env.example"])
        git_repo.index.commit("Add latin-1 env example")
        monkeypatch.chdir(repo_path)

        assert main(["--yes", "new", "feature-x"]) == 0

        out = capsys.readouterr().out
        expected = os.path.join(repo_path, ".worktrees", "feature-x")
        assert out.strip().splitlines()[-1] == expected
        with open(os.path.join(expected, ".env"), "rb") as f:
            assert b"# DB_PASSWORD=s\xe9cret\n" in f.read()

    def test_new_existing_worktree_fails(self, git_repo, monkeypatch, capsys):
        """Test a second new for the same branch exits 1."""
        monkeypatch.chdir(git_repo.working_dir)
        assert main(["--yes", "new", "feature-x"]) == 0

        assert main(["--yes", "new", "feature-x"]) == 1
        assert "already exists" in capsys.readouterr().err

    def test_declined_branch_prompt(self, git_repo, monkeypatch, capsys):
        """Test answering no to branch creation exits 0 without changes."""
        monkeypatch.chdir(git_repo.working_dir)

        with patch("rich.prompt.Confirm.ask", return_value=False):
            assert main(["new", "feature-x"]) == 0

        assert "Aborted." in capsys.readouterr().err
        assert "feature-x" not in [head.name for head in git_repo.heads]

    def test_not_a_repository(self, temp_dir, monkeypatch, capsys):
        """Test commands fail outside a repository."""
        monkeypatch.chdir(temp_dir)

        assert main(["worktrees"]) == 1
        assert "Not in a git repository" in capsys.readouterr().err

    def test_remove(self, git_repo, monkeypatch, capsys):
        """Test removing a worktree after confirmation."""
        monkeypatch.chdir(git_repo.working_dir)
        main(["--yes", "new", "feature-x"])

        with patch("rich.prompt.Confirm.ask", return_value=True):
            assert main(["remove", "feature-x"]) == 0

        assert not os.path.exists(os.path.join(git_repo.working_dir, ".worktrees", "feature-x"))
        assert "removed successfully" in capsys.readouterr().err

    def test_remove_missing(self, git_repo, monkeypatch, capsys):
        """Test removing an unknown worktree exits 1."""
        monkeypatch.chdir(git_repo.working_dir)
        assert main(["--yes", "remove", "feature-x"]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_list(self, git_repo, monkeypatch, capsys):
        """Test the table shows every worktree branch."""
        monkeypatch.chdir(git_repo.working_dir)
        main(["--yes", "new", "feature-x"])

        assert main(["ls"]) == 0

        err = capsys.readouterr().err
        assert "main" in err
        assert "HEAD" in err

    def test_init_current(self, laravel_repo, monkeypatch, capsys):
        """Test init without a branch provisions the current worktree."""
        monkeypatch.chdir(laravel_repo.working_dir)

        assert main(["init"]) == 0
        assert os.path.isfile(os.path.join(laravel_repo.working_dir, ".env"))

    def test_no_command_shows_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
