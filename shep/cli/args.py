"""Command-line argument parsing for shep."""

import argparse
from shep.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shep",
        description="Create, provision and remove git worktrees under <repo>/.worktrees",
        epilog="'shep new' prints the worktree path as its last line of output, "
        "so a shell wrapper can cd into it.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"shep {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("-y", "--yes", action="store_true", help="Skip confirmations")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    new_parser = subparsers.add_parser("new", help="Create a new worktree for a branch")
    new_parser.add_argument("branch", help="The branch name for the worktree")

    remove_parser = subparsers.add_parser("remove", aliases=["rm"], help="Remove a worktree")
    remove_parser.add_argument("branch", help="The branch name of the worktree to remove")

    subparsers.add_parser("worktrees", aliases=["list", "ls"], help="List all worktrees")

    init_parser = subparsers.add_parser(
        "init", help="Provision an existing worktree (or the current one)"
    )
    init_parser.add_argument(
        "branch", nargs="?", default=None, help="Branch of the worktree to provision"
    )

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
