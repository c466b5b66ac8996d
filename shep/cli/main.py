"""Command-line entry point for shep"""

import os
import sys
from contextlib import contextmanager

from rich.prompt import Confirm

from shep.config import Config
from shep.core import ProgressReporter, Shep
from shep.exceptions import ShepError, UserAbort
from shep.logging_config import setup_logging
from shep.services.display_service import DisplayService, console
from .args import build_parser


class ConsoleProgress(ProgressReporter):
    """Shows each step as a spinner on the console."""

    def __init__(self, display: DisplayService):
        self.display = display

    @contextmanager
    def step(self, message: str):
        with self.display.console.status(message):
            yield

    def warn(self, message: str) -> None:
        self.display.warning(message)


def confirm_prompt(prompt: str, default: bool) -> bool:
    return Confirm.ask(prompt, default=default, console=console)


def cmd_new(shep: Shep, display: DisplayService, args) -> int:
    worktree_path = shep.new_worktree(args.branch)
    display.success(f"Worktree created at: {worktree_path}")
    # Last line of stdout is captured by the shell wrapper
    print(worktree_path)
    return 0


def cmd_remove(shep: Shep, display: DisplayService, args) -> int:
    shep.remove_worktree(args.branch)
    display.success(f"Worktree '{args.branch}' removed successfully.")
    return 0


def cmd_list(shep: Shep, display: DisplayService, args) -> int:
    display.display_worktree_table(shep.list_worktrees())
    return 0


def cmd_init(shep: Shep, display: DisplayService, args) -> int:
    worktree_path = shep.provision(args.branch)
    display.success(f"Provisioning complete for '{worktree_path}'")
    return 0


COMMANDS = {
    "new": cmd_new,
    "remove": cmd_remove,
    "rm": cmd_remove,
    "worktrees": cmd_list,
    "list": cmd_list,
    "ls": cmd_list,
    "init": cmd_init,
}


def main(argv=None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    display = DisplayService()
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            assume_yes=parsed_args.yes,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        shep = Shep(
            os.getcwd(),
            config,
            progress=ConsoleProgress(display),
            confirm=confirm_prompt,
        )
        return COMMANDS[parsed_args.command](shep, display, parsed_args)
    except UserAbort:
        display.info("Aborted.")
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except ShepError as e:
        display.error(str(e))
        return 1
    except Exception as e:
        display.error(str(e))
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
