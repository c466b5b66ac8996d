"""Command execution result model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command: merged stdout/stderr and exit status."""

    output: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
