"""Exception hierarchy for dataset provisioning."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ProvisionError(Exception):
    exit_code = 1


class ConfigurationError(ProvisionError):
    pass


class MissingConfiguration(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Error: {name} is not defined.")


class StepError(ProvisionError):
    """An external command exited non-zero or could not be started.

    ``returncode`` is ``None`` when the executable never ran, in which case the
    process exit code falls back to 1.
    """

    step = "step"

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        cwd: Path | None = None,
        detail: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.cwd = cwd
        if detail is None:
            detail = f"exit status {returncode}"
        message = f"Error: {self.step} failed ({detail})"
        if self.command:
            message += f": {' '.join(self.command)}"
        super().__init__(message)

    @property
    def exit_code(self) -> int:
        if self.returncode is None or self.returncode == 0:
            return 1
        if self.returncode < 0:
            # killed by signal N, shells report 128 + N
            return 128 - self.returncode
        return self.returncode


class SourceFetchError(StepError):
    step = "source fetch"


class BuildError(StepError):
    step = "build"


class GenerationError(StepError):
    step = "generation"


class ExportError(ProvisionError):
    def __init__(self, table: str, detail: str) -> None:
        self.table = table
        super().__init__(f"Error: parquet export failed for {table}: {detail}")
