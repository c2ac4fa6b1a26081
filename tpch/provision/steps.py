"""External commands that fetch, build and run the TPC-H generator."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Sequence, Type

from tpch.provision.config import GeneratorSettings
from tpch.provision.errors import (
    BuildError,
    GenerationError,
    SourceFetchError,
    StepError,
)

CommandRunner = Callable[[Sequence[str], Path], int]


def run_command(command: Sequence[str], cwd: Path) -> int:
    # stdio stays attached so git/make/dbgen progress reaches the terminal
    proc = subprocess.run(list(command), cwd=cwd, check=False)
    return proc.returncode


def _invoke(
    error_cls: Type[StepError],
    command: Sequence[str],
    cwd: Path,
    runner: CommandRunner,
) -> None:
    try:
        returncode = runner(command, cwd)
    except OSError as exc:
        raise error_cls(command, None, cwd, detail=exc.strerror or str(exc)) from exc
    if returncode != 0:
        raise error_cls(command, returncode, cwd)


def fetch_source(
    settings: GeneratorSettings, workdir: Path, runner: CommandRunner = run_command
) -> Path:
    command = ["git", "clone", settings.repo_url, settings.clone_dir]
    _invoke(SourceFetchError, command, workdir, runner)
    return workdir / settings.clone_dir


def build_generator(
    settings: GeneratorSettings, source_dir: Path, runner: CommandRunner = run_command
) -> None:
    _invoke(BuildError, settings.build_command, source_dir, runner)


def run_generator(
    settings: GeneratorSettings,
    source_dir: Path,
    sampling_rate: str,
    runner: CommandRunner = run_command,
) -> None:
    command = [settings.binary, settings.force_flag, settings.scale_flag, sampling_rate]
    _invoke(GenerationError, command, source_dir, runner)


def collect_table_files(source_dir: Path, pattern: str) -> list[Path]:
    return sorted(path for path in source_dir.glob(pattern) if path.is_file())


def materialize_output(table_files: Sequence[Path], data_path: Path) -> list[Path]:
    """Move generated table files into ``data_path``, creating it as needed.

    An empty ``table_files`` is refused before the directory is created: an
    empty target would satisfy every later existence check.
    """
    if not table_files:
        raise GenerationError([], None, detail="generator produced no table files")
    data_path.mkdir(parents=True, exist_ok=True)
    moved: list[Path] = []
    for source in table_files:
        destination = data_path / source.name
        shutil.move(str(source), str(destination))
        moved.append(destination)
    return moved
