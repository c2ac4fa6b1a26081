from __future__ import annotations

from pathlib import Path

import pytest

REGION_ROWS = (
    "0|AFRICA|lar deposits. blithely final packages cajole. regular waters are final requests. regular accounts are according to |\n"
    "1|AMERICA|hs use ironic, even requests. s|\n"
)
NATION_ROWS = (
    "0|ALGERIA|0| haggle. carefully final deposits detect slyly agai|\n"
    "1|ARGENTINA|1|al foxes promise slyly according to the regular accounts. bold requests alon|\n"
    "2|BRAZIL|1|y alongside of the pending deposits. carefully special packages are about the ironic forges. slyly special |\n"
)
TABLE_ROWS = {"region": REGION_ROWS, "nation": NATION_ROWS}


class FakeRunner:
    """Stands in for git, make and dbgen.

    ``fail_on`` names the executable (``git``, ``make`` or ``./dbgen``) that
    should exit with ``returncode``.
    """

    def __init__(self, fail_on=None, returncode=2, tables=("nation", "region")):
        self.fail_on = fail_on
        self.returncode = returncode
        self.tables = tables
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, command, cwd):
        command = list(command)
        cwd = Path(cwd)
        self.calls.append((command, cwd))
        if command[0] == self.fail_on:
            return self.returncode
        if command[0] == "git":
            (cwd / command[-1]).mkdir()
        elif command[0] == "./dbgen":
            for table in self.tables:
                (cwd / f"{table}.tbl").write_text(TABLE_ROWS.get(table, "1|x|\n"))
        return 0

    @property
    def executables(self) -> list[str]:
        return [command[0] for command, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def work_root(tmp_path):
    return tmp_path / "work"


@pytest.fixture
def write_tbl():
    def _write(directory: Path, table: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{table}.tbl"
        path.write_text(TABLE_ROWS[table])
        return path

    return _write
