"""Convert dbgen ``.tbl`` output into Parquet files with DuckDB."""

from __future__ import annotations

from pathlib import Path

import duckdb

from tpch.provision.errors import ExportError
from tpch.provision.tables import TABLE_SPECS

# dbgen terminates every row with the delimiter, which reads as one extra field
TRAILING_COLUMN = "_trailing"


def path_literal(path: Path) -> str:
    return path.as_posix().replace("'", "''")


def columns_literal(columns: list[tuple[str, str]]) -> str:
    entries = [f"'{name}': '{dtype}'" for name, dtype in columns]
    entries.append(f"'{TRAILING_COLUMN}': 'VARCHAR'")
    return "{" + ", ".join(entries) + "}"


def build_copy_sql(spec: dict, source: Path, dest: Path) -> str:
    column_names = ", ".join(name for name, _ in spec["columns"])
    return f"""
    COPY (
      SELECT {column_names}
      FROM read_csv(
        '{path_literal(source)}',
        delim = '|',
        header = false,
        null_padding = true,
        columns = {columns_literal(spec['columns'])}
      )
    ) TO '{path_literal(dest)}' (FORMAT PARQUET)
    """


def convert_tables(
    data_path: Path,
    con: duckdb.DuckDBPyConnection | None = None,
    skip_existing: bool = False,
) -> list[Path]:
    """Write ``<table>.parquet`` beside each ``<table>.tbl`` found in ``data_path``.

    Tables without a ``.tbl`` file are skipped, as are tables that already have
    a ``.parquet`` when ``skip_existing`` is set. Each file is written under a
    ``.partial`` name and renamed once complete, so a failed export never
    leaves a ``.parquet`` behind. Paths written are returned in schema order.
    """
    owns_connection = con is None
    if con is None:
        con = duckdb.connect()
    written: list[Path] = []
    try:
        for spec in TABLE_SPECS:
            source = data_path / spec["source"]
            if not source.exists():
                continue
            dest = data_path / f"{spec['name']}.parquet"
            if skip_existing and dest.exists():
                continue
            partial = dest.with_name(dest.name + ".partial")
            try:
                con.execute(build_copy_sql(spec, source, partial))
            except duckdb.Error as exc:
                partial.unlink(missing_ok=True)
                raise ExportError(spec["name"], str(exc)) from exc
            partial.replace(dest)
            written.append(dest)
    finally:
        if owns_connection:
            con.close()
    return written
