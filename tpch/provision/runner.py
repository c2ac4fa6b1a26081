"""Provisioner that generates a TPC-H dataset when the target is missing."""

from __future__ import annotations

import tempfile
from pathlib import Path

from tpch.provision.config import GeneratorSettings, ProvisionConfig, load_generator_settings
from tpch.provision.constants import (
    ALREADY_EXISTS_MESSAGE,
    CREATING_MESSAGE,
    STATUS_ALREADY_PRESENT,
    STATUS_GENERATED,
)
from tpch.provision.models import ProvisionResult
from tpch.provision.parquet import convert_tables
from tpch.provision.steps import (
    CommandRunner,
    build_generator,
    collect_table_files,
    fetch_source,
    materialize_output,
    run_command,
    run_generator,
)


class DatasetProvisioner:
    def __init__(
        self,
        config: ProvisionConfig,
        settings: GeneratorSettings | None = None,
        runner: CommandRunner = run_command,
        work_root: Path | None = None,
        convert_parquet: bool = False,
    ) -> None:
        self.config = config
        self.settings = settings or load_generator_settings()
        self.runner = runner
        self.work_root = work_root
        self.convert_parquet = convert_parquet

    def run(self) -> ProvisionResult:
        data_path = self.config.data_path
        # existence only; an empty or partial directory counts as done
        if data_path.is_dir():
            print(ALREADY_EXISTS_MESSAGE)
            # local only: tables still lacking a .parquet are exported
            parquet_files = (
                convert_tables(data_path, skip_existing=True) if self.convert_parquet else []
            )
            return ProvisionResult(
                status=STATUS_ALREADY_PRESENT,
                data_path=data_path,
                sampling_rate=self.config.sampling_rate,
                parquet_files=parquet_files,
            )

        print(CREATING_MESSAGE)
        table_files = self._generate(data_path)
        parquet_files = convert_tables(data_path) if self.convert_parquet else []
        return ProvisionResult(
            status=STATUS_GENERATED,
            data_path=data_path,
            sampling_rate=self.config.sampling_rate,
            table_files=table_files,
            parquet_files=parquet_files,
        )

    def _generate(self, data_path: Path) -> list[Path]:
        if self.work_root is not None:
            self.work_root.mkdir(parents=True, exist_ok=True)
        # the clone is removed on every exit path, failures included
        with tempfile.TemporaryDirectory(prefix="tpch-dbgen-", dir=self.work_root) as tmp:
            source_dir = fetch_source(self.settings, Path(tmp), self.runner)
            build_generator(self.settings, source_dir, self.runner)
            run_generator(self.settings, source_dir, self.config.sampling_rate, self.runner)
            produced = collect_table_files(source_dir, self.settings.table_glob)
            return materialize_output(produced, data_path)
