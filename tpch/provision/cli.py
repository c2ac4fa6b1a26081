"""Command-line driver for the TPC-H dataset provisioner."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from tpch.provision.config import load_config, load_generator_settings, parquet_requested
from tpch.provision.constants import STATUS_GENERATED
from tpch.provision.errors import ProvisionError
from tpch.provision.runner import DatasetProvisioner


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Generate TPC-H table files into $TPCH_DATA_PATH at scale "
            "$TPCH_SAMPLING_RATE unless the directory already exists."
        )
    )
    parser.add_argument(
        "--parquet",
        action="store_true",
        help="Also export each generated table as <table>.parquet (or set TPCH_PARQUET=1).",
    )
    parser.add_argument(
        "--generator-config",
        type=Path,
        help="YAML file overriding the bundled generator settings.",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config()
        settings = load_generator_settings(args.generator_config)
        provisioner = DatasetProvisioner(
            config,
            settings,
            convert_parquet=args.parquet or parquet_requested(),
        )
        result = provisioner.run()
    except ProvisionError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(exc.exit_code) from exc

    if result.status != STATUS_GENERATED:
        if result.parquet_files:
            print(f"Parquet exports: {len(result.parquet_files)}")
        return
    lines = [
        f"Generated {len(result.table_files)} table files at scale {result.sampling_rate}.",
        f"Data path: {result.data_path}",
    ]
    if result.parquet_files:
        lines.append(f"Parquet exports: {len(result.parquet_files)}")
    print("\n".join(lines))
