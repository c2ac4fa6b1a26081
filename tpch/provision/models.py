"""Data models for provisioning runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ProvisionResult:
    status: str
    data_path: Path
    sampling_rate: str
    table_files: list[Path] = field(default_factory=list)
    parquet_files: list[Path] = field(default_factory=list)
