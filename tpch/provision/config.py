"""Helpers for loading provisioning configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from tpch.provision.constants import (
    DATA_PATH_VAR,
    DEFAULT_BINARY,
    DEFAULT_BUILD_COMMAND,
    DEFAULT_CLONE_DIR,
    DEFAULT_FORCE_FLAG,
    DEFAULT_REPO_URL,
    DEFAULT_SCALE_FLAG,
    DEFAULT_TABLE_GLOB,
    PARQUET_VAR,
    SAMPLING_RATE_VAR,
)
from tpch.provision.errors import ConfigurationError, MissingConfiguration
from tpch.provision.paths import GENERATOR_CONFIG_PATH


@dataclass(frozen=True)
class ProvisionConfig:
    sampling_rate: str
    data_path: Path


@dataclass(frozen=True)
class GeneratorSettings:
    repo_url: str = DEFAULT_REPO_URL
    clone_dir: str = DEFAULT_CLONE_DIR
    build_command: tuple[str, ...] = DEFAULT_BUILD_COMMAND
    binary: str = DEFAULT_BINARY
    force_flag: str = DEFAULT_FORCE_FLAG
    scale_flag: str = DEFAULT_SCALE_FLAG
    table_glob: str = DEFAULT_TABLE_GLOB


def _require(environ: Mapping[str, str], name: str) -> str:
    value = (environ.get(name) or "").strip()
    if not value:
        raise MissingConfiguration(name)
    return value


def load_config(environ: Mapping[str, str] | None = None) -> ProvisionConfig:
    """Build a ``ProvisionConfig`` from environment-style values.

    Both variables are mandatory and nothing is defaulted. The sampling rate is
    checked first and kept as text so it reaches the generator unchanged.
    """
    source = os.environ if environ is None else environ
    sampling_rate = _require(source, SAMPLING_RATE_VAR)
    data_path = _require(source, DATA_PATH_VAR)
    return ProvisionConfig(sampling_rate=sampling_rate, data_path=Path(data_path))


def parquet_requested(environ: Mapping[str, str] | None = None) -> bool:
    source = os.environ if environ is None else environ
    return (source.get(PARQUET_VAR) or "").strip().lower() in {"1", "true", "yes", "on"}


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    section = raw.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section '{key}' must be a mapping in generator settings.")
    return section


def _command(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, list) and value:
        return tuple(str(part) for part in value)
    raise ConfigurationError("build.command must be a string or a non-empty list.")


def load_generator_settings(path: Path | None = None) -> GeneratorSettings:
    source = path or GENERATOR_CONFIG_PATH
    if not source.is_file():
        raise ConfigurationError(f"Generator settings not found at {source}")
    try:
        raw = yaml.safe_load(source.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Generator settings at {source} are not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Generator settings at {source} must be a mapping.")

    fetch_cfg = _section(raw, "source")
    build_cfg = _section(raw, "build")
    generate_cfg = _section(raw, "generate")
    output_cfg = _section(raw, "output")

    build_command = DEFAULT_BUILD_COMMAND
    if "command" in build_cfg:
        build_command = _command(build_cfg["command"])

    return GeneratorSettings(
        repo_url=str(fetch_cfg.get("repo_url", DEFAULT_REPO_URL)),
        clone_dir=str(fetch_cfg.get("clone_dir", DEFAULT_CLONE_DIR)),
        build_command=build_command,
        binary=str(generate_cfg.get("binary", DEFAULT_BINARY)),
        force_flag=str(generate_cfg.get("force_flag", DEFAULT_FORCE_FLAG)),
        scale_flag=str(generate_cfg.get("scale_flag", DEFAULT_SCALE_FLAG)),
        table_glob=str(output_cfg.get("table_glob", DEFAULT_TABLE_GLOB)),
    )
