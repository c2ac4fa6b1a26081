"""Entry point for the provisioning package."""

from __future__ import annotations

from .config import GeneratorSettings, ProvisionConfig, load_config, load_generator_settings
from .errors import (
    BuildError,
    ConfigurationError,
    ExportError,
    GenerationError,
    MissingConfiguration,
    ProvisionError,
    SourceFetchError,
    StepError,
)
from .models import ProvisionResult
from .parquet import convert_tables
from .runner import DatasetProvisioner

__all__ = [
    "BuildError",
    "ConfigurationError",
    "DatasetProvisioner",
    "ExportError",
    "GenerationError",
    "GeneratorSettings",
    "MissingConfiguration",
    "ProvisionConfig",
    "ProvisionError",
    "ProvisionResult",
    "SourceFetchError",
    "StepError",
    "convert_tables",
    "load_config",
    "load_generator_settings",
]
