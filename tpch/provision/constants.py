"""Shared provisioning constants."""

from __future__ import annotations

SAMPLING_RATE_VAR = "TPCH_SAMPLING_RATE"
DATA_PATH_VAR = "TPCH_DATA_PATH"
PARQUET_VAR = "TPCH_PARQUET"

STATUS_ALREADY_PRESENT = "already_present"
STATUS_GENERATED = "generated"

DEFAULT_REPO_URL = "https://github.com/databricks/tpch-dbgen.git"
DEFAULT_CLONE_DIR = "tpch-dbgen"
DEFAULT_BUILD_COMMAND = ("make",)
DEFAULT_BINARY = "./dbgen"
DEFAULT_FORCE_FLAG = "-f"
DEFAULT_SCALE_FLAG = "-s"
DEFAULT_TABLE_GLOB = "*.tbl"

CREATING_MESSAGE = "Creating TPCH data for testing..."
ALREADY_EXISTS_MESSAGE = "TPCH data already exists. Skipping clone and generation."
