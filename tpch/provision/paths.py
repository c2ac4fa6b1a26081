"""Path helpers for provisioning."""

from __future__ import annotations

from pathlib import Path


PACKAGE_ROOT = Path(__file__).resolve().parents[1]
GENERATOR_CONFIG_PATH = PACKAGE_ROOT / "config" / "generator.yml"
