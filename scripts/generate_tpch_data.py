#!/usr/bin/env python3
"""Provision the local TPC-H dataset named by TPCH_DATA_PATH."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tpch.provision.cli import main


if __name__ == "__main__":
    main()
