"""Pytest configuration.

The repository keeps its code under a flat `src/` namespace. This conftest ensures tests can import
from `src.*` when running `pytest` without installing the project.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
