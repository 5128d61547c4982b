from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure repo root is importable (parameters.py and the entry-point scripts).
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture(scope="session")
def default_grid():
    from bet_thresholds.grid import build_grid

    return build_grid()
