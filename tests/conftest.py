from __future__ import annotations

import matplotlib
import pytest

from connectn.config import EngineConfig

# figures are written to disk, never shown
matplotlib.use("Agg")


@pytest.fixture
def shallow() -> EngineConfig:
    # Keeps search tests fast
    return EngineConfig(depth=2)
