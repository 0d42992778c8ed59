from __future__ import annotations

import pandas as pd
import pytest

from metacog.datasets import simulate_wide
from metacog.reshape import wide_to_long

N_PARTICIPANTS = 24
N_ITEMS = 15


@pytest.fixture(scope="session")
def wide_data() -> pd.DataFrame:
    return simulate_wide(N_PARTICIPANTS, N_ITEMS, seed=20260214)


@pytest.fixture(scope="session")
def long_data(wide_data: pd.DataFrame) -> pd.DataFrame:
    return wide_to_long(wide_data)


@pytest.fixture(scope="session")
def long_data_missing() -> pd.DataFrame:
    wide = simulate_wide(N_PARTICIPANTS, N_ITEMS, seed=20260215, missing_rate=0.1)
    return wide_to_long(wide)


@pytest.fixture
def toy_long() -> pd.DataFrame:
    """Two participants x four items with hand-checkable metrics."""
    return pd.DataFrame(
        {
            "id": [1, 1, 1, 1, 2, 2, 2, 2],
            "item": [1, 2, 3, 4, 1, 2, 3, 4],
            "correct": [1, 1, 0, 0, 1, 1, 1, 1],
            "confidence": [90, 80, 30, 20, 60, 60, 70, 50],
            "decision": ["A", "B", "A", "B", "A", "A", "B", "B"],
            "rt": [1.2, 2.0, 3.1, 2.2, 0.9, 1.1, 1.5, 2.5],
        }
    )
