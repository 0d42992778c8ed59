"""Synthetic wide-format confidence-rating datasets.

Each participant has an ability, a confidence offset (over/underconfidence)
and a sensitivity (how much confidence tracks correctness); each item has a
difficulty. Outcomes follow a logistic model and confidence ratings are
drawn around a participant baseline shifted up on correct answers.

"""

import numpy as np
import pandas as pd

from .reshape import ID_COL


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-np.clip(x, -30, 30)))


def simulate_wide(
    n_participants: int = 30,
    n_items: int = 20,
    seed: int = 20240101,
    missing_rate: float = 0.0,
) -> pd.DataFrame:
    """
    Build a reproducible wide dataset with ``a{n}/c{n}/d{n}/t{n}`` columns.

    Args:
        n_participants: Number of rows (participants), at least 1.
        n_items: Number of items ``K``, at least 1.
        seed: Seed for ``numpy.random.default_rng``.
        missing_rate: Probability in ``[0, 1)`` that a confidence rating is
            blanked out (``nan``).

    Returns:
        DataFrame with an ``id`` column (``1..n_participants``) followed by
        ``a1, c1, d1, t1, ..., aK, cK, dK, tK``. Correctness is 0/1,
        confidence is an integer in ``[0, 100]``, decisions are ``"A"`` or
        ``"B"`` and response times are positive seconds.
    """
    if n_participants < 1 or n_items < 1:
        raise ValueError("n_participants and n_items must be >= 1.")
    if not (0.0 <= missing_rate < 1.0):
        raise ValueError("missing_rate must be in [0, 1).")

    rng = np.random.default_rng(seed)
    P, K = n_participants, n_items

    ability = rng.normal(0.0, 1.0, size=P)
    offset = rng.normal(10.0, 10.0, size=P)
    sensitivity = rng.uniform(0.0, 25.0, size=P)
    difficulty = rng.normal(0.0, 1.0, size=K)

    p_correct = _sigmoid(ability[:, None] - difficulty[None, :])
    correct = (rng.random((P, K)) < p_correct).astype(int)

    base = 50.0 + offset[:, None] + sensitivity[:, None] * (correct - 0.5)
    conf = np.clip(np.round(base + rng.normal(0.0, 12.0, size=(P, K))), 0, 100)
    if missing_rate > 0.0:
        conf[rng.random((P, K)) < missing_rate] = np.nan

    decision = np.where(rng.random((P, K)) < 0.5, "A", "B")
    rt = np.round(rng.lognormal(mean=1.0, sigma=0.4, size=(P, K)), 3)

    data = {ID_COL: np.arange(1, P + 1)}
    for k in range(K):
        n = k + 1
        data[f"a{n}"] = correct[:, k]
        data[f"c{n}"] = conf[:, k]
        data[f"d{n}"] = decision[:, k]
        data[f"t{n}"] = rt[:, k]
    return pd.DataFrame(data)


__all__ = ["simulate_wide"]
