import numpy as np
import pandas as pd


def _as_1d_float(x, name: str) -> np.ndarray:
    """Coerce a sequence to a 1D float array; ``None`` and ``pd.NA`` become ``nan``."""
    v = np.asarray(x, dtype=object)
    if v.ndim == 0:
        v = v.reshape(1)
    elif v.ndim != 1:
        raise ValueError(f"{name} must be a 1D sequence.")
    return pd.Series(v, dtype=object).to_numpy(dtype=float, na_value=np.nan)


def _drop_missing(v: np.ndarray) -> np.ndarray:
    return v[~np.isnan(v)]


def _paired_complete(
    correct, confidence
) -> tuple[np.ndarray, np.ndarray]:
    """Return the pairs where neither correctness nor confidence is missing."""
    c = _as_1d_float(correct, "correct")
    r = _as_1d_float(confidence, "confidence")
    if c.shape != r.shape:
        raise ValueError(
            f"correct and confidence must have the same length; got {c.size} and {r.size}"
        )
    keep = ~(np.isnan(c) | np.isnan(r))
    return c[keep], r[keep]


def _validate_binary(v: np.ndarray, name: str = "correct") -> None:
    """Validate that non-missing entries are binary (0 or 1)."""
    if v.size == 0:
        return
    if not np.all((v == 0) | (v == 1)):
        raise ValueError(f"Entries of {name} must be 0 or 1.")


def _validate_range(
    v: np.ndarray, bounds: tuple[float, float] | None, name: str
) -> None:
    """Validate that non-missing entries are within ``bounds`` (inclusive)."""
    if bounds is None or v.size == 0:
        return
    lo, hi = bounds
    if lo > hi:
        raise ValueError("bounds must satisfy bounds[0] <= bounds[1]")
    if v.min() < lo or v.max() > hi:
        raise ValueError(f"Entries of {name} must be in [{lo}, {hi}].")
