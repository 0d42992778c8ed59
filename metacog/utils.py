import numpy as np
from scipy.stats import kendalltau, pearsonr, rankdata

from ._types import CorrelationMethod

CORRELATION_METHODS = ("spearman", "kendall", "pearson")


def average_ranks(values, tol=1e-12):
    """
    Rank values in ascending order with average (fractional) tie handling.

    Args:
        values (list or np.ndarray): 1D sequence of finite values.
        tol (float): Tolerance threshold for treating values as equal.

    Returns:
        np.ndarray: Ranks starting at 1.0; tied values share the mean of
        the ranks they span (e.g. ``[1.0, 2.5, 2.5, 4.0]``).
    """
    x = np.asarray(values, dtype=float)
    if x.ndim != 1:
        raise ValueError("values must be a 1D sequence.")
    order = np.argsort(x, kind="stable")
    sorted_x = x[order]

    # Group near-equal values (within tolerance)
    grouped = sorted_x.copy()
    for i in range(1, len(grouped)):
        if abs(grouped[i] - grouped[i - 1]) <= tol:
            grouped[i] = grouped[i - 1]

    ranks = np.empty(len(x), dtype=float)
    ranks[order] = rankdata(grouped, method="average")
    return ranks


def rank_correlation(x, y, method: CorrelationMethod = "spearman") -> float:
    """
    Correlation coefficient between two parallel 1D sequences.

    Args:
        x, y: Finite values of equal length (at least 2).
        method: ``"spearman"`` (Pearson correlation of average ranks),
            ``"kendall"`` (tau-b, tie-corrected) or ``"pearson"``.

    Returns:
        float: Coefficient in ``[-1, 1]``, or ``nan`` when either input is
        constant.
    """
    if method not in CORRELATION_METHODS:
        raise ValueError(
            f"method must be one of {CORRELATION_METHODS}; got {method!r}"
        )
    xv = np.asarray(x, dtype=float)
    yv = np.asarray(y, dtype=float)
    if xv.shape != yv.shape or xv.ndim != 1:
        raise ValueError("x and y must be 1D and same shape.")
    if xv.size < 2 or np.ptp(xv) == 0.0 or np.ptp(yv) == 0.0:
        return float("nan")

    if method == "spearman":
        rx, ry = average_ranks(xv), average_ranks(yv)
        # values within tol of each other collapse to one tied rank
        if np.ptp(rx) == 0.0 or np.ptp(ry) == 0.0:
            return float("nan")
        rho, _ = pearsonr(rx, ry)
    elif method == "kendall":
        rho, _ = kendalltau(xv, yv)
    else:
        rho, _ = pearsonr(xv, yv)
    return float(rho)


__all__ = [
    "CORRELATION_METHODS",
    "average_ranks",
    "rank_correlation",
]
