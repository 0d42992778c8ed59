"""Accuracy, confidence and bias.

Let :math:`a \\in \\{0,1\\}^{n}` be correctness flags and
:math:`c \\in [0,100]^{n}` be confidence ratings for one group of
observations. Missing entries are dropped before averaging, so every metric
here is computed over the :math:`n'` non-missing entries.

"""

import numpy as np

from .utils import _as_1d_float, _drop_missing, _validate_binary, _validate_range


def accuracy(correct) -> float:
    """
    Percentage of correct answers among non-missing entries.

    Args:
        correct: 1D sequence of 0/1 flags; ``nan`` or ``None`` marks a
            missing entry.

    Returns:
        float: :math:`100 \\cdot \\bar{a}` in ``[0, 100]``, or ``nan`` when
        no entry is left after dropping missing values.

    Formula:
        .. math::

            \\text{accuracy} = \\frac{100}{n'} \\sum_{i} a_i

    Examples:
        >>> accuracy([1, 1, 0, 1])
        75.0
        >>> round(accuracy([1, None, 0, 1]), 2)
        66.67
    """
    a = _drop_missing(_as_1d_float(correct, "correct"))
    _validate_binary(a)
    if a.size == 0:
        return float("nan")
    return float(100.0 * np.mean(a))


def confidence(
    ratings,
    bounds: tuple[float, float] | None = (0.0, 100.0),
) -> float:
    """
    Mean confidence rating among non-missing entries.

    Args:
        ratings: 1D sequence of confidence ratings; ``nan`` or ``None``
            marks a missing entry.
        bounds: optional inclusive ``(lo, hi)`` range the ratings must lie
            in. ``None`` disables the check.

    Returns:
        float: Arithmetic mean, or ``nan`` for empty input.

    Examples:
        >>> confidence([20, 40, 60, 80])
        50.0
    """
    c = _drop_missing(_as_1d_float(ratings, "ratings"))
    _validate_range(c, bounds, "ratings")
    if c.size == 0:
        return float("nan")
    return float(np.mean(c))


def bias(confidence, accuracy):
    """
    Over- or underconfidence: mean confidence minus percent accuracy.

    Both operands are on the 0-100 scale. Vectors are subtracted
    elementwise; a missing operand gives ``nan``.

    Args:
        confidence: scalar or 1D sequence of mean confidence values.
        accuracy: scalar or 1D sequence of percent accuracy values, same
            shape as ``confidence``.

    Returns:
        float for scalar inputs, ``np.ndarray`` otherwise. Positive values
        mean overconfidence.

    Examples:
        >>> bias(70, 55)
        15.0
        >>> bias([70, 40], [55, 60]).tolist()
        [15.0, -20.0]
    """
    c = np.asarray(confidence, dtype=float)
    a = np.asarray(accuracy, dtype=float)
    if c.shape != a.shape:
        raise ValueError(
            f"confidence and accuracy must have the same shape; got {c.shape} and {a.shape}"
        )
    out = c - a
    if out.ndim == 0:
        return float(out)
    return out


__all__ = [
    "accuracy",
    "confidence",
    "bias",
]
