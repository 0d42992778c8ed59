"""Discrimination: higher confidence on correct than on incorrect answers.

Two complementary indicators are provided. The difference form contrasts
mean confidence between correct and incorrect answers on the rating scale.
The rank form correlates correctness with confidence and is bounded in
``[-1, 1]``. Across groups the two are usually strongly positively related,
but they are not interchangeable.

Both are undefined (``nan``) when a group has no contrast, i.e. when every
answer is correct or every answer is incorrect. Pairs with a missing
correctness flag or a missing rating are dropped first.

"""

import numpy as np

from ..utils import rank_correlation

from .._types import CorrelationMethod
from .utils import _paired_complete, _validate_binary


def discrimination(correct, confidence) -> float:
    """
    Mean confidence on correct answers minus mean confidence on errors.

    Args:
        correct: 1D sequence of 0/1 flags.
        confidence: 1D sequence of ratings, same length as ``correct``.

    Returns:
        float: :math:`\\bar{c}_{a=1} - \\bar{c}_{a=0}`, or ``nan`` when
        ``correct`` holds fewer than two distinct values.

    Formula:
        .. math::

            d = \\frac{\\sum_i a_i c_i}{\\sum_i a_i}
              - \\frac{\\sum_i (1-a_i) c_i}{\\sum_i (1-a_i)}

    Examples:
        >>> discrimination([1, 1, 0, 0], [90, 80, 30, 20])
        60.0
        >>> discrimination([1, 1, 1], [90, 80, 30])
        nan
    """
    a, c = _paired_complete(correct, confidence)
    _validate_binary(a)
    if np.unique(a).size < 2:
        return float("nan")
    hit = a == 1
    return float(np.mean(c[hit]) - np.mean(c[~hit]))


def rank_discrimination(
    correct,
    confidence,
    method: CorrelationMethod = "spearman",
) -> float:
    """
    Correlation between correctness and confidence.

    Method context:
        The default Spearman coefficient is the Pearson correlation of
        average ranks, so tied ratings (and the two tied blocks of the
        binary correctness vector) receive the mean of the ranks they span.
        ``"kendall"`` gives tau-b and ``"pearson"`` the point-biserial
        correlation on raw ratings.

    Args:
        correct: 1D sequence of 0/1 flags.
        confidence: 1D sequence of ratings, same length as ``correct``.
        method: One of ``"spearman"``, ``"kendall"`` or ``"pearson"``.

    Returns:
        float: Coefficient in ``[-1, 1]``, or ``nan`` when ``correct`` holds
        fewer than two distinct values or ``confidence`` is constant.

    Examples:
        >>> round(rank_discrimination([1, 1, 0, 0], [90, 80, 30, 20]), 4)
        0.8944
        >>> rank_discrimination([1, 0, 1, 0], [50, 50, 50, 50])
        nan
    """
    a, c = _paired_complete(correct, confidence)
    _validate_binary(a)
    if np.unique(a).size < 2:
        return float("nan")
    if np.ptp(c) == 0.0:
        return float("nan")
    return rank_correlation(a, c, method=method)


__all__ = [
    "discrimination",
    "rank_discrimination",
]
