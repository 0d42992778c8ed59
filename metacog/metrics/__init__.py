"""Scalar confidence-rating metrics for one group of observations.

Notation
--------
A group is the set of observations sharing one participant or one item.

- :math:`a_i \\in \\{0,1\\}` is the correctness of observation :math:`i`.
- :math:`c_i \\in [0,100]` is the confidence rating of observation :math:`i`.

Missing entries (``nan``, ``None`` or ``pd.NA``) are dropped before any reduction.

Return Pattern
---------------------
Every metric returns a plain ``float``. Statistics that are undefined for a
group (empty input, no correct/incorrect contrast, constant confidence)
return ``nan`` instead of raising, so tables can carry them as missing
values. Precondition violations such as non-binary correctness raise
``ValueError``.

Available Metrics
------------------
- Level: ``accuracy``, ``confidence``.
- Calibration: ``bias``.
- Discrimination: ``discrimination`` (mean difference) and
  ``rank_discrimination`` (correlation).
"""

from .basic import accuracy, bias, confidence
from .discrimination import discrimination, rank_discrimination

__all__ = [
    # Level
    "accuracy",
    "confidence",
    # Calibration
    "bias",
    # Discrimination
    "discrimination",
    "rank_discrimination",
]
