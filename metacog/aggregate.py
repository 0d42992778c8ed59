"""Per-participant and per-item metric tables.

All functions here take a long-format ``pandas.DataFrame`` (one row per
participant x item observation, see :func:`metacog.reshape.wide_to_long`),
split it into groups by a key column and reduce each group with scalar
metrics from :mod:`metacog.metrics`.

Output Format
-------------
A DataFrame indexed by the (sorted) group key with one column per metric.
Row order does not follow input order, so consumers should join on the
key rather than on position.

"""

import logging
from functools import partial
from typing import Mapping

import numpy as np
import pandas as pd

from ._types import CorrelationMethod, GroupKey, MetricSpec
from .metrics import accuracy, bias, confidence, discrimination, rank_discrimination
from .reshape import ID_COL, ITEM_COL
from .utils import rank_correlation

logger = logging.getLogger(__name__)

METRIC_COLUMNS = [
    "accuracy",
    "confidence",
    "bias",
    "discrimination",
    "rank_discrimination",
]


def default_metrics(method: CorrelationMethod = "spearman") -> dict[str, MetricSpec]:
    """Named metrics used by :func:`participant_metrics` and :func:`item_metrics`."""
    return {
        "accuracy": ("correct", accuracy),
        "confidence": ("confidence", confidence),
        "discrimination": (("correct", "confidence"), discrimination),
        "rank_discrimination": (
            ("correct", "confidence"),
            partial(rank_discrimination, method=method),
        ),
    }


DEFAULT_METRICS = default_metrics()


def _columns_of(spec: MetricSpec) -> tuple[str, ...]:
    columns, _ = spec
    if isinstance(columns, str):
        return (columns,)
    return tuple(columns)


def aggregate(
    long: pd.DataFrame,
    by: str,
    metrics: Mapping[str, MetricSpec],
) -> pd.DataFrame:
    """
    Group ``long`` by ``by`` and apply every named metric to each group.

    Args:
        long: Long-format observations.
        by: Name of the grouping key column (e.g. ``"id"`` or ``"item"``).
        metrics: Mapping ``name -> (columns, func)``. A single column name
            calls ``func(vector)``; a sequence of names calls
            ``func(*vectors)`` in that order.

    Returns:
        DataFrame indexed by ``by`` (sorted), one row per distinct key and
        one column per metric, in mapping order.

    Raises:
        ValueError: If ``by`` or a column named by a metric is missing, or
            ``metrics`` is empty.

    Examples:
        >>> import pandas as pd
        >>> from metacog.metrics import accuracy
        >>> long = pd.DataFrame({"id": [1, 1, 2], "correct": [1, 0, 1]})
        >>> aggregate(long, "id", {"accuracy": ("correct", accuracy)})["accuracy"].tolist()
        [50.0, 100.0]
    """
    if by not in long.columns:
        raise ValueError(f"Grouping column {by!r} not found.")
    if not metrics:
        raise ValueError("metrics must name at least one metric.")
    for name, spec in metrics.items():
        missing = [c for c in _columns_of(spec) if c not in long.columns]
        if missing:
            raise ValueError(f"Metric {name!r} needs missing column(s) {missing}.")

    n_missing_key = int(long[by].isna().sum())
    if n_missing_key:
        logger.warning(
            "Dropping %d observation(s) with missing %r", n_missing_key, by
        )

    rows = {}
    for key, group in long.groupby(by, sort=True, observed=True):
        row = {}
        for name, spec in metrics.items():
            _, func = spec
            vectors = [
                group[c].to_numpy(dtype=float, na_value=np.nan)
                for c in _columns_of(spec)
            ]
            row[name] = func(*vectors)
        rows[key] = row

    table = pd.DataFrame.from_dict(rows, orient="index", columns=list(metrics))
    table.index.name = by
    logger.debug("Aggregated %d rows into %d %r groups", len(long), len(table), by)
    return table


def _metrics_table(
    long: pd.DataFrame, by: GroupKey | str, method: CorrelationMethod
) -> pd.DataFrame:
    table = aggregate(long, by, default_metrics(method))
    table["bias"] = bias(
        table["confidence"].to_numpy(), table["accuracy"].to_numpy()
    )
    return table[METRIC_COLUMNS]


def participant_metrics(
    long: pd.DataFrame,
    method: CorrelationMethod = "spearman",
    id_col: str = ID_COL,
) -> pd.DataFrame:
    """
    Metrics table with one row per participant.

    Args:
        long: Long-format observations.
        method: Correlation used for ``rank_discrimination``.
        id_col: Participant identifier column.

    Returns:
        DataFrame indexed by participant with columns ``accuracy``,
        ``confidence``, ``bias``, ``discrimination`` and
        ``rank_discrimination``.
    """
    return _metrics_table(long, id_col, method)


def item_metrics(
    long: pd.DataFrame,
    method: CorrelationMethod = "spearman",
    item_col: str = ITEM_COL,
) -> pd.DataFrame:
    """Metrics table with one row per item; see :func:`participant_metrics`."""
    return _metrics_table(long, item_col, method)


def compare_discrimination(
    table: pd.DataFrame,
    method: CorrelationMethod = "spearman",
) -> dict[str, float | int]:
    """
    Agreement between the two discrimination forms across groups.

    Args:
        table: Output of :func:`participant_metrics` or :func:`item_metrics`.
        method: Correlation used to compare the two columns.

    Returns:
        Dictionary with keys ``"correlation"`` (``nan`` with fewer than
        three usable groups), ``"n_groups"`` (groups used) and
        ``"n_dropped"`` (groups with an undefined discrimination value).
    """
    for col in ("discrimination", "rank_discrimination"):
        if col not in table.columns:
            raise ValueError(f"table must have a {col!r} column.")
    pairs = table[["discrimination", "rank_discrimination"]].dropna()
    n = len(pairs)
    if n < 3:
        corr = float("nan")
    else:
        corr = rank_correlation(
            pairs["discrimination"].to_numpy(),
            pairs["rank_discrimination"].to_numpy(),
            method=method,
        )
    return {
        "correlation": corr,
        "n_groups": n,
        "n_dropped": int(len(table) - n),
    }


__all__ = [
    "DEFAULT_METRICS",
    "METRIC_COLUMNS",
    "aggregate",
    "compare_discrimination",
    "default_metrics",
    "item_metrics",
    "participant_metrics",
]
