"""Shared type aliases for correlation methods and grouping keys."""

from typing import Callable, Literal, Sequence, TypeAlias

CorrelationMethod: TypeAlias = Literal["spearman", "kendall", "pearson"]
GroupKey: TypeAlias = Literal["id", "item"]
MetricSpec: TypeAlias = tuple[str | Sequence[str], Callable[..., float]]
