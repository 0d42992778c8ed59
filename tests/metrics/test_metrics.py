import math

import numpy as np
import pandas as pd
import pytest
from scipy.stats import kendalltau, pearsonr, spearmanr

from metacog import metrics


def _difference_reference(correct, confidence) -> float:
    hits = [c for a, c in zip(correct, confidence) if a == 1]
    misses = [c for a, c in zip(correct, confidence) if a == 0]
    return sum(hits) / len(hits) - sum(misses) / len(misses)


@pytest.mark.parametrize("n", [1, 3, 10])
def test_accuracy_all_correct_is_100(n: int) -> None:
    assert metrics.accuracy([1] * n) == 100.0


@pytest.mark.parametrize("n", [1, 3, 10])
def test_accuracy_all_incorrect_is_0(n: int) -> None:
    assert metrics.accuracy([0] * n) == 0.0


def test_accuracy_excludes_missing_values() -> None:
    with_na = metrics.accuracy([1, np.nan, 0, 1])
    without = metrics.accuracy([1, 0, 1])
    assert with_na == pytest.approx(without)
    assert with_na == pytest.approx(200.0 / 3.0)
    assert metrics.accuracy([1, None, 0, 1]) == pytest.approx(without)


def test_accuracy_empty_after_filtering_is_nan() -> None:
    assert math.isnan(metrics.accuracy([]))
    assert math.isnan(metrics.accuracy([np.nan, None]))


def test_accuracy_accepts_booleans() -> None:
    assert metrics.accuracy(np.array([True, False, True, True])) == 75.0


def test_accuracy_rejects_non_binary() -> None:
    with pytest.raises(ValueError, match="must be 0 or 1"):
        metrics.accuracy([1, 2, 0])


def test_confidence_mean() -> None:
    assert metrics.confidence([20, 40, 60, 80]) == 50.0


def test_confidence_excludes_missing_values() -> None:
    assert metrics.confidence([20, np.nan, 80]) == 50.0
    assert math.isnan(metrics.confidence([np.nan]))


def test_confidence_bounds() -> None:
    with pytest.raises(ValueError, match=r"in \[0.0, 100.0\]"):
        metrics.confidence([50, 120])
    assert metrics.confidence([1, 2, 3], bounds=(1, 4)) == 2.0
    assert metrics.confidence([150, 250], bounds=None) == 200.0


def test_bias_scalar() -> None:
    out = metrics.bias(confidence=70, accuracy=55)
    assert isinstance(out, float)
    assert out == 15.0


def test_bias_is_antisymmetric() -> None:
    assert metrics.bias(55, 70) == -metrics.bias(70, 55)
    assert metrics.bias(55, 70) != metrics.bias(70, 55)
    assert metrics.bias(60, 60) == 0.0


def test_bias_vectors_elementwise() -> None:
    out = metrics.bias([70, 40, np.nan], [55, 60, 50])
    np.testing.assert_allclose(out, [15.0, -20.0, np.nan])


def test_bias_nan_operand_propagates() -> None:
    assert math.isnan(metrics.bias(float("nan"), 50.0))


def test_bias_shape_mismatch() -> None:
    with pytest.raises(ValueError, match="same shape"):
        metrics.bias([1.0, 2.0], [1.0])


def test_discrimination_difference() -> None:
    correct = [1, 1, 0, 0]
    conf = [90, 80, 30, 20]
    assert metrics.discrimination(correct, conf) == 60.0
    assert metrics.discrimination(correct, conf) == pytest.approx(
        _difference_reference(correct, conf)
    )


def test_discrimination_inverted_is_negative() -> None:
    assert metrics.discrimination([0, 0, 1, 1], [90, 80, 30, 20]) == -60.0


@pytest.mark.parametrize("correct", [[1, 1, 1], [0, 0, 0], [1]])
def test_discrimination_without_contrast_is_nan(correct: list[int]) -> None:
    conf = [90, 10, 50][: len(correct)]
    assert math.isnan(metrics.discrimination(correct, conf))
    assert math.isnan(metrics.rank_discrimination(correct, conf))


def test_constant_confidence() -> None:
    correct = [1, 0, 1, 0]
    conf = [50, 50, 50, 50]
    assert math.isnan(metrics.rank_discrimination(correct, conf))
    assert metrics.discrimination(correct, conf) == 0.0


def test_discrimination_drops_incomplete_pairs() -> None:
    correct = [1, 1, np.nan, 0, 0]
    conf = [90, np.nan, 10, 30, 20]
    assert metrics.discrimination(correct, conf) == 65.0


def test_discrimination_incomplete_pairs_can_remove_contrast() -> None:
    assert math.isnan(metrics.discrimination([1, 0], [80, np.nan]))


def test_discrimination_length_mismatch() -> None:
    with pytest.raises(ValueError, match="same length"):
        metrics.discrimination([1, 0, 1], [10, 20])
    with pytest.raises(ValueError, match="same length"):
        metrics.rank_discrimination([1, 0, 1], [10, 20])


def test_rank_discrimination_matches_scipy_spearman() -> None:
    correct = [1, 0, 1, 1, 0, 1, 0, 1]
    conf = [80, 40, 70, 70, 55, 90, 40, 30]
    expected = spearmanr(correct, conf)[0]
    assert metrics.rank_discrimination(correct, conf) == pytest.approx(expected)


def test_rank_discrimination_worked_example() -> None:
    # ranks: correct (3.5, 3.5, 1.5, 1.5), confidence (4, 3, 2, 1)
    out = metrics.rank_discrimination([1, 1, 0, 0], [90, 80, 30, 20])
    assert out == pytest.approx(4.0 / math.sqrt(20.0))


def test_rank_discrimination_methods() -> None:
    correct = [1, 0, 1, 1, 0, 1, 0, 0]
    conf = [80, 40, 70, 65, 55, 90, 40, 60]
    tau = metrics.rank_discrimination(correct, conf, method="kendall")
    r = metrics.rank_discrimination(correct, conf, method="pearson")
    assert tau == pytest.approx(kendalltau(correct, conf)[0])
    assert r == pytest.approx(pearsonr(correct, conf)[0])


def test_rank_discrimination_unknown_method() -> None:
    with pytest.raises(ValueError, match="method must be one of"):
        metrics.rank_discrimination([1, 0], [80, 20], method="cosine")


def test_both_forms_agree_in_sign() -> None:
    correct = [1, 1, 0, 1, 0, 0]
    conf = [40, 50, 70, 30, 90, 60]
    assert metrics.discrimination(correct, conf) < 0
    assert metrics.rank_discrimination(correct, conf) < 0


def test_pandas_missing_marker_is_dropped() -> None:
    assert metrics.accuracy([1, pd.NA, 0, 1]) == pytest.approx(200.0 / 3.0)
    assert metrics.confidence(pd.array([20, pd.NA, 80], dtype="Int64")) == 50.0
    assert metrics.discrimination([1, 0, pd.NA], [80, 20, 50]) == 60.0
