"""Classification metrics derived from a confusion matrix."""

from __future__ import annotations

from collections.abc import Sequence

from digitnet.confusion_matrix import ConfusionMatrix


def _ratio(numerator: float, denominator: float) -> float:
    return 0.0 if denominator == 0 else numerator / denominator


def recall(conf_mat: ConfusionMatrix) -> list[float]:
    """Share of each class's samples that were predicted correctly."""
    return [
        _ratio(tp, tp + fn)
        for tp, fn in zip(conf_mat.true_positives, conf_mat.false_negatives)
    ]


def precision(conf_mat: ConfusionMatrix) -> list[float]:
    """Share of each class's predictions that were correct."""
    return [
        _ratio(tp, tp + fp)
        for tp, fp in zip(conf_mat.true_positives, conf_mat.false_positives)
    ]


def f1_score(conf_mat: ConfusionMatrix) -> list[float]:
    """Per-class F1 score."""
    return [
        _ratio(2.0 * tp, 2.0 * tp + fp + fn)
        for tp, fp, fn in zip(
            conf_mat.true_positives,
            conf_mat.false_positives,
            conf_mat.false_negatives,
        )
    ]


def accuracy(conf_mat: ConfusionMatrix) -> float:
    """Share of all samples that were predicted correctly."""
    return _ratio(sum(conf_mat.true_positives), conf_mat.sample_count)


def macro_average(metric_per_class: Sequence[float]) -> float:
    """Unweighted mean over classes; 0 when there are none."""
    values = list(metric_per_class)
    return _ratio(sum(values), len(values))