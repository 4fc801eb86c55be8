"""Per-class prediction counts for a classifier."""

from __future__ import annotations

from collections.abc import Sequence


class ConfusionMatrix:
    """True/false positive and negative counts for each class."""

    def __init__(self, class_count: int) -> None:
        self.class_count = class_count
        self.sample_count = 0
        self.true_positives = [0] * class_count
        self.true_negatives = [0] * class_count
        self.false_positives = [0] * class_count
        self.false_negatives = [0] * class_count

    def _check_class(self, value: int) -> int:
        value = int(value)
        if not 0 <= value < self.class_count:
            raise IndexError(f"class {value} outside [0, {self.class_count})")
        return value

    def calculate(self, predictions: Sequence[int], truth: Sequence[int]) -> None:
        """Count outcomes of the given predictions against the true classes."""
        if len(predictions) != len(truth):
            raise ValueError(
                f"{len(predictions)} predictions but {len(truth)} true labels"
            )
        n = self.class_count
        self.true_positives = [0] * n
        self.false_positives = [0] * n
        self.false_negatives = [0] * n
        self.sample_count = len(predictions)
        for pred, actual in zip(predictions, truth):
            pred = self._check_class(pred)
            actual = self._check_class(actual)
            if pred == actual:
                self.true_positives[pred] += 1
            else:
                self.false_positives[pred] += 1
                self.false_negatives[actual] += 1
        self.true_negatives = [
            self.sample_count - (tp + fp + fn)
            for tp, fp, fn in zip(
                self.true_positives, self.false_positives, self.false_negatives
            )
        ]

    def __str__(self) -> str:
        return (
            f"true positives:  {self.true_positives}\n"
            f"false positives: {self.false_positives}\n"
            f"false negatives: {self.false_negatives}\n"
        )