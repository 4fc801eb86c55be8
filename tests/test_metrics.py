import pytest

from digitnet import metrics
from digitnet.confusion_matrix import ConfusionMatrix

PRED = [0, 1, 1, 2, 2, 0, 1, 2]
TRUTH = [0, 1, 2, 2, 0, 0, 1, 1]


def _matrix(pred, truth, classes=3):
    cm = ConfusionMatrix(classes)
    cm.calculate(pred, truth)
    return cm


def test_perfect_predictions_score_one():
    labels = [0, 1, 2, 2, 1]
    cm = _matrix(labels, labels)
    assert metrics.recall(cm) == [1.0, 1.0, 1.0]
    assert metrics.precision(cm) == [1.0, 1.0, 1.0]
    assert metrics.f1_score(cm) == [1.0, 1.0, 1.0]
    assert metrics.accuracy(cm) == 1.0


def test_accuracy_is_fraction_correct():
    cm = _matrix(PRED, TRUTH)
    correct = sum(p == t for p, t in zip(PRED, TRUTH))
    assert metrics.accuracy(cm) == pytest.approx(correct / len(PRED))


def test_empty_matrix_gives_zeros():
    cm = ConfusionMatrix(3)
    assert metrics.accuracy(cm) == 0.0
    assert metrics.recall(cm) == [0.0, 0.0, 0.0]
    assert metrics.precision(cm) == [0.0, 0.0, 0.0]
    assert metrics.f1_score(cm) == [0.0, 0.0, 0.0]


def test_unseen_class_scores_zero():
    cm = _matrix([0, 1], [0, 1], classes=3)
    assert metrics.recall(cm)[2] == 0.0
    assert metrics.precision(cm)[2] == 0.0


def test_f1_is_harmonic_mean():
    cm = _matrix(PRED, TRUTH)
    for p, r, f in zip(metrics.precision(cm), metrics.recall(cm), metrics.f1_score(cm)):
        expected = 0.0 if p + r == 0 else 2 * p * r / (p + r)
        assert f == pytest.approx(expected)


def test_metrics_in_unit_interval():
    cm = _matrix(PRED, TRUTH)
    for values in (metrics.recall(cm), metrics.precision(cm), metrics.f1_score(cm)):
        assert len(values) == 3
        assert all(0.0 <= v <= 1.0 for v in values)


def test_macro_average():
    assert metrics.macro_average([]) == 0.0
    assert metrics.macro_average([0.25, 0.25, 0.25]) == pytest.approx(0.25)
    values = [0.1, 0.9, 0.5]
    avg = metrics.macro_average(values)
    assert min(values) <= avg <= max(values)
    assert avg * len(values) == pytest.approx(sum(values))