import numpy as np
import pytest

from digitnet.optimizer import Optimizer


def _params():
    weights = [np.ones((3, 2), dtype=np.float32), np.ones((1, 3), dtype=np.float32)]
    biases = [np.zeros(3, dtype=np.float32), np.zeros(1, dtype=np.float32)]
    return weights, biases


def _grads():
    weight_grads = [
        np.array([[0.5, -2.0], [1.0, 0.0], [-0.1, 3.0]], dtype=np.float32),
        np.array([[4.0, -4.0, 0.0]], dtype=np.float32),
    ]
    bias_grads = [np.array([1.0, -1.0, 0.0], dtype=np.float32),
                  np.array([0.2], dtype=np.float32)]
    return weight_grads, bias_grads


def test_first_step_moves_by_learn_rate_against_gradient():
    opt = Optimizer(0.01, 0.9, 0.999)
    weights, biases = _params()
    wg, bg = _grads()
    expected_w = [w - 0.01 * np.sign(g) for w, g in zip(weights, wg)]
    expected_b = [b - 0.01 * np.sign(g) for b, g in zip(biases, bg)]
    opt.step(weights, biases, wg, bg)
    for got, want in zip(weights + biases, expected_w + expected_b):
        assert np.allclose(got, want, atol=1e-5)


def test_default_learn_rate():
    opt = Optimizer()
    weights, biases = _params()
    wg, bg = _grads()
    opt.step(weights, biases, wg, bg)
    assert weights[0][0, 0] == pytest.approx(1.0 - opt.learn_rate, rel=1e-5)
    assert opt.learn_rate == pytest.approx(1e-3)


def test_step_resets_gradients():
    opt = Optimizer()
    weights, biases = _params()
    wg, bg = _grads()
    opt.step(weights, biases, wg, bg)
    assert all(not g.any() for g in wg + bg)


def test_compute_adam_keeps_gradients():
    opt = Optimizer()
    weights, biases = _params()
    wg, bg = _grads()
    before = [g.copy() for g in wg + bg]
    opt.compute_adam(weights, biases, wg, bg)
    assert all(np.array_equal(a, b) for a, b in zip(before, wg + bg))


def test_zero_gradient_leaves_parameters():
    opt = Optimizer()
    weights, biases = _params()
    wg = [np.zeros_like(w) for w in weights]
    bg = [np.zeros_like(b) for b in biases]
    opt.step(weights, biases, wg, bg)
    original_w, original_b = _params()
    assert all(np.array_equal(a, b) for a, b in zip(weights, original_w))
    assert all(np.array_equal(a, b) for a, b in zip(biases, original_b))


def test_step_count_and_repeated_steps_descend():
    opt = Optimizer(0.05, 0.9, 0.999)
    weights = [np.array([[2.0]], dtype=np.float32)]
    biases = [np.array([0.0], dtype=np.float32)]
    values = []
    for _ in range(5):
        wg = [2 * weights[0].copy()]
        bg = [np.zeros(1, dtype=np.float32)]
        opt.step(weights, biases, wg, bg)
        values.append(float(weights[0][0, 0]))
    assert opt.step_count == 5
    assert values == sorted(values, reverse=True)
    assert values[-1] < 2.0


def test_mismatched_layer_counts():
    opt = Optimizer()
    weights, biases = _params()
    wg, bg = _grads()
    with pytest.raises(ValueError):
        opt.step(weights, biases[:1], wg, bg)