"""Adam optimizer for lists of weight matrices and bias vectors."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


class Optimizer:
    """Adam with bias-corrected first and second moment estimates."""

    EPS = 1e-8

    def __init__(self, learn_rate: float = 1e-3, beta1: float = 0.9, beta2: float = 0.999) -> None:
        self.learn_rate = learn_rate
        self.beta1 = beta1
        self.beta2 = beta2
        self.step_count = 0
        self._weight_mean: list[np.ndarray] | None = None
        self._weight_variance: list[np.ndarray] = []
        self._bias_mean: list[np.ndarray] = []
        self._bias_variance: list[np.ndarray] = []

    def _init_moments(self, weights: Sequence[np.ndarray], biases: Sequence[np.ndarray]) -> None:
        if self._weight_mean is not None:
            return

        def zeros(params):
            return [np.zeros(np.shape(p), dtype=np.float32) for p in params]

        self._weight_mean = zeros(weights)
        self._weight_variance = zeros(weights)
        self._bias_mean = zeros(biases)
        self._bias_variance = zeros(biases)

    def _update(self, param, grad, means, variances, i, correction1, correction2) -> None:
        means[i] = self.beta1 * means[i] + (1.0 - self.beta1) * grad
        variances[i] = self.beta2 * variances[i] + (1.0 - self.beta2) * grad * grad
        mean_hat = means[i] / correction1
        variance_hat = variances[i] / correction2
        param -= self.learn_rate * mean_hat / (np.sqrt(variance_hat) + self.EPS)

    def compute_adam(self, weights, biases, weight_grads, bias_grads) -> None:
        """Apply one Adam update to ``weights`` and ``biases`` in place."""
        layers = list(zip(weights, biases, weight_grads, bias_grads, strict=True))
        self._init_moments(weights, biases)
        self.step_count += 1
        correction1 = 1.0 - self.beta1 ** self.step_count
        correction2 = 1.0 - self.beta2 ** self.step_count
        for i, (w, b, gw, gb) in enumerate(layers):
            self._update(w, np.asarray(gw), self._weight_mean, self._weight_variance,
                         i, correction1, correction2)
            self._update(b, np.asarray(gb), self._bias_mean, self._bias_variance,
                         i, correction1, correction2)

    def step(self, weights, biases, weight_grads, bias_grads) -> None:
        """Update the parameters, then zero the accumulated gradients."""
        self.compute_adam(weights, biases, weight_grads, bias_grads)
        for grad in (*weight_grads, *bias_grads):
            grad.fill(0.0)