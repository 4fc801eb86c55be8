"""Fully connected feed-forward network for digit classification."""

from __future__ import annotations

import os
import struct
from collections.abc import Sequence

import numpy as np

from digitnet.confusion_matrix import ConfusionMatrix
from digitnet.helper import (
    index_of_max,
    relu,
    relu_derivative,
    shuffle,
    softmax,
    timestamped_filename,
)
from digitnet.optimizer import Optimizer

_MAGIC = b"KNNET"
_U64 = struct.Struct("<Q")
_FLOAT = np.dtype("<f4")
_INITIAL_BIAS = 0.01
_EVAL_CLASS_COUNT = 10


class NeuralNet:
    """ReLU hidden layers with a softmax output layer, trained by backpropagation."""

    def __init__(
        self,
        input_node_count: int,
        output_node_count: int,
        hidden_layer_count: int,
        hidden_node_count: int,
    ) -> None:
        if input_node_count <= 0 or output_node_count <= 0:
            raise ValueError("input and output layers need at least one node")
        if hidden_layer_count < 0:
            raise ValueError("hidden layer count cannot be negative")
        if hidden_layer_count and hidden_node_count <= 0:
            raise ValueError("hidden layers need at least one node")
        self.input_node_count = input_node_count
        self.output_node_count = output_node_count
        self.hidden_layer_count = hidden_layer_count
        self.hidden_node_count = hidden_node_count

        sizes = self.layer_sizes
        # He initialisation
        self.weights = [
            np.random.normal(0.0, np.sqrt(2.0 / fan_in), size=(fan_out, fan_in)).astype(
                np.float32
            )
            for fan_in, fan_out in zip(sizes, sizes[1:])
        ]
        self.biases = [
            np.full(fan_out, _INITIAL_BIAS, dtype=np.float32) for fan_out in sizes[1:]
        ]
        self._allocate()

    @classmethod
    def from_parameters(
        cls, weights: Sequence[np.ndarray], biases: Sequence[np.ndarray]
    ) -> NeuralNet:
        """Build a network from existing weight matrices and bias vectors."""
        ws = [np.array(w, dtype=np.float32) for w in weights]
        bs = [np.array(b, dtype=np.float32).reshape(-1) for b in biases]
        if not ws:
            raise ValueError("a network needs at least one weight matrix")
        if len(ws) != len(bs):
            raise ValueError(f"{len(ws)} weight matrices but {len(bs)} bias vectors")
        for i, (w, b) in enumerate(zip(ws, bs)):
            if w.ndim != 2:
                raise ValueError(f"weight {i} is not a matrix")
            if w.shape[0] != b.shape[0]:
                raise ValueError(f"layer {i}: {w.shape[0]} rows but {b.shape[0]} biases")
            if i and w.shape[1] != ws[i - 1].shape[0]:
                raise ValueError(f"layer {i} does not fit the layer before it")

        net = cls.__new__(cls)
        net.input_node_count = ws[0].shape[1]
        net.output_node_count = ws[-1].shape[0]
        net.hidden_layer_count = len(ws) - 1
        net.hidden_node_count = ws[0].shape[0]
        net.weights = ws
        net.biases = bs
        net._allocate()
        return net

    @property
    def layer_sizes(self) -> list[int]:
        """Node count of every layer, input first."""
        return (
            [self.input_node_count]
            + [self.hidden_node_count] * self.hidden_layer_count
            + [self.output_node_count]
        )

    def _allocate(self) -> None:
        sizes = [self.input_node_count] + [w.shape[0] for w in self.weights]
        self.neurons = [np.zeros(n, dtype=np.float32) for n in sizes]
        self.zvalues = [np.zeros(n, dtype=np.float32) for n in sizes]
        self.weight_grad_sum = [np.zeros_like(w) for w in self.weights]
        self.bias_grad_sum = [np.zeros_like(b) for b in self.biases]

    def forward_pass(self, input_data: Sequence[float]) -> None:
        """Propagate ``input_data`` through the network, storing every layer."""
        x = np.asarray(input_data, dtype=np.float32)
        if x.shape != (self.input_node_count,):
            raise ValueError(
                f"expected {self.input_node_count} inputs, got shape {x.shape}"
            )
        self.neurons[0] = x.copy()
        last = len(self.weights)
        for i, (w, b) in enumerate(zip(self.weights, self.biases), start=1):
            z = (w @ self.neurons[i - 1] + b).astype(np.float32)
            self.zvalues[i] = z
            self.neurons[i] = softmax(z) if i == last else relu(z).astype(np.float32)

    def backpropagation(self, target: Sequence[float], batch_size: int) -> None:
        """Add this sample's gradient, divided by ``batch_size``, to the sums."""
        t = np.asarray(target, dtype=np.float32)
        if t.shape != self.neurons[-1].shape:
            raise ValueError(
                f"expected target of shape {self.neurons[-1].shape}, got {t.shape}"
            )
        if batch_size <= 0:
            raise ValueError("batch size must be positive")
        delta = self.neurons[-1] - t
        for i in range(len(self.weights), 0, -1):
            self.weight_grad_sum[i - 1] += np.outer(delta, self.neurons[i - 1]) / batch_size
            self.bias_grad_sum[i - 1] += delta / batch_size
            if i > 1:
                delta = (
                    (self.weights[i - 1].T @ delta) * relu_derivative(self.zvalues[i - 1])
                ).astype(np.float32)

    def train(
        self,
        training_data,
        labels,
        epochs: int,
        batch_size: int,
        optimizer: Optimizer,
    ) -> None:
        """Train on normalized samples and one-hot labels with mini-batches."""
        if batch_size <= 0:
            raise ValueError("batch size must be positive")
        print(
            f"Started Training on {len(training_data)} trainingData, \n"
            "Model Parameters\n"
            f"Epochs: {epochs}\n"
            f"Batch Size: {batch_size}"
        )
        for _ in range(epochs):
            shuffle(training_data, labels)
            for i, (sample, label) in enumerate(zip(training_data, labels), start=1):
                self.forward_pass(sample)
                self.backpropagation(label, batch_size)
                if i % batch_size == 0:
                    optimizer.step(
                        self.weights, self.biases, self.weight_grad_sum, self.bias_grad_sum
                    )

    def classify(self, input_data: Sequence[float]) -> np.ndarray:
        """Return the output probabilities for one sample."""
        self.forward_pass(input_data)
        return self.neurons[-1].copy()

    def evaluate(self, test_data, labels) -> ConfusionMatrix:
        """Classify every sample and count the outcomes against one-hot labels."""
        predictions = [index_of_max(self.classify(sample)) for sample in test_data]
        truth = [index_of_max(label) for label in labels]
        conf_mat = ConfusionMatrix(_EVAL_CLASS_COUNT)
        conf_mat.calculate(predictions, truth)
        return conf_mat

    def save(self, filename: str) -> str:
        """Write the parameters to ``filename``; never overwrites. Returns the path used."""
        path = filename
        if os.path.exists(filename):
            path = timestamped_filename(filename)
            print(f"File {filename} already exists, saving as: {path}")
        with open(path, "wb") as fh:
            fh.write(_MAGIC)
            fh.write(_U64.pack(len(self.weights)))
            for w, b in zip(self.weights, self.biases):
                rows, cols = w.shape
                fh.write(_U64.pack(rows))
                fh.write(_U64.pack(cols))
                fh.write(np.ascontiguousarray(w, dtype=_FLOAT).tobytes())
                fh.write(_U64.pack(b.shape[0]))
                fh.write(np.ascontiguousarray(b, dtype=_FLOAT).tobytes())
        return path

    @classmethod
    def load(cls, filename: str) -> NeuralNet:
        """Read a network written by :meth:`save`."""
        with open(filename, "rb") as fh:
            data = fh.read()
        offset = 0

        def take(size: int) -> bytes:
            nonlocal offset
            chunk = data[offset:offset + size]
            if len(chunk) != size:
                raise ValueError(f"unexpected end of file in {filename}")
            offset += size
            return chunk

        if data[: len(_MAGIC)] != _MAGIC:
            raise ValueError("Given File does not encode a Neural Net")
        take(len(_MAGIC))

        def take_u64() -> int:
            return _U64.unpack(take(_U64.size))[0]

        def take_floats(count: int) -> np.ndarray:
            return np.frombuffer(take(count * _FLOAT.itemsize), dtype=_FLOAT).astype(
                np.float32
            )

        weights, biases = [], []
        for _ in range(take_u64()):
            rows = take_u64()
            cols = take_u64()
            weights.append(take_floats(rows * cols).reshape(rows, cols))
            biases.append(take_floats(take_u64()))
        return cls.from_parameters(weights, biases)

    def __str__(self) -> str:
        def fmt(arr: np.ndarray) -> str:
            return np.array2string(arr, precision=2)

        parts = ["Weight Matrices: \n"]
        parts += [fmt(w) + "\n" for w in self.weights]
        parts.append("\nBiases: \n")
        parts += [f"{i} : {fmt(b)}\n" for i, b in enumerate(self.biases)]
        parts.append("\nNeuron Vectors: \n")
        parts += [f"{i} : {fmt(n)}\n" for i, n in enumerate(self.neurons)]
        return "".join(parts)