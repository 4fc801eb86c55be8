"""Activation functions, random helpers and MNIST file handling."""

from __future__ import annotations

import random
import struct
import sys
import time
from collections.abc import Callable, MutableSequence, Sequence

import numpy as np

_IMAGE_HEADER = struct.Struct(">iiii")
_LABEL_HEADER = struct.Struct(">II")
_LABEL_MAGIC = 2049
_CLASS_COUNT = 10
_IMAGE_WIDTH = 28
_INK_THRESHOLD = 140


def shuffle(training_data: MutableSequence, labels: MutableSequence) -> None:
    """Shuffle samples and labels in place with one shared permutation."""
    if len(training_data) != len(labels):
        raise ValueError(
            f"sample count {len(training_data)} does not match label count {len(labels)}"
        )
    order = np.random.permutation(len(training_data))
    for seq in (training_data, labels):
        if isinstance(seq, np.ndarray):
            seq[...] = seq[order]
        else:
            seq[:] = [seq[i] for i in order]


def index_of_max(vec: Sequence[float]) -> int:
    """Index of the first largest element; 0 for an empty vector."""
    arr = np.asarray(vec)
    if arr.size == 0:
        return 0
    return int(np.argmax(arr))


def apply_activation(vec: Sequence[float], func: Callable[[float], float]) -> np.ndarray:
    """Return a new vector with ``func`` applied to every element."""
    arr = np.asarray(vec, dtype=np.float32)
    return np.array([func(float(x)) for x in arr], dtype=np.float32)


def sigmoid(x):
    """Logistic function."""
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=np.float64)))


def sigmoid_derivative(x):
    """Derivative of the logistic function."""
    s = sigmoid(x)
    return s * (1.0 - s)


def relu(x):
    """Rectified linear unit."""
    return np.maximum(0.0, x)


def relu_derivative(x):
    """Derivative of the rectified linear unit: 1 where positive, else 0."""
    return np.where(np.asarray(x) > 0, 1.0, 0.0)


def softmax(vec: Sequence[float]) -> np.ndarray:
    """Numerically stable softmax."""
    arr = np.asarray(vec, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("softmax of an empty vector")
    exps = np.exp(arr - arr.max())
    return (exps / exps.sum()).astype(np.float32)


def uniform_in(lower: float, upper: float) -> float:
    """Uniformly distributed random number in [lower, upper)."""
    return random.uniform(lower, upper)


def normal_in(mean: float, stddev: float) -> float:
    """Normally distributed random number."""
    return random.gauss(mean, stddev)


def mse(actual: Sequence[float], target: Sequence[float]) -> float:
    """Mean squared error between two vectors of equal length."""
    a = np.asarray(actual, dtype=np.float32)
    t = np.asarray(target, dtype=np.float32)
    if a.shape != t.shape:
        raise ValueError(f"length mismatch: {a.shape} vs {t.shape}")
    if a.size == 0:
        raise ValueError("mean squared error of empty vectors")
    return float(np.mean((t - a) ** 2))


def _read_exact(path: str, data: bytes, offset: int, size: int) -> bytes:
    chunk = data[offset:offset + size]
    if len(chunk) != size:
        raise ValueError(f"unexpected end of file in {path}")
    return chunk


def load_mnist_images(filename: str) -> np.ndarray:
    """Read an IDX3 image file into an array of shape (count, rows * cols)."""
    with open(filename, "rb") as fh:
        data = fh.read()
    header = _read_exact(filename, data, 0, _IMAGE_HEADER.size)
    _magic, count, rows, cols = _IMAGE_HEADER.unpack(header)
    pixels = rows * cols
    body = _read_exact(filename, data, _IMAGE_HEADER.size, count * pixels)
    return np.frombuffer(body, dtype=np.uint8).reshape(count, pixels).copy()


def load_mnist_labels(filename: str) -> np.ndarray:
    """Read an IDX1 label file into a uint8 array."""
    with open(filename, "rb") as fh:
        data = fh.read()
    header = _read_exact(filename, data, 0, _LABEL_HEADER.size)
    magic, count = _LABEL_HEADER.unpack(header)
    if magic != _LABEL_MAGIC:
        raise ValueError(f"wrong magic number in label file: {magic}")
    body = _read_exact(filename, data, _LABEL_HEADER.size, count)
    return np.frombuffer(body, dtype=np.uint8).copy()


def normalize_images(images) -> np.ndarray:
    """Map 8-bit pixel values into [-1, 1]."""
    arr = np.asarray(images, dtype=np.float32)
    return ((arr / 255.0 - 0.5) * 2.0).astype(np.float32)


def one_hot_encode(labels) -> np.ndarray:
    """Encode digit labels as one-hot vectors of length 10."""
    arr = np.asarray(labels, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= _CLASS_COUNT):
        raise IndexError(f"labels must lie in [0, {_CLASS_COUNT})")
    result = np.zeros((arr.size, _CLASS_COUNT), dtype=np.float32)
    result[np.arange(arr.size), arr] = 1.0
    return result


def visualize_mnist_images(images) -> None:
    """Print images as ASCII art, '#' for dark pixels."""
    parts = []
    for t, image in enumerate(images):
        parts.append(f"Image {t}:\n")
        for k, pixel in enumerate(image, start=1):
            parts.append("#" if pixel > _INK_THRESHOLD else " ")
            if k % _IMAGE_WIDTH == 0:
                parts.append("\n")
        parts.append("\n")
    sys.stdout.write("".join(parts))


def print_labels(labels) -> None:
    """Print one label per line."""
    for label in labels:
        print(int(label))


def timestamped_filename(filename: str) -> str:
    """Append the local time as YYYYmmdd_HHMMSS to ``filename``."""
    return filename + time.strftime("%Y%m%d_%H%M%S", time.localtime())