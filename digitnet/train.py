"""Command that trains a network on MNIST, saves it and reports test results."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from digitnet.evaluate import TEST_IMAGES, TEST_LABELS
from digitnet.helper import (
    load_mnist_images,
    load_mnist_labels,
    normalize_images,
    one_hot_encode,
)
from digitnet.net import NeuralNet
from digitnet.optimizer import Optimizer

TRAIN_IMAGES = "train-images-idx3-ubyte"
TRAIN_LABELS = "train-labels-idx1-ubyte"

INPUT_NODES = 784
OUTPUT_NODES = 10
HIDDEN_LAYERS = 2
HIDDEN_NODES = 128


def head(items, count: int):
    """The first ``count`` items; raises if there are fewer."""
    if count < 0:
        raise ValueError("count cannot be negative")
    if len(items) < count:
        raise ValueError(f"asked for {count} items but only {len(items)} are there")
    return items[:count]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train a digit classifier on MNIST.")
    parser.add_argument("--data-dir", default="data", help="directory holding the MNIST files")
    parser.add_argument("--epochs", type=int, default=35)
    parser.add_argument("--batch-size", type=int, default=128)
    parser.add_argument("--limit", type=int, help="train on only the first LIMIT samples")
    parser.add_argument("--output", default="test", help="where to save the trained network")
    args = parser.parse_args(argv)

    images = normalize_images(load_mnist_images(os.path.join(args.data_dir, TRAIN_IMAGES)))
    labels = one_hot_encode(load_mnist_labels(os.path.join(args.data_dir, TRAIN_LABELS)))
    if args.limit is not None:
        images = head(images, args.limit).copy()
        labels = head(labels, args.limit).copy()

    net = NeuralNet(INPUT_NODES, OUTPUT_NODES, HIDDEN_LAYERS, HIDDEN_NODES)
    net.train(images, labels, args.epochs, args.batch_size, Optimizer())
    net.save(args.output)

    test_data = normalize_images(load_mnist_images(os.path.join(args.data_dir, TEST_IMAGES)))
    test_labels = one_hot_encode(load_mnist_labels(os.path.join(args.data_dir, TEST_LABELS)))
    print(net.evaluate(test_data, test_labels), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())