"""Command that scores a saved network on the MNIST test set."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from digitnet.confusion_matrix import ConfusionMatrix
from digitnet.helper import (
    load_mnist_images,
    load_mnist_labels,
    normalize_images,
    one_hot_encode,
)
from digitnet.metrics import accuracy, f1_score, precision, recall
from digitnet.net import NeuralNet

TEST_IMAGES = "t10k-images-idx3-ubyte"
TEST_LABELS = "t10k-labels-idx1-ubyte"


def _format_vector(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{v:.4f}" for v in values) + "]"


def format_report(name: str, conf_mat: ConfusionMatrix) -> str:
    """Accuracy, precision, recall and F1 score as printed by the command."""
    return (
        f"Evaluation of Net {name}: \n"
        f"Accuracy: {accuracy(conf_mat):.4f}\n"
        f"Precision: {_format_vector(precision(conf_mat))}\n"
        f"Recall: {_format_vector(recall(conf_mat))}\n"
        f"F1-Score: {_format_vector(f1_score(conf_mat))}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate a saved network on MNIST test data.")
    parser.add_argument("model", nargs="?", help="saved network; asked for when omitted")
    parser.add_argument("--data-dir", default="data", help="directory holding the MNIST files")
    args = parser.parse_args(argv)

    model = args.model
    if model is None:
        print(" Enter Model To Evaluate: ")
        model = input().strip()
    net = NeuralNet.load(model)

    test_data = normalize_images(load_mnist_images(os.path.join(args.data_dir, TEST_IMAGES)))
    test_labels = one_hot_encode(load_mnist_labels(os.path.join(args.data_dir, TEST_LABELS)))

    conf_mat = net.evaluate(test_data, test_labels)
    print(format_report(model, conf_mat), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())