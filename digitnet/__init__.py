"""Fully connected neural network for handwritten digit recognition, with MNIST tools, metrics and a drawing grid."""

__version__ = "1.0.0"