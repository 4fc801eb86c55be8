# digitnet

digitnet is a small fully connected neural network for classifying
handwritten digits from the MNIST data set. It contains:

- `digitnet.net.NeuralNet`: ReLU hidden layers and a softmax output layer.
  Weights are He-initialised and biases start at 0.01. Training uses
  backpropagation with mini-batches. `save` writes the parameters to a binary
  file and `NeuralNet.load` reads them back. `NeuralNet.from_parameters`
  builds a network from existing weight matrices and bias vectors.
- `digitnet.optimizer.Optimizer`: the Adam update rule. Its defaults are
  `learn_rate=1e-3`, `beta1=0.9` and `beta2=0.999`. `step` applies one update
  and then zeroes the accumulated gradients.
- `digitnet.confusion_matrix.ConfusionMatrix`: per-class counts of true and
  false positives and negatives.
- `digitnet.metrics`: `precision`, `recall` and `f1_score`, each giving one
  value per class, plus `accuracy` and `macro_average`. A ratio whose
  denominator is zero counts as 0.
- `digitnet.helper`:
  - `load_mnist_images` and `load_mnist_labels` read MNIST IDX files. The
    label reader checks for magic number 2049.
  - `normalize_images` maps pixel values into [-1, 1].
  - `one_hot_encode` encodes labels 0–9 and raises `IndexError` for any other
    label.
  - Also present: `softmax`, `relu`, `sigmoid` and their derivatives, `mse`,
    `shuffle`, `index_of_max`, `visualize_mnist_images` and `print_labels`.
- `digitnet.button_grid.ButtonGrid`: a grid of square cells used as a drawing
  pad. `digitnet.button.Button` is a rectangle that toggles between white and
  black when clicked.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Data

By default the commands read the MNIST files from `data/`, relative to the
current directory:

```
data/train-images-idx3-ubyte
data/train-labels-idx1-ubyte
data/t10k-images-idx3-ubyte
data/t10k-labels-idx1-ubyte
```

Use `--data-dir` to read them from another directory.

## Commands

### digitnet-train

```
digitnet-train [--data-dir DIR] [--epochs N] [--batch-size N] [--limit N] [--output PATH]
```

Trains a network with 784 inputs, two hidden layers of 128 nodes and 10
outputs, using Adam. The defaults are 35 epochs, a batch size of 128 and the
output file `test`. `--limit N` trains on only the first N samples.

When training finishes, the command saves the network and prints the
confusion counts for the test set. If the output file already exists, the
network is saved under the same name with the local time appended
(`YYYYmmdd_HHMMSS`).

### digitnet-evaluate

```
digitnet-evaluate [MODEL] [--data-dir DIR]
```

Loads a saved network and prints its results on the test set: accuracy, and
precision, recall and F1 score per class, each to four decimals. If `MODEL` is
omitted, the command asks for the file name.

### digitnet-draw

```
digitnet-draw
```

Opens a resizable pygame window with a 28×28 drawing grid.

- Left mouse button: paints a cell white and shades its neighbours.
- Right mouse button: paints a cell black.
- `R`: clears the grid.

## What it does not do

The drawing window does not classify what you draw. It has no connection to
a trained network, and the grid cannot be turned into network input.

## Library use

```python
from digitnet.helper import load_mnist_images, load_mnist_labels, normalize_images, one_hot_encode
from digitnet.net import NeuralNet
from digitnet.optimizer import Optimizer
from digitnet.metrics import accuracy, f1_score, macro_average

images = normalize_images(load_mnist_images("data/train-images-idx3-ubyte"))
labels = one_hot_encode(load_mnist_labels("data/train-labels-idx1-ubyte"))

net = NeuralNet(784, 10, 2, 128)
net.train(images, labels, 1, 128, Optimizer())
path = net.save("model.knnet")

restored = NeuralNet.load(path)
conf = restored.evaluate(images, labels)
print(accuracy(conf), macro_average(f1_score(conf)))
```

`train` shuffles `images` and `labels` in place.

## File format

A saved network is laid out as follows:

1. The bytes `KNNET`.
2. The layer count, as a little-endian unsigned 64-bit integer.
3. For each layer:
   - the row count and the column count, each a 64-bit integer;
   - the weights, as little-endian 32-bit floats in row-major order;
   - the bias count, as a 64-bit integer;
   - the biases, as 32-bit floats.

`NeuralNet.load` raises `ValueError` if the magic bytes are wrong or the file
ends early.