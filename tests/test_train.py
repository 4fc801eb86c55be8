import random
import struct

import numpy as np
import pytest

from digitnet.net import NeuralNet
from digitnet.train import head, main


def _write_pair(directory, prefix, images, labels):
    images = np.asarray(images, dtype=np.uint8)
    count, rows, cols = images.shape
    (directory / f"{prefix}-images-idx3-ubyte").write_bytes(
        struct.pack(">iiii", 2051, count, rows, cols) + images.tobytes()
    )
    (directory / f"{prefix}-labels-idx1-ubyte").write_bytes(
        struct.pack(">II", 2049, len(labels)) + bytes(labels)
    )


@pytest.fixture
def data_dir(tmp_path):
    np.random.seed(3)
    random.seed(3)
    data = tmp_path / "data"
    data.mkdir()
    _write_pair(data, "train", np.random.randint(0, 256, size=(4, 28, 28)), [0, 1, 2, 3])
    _write_pair(data, "t10k", np.random.randint(0, 256, size=(2, 28, 28)), [5, 6])
    return data


def test_head_of_list():
    assert head([1, 2, 3], 2) == [1, 2]
    assert head([1, 2, 3], 0) == []


def test_head_of_array():
    arr = np.arange(12).reshape(4, 3)
    assert np.array_equal(head(arr, 2), arr[:2])


def test_head_too_short():
    with pytest.raises(ValueError):
        head([1, 2], 3)
    with pytest.raises(ValueError):
        head([1, 2], -1)


def test_main_trains_saves_and_evaluates(data_dir, tmp_path, capsys):
    output = tmp_path / "trained"
    code = main([
        "--data-dir", str(data_dir),
        "--epochs", "1",
        "--batch-size", "2",
        "--output", str(output),
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "Started Training on 4 trainingData" in out
    assert "Batch Size: 2" in out
    assert "true positives:" in out
    loaded = NeuralNet.load(str(output))
    assert loaded.layer_sizes == [784, 128, 128, 10]


def test_main_with_limit(data_dir, tmp_path, capsys):
    output = tmp_path / "limited"
    main([
        "--data-dir", str(data_dir),
        "--epochs", "1",
        "--batch-size", "1",
        "--limit", "2",
        "--output", str(output),
    ])
    out = capsys.readouterr().out
    assert "Started Training on 2 trainingData" in out
    assert output.exists()


def test_main_missing_data(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--data-dir", str(tmp_path / "nowhere"), "--output", str(tmp_path / "m")])