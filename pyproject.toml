[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digitnet"
version = "1.0.0"
description = "A small fully connected neural network for handwritten digit recognition, with MNIST tools and a drawing grid."
requires-python = ">=3.10"
keywords = ["neural network", "mnist", "digits", "classification", "adam", "backpropagation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
digitnet-train = "digitnet.train:main"
digitnet-evaluate = "digitnet.evaluate:main"
digitnet-draw = "digitnet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["digitnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
