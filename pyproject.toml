[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statevec"
version = "2.0.0"
description = "Building blocks for a pure-state quantum circuit simulator: small gate matrices, qubit permutations, amplitude kernels and gate sets."
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "simulator", "state-vector", "qubit", "gates", "fourier"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Quantum Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statevec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
