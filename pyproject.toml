[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qecsim"
version = "0.1.0"
description = "Monte Carlo simulator for three-qubit bit-flip and phase-flip quantum error correction codes"
requires-python = ">=3.10"
keywords = ["quantum", "error correction", "qubit", "simulation", "bit flip", "phase flip"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Quantum Computing",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
qecsim = "qecsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qecsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
