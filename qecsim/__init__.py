"""Monte Carlo simulation of three-qubit bit-flip and phase-flip error correction codes."""

__version__ = "0.1.0"