"""Noise channels that randomly disturb a qubit."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from qecsim.gates import pauli_x, pauli_z
from qecsim.qubit import Qubit, RandomSource


class ErrorModel(ABC):
    """A source of errors applied to one qubit at a time."""

    @abstractmethod
    def apply_error(self, qubit: Qubit) -> None:
        """Possibly disturb the qubit in place."""


def _draw(rng: RandomSource | None) -> float:
    return (rng if rng is not None else random).random()


@dataclass
class BitFlipNoise(ErrorModel):
    """Applies Pauli X with the given probability."""

    probability: float
    rng: RandomSource | None = None

    def apply_error(self, qubit: Qubit) -> None:
        if _draw(self.rng) < self.probability:
            pauli_x(qubit)


@dataclass
class PhaseFlipNoise(ErrorModel):
    """Applies Pauli Z with the given probability."""

    probability: float
    rng: RandomSource | None = None

    def apply_error(self, qubit: Qubit) -> None:
        if _draw(self.rng) < self.probability:
            pauli_z(qubit)