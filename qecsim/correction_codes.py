"""Three-qubit repetition codes against bit-flip and phase-flip errors."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from qecsim.gates import cnot, hadamard, pauli_x, pauli_z
from qecsim.qubit import Qubit, RandomSource


class CorrectionCode(ABC):
    """Encodes a qubit, detects and corrects errors, and decodes it again.

    Every call to ``correct`` records how long the correction took.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng
        self._correction_times: list[float] = []

    @property
    def correction_times(self) -> tuple[float, ...]:
        """Durations in seconds of every correction performed so far."""
        return tuple(self._correction_times)

    @contextmanager
    def _timed(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self._correction_times.append(time.perf_counter() - start)

    @abstractmethod
    def encode(self, data: Qubit) -> list[Qubit]:
        """Spread one logical qubit over several physical qubits."""

    @abstractmethod
    def syndrome_measurement(self, encoded_qubits: list[Qubit]) -> list[bool]:
        """Return the parity checks of the encoded qubits."""

    @abstractmethod
    def correct(self, encoded_qubits: list[Qubit], syndromes: Sequence[bool]) -> None:
        """Fix the encoded qubits in place according to the syndromes."""

    @abstractmethod
    def decode(self, encoded_qubits: list[Qubit]) -> Qubit:
        """Recover the logical qubit from the encoded qubits."""

    def average_correction_time(self) -> float:
        """Mean correction duration in seconds, or 0.0 if none was recorded."""
        if not self._correction_times:
            return 0.0
        return sum(self._correction_times) / len(self._correction_times)


def _locate_error(syndromes: Sequence[bool]) -> int | None:
    """Index of the qubit the two parity checks point at, if any."""
    if len(syndromes) < 2:
        return None
    first, second = syndromes[0], syndromes[1]
    if first and second:
        return 0
    if first:
        return 1
    if second:
        return 2
    return None


class BitFlipCode(CorrectionCode):
    """The three-qubit bit-flip repetition code."""

    def encode(self, data: Qubit) -> list[Qubit]:
        q0, q1, q2 = data.copy(), data.copy(), data.copy()
        cnot(q0, q1, self._rng)
        cnot(q0, q2, self._rng)
        return [q0, q1, q2]

    def syndrome_measurement(self, encoded_qubits: list[Qubit]) -> list[bool]:
        r0, r1, r2 = (q.measure(self._rng) for q in encoded_qubits[:3])
        return [r0 ^ r1, r0 ^ r2]

    def correct(self, encoded_qubits: list[Qubit], syndromes: Sequence[bool]) -> None:
        with self._timed():
            index = _locate_error(syndromes)
            if index is not None:
                pauli_x(encoded_qubits[index])

    def decode(self, encoded_qubits: list[Qubit]) -> Qubit:
        decoded = encoded_qubits[0].copy()
        cnot(decoded, encoded_qubits[1], self._rng)
        cnot(decoded, encoded_qubits[2], self._rng)
        return decoded


class PhaseFlipCode(CorrectionCode):
    """The three-qubit phase-flip repetition code, working in the X basis."""

    def encode(self, data: Qubit) -> list[Qubit]:
        encoded = [data.copy(), data.copy(), data.copy()]
        for qubit in encoded:
            hadamard(qubit)
        control = encoded[0]
        for target in encoded[1:]:
            # H, CNOT, H stands in for a controlled-Z
            hadamard(target)
            cnot(control, target, self._rng)
            hadamard(target)
        return encoded

    def syndrome_measurement(self, encoded_qubits: list[Qubit]) -> list[bool]:
        for qubit in encoded_qubits:
            hadamard(qubit)
        r0, r1, r2 = (q.measure(self._rng) for q in encoded_qubits[:3])
        for qubit in encoded_qubits:
            hadamard(qubit)
        return [r0 ^ r1, r0 ^ r2]

    def correct(self, encoded_qubits: list[Qubit], syndromes: Sequence[bool]) -> None:
        with self._timed():
            index = _locate_error(syndromes)
            if index is not None:
                pauli_z(encoded_qubits[index])

    def decode(self, encoded_qubits: list[Qubit]) -> Qubit:
        for qubit in encoded_qubits:
            hadamard(qubit)
        decoded = encoded_qubits[0].copy()
        cnot(decoded, encoded_qubits[1], self._rng)
        cnot(decoded, encoded_qubits[2], self._rng)
        hadamard(decoded)
        return decoded