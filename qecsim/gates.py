"""Single- and two-qubit gates acting in place on qubits."""

from __future__ import annotations

import math

from qecsim.qubit import Qubit, RandomSource

_NORMALIZATION = 1 / math.sqrt(2)


def pauli_x(qubit: Qubit) -> None:
    """Apply the Pauli X (bit flip) gate."""
    qubit.bit_flip()


def pauli_z(qubit: Qubit) -> None:
    """Apply the Pauli Z (phase flip) gate."""
    qubit.phase_flip()


def hadamard(qubit: Qubit) -> None:
    """Apply the Hadamard gate: |0> -> |+>, |1> -> |->."""
    zero, one = qubit.zero, qubit.one
    qubit.zero = _NORMALIZATION * (zero + one)
    qubit.one = _NORMALIZATION * (zero - one)


def cnot(control: Qubit, target: Qubit, rng: RandomSource | None = None) -> None:
    """Flip the target when a measurement of the control yields |1>."""
    if control.measure(rng):
        pauli_x(target)