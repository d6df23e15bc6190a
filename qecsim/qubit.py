"""A single simulated qubit holding two complex amplitudes."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Protocol


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


@dataclass
class Qubit:
    """Amplitudes of |0> and |1>; starts in |0>.

    Equality compares both amplitudes exactly.
    """

    zero: complex = 1 + 0j
    one: complex = 0j

    def measure(self, rng: RandomSource | None = None) -> bool:
        """Sample the qubit without collapsing it; True means |1> was observed."""
        source = rng if rng is not None else random
        return source.random() > abs(self.zero) ** 2

    def bit_flip(self) -> None:
        """Swap the |0> and |1> amplitudes."""
        self.zero, self.one = self.one, self.zero

    def phase_flip(self) -> None:
        """Negate the |1> amplitude."""
        self.one = -self.one

    def copy(self) -> Qubit:
        """Return an independent qubit in the same state."""
        return dataclasses.replace(self)