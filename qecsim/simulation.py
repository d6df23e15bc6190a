"""Repeated encode/correct/decode runs measuring how often a code succeeds."""

from __future__ import annotations

from dataclasses import dataclass

from qecsim.correction_codes import CorrectionCode
from qecsim.error_models import ErrorModel
from qecsim.qubit import Qubit


@dataclass(frozen=True)
class SimulationResult:
    """Statistics gathered over all runs of a simulation."""

    success_rate: float
    error_rate: float
    average_correction_time: float


@dataclass
class Simulation:
    """Runs a correction code against an error model a fixed number of times."""

    error_model: ErrorModel
    correction_code: CorrectionCode
    num_runs: int

    def __post_init__(self) -> None:
        if self.num_runs < 1:
            raise ValueError(f"num_runs must be at least 1, got {self.num_runs}")

    def _single_run(self) -> bool:
        qubit = Qubit()
        self.error_model.apply_error(qubit)
        encoded = self.correction_code.encode(qubit)
        syndromes = self.correction_code.syndrome_measurement(encoded)
        self.correction_code.correct(encoded, syndromes)
        decoded = self.correction_code.decode(encoded)
        return decoded == qubit

    def run(self) -> SimulationResult:
        """Perform every run and summarise how many recovered the original state."""
        successes = sum(self._single_run() for _ in range(self.num_runs))
        success_rate = successes / self.num_runs
        return SimulationResult(
            success_rate=success_rate,
            error_rate=1.0 - success_rate,
            average_correction_time=self.correction_code.average_correction_time(),
        )