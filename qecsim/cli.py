"""Command line entry point running and charting both repetition codes."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from qecsim.correction_codes import BitFlipCode, PhaseFlipCode
from qecsim.error_models import BitFlipNoise, PhaseFlipNoise
from qecsim.simulation import Simulation, SimulationResult
from qecsim.visualization import plot_error_vs_success, plot_success_rates

DEFAULT_ERROR_RATES = (0.01, 0.05, 0.1, 0.15, 0.2, 0.25, 0.3)


def _simulate_bit_flip(error_rate: float, num_runs: int) -> SimulationResult:
    return Simulation(BitFlipNoise(error_rate), BitFlipCode(), num_runs).run()


def _simulate_phase_flip(error_rate: float, num_runs: int) -> SimulationResult:
    return Simulation(PhaseFlipNoise(error_rate), PhaseFlipCode(), num_runs).run()


def _report(result: SimulationResult) -> None:
    print("Simulation Results:")
    print(f"Success Rate: {result.success_rate * 100.0:.2f}%")
    print(f"Error Rate: {result.error_rate * 100.0:.2f}%")
    print(f"Average Correction Time: {result.average_correction_time:.2f} seconds")


def run_comparison(
    error_rates: Sequence[float], num_runs: int
) -> tuple[list[float], list[float]]:
    """Success rates of the bit-flip and phase-flip codes at each error rate."""
    bit_flip_rates: list[float] = []
    phase_flip_rates: list[float] = []
    for error_rate in error_rates:
        print(f"Running simulations with error rate: {error_rate}")
        bit_flip_rates.append(_simulate_bit_flip(error_rate, num_runs).success_rate)
        phase_flip_rates.append(_simulate_phase_flip(error_rate, num_runs).success_rate)
    return bit_flip_rates, phase_flip_rates


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="qecsim", description="Quantum error correction simulator."
    )
    parser.add_argument("--runs", type=int, default=1000,
                        help="runs for each main simulation (default: 1000)")
    parser.add_argument("--sweep-runs", type=int, default=500,
                        help="runs for each point of the error rate sweep (default: 500)")
    parser.add_argument("--error-rate", type=float, default=0.1,
                        help="error probability of the main simulations (default: 0.1)")
    parser.add_argument("--output-dir", type=Path, default=Path("."),
                        help="directory the charts are written to")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run both codes, sweep the error rate and write the charts."""
    args = _parse_args(argv)
    success_chart = args.output_dir / "success_rates.svg"
    sweep_chart = args.output_dir / "error_vs_success.svg"

    print("Quantum Error Correction Simulator")

    print("\n=== Bit Flip Code Simulation ===")
    bit_flip_result = _simulate_bit_flip(args.error_rate, args.runs)
    _report(bit_flip_result)

    print("\n=== Phase Flip Code Simulation ===")
    phase_flip_result = _simulate_phase_flip(args.error_rate, args.runs)
    _report(phase_flip_result)

    print("\n=== Generating Visualizations ===")
    try:
        plot_success_rates(
            bit_flip_result.success_rate, phase_flip_result.success_rate, success_chart
        )
    except (OSError, ValueError) as exc:
        print(f"Failed to create chart: {exc}")
    else:
        print("Success rates chart created successfully")

    print("\n=== Running Error Rate Comparison ===")
    bit_flip_rates, phase_flip_rates = run_comparison(DEFAULT_ERROR_RATES, args.sweep_runs)
    try:
        plot_error_vs_success(DEFAULT_ERROR_RATES, bit_flip_rates, phase_flip_rates, sweep_chart)
    except (OSError, ValueError) as exc:
        print(f"Failed to create chart: {exc}")
    else:
        print("Error vs success chart created successfully")

    print("\nSimulations and visualizations complete!")
    print(f"Results have been saved as '{success_chart.name}' and '{sweep_chart.name}'")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())