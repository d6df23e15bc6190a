# qecsim

A small Monte Carlo simulator for the three-qubit repetition codes used in
quantum error correction: the bit-flip code and the phase-flip code.

Each run prepares a qubit in |0⟩, passes it through a noise model, encodes it
into three qubits, measures syndromes, corrects, decodes and checks whether
the decoded qubit has exactly the same amplitudes as the prepared one. Over
many runs this gives a success rate, an error rate and the mean time spent in
the correction step.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
qecsim
```

By default this simulates both codes at a 10% error probability over 1000
runs each and prints the success rate, error rate and average correction
time. It then runs 500 simulations per code at each of the error rates
0.01, 0.05, 0.1, 0.15, 0.2, 0.25 and 0.3, and writes two SVG charts:

- `success_rates.svg` compares the success rates of the two codes;
- `error_vs_success.svg` plots success rate against error rate for both codes.

Options:

- `--runs N`: runs for each of the two main simulations (default 1000);
- `--sweep-runs N`: runs for each point of the error rate sweep (default 500);
- `--error-rate P`: error probability of the two main simulations (default 0.1);
- `--output-dir DIR`: directory the charts are written to (default: the current directory).

If a chart cannot be written, the failure is printed and the command carries on.

## Library use

```python
from qecsim.error_models import BitFlipNoise
from qecsim.correction_codes import BitFlipCode
from qecsim.simulation import Simulation

result = Simulation(BitFlipNoise(0.1), BitFlipCode(), 1000).run()
print(result.success_rate, result.error_rate, result.average_correction_time)
```

`Simulation` raises `ValueError` when `num_runs` is less than 1.

The building blocks live in separate modules:

- `qecsim.qubit`: the `Qubit` dataclass (amplitudes `zero` and `one`, starting
  in |0⟩) with `measure`, `bit_flip`, `phase_flip` and `copy`. `measure`
  samples the qubit without changing its state.
- `qecsim.gates`: `pauli_x`, `pauli_z`, `hadamard` and `cnot`, each acting in
  place.
- `qecsim.error_models`: the abstract `ErrorModel` and the `BitFlipNoise` and
  `PhaseFlipNoise` channels, which apply X or Z with a given `probability`.
- `qecsim.correction_codes`: the abstract `CorrectionCode` and the
  `BitFlipCode` and `PhaseFlipCode` implementations. Every call to `correct`
  records its duration; `correction_times` lists them and
  `average_correction_time()` gives their mean (0.0 if there are none).
- `qecsim.simulation`: `Simulation` and the frozen `SimulationResult`.
- `qecsim.visualization`: `plot_success_rates` and `plot_error_vs_success`,
  which write 800×600 SVG charts with matplotlib. `plot_error_vs_success`
  raises `ValueError` for an empty list of error rates.
- `qecsim.cli`: `run_comparison(error_rates, num_runs)`, which returns the
  success rates of both codes at each error rate, and the `main` entry point.

### Reproducible runs

`measure`, `cnot`, the noise channels and the correction codes accept an
optional random source: any object with a `random()` method returning a float
in [0, 1), such as `random.Random(seed)`. Without one, the module-level
`random` generator is used.

```python
import random
from qecsim.error_models import PhaseFlipNoise
from qecsim.correction_codes import PhaseFlipCode
from qecsim.simulation import Simulation

rng = random.Random(42)
result = Simulation(PhaseFlipNoise(0.1, rng), PhaseFlipCode(rng), 500).run()
```

## Limitations

The model is deliberately simple: each qubit is tracked on its own, with no
entanglement between qubits and no multi-qubit state vector. Measurement does
not collapse a qubit, and a controlled-NOT measures its control qubit to
decide whether to flip the target. Only the two three-qubit repetition codes
and the two single-error noise channels are provided.