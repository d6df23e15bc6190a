import pytest

from qecsim.cli import DEFAULT_ERROR_RATES, main, run_comparison


def test_run_comparison_returns_one_rate_per_error_rate(capsys):
    rates = [0.0, 0.2, 0.4]
    bit_rates, phase_rates = run_comparison(rates, 10)
    assert len(bit_rates) == len(rates)
    assert len(phase_rates) == len(rates)
    assert all(0.0 <= value <= 1.0 for value in bit_rates + phase_rates)
    out = capsys.readouterr().out
    assert "Running simulations with error rate: 0.2" in out


def test_run_comparison_without_noise_bit_flip_always_succeeds():
    bit_rates, _ = run_comparison([0.0], 20)
    assert bit_rates == [1.0]


def test_run_comparison_of_nothing_is_empty():
    assert run_comparison([], 5) == ([], [])


def test_main_writes_both_charts(tmp_path, capsys):
    code = main(["--runs", "20", "--sweep-runs", "5", "--output-dir", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "success_rates.svg").is_file()
    assert (tmp_path / "error_vs_success.svg").is_file()
    out = capsys.readouterr().out
    assert out.startswith("Quantum Error Correction Simulator")
    assert "=== Bit Flip Code Simulation ===" in out
    assert "=== Phase Flip Code Simulation ===" in out
    assert "Success rates chart created successfully" in out
    assert "Error vs success chart created successfully" in out
    assert out.count("Running simulations with error rate:") == len(DEFAULT_ERROR_RATES)


def test_main_reports_chart_failure(tmp_path, capsys):
    missing = tmp_path / "does-not-exist"
    code = main(["--runs", "5", "--sweep-runs", "2", "--output-dir", str(missing)])
    assert code == 0
    out = capsys.readouterr().out
    assert out.count("Failed to create chart:") == 2


def test_main_rejects_non_positive_runs(tmp_path):
    with pytest.raises(ValueError):
        main(["--runs", "0", "--output-dir", str(tmp_path)])