import pytest

from qecsim.visualization import plot_error_vs_success, plot_success_rates


def test_success_rates_chart_is_written(tmp_path, capsys):
    target = tmp_path / "success_rates.svg"
    plot_success_rates(0.9, 0.6, target)
    content = target.read_text(encoding="utf-8")
    assert "<svg" in content
    assert "Error Correction Success Rates" in content
    assert "Bit Flip Code" in content
    assert "Phase Flip Code" in content
    assert f"Chart has been saved to {target}" in capsys.readouterr().out


def test_error_vs_success_chart_is_written(tmp_path, capsys):
    target = tmp_path / "error_vs_success.svg"
    plot_error_vs_success([0.01, 0.1, 0.3], [0.99, 0.9, 0.7], [0.98, 0.85, 0.6], target)
    content = target.read_text(encoding="utf-8")
    assert "<svg" in content
    assert "Error Rate vs. Success Rate" in content
    assert "Phase Flip Code" in content
    assert str(target) in capsys.readouterr().out


def test_error_vs_success_accepts_string_path(tmp_path):
    target = tmp_path / "chart.svg"
    plot_error_vs_success([0.2], [0.5], [0.4], str(target))
    assert target.stat().st_size > 0


def test_error_vs_success_requires_error_rates(tmp_path):
    target = tmp_path / "empty.svg"
    with pytest.raises(ValueError):
        plot_error_vs_success([], [], [], target)
    assert not target.exists()


def test_unwritable_location_raises(tmp_path):
    with pytest.raises(OSError):
        plot_success_rates(0.5, 0.5, tmp_path / "missing" / "chart.svg")