"""Tests for the demo entry point."""

from threaded_generator.config import GeneratorConfig
from threaded_generator.main import main, run_demos


def test_run_demos():
    """Test the demo results."""
    results = run_demos(GeneratorConfig())

    assert results["Sum of first 45 Fibonacci numbers"] == 1836311902
    assert results["Lattice points inside (2, 3, 2, 4)"] == 8
    assert results["Counter sums (5 items, then 10 after reset)"] == (10, 45)


def test_main_returns_zero(monkeypatch, capsys):
    """Test that main() runs successfully and prints a summary."""
    monkeypatch.setenv("THREADGEN_DEMO_ITEMS", "10")

    assert main() == 0
    assert "EXECUTION SUMMARY" in capsys.readouterr().out
