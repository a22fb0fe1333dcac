"""Tests for the simulator command line."""

from simulator.main import main


def test_prints_per_job_table_and_averages(tmp_path, capsys):
    trace = tmp_path / "trace.csv"
    trace.write_text("0,5,1\n2,3,1\n", encoding="utf-8")

    exit_code = main([str(trace), "--cores", "1", "--scheme", "fcfs"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "=== FCFS on 1 core(s) ===" in out
    assert "Average waiting time:    1.50" in out
    assert "Average turnaround time: 5.50" in out


def test_round_robin_prints_quantum(tmp_path, capsys):
    trace = tmp_path / "trace.csv"
    trace.write_text("0,5\n1,3\n", encoding="utf-8")

    assert main([str(trace), "--scheme", "rr", "--quantum", "2"]) == 0
    assert "Quantum: 2.0" in capsys.readouterr().out


def test_missing_trace_returns_error_code(tmp_path):
    assert main([str(tmp_path / "nope.csv")]) == 1


def test_nan_quantum_returns_error_code(tmp_path):
    trace = tmp_path / "trace.csv"
    trace.write_text("0,5\n", encoding="utf-8")
    assert main([str(trace), "--scheme", "rr", "--quantum", "nan"]) == 1
