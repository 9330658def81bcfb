import csv
import os
import subprocess
import sys
from pathlib import Path

from doseengine.cli import run_cli

SRC = Path(__file__).resolve().parents[1] / "src"


def test_cli_writes_csv(tmp_path):
    out_csv = tmp_path / "out.csv"
    env = {**os.environ, "PYTHONPATH": str(SRC)}
    cmd = [sys.executable, "-m", "doseengine.cli", "--time-span", "14", "--csv", str(out_csv)]
    subprocess.check_call(cmd, env=env)
    assert out_csv.exists()
    with open(out_csv, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["time", "quantity", "dose"]
    assert len(rows) == 16
    assert rows[1] == ["0", "2.5", "2.5"]
    assert rows[8][0] == "7" and float(rows[8][2]) == 2.5
    assert float(rows[9][2]) == 0.0


def test_cli_rejects_invalid_input(tmp_path, capsys):
    out_csv = tmp_path / "out.csv"
    code = run_cli(["--half-life", "0", "--csv", str(out_csv)])
    assert code == 2
    assert "half_life" in capsys.readouterr().err
    assert not out_csv.exists()


def test_cli_no_validate_runs_raw_engine(tmp_path):
    out_csv = tmp_path / "out.csv"
    code = run_cli(["--half-life", "0", "--time-span", "3", "--no-validate", "--csv", str(out_csv)])
    assert code == 0
    with open(out_csv, newline="") as f:
        rows = list(csv.reader(f))
    assert [float(r[1]) for r in rows[1:]] == [2.5, 0.0, 0.0, 0.0]
