import os
import sys
import csv

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from minqueue import cli


def test_demo_prints_walkthrough(capsys):
    cli.main(["demo"])
    out = capsys.readouterr().out.splitlines()
    pops = [line.split("-> ")[1] for line in out if line.startswith("pop_min")]
    assert pops == ["'coco'", "'mango'", "'fig'", "'pineapple'", "None"]
    assert "remove 'coco' -> False" in out
    assert "remove 'banana' -> True" in out
    assert "size -> 2" in out


def test_drain_orders_by_length(capsys):
    cli.main(["drain", "banana", "fig", "kiwi", "fig"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "  1. fig | key=3",
        "  2. kiwi | key=4",
        "  3. banana | key=6",
    ]


def test_drain_empty(capsys):
    cli.main(["drain"])
    assert capsys.readouterr().out.strip() == "Queue is empty."


def test_benchmark_writes_csv(tmp_path, capsys):
    path = tmp_path / "bench.csv"
    cli.main(["benchmark", "--path", str(path), "--base-input", "8", "--steps", "2", "--iterations", "2"])
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][:2] == ["Input Size", "Operation"]
    assert {(r[0], r[1]) for r in rows[1:]} == {
        (size, op) for size in ("8", "16") for op in ("add", "pop_min", "remove")
    }
    assert "6 rows saved" in capsys.readouterr().out
