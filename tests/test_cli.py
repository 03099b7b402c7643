import sys

import pytest

from pushswap.cli import main
from pushswap.stack import Machine


def replay(values, lines):
    machine = Machine(values, emit=lambda _name: None)
    for name in lines:
        getattr(machine, name)()
    return machine


def test_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_values(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_output_sorts_input(capsys):
    values = [5, -3, 12, 0, 7, 99, -40, 2]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    machine = replay(values, lines)
    assert list(machine.a) == sorted(values)
    assert len(machine.b) == 0


def test_mixed_quoted_and_separate_arguments(capsys):
    assert main(["4 2", "3", "1 5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    machine = replay([4, 2, 3, 1, 5], lines)
    assert list(machine.a) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "1"],
        ["abc"],
        ["   "],
        ["\t"],
        ["1", ""],
        ["2147483648"],
        ["-2147483649"],
        ["1 2x"],
        ["-"],
    ],
)
def test_invalid_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_limits_are_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_reads_sys_argv_by_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["push_swap", "3", "1", "2"])
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    machine = replay([3, 1, 2], lines)
    assert list(machine.a) == [1, 2, 3]