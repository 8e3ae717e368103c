import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def test_single_argument_split_on_spaces(capsys):
    assert main(["2 1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_several_arguments(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["1 2 2"], ["2147483648"], ["1", "-"], ["4", "+x"]],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_output_replays_to_sorted_stack(capsys):
    values = list(range(-50, 50))
    random.Random(3).shuffle(values)
    assert main([str(value) for value in values]) == 0
    moves = capsys.readouterr().out.splitlines()
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    assert stacks.a == sorted(values)
    assert stacks.b == []