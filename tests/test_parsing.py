import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import InputError, check_unique, parse_arguments, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-15", -15),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("007", 7),
    ],
)
def test_parse_number_accepts_valid(text, expected):
    assert parse_number(text) == expected


def test_parse_number_of_empty_text_is_zero():
    assert parse_number("") == 0


@pytest.mark.parametrize(
    "text",
    [
        "2147483648",
        "-2147483649",
        "4294967296",
        "abc",
        "1a",
        "-",
        "+",
        "--1",
        "+-1",
        "1-2",
        "1+",
        " 1",
        "1 ",
        "\t3",
    ],
)
def test_parse_number_rejects_invalid(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_input_error_is_value_error_with_message():
    with pytest.raises(ValueError, match="Error"):
        parse_number("x")


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_parse_number_round_trips(value):
    assert parse_number(str(value)) == value


def test_check_unique_rejects_duplicates():
    with pytest.raises(InputError):
        check_unique([3, 1, 3])


@given(st.sets(st.integers()))
def test_check_unique_returns_distinct_values(values):
    as_list = sorted(values)
    assert check_unique(iter(as_list)) == as_list


def test_single_argument_is_split_on_spaces():
    assert parse_arguments(["3 1  2 "]) == [3, 1, 2]


def test_several_arguments_hold_one_number_each():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_no_numbers_give_empty_list():
    assert parse_arguments([]) == []
    assert parse_arguments(["   "]) == []


@pytest.mark.parametrize(
    "args",
    [["1 1"], ["1", "1"], ["1 2", "3"], ["1\t2"], ["1 x"], ["2147483648"]],
)
def test_invalid_arguments_raise(args):
    with pytest.raises(InputError):
        parse_arguments(args)


@given(st.sets(st.integers(min_value=-(2**31), max_value=2**31 - 1), min_size=1))
def test_joined_numbers_round_trip(values):
    ordered = list(values)
    assert parse_arguments([" ".join(map(str, ordered))]) == ordered
    if len(ordered) > 1:
        assert parse_arguments([str(v) for v in ordered]) == ordered