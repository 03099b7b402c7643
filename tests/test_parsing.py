import pytest

from pushswap.parsing import (
    InputError,
    has_duplicates,
    input_is_empty,
    normalize,
    parse_input,
    parse_int,
    split_args,
)


@pytest.mark.parametrize("text", ["42", "+42", "0", "-17", "007"])
def test_parse_int_accepts_plain_numbers(text):
    assert parse_int(text) == int(text)


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


def test_parse_int_skips_leading_whitespace():
    assert parse_int("\t 7") == 7


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "", "+", "-", "12a", "--1", "1 ", "+-3", "abc"],
)
def test_parse_int_rejects(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_split_args_gathers_words():
    assert split_args(["1 2", "3", "  4   5 "]) == ["1", "2", "3", "4", "5"]
    assert split_args([]) == []


@pytest.mark.parametrize("arg", ["", "   "])
def test_split_args_rejects_empty_argument(arg):
    with pytest.raises(InputError):
        split_args(["1", arg])


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


def test_normalize_gives_ranks():
    assert normalize([10, -5, 3]) == [2, 0, 1]


def test_normalize_is_a_permutation_preserving_order():
    values = [900, -40, 12, 7, 2147483647, -2147483648]
    ranks = normalize(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left < right) == (ranks[i] < ranks[j])


def test_normalize_rejects_duplicates():
    with pytest.raises(InputError):
        normalize([1, 1])


def test_parse_input_matches_normalize():
    words = ["3", "-1", "20", "0"]
    assert parse_input(words) == normalize([int(w) for w in words])


def test_parse_input_sorted_input_gives_identity():
    assert parse_input(["-3", "0", "5"]) == [0, 1, 2]


@pytest.mark.parametrize("words", [["1", "2", "1"], ["1", "x"], ["99999999999"]])
def test_parse_input_rejects(words):
    with pytest.raises(InputError):
        parse_input(words)


def test_input_is_empty():
    assert input_is_empty(["  \t\n"]) is True
    assert input_is_empty([""]) is True
    assert input_is_empty([" 1 "]) is False
    assert input_is_empty(["", ""]) is False
    assert input_is_empty([]) is False