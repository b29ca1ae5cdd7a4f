import pytest

from philosophers.args import InputError, parse_int, validate_args


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("\t\n+8", 8),
        ("123abc", 123),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "  x1", "--3"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_stops_at_inner_space():
    assert parse_int("12 34") == 12


def test_validate_args_accepts_documented_example():
    assert validate_args(["4", "800", "200", "200", "5"]) == (4, 800, 200, 200, 5)


def test_validate_args_without_meal_count():
    assert validate_args(["1", "800", "200", "200"]) == (1, 800, 200, 200)


def test_validate_args_boundary_times_accepted():
    assert validate_args(["2", "11", "11", "11", "1"]) == (2, 11, 11, 11, 1)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["4", "800", "200"],
        ["4", "800", "200", "200", "5", "6"],
    ],
)
def test_validate_args_wrong_count(args):
    with pytest.raises(InputError):
        validate_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["-4", "800", "200", "200"],
        ["4a", "800", "200", "200"],
        ["4", "800", "+200", "200"],
        ["4", "800", "200", " 200"],
    ],
)
def test_validate_args_rejects_non_digits(args):
    with pytest.raises(InputError):
        validate_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["", "800", "200", "200"],
        ["4", "10", "200", "200"],
        ["4", "800", "10", "200"],
        ["4", "800", "200", "10"],
        ["4", "800", "200", "200", "0"],
        ["4", "800", "200", "200", ""],
    ],
)
def test_validate_args_rejects_out_of_range(args):
    with pytest.raises(InputError):
        validate_args(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        validate_args(["x"])