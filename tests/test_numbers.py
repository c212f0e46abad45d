import pytest

from minirt.numbers import atof, atoi, atoi_at, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n\v\f\r +7", 7),
        ("abc", 0),
        ("", 0),
        ("+-5", 0),
        ("-+5", 0),
        ("- 5", 0),
        ("-", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_at_advances_position():
    text = "  12 -34,x"
    first, pos = atoi_at(text, 0)
    assert first == 12
    assert text[pos] == " "
    second, pos = atoi_at(text, pos)
    assert second == -34
    assert text[pos] == ","


def test_atoi_at_without_digits_keeps_position_after_spaces():
    value, pos = atoi_at("   x", 0)
    assert value == 0
    assert pos == 3


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.5)
    with pytest.raises(TypeError):
        itoa(True)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        ("3", 3.0),
        ("0.25", 0.25),
        (".5", 0.5),
        ("7.5xyz", 7.5),
        ("8.", 8.0),
        ("", 0.0),
        ("abc", 0.0),
        ("-1.5", 0.0),
    ],
)
def test_atof(text, expected):
    assert atof(text) == pytest.approx(expected)


@pytest.mark.parametrize("n", [0, 1, 7, 255, 1000])
def test_atof_agrees_with_atoi_on_integers(n):
    assert atof(itoa(n)) == float(atoi(itoa(n)))