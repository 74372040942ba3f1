import pytest

from philo.parsing import ArgumentError, Settings, atoi, is_digits, parse_settings


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", 123),
        ("   42", 42),
        ("\t\n\v\f\r7", 7),
        ("-15", -15),
        ("+8", 8),
        ("99abc", 99),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
    ],
)
def test_atoi_follows_c_rules(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_32_bits():
    assert atoi("4294967297") == 1
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize(
    "text, expected",
    [("0123", True), ("", True), ("+1", False), ("12a", False), ("-3", False), ("١٢", False)],
)
def test_is_digits(text, expected):
    assert is_digits(text) is expected


def test_parse_four_arguments():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_five_arguments():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings.must_eat == 7
    assert settings.number_of_philosophers == 4


def test_zero_meals_is_allowed():
    assert parse_settings(["2", "100", "50", "50", "0"]).must_eat == 0


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(args):
    with pytest.raises(ArgumentError, match="Wrong argument count"):
        parse_settings(args)


def test_too_many_philosophers():
    with pytest.raises(ArgumentError, match="Exceeded Maximum Number of Philosophers"):
        parse_settings(["201", "800", "200", "200"])


def test_two_hundred_philosophers_is_the_limit():
    assert parse_settings(["200", "800", "200", "200"]).number_of_philosophers == 200


@pytest.mark.parametrize("value", ["0", "+5", "abc", "-3", "5x"])
def test_invalid_philosopher_count(value):
    with pytest.raises(ArgumentError, match="Invalid value for philosophers number"):
        parse_settings([value, "800", "200", "200"])


@pytest.mark.parametrize(
    "position, message",
    [
        (1, "Invalid value for time to die"),
        (2, "Invalid value for time to eat"),
        (3, "Invalid value for time to sleep"),
    ],
)
@pytest.mark.parametrize("bad", ["0", "-10", "1a", " 5"])
def test_invalid_times(position, message, bad):
    args = ["3", "800", "200", "200"]
    args[position] = bad
    with pytest.raises(ArgumentError, match=message):
        parse_settings(args)


@pytest.mark.parametrize("bad", ["-1", "x", "+2"])
def test_invalid_meal_count(bad):
    with pytest.raises(
        ArgumentError,
        match="Invalid value for number of times each philosopher must eat",
    ):
        parse_settings(["3", "800", "200", "200", bad])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["1"])