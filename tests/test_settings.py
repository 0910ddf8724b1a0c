import pytest

from dining.settings import InvalidArgumentError, Settings, parse_args


def test_four_arguments():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_five_arguments_sets_meal_count():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.must_eat_count == 7
    assert settings.num_philos == 4


def test_lenient_integer_reading():
    settings = parse_args([" 3", "+100abc", "50", "60"])
    assert settings.num_philos == 3
    assert settings.time_to_die == 100


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1", "2", "3"],
        ["1", "2", "3", "4", "5", "6"],
    ],
)
def test_wrong_argument_count(argv):
    with pytest.raises(InvalidArgumentError):
        parse_args(argv)


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["5", "-1", "200", "200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "x"],
    ],
)
def test_non_positive_values_rejected(argv):
    with pytest.raises(InvalidArgumentError):
        parse_args(argv)