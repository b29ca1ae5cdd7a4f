import pytest

from philosophers.args import InputError
from philosophers.config import Settings


def test_from_args_documented_example():
    settings = Settings.from_args(["4", "800", "200", "200", "5"])
    assert settings == Settings(4, 800, 200, 200, 5)


def test_from_args_without_meal_count():
    settings = Settings.from_args(["4", "800", "200", "200"])
    assert settings.must_eat is None
    assert settings.philo_count == 4


def test_from_args_rejects_bad_input():
    with pytest.raises(InputError):
        Settings.from_args(["4", "800", "5", "200"])


@pytest.mark.parametrize("count", [1, 2])
def test_small_tables_have_no_staggering(count):
    settings = Settings(count, 800, 200, 200)
    assert settings.odd_count() == 0
    assert settings.eat_interval() == 0


def test_odd_count_for_five():
    assert Settings(5, 800, 200, 200).odd_count() == 3


@pytest.mark.parametrize("count", [3, 4, 5, 6, 7, 200])
def test_odd_count_is_half_rounded_up(count):
    odd = Settings(count, 800, 200, 200).odd_count()
    assert odd + count // 2 == count
    assert odd == len(range(1, count + 1, 2))


def test_eat_interval_has_minimum_of_one():
    assert Settings(200, 800, 11, 200).eat_interval() == 1


@pytest.mark.parametrize("count", [3, 5, 7, 9])
def test_eat_interval_spreads_odd_philosophers_over_eat_time(count):
    settings = Settings(count, 800, 200, 200)
    interval = settings.eat_interval()
    assert interval * (settings.odd_count() - 1) <= settings.time_to_eat
    assert (interval + 1) * (settings.odd_count() - 1) > settings.time_to_eat


def test_first_philosopher_starts_immediately():
    assert Settings(5, 500, 200, 200).start_delay(1) == 0


@pytest.mark.parametrize("count", [3, 5, 7, 199])
def test_start_delay_is_below_die_time(count):
    settings = Settings(count, 310, 200, 100)
    for philo_id in range(1, count + 1):
        assert 0 <= settings.start_delay(philo_id) < settings.time_to_die


def test_odd_ids_start_before_even_ids():
    settings = Settings(7, 10_000, 300, 100)
    odd_delays = [settings.start_delay(i) for i in (1, 3, 5, 7)]
    even_delays = [settings.start_delay(i) for i in (2, 4, 6)]
    assert odd_delays == sorted(odd_delays)
    assert even_delays == sorted(even_delays)
    assert max(odd_delays) < min(even_delays)


def test_consecutive_odd_ids_differ_by_interval():
    settings = Settings(7, 10_000, 300, 100)
    interval = settings.eat_interval()
    assert settings.start_delay(3) - settings.start_delay(1) == interval
    assert settings.start_delay(4) - settings.start_delay(2) == interval


@pytest.mark.parametrize(
    "settings, expected",
    [
        (Settings(5, 800, 200, 200), False),
        (Settings(5, 500, 200, 200), True),
        (Settings(4, 500, 200, 200), False),
        (Settings(1, 500, 200, 200), True),
    ],
)
def test_needs_staggered_start(settings, expected):
    assert settings.needs_staggered_start() is expected


def test_settings_are_immutable():
    settings = Settings(4, 800, 200, 200)
    with pytest.raises(AttributeError):
        settings.philo_count = 5
    assert settings.philo_count == 4
    assert settings == Settings(4, 800, 200, 200)