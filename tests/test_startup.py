from unittest import mock

import pytest

from edgeboot.startup import Timer, format_duration


def test_format_duration_pinned_values():
    assert format_duration(0) == "0s"
    assert format_duration(1.5) == "1.5s"
    assert format_duration(90) == "1m30s"


@pytest.mark.parametrize("seconds", [0.000000005, 0.0025, 0.75, 2, 75, 7322.25])
def test_format_duration_negative_mirrors_positive(seconds):
    assert format_duration(-seconds) == "-" + format_duration(seconds)


@pytest.mark.parametrize("seconds", [1, 59, 61, 3600, 3661])
def test_format_duration_whole_seconds_end_in_s(seconds):
    text = format_duration(seconds)
    assert text.endswith("s")
    assert "." not in text


def test_format_duration_hours_include_minutes():
    text = format_duration(3600)
    assert text.startswith("1h")
    assert "m" in text


def test_format_duration_small_units():
    assert format_duration(0.000000005).endswith("ns")
    assert format_duration(0.000005).endswith("µs")
    assert format_duration(0.005).endswith("ms")


def test_timer_not_elapsed_for_long_duration():
    timer = Timer(3600, 1)
    assert timer.has_not_elapsed() is True


def test_timer_elapsed_for_zero_duration():
    timer = Timer(0, 1)
    assert timer.has_not_elapsed() is False
    assert timer.remaining_as_string() == format_duration(0)


def test_timer_remaining_not_more_than_duration():
    timer = Timer(10, 1)
    remaining = timer.remaining_as_string()
    assert remaining.endswith("s")
    assert remaining != format_duration(0)


def test_timer_since_is_a_duration():
    timer = Timer(10, 1)
    assert timer.since_as_string().endswith("s")


def test_sleep_for_interval_sleeps_interval():
    timer = Timer(10, 2)
    with mock.patch("edgeboot.startup.time.sleep") as sleeper:
        timer.sleep_for_interval()
    assert sleeper.call_args == mock.call(2)
    assert timer.has_not_elapsed() is True


def test_sleep_for_interval_lets_duration_elapse():
    timer = Timer(1, 1)
    assert timer.has_not_elapsed() is True
    timer.sleep_for_interval()
    assert timer.has_not_elapsed() is False
    assert timer.remaining_as_string() == format_duration(0)