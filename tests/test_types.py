import pytest

from advent.types import DayKey
from advent.types import Part


def test_day_key_str():
    assert str(DayKey(2021, 7)) == "2021/07"


def test_day_key_is_hashable_and_ordered():
    keys = {DayKey(2021, 7), DayKey(2021, 7), DayKey(2015, 25)}
    assert sorted(keys) == [DayKey(2015, 25), DayKey(2021, 7)]


@pytest.mark.parametrize(
    ("year", "day", "msg"),
    [
        (2014, 1, "year must be 2015 or later, got 2014"),
        (2021, 0, "day must be 1-25, got 0"),
        (2021, 26, "day must be 1-25, got 26"),
    ],
)
def test_day_key_out_of_range(year, day, msg):
    with pytest.raises(ValueError) as exc_info:
        DayKey(year, day)
    assert str(exc_info.value) == msg


def test_part_letters():
    assert Part.from_letter("A") is Part.ONE
    assert Part.from_letter("b") is Part.TWO


def test_unspecified_part_defaults_to_one():
    assert Part.UNSPECIFIED.resolve() is Part.ONE
    assert Part.TWO.resolve() is Part.TWO
