import pytest

from advent.commands import parse_request
from advent.exceptions import UsageError
from advent.types import DayKey
from advent.types import Part
from advent.types import Request
from advent.types import Verb


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        (["2021", "7b"], Request(Verb.RUN, DayKey(2021, 7), Part.TWO)),
        (["7b", "2021"], Request(Verb.RUN, DayKey(2021, 7), Part.TWO)),
        (["newday", "2022", "3"], Request(Verb.SCAFFOLD, DayKey(2022, 3), Part.UNSPECIFIED)),
        (["3", "NewDay"], Request(Verb.SCAFFOLD, DayKey(2020, 3), Part.UNSPECIFIED)),
        (["scaffold", "2016", "25"], Request(Verb.SCAFFOLD, DayKey(2016, 25), Part.UNSPECIFIED)),
        (["12A"], Request(Verb.RUN, DayKey(2020, 12), Part.ONE)),
        (["run", "2019", "1"], Request(Verb.RUN, DayKey(2019, 1), Part.UNSPECIFIED)),
        (["whatever", "--", "9b"], Request(Verb.RUN, DayKey(2020, 9), Part.TWO)),
        (["2012", "4"], Request(Verb.RUN, DayKey(2020, 4), Part.UNSPECIFIED)),
        (["1a", "2b"], Request(Verb.RUN, DayKey(2020, 2), Part.TWO)),
        (["²", "7"], Request(Verb.RUN, DayKey(2020, 7), Part.UNSPECIFIED)),
    ],
)
def test_parse_request(tokens, expected):
    assert parse_request(tokens, default_year=2020) == expected


@pytest.mark.parametrize(
    ("tokens", "msg"),
    [
        ([], "Day was not specified on the command line"),
        (["2021"], "Day was not specified on the command line"),
        (["40"], "Day was not specified on the command line"),
        (["0"], "Day was not specified on the command line"),
        (["newday"], "Day was not specified on the command line"),
        (["40a"], "day must be 1-25, got 40"),
        (["0b"], "day must be 1-25, got 0"),
    ],
)
def test_parse_request_usage_error(tokens, msg):
    with pytest.raises(UsageError) as exc_info:
        parse_request(tokens, default_year=2020)
    assert str(exc_info.value) == msg
