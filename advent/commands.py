from __future__ import annotations

import logging
import re
import typing as t

from .exceptions import UsageError
from .types import DayKey
from .types import DAYS
from .types import FIRST_YEAR
from .types import Part
from .types import Request
from .types import Verb


log = logging.getLogger(__name__)

SCAFFOLD_VERBS = {"newday", "scaffold"}
YEAR_PATTERN = re.compile(r"^20\d\d$")
DAY_PATTERN = re.compile(r"^(?P<daynum>\d+)(?P<daypart>[ab])$", re.IGNORECASE)

USAGE = """\
usage: advent [yyyy] <dd>(a|b)
    - run the puzzle for that year, day and part (a or b, default a)
    - download the puzzle input if it's not there already
usage: advent newday [yyyy] <dd>
    - create the puzzle solution module for a new day
"""


def parse_request(tokens: t.Iterable[str], default_year: int) -> Request:
    """
    Make sense of the free-form command line. Each token is looked at on its own, so
    the order doesn't matter, and tokens which mean nothing are skipped:

        newday / scaffold   create a new solution instead of running one
        2021                the year (otherwise `default_year`)
        7b, 12A             the day and the part
        7                   the day alone, part a is run
    """
    verb = Verb.RUN
    year = default_year
    day = None
    part = Part.UNSPECIFIED
    for token in tokens:
        if token.casefold() in SCAFFOLD_VERBS:
            verb = Verb.SCAFFOLD
        elif YEAR_PATTERN.match(token) and int(token) >= FIRST_YEAR:
            year = int(token)
        elif match := DAY_PATTERN.match(token):
            day = int(match.group("daynum"))
            part = Part.from_letter(match.group("daypart"))
        elif token.isdecimal() and int(token) in DAYS:
            day = int(token)
        else:
            log.debug("ignoring command line token %r", token)
    if day is None:
        raise UsageError("Day was not specified on the command line")
    if day not in DAYS:
        raise UsageError(f"day must be 1-25, got {day}")
    try:
        key = DayKey(year, day)
    except ValueError as err:
        raise UsageError(str(err)) from None
    return Request(verb=verb, key=key, part=part)
