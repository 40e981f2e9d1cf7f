from __future__ import annotations

import logging
import os
import typing as t
from datetime import datetime
from importlib.metadata import entry_points
from importlib.metadata import EntryPoints
from importlib.metadata import version
from pathlib import Path
from zoneinfo import ZoneInfo

import urllib3

from .types import FIRST_YEAR

log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
_v = version("advent-runner")
USER_AGENT = f"advent-runner v{_v}"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that the user agent and session cookie are always attached

    pool_manager: urllib3.PoolManager
    req_count: dict[t.Literal["GET"], int]

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers={"User-Agent": USER_AGENT})
        else:
            self.pool_manager = urllib3.PoolManager(headers={"User-Agent": USER_AGENT})
        self.req_count = {"GET": 0}

    def get(self, url: str, cookie: str | None = None) -> urllib3.BaseHTTPResponse:
        if cookie is None:
            headers = self.pool_manager.headers
        else:
            headers = self.pool_manager.headers | {"Cookie": cookie}
        resp = self.pool_manager.request("GET", url, headers=headers, retries=False)
        self.req_count["GET"] += 1
        return resp


http: HttpClient = HttpClient()


def session_cookie(credential: str) -> str:
    """
    Cookie header value for a credential. A bare token is sent as the "session"
    cookie, a credential already in "name=value" form is sent as it is.
    """
    if "=" in credential:
        return credential
    return f"session={credential}"


def sanitized(credential: str) -> str:
    return "..." + credential[-4:]


def most_recent_year() -> int:
    """
    This year, if it's December.
    The most recent year, otherwise.
    """
    aoc_now = datetime.now(tz=AOC_TZ)
    year = aoc_now.year
    if aoc_now.month < 12:
        year -= 1
    return max(year, FIRST_YEAR)


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


def get_plugins(group: str = "advent.solutions") -> EntryPoints:
    """
    Currently installed plugins providing extra solutions.
    """
    return entry_points(group=group)


def coerce_answer(val: t.Any) -> str:
    # puzzle answers are always compared as text, but it's convenient for the
    # solutions to return plain numbers. integral floats are shown as ints.
    floatish = isinstance(val, (float, complex))
    if floatish and val.imag == 0.0 and val.real.is_integer():
        val = int(val.real)
    elif type(val).__module__ == "numpy" and getattr(val, "ndim", None) == 0:
        val = val.item()
        return coerce_answer(val)
    if isinstance(val, bytes):
        return val.decode()
    return str(val)
