from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile

import urllib3

from .exceptions import CacheError
from .exceptions import ConfigurationError
from .exceptions import PuzzleLockedError
from .types import DayKey
from .utils import _ensure_intermediate_dirs
from .utils import http
from .utils import sanitized
from .utils import session_cookie


log = logging.getLogger(__name__)

HOST = "adventofcode.com"
URL = "https://{host}/{year}/day/{day}/input"


class InputCache:
    """
    Puzzle inputs, stored on disk under `root` as <year>/day<NN>.txt.

    An input is downloaded the first time it's needed and then kept forever: the
    inputs never change once a puzzle has unlocked, so a cached file is trusted as
    it is and never checked against the server again.
    """

    def __init__(self, root, credential="", host=HOST):
        self.root = Path(root)
        self.credential = credential
        self.host = host

    def path_for(self, key: DayKey) -> Path:
        return self.root / str(key.year) / f"day{key.day:02d}.txt"

    def url_for(self, key: DayKey) -> str:
        return URL.format(host=self.host, year=key.year, day=key.day)

    def get(self, key: DayKey) -> str:
        """
        The input text for this puzzle, verbatim. Read from the cache if present,
        otherwise requested from the server (exactly once) and then cached.
        """
        if not self.root.is_dir():
            raise CacheError(f"Input directory not found: '{self.root}'")
        path = self.path_for(key)
        log.info("loading input from %s", path)
        try:
            with path.open(encoding="utf-8", newline="") as f:
                data = f.read()
        except FileNotFoundError:
            log.debug("input cache miss %s", path)
        except (OSError, UnicodeDecodeError) as err:
            raise CacheError(f"Failed to read {path} ({err})") from err
        else:
            log.debug("input cache hit %s", path)
            return data
        return self._fetch(key, path)

    def _fetch(self, key, path):
        if not self.credential:
            raise ConfigurationError(
                "A session cookie is needed to download puzzle inputs. Put it in the "
                "settings file (session_cookie) or export it as AOC_SESSION."
            )
        url = self.url_for(key)
        token = sanitized(self.credential)
        log.info("downloading %s token=%s", url, token)
        try:
            response = http.get(url, cookie=session_cookie(self.credential))
        except urllib3.exceptions.HTTPError as err:
            log.error("request to %s failed token=%s", url, token)
            raise CacheError(f"Failed to download {url} ({err})") from err
        if not 200 <= response.status < 300:
            if response.status == 404:
                raise PuzzleLockedError(f"{key} not available yet")
            log.error("got %s status code token=%s", response.status, token)
            log.error(response.data.decode(errors="replace"))
            raise CacheError(f"HTTP {response.status} at {url}")
        body = response.data
        try:
            data = body.decode()
        except UnicodeDecodeError as err:
            raise CacheError(f"Puzzle input from {url} is not valid UTF-8 ({err})") from err
        log.info("saving the puzzle input token=%s", token)
        try:
            self._write(path, body)
        except OSError as err:
            raise CacheError(f"Failed to save input to {path} ({err})") from err
        return data

    def _write(self, path, body):
        # the body goes to a temporary file beside the target which is only moved into
        # place once fully written, so a cache file is either complete or absent
        _ensure_intermediate_dirs(path)
        with NamedTemporaryFile("wb", dir=path.parent, prefix=f".{path.stem}-", delete=False) as f:
            log.debug("writing to tempfile @ %s", f.name)
            try:
                f.write(body)
            except BaseException:
                f.close()
                os.unlink(f.name)
                raise
        log.debug("moving %s -> %s", f.name, path)
        try:
            shutil.move(f.name, path)
        except OSError:
            Path(f.name).unlink(missing_ok=True)
            raise
