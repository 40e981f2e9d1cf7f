from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError
from .types import FIRST_YEAR
from .utils import most_recent_year


log = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"
DEFAULT_INPUT_DIRECTORY = "Input"

# accepted spellings of each setting, the PascalCase ones are from older settings files
_KEYS = {
    "default_year": ("default_year", "DefaultYear"),
    "input_directory": ("input_directory", "InputDirectory"),
    "session_cookie": ("session_cookie", "SessionCookie"),
}


@dataclass(frozen=True)
class Config:
    """
    Settings for one invocation, built once at startup by `load_config` and then
    handed to whatever needs them.
    """

    default_year: int
    input_directory: str = DEFAULT_INPUT_DIRECTORY
    session_cookie: str = ""
    base_directory: Path = Path(".")

    @property
    def cache_root(self) -> Path:
        """
        Where puzzle inputs are cached. An absolute input directory is used as it
        is, a relative one is resolved against the settings file's directory.
        """
        path = Path(self.input_directory).expanduser()
        if path.is_absolute():
            return path
        return self.base_directory / path

    def sanity_check(self) -> None:
        if not isinstance(self.default_year, int) or self.default_year < FIRST_YEAR:
            raise ConfigurationError(
                f"default_year must be a year from {FIRST_YEAR} onwards, "
                f"got {self.default_year!r}"
            )
        if not isinstance(self.input_directory, str):
            raise ConfigurationError(
                f"input_directory must be a string, got {self.input_directory!r}"
            )
        if not self.input_directory:
            raise ConfigurationError("input_directory must not be empty")
        cookie = self.session_cookie
        if not isinstance(cookie, str):
            raise ConfigurationError(f"session_cookie must be a string, got {cookie!r}")
        if cookie and (cookie.count("=") > 1 or cookie.startswith("=") or cookie.endswith("=")):
            raise ConfigurationError(
                'A valid session cookie is in the form "session=53616c7465..." '
                'or just the token "53616c7465..."'
            )


def _pick(settings, name, default):
    for key in _KEYS[name]:
        if key in settings:
            return settings[key]
    return default


def load_config(path=None) -> Config:
    """
    Read the JSON settings file. When no path is given, $ADVENT_SETTINGS is used,
    and failing that ./settings.json - which is allowed to be absent, in which case
    everything takes its default value. The session cookie may be overridden by
    exporting it in $AOC_SESSION.
    """
    explicit = True
    if path is None:
        path = os.environ.get("ADVENT_SETTINGS")
    if path is None:
        explicit = False
        path = SETTINGS_FILENAME
    path = Path(path).expanduser()
    try:
        txt = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if explicit:
            raise ConfigurationError(f"Settings file {path} was not found")
        log.debug("no settings file at %s, using defaults", path)
        settings = {}
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigurationError(f"Settings file {path} is unreadable ({err})")
    else:
        try:
            settings = json.loads(txt)
        except json.JSONDecodeError as err:
            raise ConfigurationError(f"Settings file {path} is not valid JSON ({err})")
        if not isinstance(settings, dict):
            raise ConfigurationError(f"Settings file {path} should contain a JSON object")
        log.debug("loaded settings from %s", path)
    cookie = os.environ.get("AOC_SESSION")
    if cookie:
        log.debug("using session cookie from $AOC_SESSION")
    else:
        cookie = _pick(settings, "session_cookie", "")
    year = _pick(settings, "default_year", None)
    if year is None:
        year = most_recent_year()
        log.info("default year not configured, using most recent year=%s", year)
    config = Config(
        default_year=year,
        input_directory=_pick(settings, "input_directory", DEFAULT_INPUT_DIRECTORY),
        session_cookie=cookie.strip() if isinstance(cookie, str) else cookie,
        base_directory=path.absolute().parent,
    )
    config.sanity_check()
    return config
