from . import cache
from . import catalog
from . import commands
from . import config
from . import exceptions
from . import harness
from . import models
from . import scaffold
from . import transforms
from . import types
from . import utils
from .catalog import puzzle
from .exceptions import AdventError
from .models import Solution
from .types import DayKey
from .types import NOT_SOLVED
from .types import Part

__all__ = [
    "AdventError",
    "DayKey",
    "NOT_SOLVED",
    "Part",
    "Solution",
    "cache",
    "catalog",
    "commands",
    "config",
    "exceptions",
    "harness",
    "models",
    "puzzle",
    "scaffold",
    "transforms",
    "types",
    "utils",
]
