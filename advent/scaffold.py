import logging
from pathlib import Path

from .exceptions import ScaffoldError
from .types import DayKey


log = logging.getLogger(__name__)

SOLUTIONS_DIR = Path(__file__).parent / "solutions"

TEMPLATE = '''\
from advent.catalog import puzzle
from advent.models import Solution
from advent.types import NOT_SOLVED


@puzzle({year}, {day})
class Day{day:02d}(Solution):
    def part_one(self, data):
        return NOT_SOLVED

    def part_two(self, data):
        return NOT_SOLVED
'''


def solution_path(key: DayKey, solutions_dir=SOLUTIONS_DIR) -> Path:
    return Path(solutions_dir) / f"year{key.year}" / f"day{key.day:02d}.py"


def scaffold(key: DayKey, solutions_dir=SOLUTIONS_DIR, catalog=None) -> Path:
    """
    Create a skeleton solution module for a new day, and the package for its year
    if this is the first day of that year. An existing solution is never overwritten.
    """
    path = solution_path(key, solutions_dir)
    if path.exists() or (catalog is not None and key in catalog):
        raise ScaffoldError(f"Code for {key} already exists")
    year_dir = path.parent
    if not year_dir.is_dir():
        print(f"Creating a new year's directory at {year_dir}")
        year_dir.mkdir(parents=True)
    init = year_dir / "__init__.py"
    if not init.exists():
        init.touch()
    print(f"Creating solution file for {key} at '{path}'")
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(TEMPLATE.format(year=key.year, day=key.day))
    except FileExistsError:
        raise ScaffoldError(f"Code for {key} already exists") from None
    log.info("created %s", path)
    return path
