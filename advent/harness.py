from __future__ import annotations

import logging
import time
import typing as t
from concurrent import futures

import pebble.concurrent
from termcolor import colored

from .catalog import Catalog
from .models import Solution
from .types import Failed
from .types import NotSolved
from .types import Outcome
from .types import Part
from .types import Request
from .types import Solved
from .utils import coerce_answer

if t.TYPE_CHECKING:
    from .cache import InputCache


# from https://adventofcode.com/about
# every problem has a solution that completes in at most 15 seconds on ten-year-old hardware
BUDGET = 15.0

log = logging.getLogger(__name__)


def run(solution: Solution, part: Part, data: str) -> tuple[Outcome, float]:
    """
    Execute one part of a solution against the input data. Returns the outcome and
    the walltime (in seconds) spent inside the part function itself.
    """
    part = part.resolve()
    func = solution.part_one if part is Part.ONE else solution.part_two
    t0 = time.perf_counter()
    try:
        answer = func(data)
    except Exception as err:
        elapsed = time.perf_counter() - t0
        log.debug("%r part %s raised", solution, part.value, exc_info=True)
        return Failed(repr(err)), elapsed
    elapsed = time.perf_counter() - t0
    return _classify(answer), elapsed


def _classify(answer):
    if isinstance(answer, NotSolved):
        return answer
    if answer is None:
        return Failed("no answer returned (use NOT_SOLVED for an unsolved part)")
    return Solved(coerce_answer(answer))


def run_with_timeout(
    solution: Solution, part: Part, data: str, timeout: float = 0
) -> tuple[Outcome, float]:
    """
    Like `run`, but the solution executes in a subprocess which is killed if it
    exceeds `timeout` seconds. You can't do that reliably with threads. A timeout of
    0 disables the limit and runs in this process.
    """
    if not timeout:
        return run(solution, part, data)
    func = pebble.concurrent.process(daemon=False, timeout=timeout)(run)
    future = func(solution, part, data)
    try:
        return future.result()
    except futures.TimeoutError:
        log.warning("%r part %s killed after %ss", solution, part.resolve().value, timeout)
        return Failed(f"timed out after {timeout}s"), float(timeout)
    except Exception as err:
        # the solution itself can't raise through `run`, so this is the process dying
        return Failed(repr(err)), 0.0


def format_elapsed(seconds: float, budget: float = BUDGET) -> str:
    """
    Used for rendering the puzzle solve time in color:
    - green, if you're under a quarter of the budget
    - yellow, if you're over a quarter but under a half
    - red, if you're really slow
    """
    if seconds < budget / 4:
        color = "green"
    elif seconds < budget / 2:
        color = "yellow"
    else:
        color = "red"
    return colored(f"{seconds * 1000:.3f}ms", color)


def run_day(
    request: Request, catalog: Catalog, cache: InputCache, timeout: float = 0
) -> Outcome:
    """
    Find the solution for the requested day, get its input if it needs any, run the
    requested part and print the result. Input is resolved before the clock starts,
    and solutions which don't need input never touch the cache.
    """
    descriptor = catalog.descriptor(request.key)
    solution = catalog.resolve(request.key)
    data = ""
    if descriptor.needs_input:
        data = cache.get(request.key)
    else:
        log.debug("%r does not need input", solution)
    part = request.part.resolve()
    print(f"Running {request.key} part {part.value}")
    print()
    outcome, elapsed = run_with_timeout(solution, part, data, timeout=timeout)
    print(f"ELAPSED: {format_elapsed(elapsed)}")
    if isinstance(outcome, Solved):
        print(f"RESULT : {outcome.result}")
    elif isinstance(outcome, NotSolved):
        print(colored("PUZZLE NOT SOLVED", "yellow"))
    else:
        print(colored(f"FAILED : {outcome.error}", "red"))
    return outcome
