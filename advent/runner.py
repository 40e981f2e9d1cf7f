import logging
import sys
from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
from importlib.metadata import version

from termcolor import colored

from .cache import InputCache
from .catalog import catalog
from .commands import parse_request
from .commands import USAGE
from .config import load_config
from .exceptions import AdventError
from .exceptions import DayNotFoundError
from .exceptions import UsageError
from .harness import run_day
from .scaffold import scaffold
from .types import Failed
from .types import Verb


log = logging.getLogger(__name__)


def main():
    """
    Run one part of one day's puzzle, downloading the puzzle input first if it's not
    cached yet. Or, with "newday", create the solution module for a new day.
    """
    parser = ArgumentParser(
        prog="advent",
        description="Advent of Code puzzle runner",
        usage="advent [-h] [options] [newday] [yyyy] <dd>[a|b]",
        epilog=USAGE,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="token",
        help="year (yyyy), day and part (e.g. 7 or 7b), or the newday verb, in any order",
    )
    parser.add_argument(
        "-s",
        "--settings",
        metavar="PATH",
        help="JSON settings file (default: $ADVENT_SETTINGS or ./settings.json)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        metavar="T",
        type=float,
        default=0,
        help=(
            "Kill a solution if it exceeded this timeout, in seconds "
            "(default: %(default)s, which means no timeout)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        help=(
            "Increased logging (-v INFO, -vv DEBUG). "
            "Default level is logging.WARNING."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s v{version('advent-runner')}",
    )
    args = parser.parse_args()
    if args.verbose is None:
        log_level = logging.WARNING
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG
    logging.basicConfig(level=log_level)

    # duplicate registrations are a bug in the solutions, not something to report nicely
    catalog.register_all()

    try:
        config = load_config(args.settings)
        request = parse_request(args.tokens, default_year=config.default_year)
        if request.verb is Verb.SCAFFOLD:
            scaffold(request.key, catalog=catalog)
            rc = 0
        else:
            cache = InputCache(config.cache_root, credential=config.session_cookie)
            outcome = run_day(request, catalog, cache, timeout=args.timeout)
            rc = int(isinstance(outcome, Failed))
    except (UsageError, DayNotFoundError) as err:
        print(err, file=sys.stderr)
        print(file=sys.stderr)
        print(USAGE, file=sys.stderr, end="")
        rc = 1
    except AdventError as err:
        log.debug("%s: %s", type(err).__name__, err)
        print(colored(f"ERROR: {err}", "red"), file=sys.stderr)
        rc = 1
    sys.exit(rc)
