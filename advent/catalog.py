"""
The catalog maps each puzzle (year, day) to the solution which solves it.

Solution modules register themselves when they're imported, by decorating their
`Solution` subclass with `@puzzle(year, day)`. `Catalog.register_all` imports every
module of the solutions package (and any installed plugins) so that dropping a new
file into advent/solutions/yearYYYY/ is enough to make it runnable.
"""
from __future__ import annotations

import importlib
import logging
import pkgutil
import typing as t

from .exceptions import DayNotFoundError
from .exceptions import DuplicateDayError
from .models import Solution
from .models import SolutionDescriptor
from .types import DayKey
from .utils import get_plugins


log = logging.getLogger(__name__)

SolutionType = t.TypeVar("SolutionType", bound=type[Solution])


class Catalog:
    def __init__(self) -> None:
        self._descriptors: dict[DayKey, SolutionDescriptor] = {}

    def __contains__(self, key):
        return key in self._descriptors

    def __len__(self):
        return len(self._descriptors)

    def __iter__(self) -> t.Iterator[DayKey]:
        return iter(sorted(self._descriptors))

    def __repr__(self):
        return f"<{type(self).__name__} with {len(self)} solutions>"

    def register(self, descriptor: SolutionDescriptor) -> None:
        key = descriptor.key
        if key in self._descriptors:
            existing = self._descriptors[key].factory
            msg = f"{key} is claimed by both {existing!r} and {descriptor.factory!r}"
            raise DuplicateDayError(msg)
        log.debug("registered %s -> %r", key, descriptor.factory)
        self._descriptors[key] = descriptor

    def puzzle(
        self, year: int, day: int, needs_input: bool | None = None
    ) -> t.Callable[[SolutionType], SolutionType]:
        """
        Class decorator which registers a Solution subclass as the solver for the
        given year and day. The class is used directly as the factory.
        """
        key = DayKey(year, day)

        def decorator(cls):
            cls.key = key
            if needs_input is not None:
                cls.needs_input = needs_input
            self.register(SolutionDescriptor(key, cls.needs_input, cls))
            return cls

        return decorator

    def register_all(self, packages=("advent.solutions",), plugins=True) -> None:
        """
        Import every module in the given packages (in sorted order) and every plugin
        advertised under the "advent.solutions" entry-point group. Importing a
        solution module is what registers it.
        """
        for name in packages:
            for modname in _walk(name):
                log.debug("importing solution module %s", modname)
                importlib.import_module(modname)
        if plugins:
            for ep in sorted(get_plugins(), key=lambda ep: ep.name):
                log.debug("loading solutions plugin %s (%s)", ep.name, ep.value)
                ep.load()
        log.info("%d solutions registered", len(self))

    def descriptor(self, key: DayKey) -> SolutionDescriptor:
        try:
            return self._descriptors[key]
        except KeyError:
            raise DayNotFoundError(f"Code for {key} could not be found") from None

    def resolve(self, key: DayKey) -> Solution:
        """A fresh instance of the solution registered for this key"""
        descriptor = self.descriptor(key)
        instance = descriptor.factory()
        if not isinstance(instance, Solution):
            raise TypeError(f"factory for {key} made {instance!r}, not a Solution")
        # the registered key is authoritative, whatever the factory produced
        instance.key = key
        instance.needs_input = descriptor.needs_input
        return instance


def _walk(package_name):
    package = importlib.import_module(package_name)
    names = [package_name]
    path = getattr(package, "__path__", None)
    if path is not None:
        prefix = package_name + "."
        names += [info.name for info in pkgutil.walk_packages(path, prefix)]
    return sorted(names)


catalog: Catalog = Catalog()


def puzzle(year, day, needs_input=None):
    """Register a solution in the process-wide catalog. See `Catalog.puzzle`."""
    return catalog.puzzle(year, day, needs_input=needs_input)
