class AdventError(Exception):
    """base exception for this package"""


class UsageError(AdventError):
    """the command line could not be understood"""


class ConfigurationError(AdventError):
    """settings are missing, unreadable or insufficient for the request"""


class DayNotFoundError(AdventError, LookupError):
    """no solution is registered for the requested year/day"""


class DuplicateDayError(AdventError):
    """two solutions claim the same year/day"""


class CacheError(AdventError):
    """puzzle input could not be read from disk or fetched from the server"""


class PuzzleLockedError(CacheError):
    """trying to access input before the unlock"""


class ScaffoldError(AdventError):
    """refusing to create a solution skeleton"""
