"""
Exceptions raised by the schedule scraper.

All errors are raised to the immediate caller; nothing here is retried.
"""


class ScheduleError(Exception):
    """Base class for all schedule scraper errors"""
    pass


class ConfigError(ScheduleError, ValueError):
    """Raised when the construction parameters are invalid"""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class InvalidLocation(ConfigError):
    """Raised when a location code is not one of the supported feeds"""

    def __init__(self, code: object):
        super().__init__(f"invalid location: {code!r}", key="location")
        self.code = code


class IncompleteDate(ConfigError):
    """Raised when only part of yyyy/mm/dd is supplied"""

    def __init__(self, missing: str):
        super().__init__(f"missing {missing}", key=missing)


class FetchError(ScheduleError):
    """Raised when the schedule page could not be retrieved"""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"couldn't fetch [{url}]: {message}")
        self.url = url
        self.status_code = status_code


class ParseError(ScheduleError):
    """Raised when the extractor is handed something that is not a document"""
    pass
