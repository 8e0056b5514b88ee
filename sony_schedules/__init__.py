"""
Sony TV programme schedules

Fetches the SetAsia schedule page for a regional feed and date and extracts
the programme listings from it.
"""
from sony_schedules.exceptions import (
    ConfigError,
    FetchError,
    IncompleteDate,
    InvalidLocation,
    ParseError,
    ScheduleError,
)
from sony_schedules.services.fetch_types import ListingRecord
from sony_schedules.services.schedule_service import SonySchedule

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FetchError",
    "IncompleteDate",
    "InvalidLocation",
    "ListingRecord",
    "ParseError",
    "ScheduleError",
    "SonySchedule",
]
