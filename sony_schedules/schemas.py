from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sony_schedules import locations
from sony_schedules.exceptions import ConfigError
from sony_schedules.services.fetch_types import ListingRecord
from sony_schedules.utils import dates


class ScheduleRequest(BaseModel):
    """Validated schedule request: one feed, one day"""
    model_config = ConfigDict(frozen=True)

    location: str = Field(..., description="Location code of the feed (e.g. 'en-gb')")
    yyyy: int = Field(..., description="Year")
    mm: int = Field(..., description="Month (1-12, not checked against the calendar)")
    dd: int = Field(..., description="Day (1-31, not checked against the calendar)")

    @property
    def display_name(self) -> str:
        return locations.LOCATIONS[self.location]

    @classmethod
    def from_params(cls, params: Any, today: date | None = None) -> "ScheduleRequest":
        """
        Validate construction parameters and fill in the default date

        Checks run in a fixed order: shape, presence of location, validity of
        location, then completeness of the yyyy/mm/dd trio.

        Args:
            params: Mapping with 'location' and optionally all of 'yyyy', 'mm', 'dd'
            today: Date to use when no date is given

        Returns:
            Frozen ScheduleRequest

        Raises:
            ConfigError: With a message naming the missing or invalid key
        """
        if not isinstance(params, Mapping):
            raise ConfigError("input params are not a mapping")
        if "location" not in params:
            raise ConfigError("missing location", key="location")

        location = params["location"]
        locations.resolve(location)

        yyyy, mm, dd = dates.normalize(
            params.get("yyyy"),
            params.get("mm"),
            params.get("dd"),
            today=today,
        )

        try:
            return cls(location=location, yyyy=yyyy, mm=mm, dd=dd)
        except ValidationError as e:
            key = str(e.errors()[0]["loc"][0])
            raise ConfigError(f"invalid value for {key}", key=key) from e


class ListingResponse(BaseModel):
    """Single programme listing"""
    time: str | None = Field(None, description="Start time as 'HH:MM AM|PM'")
    title: str | None = Field(None, description="Programme title")
    url: str | None = Field(None, description="Programme detail page URL")

    @classmethod
    def from_record(cls, record: ListingRecord) -> "ListingResponse":
        return cls(time=record.time, title=record.title, url=record.url)


class LocationResponse(BaseModel):
    """Supported feed"""
    code: str
    name: str


class ScheduleResponse(BaseModel):
    """Schedule data response"""
    location: str
    location_name: str
    date: str = Field(..., description="Requested date as YYYY-MM-DD")
    url: str = Field(..., description="Schedule page the listings were read from")
    total_listings: int
    listings: list[ListingResponse]


class ErrorDetail(BaseModel):
    """Standard error detail"""
    code: str = Field(..., description="Error code (e.g., 'FETCH_FAILED', 'CONFIG_ERROR')")
    message: str = Field(..., description="Human-readable error message")
    context: dict | None = Field(None, description="Additional context about the error")


class StandardErrorResponse(BaseModel):
    """Standardized error response for all endpoints"""
    status: str = Field("error", description="Status indicator")
    timestamp: str = Field(..., description="ISO8601 timestamp of error")
    error: ErrorDetail = Field(..., description="Error details")
