from typing import Annotated
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from sony_schedules import __version__
from sony_schedules.dependencies import get_fetcher
from sony_schedules.locations import LOCATIONS
from sony_schedules.schemas import ListingResponse, LocationResponse, ScheduleResponse
from sony_schedules.services import HtmlFetcher, SonySchedule


logger = logging.getLogger(__name__)

main_router = APIRouter()


def _schedule_params(location: str, yyyy: int | None, mm: int | None, dd: int | None) -> dict:
    params: dict = {"location": location}
    for key, value in (("yyyy", yyyy), ("mm", mm), ("dd", dd)):
        if value is not None:
            params[key] = value
    return params


@main_router.get("/")
async def root() -> dict:
    """Root endpoint with service information"""
    return {
        "service": "Sony Schedules",
        "version": __version__,
        "endpoints": {
            "locations": "/locations - Supported feeds",
            "schedule": "/schedule/{location}?yyyy=&mm=&dd= - Listings as JSON",
            "text": "/schedule/{location}/text - Listings as plain text",
            "health": "/health - Health check"
        }
    }


@main_router.get("/health")
async def health_check() -> dict:
    """Health check endpoint"""
    return {"status": "ok"}


@main_router.get("/locations", response_model=list[LocationResponse])
async def get_locations() -> list[LocationResponse]:
    """List the supported feeds"""
    return [LocationResponse(code=code, name=name) for code, name in LOCATIONS.items()]


@main_router.get("/schedule/{location}", response_model=ScheduleResponse)
async def get_schedule(
    location: str,
    fetcher: Annotated[HtmlFetcher, Depends(get_fetcher)],
    yyyy: int | None = None,
    mm: int | None = None,
    dd: int | None = None
) -> ScheduleResponse:
    """
    Get the programme listings of a feed for a day

    Args:
        location: Location code of the feed
        yyyy, mm, dd: Optional date, all three or none (defaults to today)

    Returns:
        Listings in broadcast order with the page URL they were read from
    """
    schedule = SonySchedule(_schedule_params(location, yyyy, mm, dd), fetcher=fetcher)
    listings = await schedule.get_listings()
    request = schedule.request

    return ScheduleResponse(
        location=request.location,
        location_name=request.display_name,
        date=f"{request.yyyy:04d}-{request.mm:02d}-{request.dd:02d}",
        url=schedule.get_url(),
        total_listings=len(listings),
        listings=[ListingResponse.from_record(item) for item in listings]
    )


@main_router.get("/schedule/{location}/text", response_class=PlainTextResponse)
async def get_schedule_text(
    location: str,
    fetcher: Annotated[HtmlFetcher, Depends(get_fetcher)],
    yyyy: int | None = None,
    mm: int | None = None,
    dd: int | None = None
) -> str:
    """Get the programme listings of a feed for a day as plain text"""
    schedule = SonySchedule(_schedule_params(location, yyyy, mm, dd), fetcher=fetcher)
    return await schedule.as_string()
