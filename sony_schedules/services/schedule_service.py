"""
Schedule Service

Ties the pipeline together for one feed and date: validate the request,
build the URL, fetch the page, extract and render the listings.
"""
import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from sony_schedules.config import settings
from sony_schedules.schemas import ScheduleRequest
from sony_schedules.services.fetch_types import ListingCollection
from sony_schedules.services.formatter import render
from sony_schedules.services.html_fetcher import HtmlFetcher, HttpxHtmlFetcher
from sony_schedules.services.listing_extractor import extract_listings
from sony_schedules.utils.urls import build_schedule_url


logger = logging.getLogger(__name__)


class SonySchedule:
    """
    Programme schedule of one SetAsia feed for one day.

    Example:
        schedule = SonySchedule({"location": "en-gb"})
        print(await schedule.as_string())
    """

    def __init__(
        self,
        params: Mapping[str, Any],
        *,
        fetcher: HtmlFetcher | None = None,
        base_url: str | None = None,
        today: date | None = None
    ):
        self.request = ScheduleRequest.from_params(params, today=today)
        self.base_url = base_url or settings.base_url
        self._fetcher = fetcher or HttpxHtmlFetcher()
        self._listings: ListingCollection | None = None

    def get_url(self) -> str:
        """Return the schedule page URL for this feed and date"""
        return build_schedule_url(
            self.base_url,
            self.request.location,
            self.request.yyyy,
            self.request.mm,
            self.request.dd,
        )

    async def get_listings(self) -> ListingCollection:
        """
        Fetch the schedule page and extract its listings

        Every call issues exactly one request and returns a fresh list.

        Raises:
            FetchError: If the page could not be retrieved
            ParseError: If the fetcher returned something that is not a document
        """
        url = self.get_url()
        logger.info(f"Fetching listings for {self.request.display_name} ({self.request.location}): {url}")
        raw_html = await self._fetcher(url)
        listings = extract_listings(raw_html, base_url=self.base_url)
        logger.info(f"Found {len(listings)} listings for {self.request.location}")
        return listings

    async def as_string(self) -> str:
        """Return the listings in a human readable format, fetching them once per instance"""
        if self._listings is None:
            self._listings = await self.get_listings()
        return render(self._listings)

    def __repr__(self) -> str:
        return f"<SonySchedule(url={self.get_url()})>"
