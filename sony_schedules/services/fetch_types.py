"""
Shared dataclasses used across the schedule scraping pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass


URL_PLACEHOLDER = "N/A"


@dataclass(frozen=True, slots=True)
class ListingRecord:
    """One programme row of the schedule page."""
    time: str | None = None
    title: str | None = None
    url: str | None = None

    @property
    def display_url(self) -> str:
        return self.url if self.url is not None else URL_PLACEHOLDER


# Document order of the source page, no deduplication.
ListingCollection = list[ListingRecord]


__all__ = ["ListingRecord", "ListingCollection", "URL_PLACEHOLDER"]
