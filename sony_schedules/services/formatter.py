from collections.abc import Iterable

from sony_schedules.services.fetch_types import ListingRecord

SEPARATOR = "-------------------"


def render(listings: Iterable[ListingRecord]) -> str:
    """Render listings as human readable text, one block per programme"""
    lines = []
    for listing in listings:
        lines.append(f"  Start Time: {listing.time or ''}")
        lines.append(f"       Title: {listing.title or ''}")
        lines.append(f"         URL: {listing.display_url}")
        lines.append(SEPARATOR)
    return "".join(f"{line}\n" for line in lines)
