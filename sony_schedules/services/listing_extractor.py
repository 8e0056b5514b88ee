import logging
import re
from collections.abc import Iterator

from sony_schedules.config import settings
from sony_schedules.exceptions import ParseError
from sony_schedules.services.fetch_types import ListingCollection, ListingRecord
from sony_schedules.utils.logging_helpers import log_extraction_summary
from sony_schedules.utils.text import clean_attribute, clean_fragment_text, normalize_whitespace
from sony_schedules.utils.urls import resolve_link

logger = logging.getLogger(__name__)

_TBODY_RE = re.compile(r"<tbody[^>]*>(.*?)</tbody>", re.IGNORECASE)
_ROW_RE = re.compile(r"<tr class=(.*?)</tr>", re.IGNORECASE)
_TIME_CELL_RE = re.compile(r"<td width=(.*?)</td>", re.IGNORECASE)
_TIME_RE = re.compile(r"\b(\d{1,2}):(\d{2})\s*([AP]M)\b", re.IGNORECASE)
_ANCHOR_RE = re.compile(r"<a\s[^>]*?href=\"([^\"]*)\"[^>]*>(.*?)</a>", re.IGNORECASE)
_TEXT_CELL_RE = re.compile(r"<td class=\"text\"[^>]*>(.*?)</td>", re.IGNORECASE)


def extract_listings(raw_html: str | bytes, base_url: str | None = None) -> ListingCollection:
    """
    Extract programme listings from a schedule page

    Rows that do not look as expected still produce a record with whatever
    fields could be read. A page without a table body yields no listings.

    Args:
        raw_html: Page body as text or bytes (bytes are decoded as UTF-8)
        base_url: Site root used to resolve relative detail links

    Returns:
        List of ListingRecord in document order

    Raises:
        ParseError: If raw_html is neither str nor bytes
    """
    if isinstance(raw_html, (bytes, bytearray)):
        raw_html = bytes(raw_html).decode("utf-8", errors="replace")
    if not isinstance(raw_html, str):
        raise ParseError(f"expected HTML text, got {type(raw_html).__name__}")

    base_url = base_url or settings.base_url
    document = normalize_whitespace(raw_html)

    table_body = _find_table_body(document)
    if table_body is None:
        logger.warning("No schedule table body found in document")
        return []

    listings = [_parse_row(row, base_url) for row in iter_rows(table_body)]

    log_extraction_summary(
        logger,
        rows=len(listings),
        titled=sum(1 for item in listings if item.title),
        linked=sum(1 for item in listings if item.url),
    )
    return listings


def iter_rows(fragment: str) -> Iterator[str]:
    """Yield each schedule row fragment in document order, single pass"""
    position = 0
    while True:
        match = _ROW_RE.search(fragment, position)
        if match is None:
            return
        position = match.end()
        yield normalize_whitespace(match.group(1))


def extract_time(cell: str) -> str | None:
    """Pull an 'HH:MM AM|PM' time out of the time cell"""
    match = _TIME_RE.search(cell)
    if match is None:
        return None
    hours, minutes, meridiem = match.groups()
    return f"{int(hours):02d}:{minutes} {meridiem.upper()}"


def _find_table_body(document: str) -> str | None:
    match = _TBODY_RE.search(document)
    if match is None:
        return None
    return normalize_whitespace(match.group(1))


def _parse_row(row: str, base_url: str) -> ListingRecord:
    """Parse a single row fragment"""
    time = None
    remainder = row

    time_cell = _TIME_CELL_RE.search(row)
    if time_cell:
        time = extract_time(time_cell.group(1))
        remainder = row[:time_cell.start()] + row[time_cell.end():]

    anchor = _ANCHOR_RE.search(remainder)
    if anchor:
        return ListingRecord(
            time=time,
            title=clean_fragment_text(anchor.group(2)),
            url=resolve_link(base_url, clean_attribute(anchor.group(1))),
        )

    text_cell = _TEXT_CELL_RE.search(remainder)
    if text_cell:
        return ListingRecord(time=time, title=clean_fragment_text(text_cell.group(1)))

    logger.debug(f"Row without title: {row[:80]}")
    return ListingRecord(time=time)
