"""
URL helpers for the schedule site.
"""
from urllib.parse import urljoin


def build_schedule_url(base_url: str, locale: str, year: int, month: int, day: int) -> str:
    """
    Build the schedule page URL for a feed and date

    Args:
        base_url: Site root, e.g. 'http://www.setasia.tv'
        locale: Validated location code
        year: Year, zero-padded to four digits
        month: Month, zero-padded to two digits
        day: Day, zero-padded to two digits

    Returns:
        URL like 'http://www.setasia.tv/en-gb/schedule#2011-04-07'
    """
    return f"{base_url.rstrip('/')}/{locale}/schedule#{year:04d}-{month:02d}-{day:02d}"


def resolve_link(base_url: str, href: str) -> str:
    """Join a relative href onto the site root; absolute URLs pass through"""
    return urljoin(base_url.rstrip("/") + "/", href)
