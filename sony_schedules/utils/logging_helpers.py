"""
Logging helpers for consistent log formatting across the scraping pipeline.
"""
import logging
from datetime import datetime, timezone


def log_fetch_start(logger: logging.Logger, method: str, url: str) -> None:
    """
    Log the start of a schedule page request.

    Args:
        logger: Logger instance
        method: HTTP method used
        url: URL being requested
    """
    logger.info(f"Schedule fetch started at {datetime.now(timezone.utc).isoformat()}: {method} {url}")


def log_fetch_end(logger: logging.Logger, url: str, status_code: int, size: int) -> None:
    """
    Log the end of a schedule page request.

    Args:
        logger: Logger instance
        url: URL that was requested
        status_code: HTTP status of the response
        size: Response body size in bytes
    """
    logger.info(f"Schedule fetch completed: {url} (HTTP {status_code}, {size / 1024:.1f} KB)")


def log_extraction_summary(
    logger: logging.Logger,
    rows: int,
    titled: int,
    linked: int
) -> None:
    """
    Log listing extraction summary.

    Args:
        logger: Logger instance
        rows: Number of schedule rows found
        titled: Rows that yielded a title
        linked: Rows that yielded a detail page URL
    """
    logger.info(f"Extraction summary - Rows: {rows}, Titled: {titled}, Linked: {linked}")
