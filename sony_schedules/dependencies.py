"""
Dependency providers for the API.

The fetcher is resolved per request so tests can swap it through
app.dependency_overrides without touching the network.
"""
import logging

from fastapi import Request

from sony_schedules.services.html_fetcher import HtmlFetcher, HttpxHtmlFetcher


logger = logging.getLogger(__name__)


def get_fetcher(request: Request) -> HtmlFetcher:
    """
    Provide an HTML fetcher bound to the application's shared client.

    Falls back to a per-request client when the lifespan has not run.
    """
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        logger.debug("No shared HTTP client on app state, using per-request client")
    return HttpxHtmlFetcher(client=client)
