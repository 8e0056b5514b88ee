"""
HTML fetcher

Retrieves the raw schedule page. One request per call, no retries: resilience
policy belongs to the caller or to the injected client.
"""
import logging
from typing import Protocol

import httpx

from sony_schedules.config import settings
from sony_schedules.exceptions import FetchError
from sony_schedules.utils.logging_helpers import log_fetch_end, log_fetch_start


logger = logging.getLogger(__name__)


class HtmlFetcher(Protocol):
    """Anything that can turn a URL into the page body"""

    async def __call__(self, url: str) -> str:
        ...


class HttpxHtmlFetcher:
    """
    Fetch schedule pages with httpx

    Uses the shared client when one is given (e.g. the API's lifespan client),
    otherwise opens a short-lived client per request.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        method: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None
    ):
        self._client = client
        self.method = (method or settings.request_method).upper()
        self.timeout = timeout if timeout is not None else settings.request_timeout_sec
        self.headers = {"User-Agent": user_agent or settings.user_agent}

    async def __call__(self, url: str) -> str:
        """
        Request the page and return its body

        Args:
            url: Schedule page URL

        Returns:
            Response body as text

        Raises:
            FetchError: On connection failure, timeout or non-2xx status
        """
        log_fetch_start(logger, self.method, url)

        try:
            if self._client is not None:
                response = await self._send(self._client, url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, url)
        except httpx.TimeoutException as e:
            raise FetchError(url, f"timed out ({type(e).__name__})") from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise FetchError(
                url,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        log_fetch_end(logger, url, response.status_code, len(response.content))
        return response.text

    async def _send(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        return await client.request(self.method, url, headers=self.headers, timeout=self.timeout)
