from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures"
BASE_URL = "http://www.setasia.tv"


class FakeFetcher:
    """Records requested URLs and returns a canned body (or raises)."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self.body = body
        self.error = error
        self.urls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture()
def schedule_html() -> str:
    return (FIXTURES / "schedule_en-gb.html").read_text(encoding="utf-8")


@pytest.fixture()
def fake_fetcher(schedule_html) -> FakeFetcher:
    return FakeFetcher(schedule_html)
