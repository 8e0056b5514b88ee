from datetime import date

import pytest

from sony_schedules.exceptions import ConfigError, FetchError
from sony_schedules.services.fetch_types import ListingRecord
from sony_schedules.services.schedule_service import SonySchedule

from tests.conftest import FakeFetcher


def test_get_url_pads_month_and_day():
    schedule = SonySchedule({"location": "en-gb", "yyyy": 2011, "mm": 4, "dd": 7}, fetcher=FakeFetcher())
    assert schedule.get_url() == "http://www.setasia.tv/en-gb/schedule#2011-04-07"


def test_get_url_with_default_date():
    schedule = SonySchedule({"location": "en-za"}, fetcher=FakeFetcher(), today=date(2011, 11, 30))
    assert schedule.get_url() == "http://www.setasia.tv/en-za/schedule#2011-11-30"


def test_custom_base_url():
    schedule = SonySchedule(
        {"location": "en-us", "yyyy": 2011, "mm": 4, "dd": 7},
        fetcher=FakeFetcher(),
        base_url="https://mirror.example.com",
    )
    assert schedule.get_url() == "https://mirror.example.com/en-us/schedule#2011-04-07"


def test_construction_validates_params():
    with pytest.raises(ConfigError, match="missing dd"):
        SonySchedule({"location": "en-gb", "yyyy": 2011, "mm": 4}, fetcher=FakeFetcher())


async def test_get_listings_fetches_every_call(fake_fetcher):
    schedule = SonySchedule({"location": "en-gb", "yyyy": 2011, "mm": 4, "dd": 7}, fetcher=fake_fetcher)

    first = await schedule.get_listings()
    second = await schedule.get_listings()

    assert fake_fetcher.urls == [schedule.get_url()] * 2
    assert first == second
    assert first[0] == ListingRecord(
        time="07:30 PM",
        title="Kaun Banega Crorepati",
        url="http://www.setasia.tv/en-gb/shows/kaun-banega-crorepati",
    )


async def test_as_string_caches_listings(fake_fetcher):
    schedule = SonySchedule({"location": "en-gb"}, fetcher=fake_fetcher)

    text = await schedule.as_string()
    again = await schedule.as_string()

    assert text == again
    assert len(fake_fetcher.urls) == 1
    assert "       Title: CID\n         URL: N/A\n" in text
    assert text.count("-------------------\n") == 3


async def test_fetch_error_propagates():
    error = FetchError("http://www.setasia.tv/en-gb/schedule#2011-04-07", "HTTP 500")
    schedule = SonySchedule({"location": "en-gb"}, fetcher=FakeFetcher(error=error))

    with pytest.raises(FetchError):
        await schedule.as_string()
    with pytest.raises(FetchError):
        await schedule.get_listings()


async def test_page_without_table_renders_empty():
    schedule = SonySchedule({"location": "en-pk"}, fetcher=FakeFetcher("<html></html>"))
    assert await schedule.get_listings() == []
    assert await schedule.as_string() == ""


def test_str_does_not_fetch():
    fetcher = FakeFetcher()
    schedule = SonySchedule({"location": "en-gb", "yyyy": 2011, "mm": 4, "dd": 7}, fetcher=fetcher)
    assert "en-gb/schedule#2011-04-07" in str(schedule)
    assert fetcher.urls == []
