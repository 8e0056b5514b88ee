from sony_schedules.utils.text import clean_attribute
from sony_schedules.utils.urls import build_schedule_url, resolve_link


def test_schedule_url_is_zero_padded():
    url = build_schedule_url("http://www.setasia.tv", "en-gb", 2011, 4, 7)
    assert url == "http://www.setasia.tv/en-gb/schedule#2011-04-07"


def test_schedule_url_pads_short_year_and_ignores_trailing_slash():
    url = build_schedule_url("http://www.setasia.tv/", "en-us", 999, 12, 25)
    assert url == "http://www.setasia.tv/en-us/schedule#0999-12-25"


def test_large_year_passes_through():
    url = build_schedule_url("http://www.setasia.tv", "en-us", 12345, 1, 1)
    assert url.endswith("#12345-01-01")


def test_resolve_link():
    base = "http://www.setasia.tv"
    assert resolve_link(base, "/en-gb/shows/cid") == "http://www.setasia.tv/en-gb/shows/cid"
    assert resolve_link(base, "shows/cid") == "http://www.setasia.tv/shows/cid"
    assert resolve_link(base, "https://example.com/x") == "https://example.com/x"


def test_clean_attribute_decodes_entities():
    assert clean_attribute(" /show?id=1&amp;ep=2 ") == "/show?id=1&ep=2"
