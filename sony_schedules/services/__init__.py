"""
Services package for the schedule scraper

This package contains the fetch / extract / render pipeline.
"""
from sony_schedules.services.formatter import render
from sony_schedules.services.html_fetcher import HtmlFetcher, HttpxHtmlFetcher
from sony_schedules.services.listing_extractor import extract_listings
from sony_schedules.services.schedule_service import SonySchedule

__all__ = [
    'render',
    'HtmlFetcher',
    'HttpxHtmlFetcher',
    'extract_listings',
    'SonySchedule',
]
