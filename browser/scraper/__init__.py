"""Scraper package — URL normalisation, web fetch & content extraction."""

from browser.scraper.extractor import extract_content
from browser.scraper.fetcher import fetch_url
from browser.scraper.models import Block, CleanPage, RawPage
from browser.scraper.urls import normalize_url

__all__ = ["normalize_url", "fetch_url", "extract_content", "RawPage", "CleanPage", "Block"]
