"""Test configuration and fixtures."""

from datetime import date
from pathlib import Path

import pytest

from review_scraper.errors import FetchTransportError

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name):
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeClient:
    """Stands in for ScrapeDoClient: serves queued pages and records every request."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.requests = []
        self.closed = False

    def fetch(self, url, render=False, browser_actions=None):
        self.requests.append({"url": url, "render": render, "browser_actions": browser_actions})
        if not self.pages:
            raise FetchTransportError("no more fixture pages", url=url)
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


@pytest.fixture
def g2_page1_html():
    return load_fixture("g2_page1.html")


@pytest.fixture
def g2_empty_html():
    return load_fixture("g2_empty.html")


@pytest.fixture
def g2_sparse_html():
    return load_fixture("g2_sparse.html")


@pytest.fixture
def capterra_html():
    return load_fixture("capterra_page.html")


@pytest.fixture
def window_2024_h1():
    """First half of 2024, the window most tests filter on."""
    return date(2024, 1, 1), date(2024, 6, 30)


@pytest.fixture
def scrape_do_env(monkeypatch, tmp_path):
    """A token in the environment and outputs redirected to a temp directory."""
    monkeypatch.setenv("SCRAPE_DO_TOKEN", "test-token")
    monkeypatch.setenv("REVIEWS_OUTPUT_DIR", str(tmp_path / "outputs"))
    monkeypatch.delenv("SCRAPE_DO_API", raising=False)
    monkeypatch.delenv("SCRAPE_DO_TIMEOUT", raising=False)
    return tmp_path
