"""
Unit tests for the scrape.do client.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from review_scraper.config import Settings
from review_scraper.errors import EmptyDocumentError, FetchError, FetchStatusError, FetchTransportError
from review_scraper.fetcher import ScrapeDoClient


def make_client(status_code=200, text="<html><body>ok</body></html>", side_effect=None):
    session = Mock(spec=requests.Session)
    session.headers = {}
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = Mock(status_code=status_code, text=text)
    settings = Settings(token="secret", api_base="https://api.scrape.do/", timeout=12)
    return ScrapeDoClient(settings, session=session), session


class TestScrapeDoClient:
    def test_returns_html_and_passes_target_as_param(self):
        client, session = make_client()

        html = client.fetch("https://www.g2.com/products/slack/reviews?page=1")

        assert "ok" in html
        session.get.assert_called_once_with(
            "https://api.scrape.do/",
            params={"token": "secret", "url": "https://www.g2.com/products/slack/reviews?page=1"},
            timeout=12,
        )

    def test_render_and_browser_actions(self):
        client, session = make_client()
        actions = [{"Action": "Wait", "Timeout": 1000}]

        client.fetch("https://www.capterra.com/p/1/x/reviews/", render=True, browser_actions=actions)

        params = session.get.call_args.kwargs["params"]
        assert params["render"] == "true"
        assert json.loads(params["playWithBrowser"]) == actions

    def test_network_failure(self):
        client, _ = make_client(side_effect=requests.ConnectionError("refused"))
        with pytest.raises(FetchTransportError) as exc:
            client.fetch("https://example.com/a")
        assert exc.value.url == "https://example.com/a"

    def test_timeout_is_transport_failure(self):
        client, _ = make_client(side_effect=requests.Timeout("slow"))
        with pytest.raises(FetchTransportError):
            client.fetch("https://example.com/a")

    @pytest.mark.parametrize("status", [301, 401, 404, 500, 502])
    def test_non_2xx_status(self, status):
        client, _ = make_client(status_code=status, text="nope")
        with pytest.raises(FetchStatusError) as exc:
            client.fetch("https://example.com/a")
        assert exc.value.status_code == status

    def test_blank_body(self):
        client, _ = make_client(text="   \n")
        with pytest.raises(EmptyDocumentError):
            client.fetch("https://example.com/a")

    def test_all_failures_share_a_base(self):
        assert issubclass(FetchTransportError, FetchError)
        assert issubclass(FetchStatusError, FetchError)
        assert issubclass(EmptyDocumentError, FetchError)

    def test_context_manager_closes_session(self):
        client, session = make_client()
        with client:
            pass
        session.close.assert_called_once()
