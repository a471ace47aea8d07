# review_scraper/fetcher.py
import json
import logging
from typing import Dict, List, Optional

import requests

from review_scraper.config import Settings
from review_scraper.errors import EmptyDocumentError, FetchStatusError, FetchTransportError

log = logging.getLogger("fetcher")


class ScrapeDoClient:
    '''
    Thin wrapper over the scrape.do proxy: one GET per page, the proxy does the
    browser rendering and bot evasion. No retries here; callers decide what a
    failure means for the run.
    '''

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "text/html,application/xhtml+xml"})

    def build_params(self, url: str, render: bool = False, browser_actions: Optional[List[Dict]] = None) -> Dict[str, str]:
        params = {"token": self.settings.token or "", "url": url}
        if render:
            params["render"] = "true"
        if browser_actions:
            params["playWithBrowser"] = json.dumps(browser_actions, separators=(",", ":"))
        return params

    def fetch(self, url: str, render: bool = False, browser_actions: Optional[List[Dict]] = None) -> str:
        params = self.build_params(url, render=render, browser_actions=browser_actions)
        log.info("GET %s (render=%s)", url, render)
        try:
            resp = self.session.get(self.settings.api_base, params=params, timeout=self.settings.timeout)
        except requests.RequestException as e:
            raise FetchTransportError(f"Network error fetching {url}: {e}", url=url) from e
        log.debug("scrape.do GET %s | status=%s", url, resp.status_code)
        if not 200 <= resp.status_code < 300:
            raise FetchStatusError(
                f"scrape.do returned {resp.status_code} for {url}: {resp.text[:300]}",
                url=url,
                status_code=resp.status_code,
            )
        html = resp.text or ""
        if not html.strip():
            raise EmptyDocumentError(f"Empty document returned for {url}", url=url)
        return html

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
