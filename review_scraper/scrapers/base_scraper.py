# review_scraper/scrapers/base_scraper.py
from datetime import date
from typing import List, Optional
import logging

from bs4 import BeautifulSoup, Tag

from review_scraper.errors import FetchError
from review_scraper.fetcher import ScrapeDoClient
from review_scraper.models import PageResult, Review, ScrapeOutcome, ScrapeStatus
from review_scraper.window import DateWindow

log = logging.getLogger("scraper")

HTML_PARSER = "html.parser"


class BaseScraper:
    name = "base"
    # True: walk ?page=1,2,... until a page has no review containers
    paginated = False
    container_selector = ""
    render = False
    browser_actions: Optional[list] = None

    def __init__(self, company: str, start_date: date, end_date: date, product_url: Optional[str] = None,
                 client: Optional[ScrapeDoClient] = None, include_undated: bool = True):
        self.company = company
        self.start_date = start_date
        self.end_date = end_date
        self.product_url = product_url
        self.client = client
        self.window = DateWindow(start_date, end_date, include_undated=include_undated)

    def scrape(self) -> ScrapeOutcome:
        '''
        Main entrypoint: fetch -> parse -> extract, page after page for
        paginated sources, once otherwise.
        Child classes must implement:
          - find_product_page(page_num) -> str
          - extract_review(container) -> Optional[Review]
        '''
        if self.client is None:
            raise RuntimeError(f"{self.__class__.__name__} needs a ScrapeDoClient to fetch pages")
        if not self.paginated:
            return self._scrape_single()
        return self._scrape_pages()

    def _scrape_single(self) -> ScrapeOutcome:
        # fetch errors propagate: a single-page run has nothing to salvage
        html = self.client.fetch(self.find_product_page(1), render=self.render, browser_actions=self.browser_actions)
        result = self.extract_reviews_from_page(self.parse_document(html), page_num=1)
        if result.exhausted:
            log.info("No reviews found on %s.", self.name)
        status = ScrapeStatus.EXHAUSTED if result.exhausted else ScrapeStatus.COMPLETE
        return ScrapeOutcome(source=self.name, status=status, reviews=list(result.reviews), pages_fetched=1)

    def _scrape_pages(self) -> ScrapeOutcome:
        all_reviews: List[Review] = []
        page_num = 0
        while True:
            page_num += 1
            url = self.find_product_page(page_num)
            try:
                html = self.client.fetch(url, render=self.render, browser_actions=self.browser_actions)
            except FetchError as e:
                log.error("Error fetching page %s: %s", page_num, e)
                return ScrapeOutcome(
                    source=self.name,
                    status=ScrapeStatus.FETCH_FAILED,
                    reviews=all_reviews,
                    pages_fetched=page_num - 1,
                    error=str(e),
                )
            result = self.extract_reviews_from_page(self.parse_document(html), page_num=page_num)
            if result.exhausted:
                log.info("No more reviews found on page %s. Stopping.", page_num)
                return ScrapeOutcome(
                    source=self.name,
                    status=ScrapeStatus.EXHAUSTED,
                    reviews=all_reviews,
                    pages_fetched=page_num,
                )
            all_reviews.extend(result.reviews)
            log.info("[page %s] %s containers, %s kept, %s collected so far",
                     page_num, result.containers, len(result.reviews), len(all_reviews))

    def parse_document(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, HTML_PARSER)

    def find_containers(self, soup: BeautifulSoup) -> List[Tag]:
        return soup.select(self.container_selector)

    def extract_reviews_from_page(self, soup: BeautifulSoup, page_num: int = 1) -> PageResult:
        '''Pure: no I/O. Containers the subclass rejects (out of window) are dropped.'''
        containers = self.find_containers(soup)
        reviews: List[Review] = []
        for container in containers:
            review = self.extract_review(container)
            if review is not None:
                reviews.append(review)
        return PageResult(page=page_num, containers=len(containers), reviews=reviews)

    def find_product_page(self, page_num: int) -> str:
        '''Implement in subclass. Returns the target URL for the given page.'''
        raise NotImplementedError

    def extract_review(self, container: Tag) -> Optional[Review]:
        '''Implement in subclass. Returns None to drop the record.'''
        raise NotImplementedError
