# review_scraper/scrapers/g2_scraper.py
from typing import Optional
from urllib.parse import urlencode, urlparse, parse_qsl, urlunparse
import logging
import re

from bs4 import Tag

from review_scraper.models import Review
from review_scraper.scrapers.base_scraper import BaseScraper
from review_scraper.scrapers.fields import FieldRule, extract_fields, positional_pair, star_rating
from review_scraper.utils import parse_date_fuzzy

log = logging.getLogger("g2scraper")

REVIEW_CARD = "div.paper.paper--white.paper--box.mb-2.position-relative.border-bottom"
USER_INFO = "div.d-f.fd-c"
USER_DETAILS = "div.c-midnight-80.line-height-h6.fw-regular div.mt-4th"
RATING_ROW = "div.f-1.d-f.ai-c.mb-half-small-only"

# evaluated inside each user-info block; role/company size have no markup of
# their own, only their order tells them apart
USER_RULES = (
    FieldRule("reviewer_name", "div.fw-semibold.mb-half.lh-100.d-f.ai-c.text-normal"),
) + positional_pair(USER_DETAILS, "reviewer_role", "reviewer_company_size")

# first div of the rating row carries the star-N class, the second the date
DATE_RULE = FieldRule("date", f"{RATING_ROW} div", index=1)

CONTENT_RULES = (
    FieldRule("title", "div.paper__bd div.m-0.l2"),
    FieldRule("description", 'div.paper__bd [itemprop="reviewBody"]'),
)


class G2Scraper(BaseScraper):
    name = "g2"
    paginated = True
    container_selector = REVIEW_CARD
    BASE_URL = "https://www.g2.com/products/{slug}/reviews"

    def _slugify(self, name: str) -> str:
        s = name.lower().strip()
        s = re.sub(r"[^a-z0-9]+", "-", s)
        s = re.sub(r"-+", "-", s).strip('-')
        return s or name.lower()

    def find_product_page(self, page_num: int) -> str:
        if self.product_url:
            base = self.product_url.rstrip('/')
        else:
            base = self.BASE_URL.format(slug=self._slugify(self.company))
        parts = urlparse(base)
        query = [(k, v) for k, v in parse_qsl(parts.query) if k != "page"]
        query.append(("page", str(page_num)))
        return urlunparse(parts._replace(query=urlencode(query)))

    def extract_review(self, container: Tag) -> Optional[Review]:
        fields = {}
        for block in container.select(USER_INFO):
            for key, value in extract_fields(block, USER_RULES).items():
                fields.setdefault(key, value)

        first_rating_div = container.select_one(f"{RATING_ROW} div")
        rating = star_rating(first_rating_div if first_rating_div is not None else container)

        date_text = extract_fields(container, (DATE_RULE,)).get("date")
        review_date = parse_date_fuzzy(date_text)
        if date_text and review_date is None:
            log.debug("Unparseable G2 date %r", date_text)
        if not self.window.contains(review_date):
            log.debug("Skipping review dated %s outside %s", review_date, self.window)
            return None

        fields.update(extract_fields(container, CONTENT_RULES))
        return Review(rating=rating, date=review_date, **fields)
