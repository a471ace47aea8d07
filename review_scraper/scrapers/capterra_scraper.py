# review_scraper/scrapers/capterra_scraper.py
from typing import Optional
import logging
import re

from bs4 import Tag

from review_scraper.errors import ConfigError
from review_scraper.models import NamedSubratings, Review, ReviewBody
from review_scraper.scrapers.base_scraper import BaseScraper
from review_scraper.scrapers.fields import FieldRule, extract_fields
from review_scraper.utils import parse_date_fuzzy

log = logging.getLogger("capterrascraper")

REVIEW_CARD = "div.sb.screen-container.m-auto.block.px-0"
REVIEW_CONTENT = 'div[data-testid="review-content"]'

# inside the first div of the card (reviewer column)
REVIEWER_RULES = (
    FieldRule("reviewer_name", "div.mb-3xs.flex.items-center.break-words.break-all.text-lg"),
    FieldRule("reviewer_job_title", 'div[data-testid="reviewer-job-title"]'),
    FieldRule("reviewer_industry", 'div[data-testid="reviewer-industry"]'),
    FieldRule("reviewer_time_used_product", 'div[data-testid="reviewer-time-used-product"]',
              label="Used the software for:"),
    FieldRule("date", 'div[data-testid="review-written-on"]'),
)

SUBRATING_RULES = tuple(
    FieldRule(key, f'div[data-testid="{label}-rating"] span.text-neutral-80')
    for key, label in (
        ("ease_of_use", "Ease of Use"),
        ("customer_service", "Customer Service"),
        ("features", "Features"),
        ("value_for_money", "Value for Money"),
    )
)

# inside the review-content block
BODY_RULES = (
    FieldRule("overall", 'p[data-testid="overall-content"]', label="Overall:"),
    FieldRule("pros", 'p[data-testid="pros-content"]', label="Pros:"),
    FieldRule("cons", 'p[data-testid="cons-content"]', label="Cons:"),
)
VENDOR_RESPONSE_RULE = FieldRule("vendor_response", 'div[data-testid="vendor-response"] div.my-2xs.break-words')


class CapterraScraper(BaseScraper):
    name = "capterra"
    paginated = False
    container_selector = REVIEW_CARD
    render = True
    # load every review on the page before the proxy hands back the HTML
    browser_actions = [
        {"Action": "Wait", "Timeout": 1000},
        {"Action": "ScrollTo", "Selector": ".sb.btn.secondary"},
        {"Action": "Click", "Selector": ".sb.btn.secondary"},
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.product_url:
            raise ConfigError("Capterra needs the reviews page URL (--url); its product routes cannot be derived from the name.")

    def find_product_page(self, page_num: int) -> str:
        url = self.product_url.strip()
        if url.startswith("//"):
            url = "https:" + url
        elif not re.match(r"^https?://", url, re.IGNORECASE):
            url = "https://" + url.lstrip("/")
        return url

    def extract_review(self, container: Tag) -> Optional[Review]:
        fields = {}
        rating = None
        reviewer_col = container.find("div")
        if reviewer_col is not None:
            fields.update(extract_fields(reviewer_col, REVIEWER_RULES))
            scores = extract_fields(reviewer_col, SUBRATING_RULES)
            if scores:
                rating = NamedSubratings(**scores)

        # dates here are informational only, the caller picked the page
        date_text = fields.pop("date", None)
        review_date = parse_date_fuzzy(date_text)

        body = None
        content = container.select_one(REVIEW_CONTENT)
        if content is not None:
            parts = extract_fields(content, BODY_RULES)
            if parts:
                body = ReviewBody(**parts)
            fields.update(extract_fields(content, (VENDOR_RESPONSE_RULE,)))

        return Review(rating=rating, date=review_date, body=body, **fields)
