from review_scraper.scrapers.g2_scraper import G2Scraper
from review_scraper.scrapers.capterra_scraper import CapterraScraper

SCRAPER_MAP = {
    "g2": G2Scraper,
    "capterra": CapterraScraper,
}

__all__ = ["G2Scraper", "CapterraScraper", "SCRAPER_MAP"]
