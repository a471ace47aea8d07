# review_scraper/api.py
import logging
import platform
import time
from datetime import date as Date
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from review_scraper import __version__
from review_scraper.config import load_settings
from review_scraper.errors import ConfigError, FetchError
from review_scraper.fetcher import ScrapeDoClient
from review_scraper.models import ScrapeStatus
from review_scraper.scrapers import SCRAPER_MAP

log = logging.getLogger("api")

app = FastAPI(title="Review Scraper API", version=__version__)


class ScrapeRequest(BaseModel):
    company: str
    start: Date
    end: Date
    source: str = "g2"
    url: Optional[str] = None
    include_undated: bool = True


def get_client() -> ScrapeDoClient:
    try:
        return ScrapeDoClient(load_settings())
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "sources": list(SCRAPER_MAP.keys()),
        "python_version": platform.python_version(),
    }


# plain def: the scrape is blocking requests I/O, FastAPI runs it in a threadpool
@app.post("/scrape")
def scrape(req: ScrapeRequest, client: ScrapeDoClient = Depends(get_client)):
    if req.source not in SCRAPER_MAP:
        raise HTTPException(status_code=400, detail=f"Unsupported source {req.source}")

    started = time.time()
    try:
        scraper = SCRAPER_MAP[req.source](
            company=req.company,
            start_date=req.start,
            end_date=req.end,
            product_url=req.url,
            client=client,
            include_undated=req.include_undated,
        )
        outcome = scraper.scrape()
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        log.error("Scrape failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Scrape failed: {e}")
    finally:
        client.close()

    return {
        "reviews": [r.model_dump(mode="json", exclude_none=True) for r in outcome.reviews],
        "meta": {
            "status": outcome.status.value,
            "pages_fetched": outcome.pages_fetched,
            "reviews_found": len(outcome.reviews),
            "partial": outcome.status == ScrapeStatus.FETCH_FAILED,
            "error": outcome.error,
            "duration_sec": round(time.time() - started, 3),
        },
    }
