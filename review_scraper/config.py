# review_scraper/config.py
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from review_scraper.errors import ConfigError

DEFAULT_API_BASE = "https://api.scrape.do/"


class Settings(BaseModel):
    token: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = Field(60.0, gt=0)
    output_dir: str = "outputs"


def load_settings(require_token: bool = True, env_file: Optional[str] = None) -> Settings:
    '''
    Reads scrape.do settings from the environment (and a .env file if present).
    SCRAPE_DO_TOKEN wins over the older bare `token` variable.
    '''
    load_dotenv(env_file)
    token = os.getenv("SCRAPE_DO_TOKEN") or os.getenv("token")
    if require_token and not token:
        raise ConfigError("Missing scrape.do token. Set SCRAPE_DO_TOKEN in the environment or .env file.")
    timeout_raw = os.getenv("SCRAPE_DO_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else 60.0
    except ValueError:
        raise ConfigError(f"SCRAPE_DO_TIMEOUT must be a number, got {timeout_raw!r}")
    return Settings(
        token=token,
        api_base=os.getenv("SCRAPE_DO_API") or DEFAULT_API_BASE,
        timeout=timeout,
        output_dir=os.getenv("REVIEWS_OUTPUT_DIR") or "outputs",
    )
