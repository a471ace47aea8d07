# review_scraper/cli.py
import logging
from datetime import datetime
from typing import Optional

import typer

from review_scraper.config import load_settings
from review_scraper.errors import ConfigError, FetchError
from review_scraper.fetcher import ScrapeDoClient
from review_scraper.output import write_result
from review_scraper.scrapers import SCRAPER_MAP

app = typer.Typer(help="Collect reviews from G2 and Capterra through the scrape.do proxy.")
log = logging.getLogger("cli")


@app.callback()
def main():
    pass


def _parse_day(value: str, flag: str):
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ConfigError(f"Invalid {flag} date {value!r}. Use YYYY-MM-DD.")


@app.command()
def scrape(
    website: str = typer.Option(..., "--website", "--source", help="g2 | capterra"),
    company: str = typer.Option(..., help="Company or product name, as used in the G2 URL"),
    start: str = typer.Option(..., help="Start date YYYY-MM-DD"),
    end: str = typer.Option(..., help="End date YYYY-MM-DD"),
    url: Optional[str] = typer.Option(None, help="Reviews page URL (required for capterra)"),
    output_dir: Optional[str] = typer.Option(None, help="Directory for reviews-<website>.json"),
    exclude_undated: bool = typer.Option(False, help="Drop reviews whose date cannot be parsed"),
    verbose: bool = typer.Option(False, help="Debug logging"),
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    try:
        start_date = _parse_day(start, "start")
        end_date = _parse_day(end, "end")
        if website not in SCRAPER_MAP:
            raise ConfigError(f"Unknown website: {website}. Supported: {list(SCRAPER_MAP.keys())}")
        settings = load_settings()
        Scraper = SCRAPER_MAP[website]
        scraper = Scraper(
            company=company,
            start_date=start_date,
            end_date=end_date,
            product_url=url,
            client=ScrapeDoClient(settings),
            include_undated=not exclude_undated,
        )
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Scraping {company} from {website} between {start} and {end} ...")
    try:
        with scraper.client:
            outcome = scraper.scrape()
    except FetchError as e:
        typer.echo(f"Error fetching page: {e}", err=True)
        raise typer.Exit(code=2)

    try:
        outpath = write_result(outcome.reviews, website, output_dir or settings.output_dir)
    except OSError as e:
        typer.echo(f"Could not write reviews: {e}", err=True)
        raise typer.Exit(code=3)
    if verbose and outcome.reviews:
        log.debug("First review: %s", outcome.reviews[0].model_dump(exclude_none=True))
    typer.echo(f"Wrote {len(outcome.reviews)} reviews from {outcome.pages_fetched} page(s) to {outpath}")
    if outcome.failed:
        typer.echo(f"Stopped early, fetch failed: {outcome.error}", err=True)
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
