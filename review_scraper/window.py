# review_scraper/window.py
from datetime import date
from typing import Optional

from review_scraper.errors import ConfigError


class DateWindow:
    '''
    Inclusive [start, end] filter on review dates.
    Reviews whose date could not be parsed are kept unless include_undated is False.
    '''

    def __init__(self, start: date, end: date, include_undated: bool = True):
        if start > end:
            raise ConfigError(f"Start date {start.isoformat()} is after end date {end.isoformat()}")
        self.start = start
        self.end = end
        self.include_undated = include_undated

    def contains(self, d: Optional[date]) -> bool:
        if d is None:
            return self.include_undated
        return self.start <= d <= self.end

    def __repr__(self):
        return f"DateWindow({self.start.isoformat()}..{self.end.isoformat()}, include_undated={self.include_undated})"
