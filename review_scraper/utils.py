# review_scraper/utils.py
from dateutil import parser as dateparser
from datetime import datetime, date
from pathlib import Path
from typing import Optional, Union


# two unrelated defaults: a component dateutil filled in from the default
# differs between them, so only fully written dates survive
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date_fuzzy(s) -> Optional[date]:
    '''
    Year, month and day must all appear in the text. Relative or partial text
    ("3 days ago", "March 2024") is None rather than a guess based on today.
    '''
    if not s:
        return None
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    try:
        first, second = (dateparser.parse(str(s), fuzzy=True, default=d) for d in _DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


def clean_text(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    s = s.strip()
    return s or None


def strip_label(s: Optional[str], label: str) -> Optional[str]:
    '''"Pros: Great support" -> "Great support" for label "Pros:".'''
    s = clean_text(s)
    if s is None:
        return None
    if s.startswith(label):
        s = s[len(label):]
    return clean_text(s)


def ensure_outputs_dir(path: Union[str, Path] = "outputs") -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
