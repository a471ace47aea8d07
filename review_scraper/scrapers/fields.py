# review_scraper/scrapers/fields.py
"""Selector tables: which node holds which field, and how its text is cleaned.

Scrapers describe their markup as tuples of FieldRule and never walk the DOM
for plain text fields themselves, so a markup change is a table edit.
"""
import re
from typing import Dict, Iterable, Optional

from bs4 import Tag

from review_scraper.models import SingleStar
from review_scraper.utils import clean_text, strip_label

STAR_CLASS = re.compile(r"^star-(\d+)$")


class FieldRule:
    '''
    name: output field
    selector: CSS selector, evaluated inside the container node
    index: which match to read when several siblings share the selector
    label: literal prefix removed from the text ("Pros:")
    '''

    __slots__ = ("name", "selector", "index", "label")

    def __init__(self, name: str, selector: str, index: int = 0, label: Optional[str] = None):
        self.name = name
        self.selector = selector
        self.index = index
        self.label = label

    def __repr__(self):
        return f"FieldRule({self.name!r}, {self.selector!r}, index={self.index})"


def select_text(node: Tag, rule: FieldRule) -> Optional[str]:
    matches = node.select(rule.selector)
    if len(matches) <= rule.index:
        return None
    text = matches[rule.index].get_text()
    if rule.label:
        return strip_label(text, rule.label)
    return clean_text(text)


def extract_fields(node: Tag, rules: Iterable[FieldRule]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for rule in rules:
        value = select_text(node, rule)
        if value is not None:
            out[rule.name] = value
    return out


def positional_pair(selector: str, first: str, second: str) -> tuple:
    '''
    Two same-shaped siblings with no semantic marker: the first match is
    `first`, the second is `second`. Anything past the second is ignored.
    '''
    return (FieldRule(first, selector, index=0), FieldRule(second, selector, index=1))


def star_rating(node: Optional[Tag]) -> Optional[SingleStar]:
    '''Reads a `star-<N>` class token (N in 1..5) from node or its descendants.'''
    if node is None:
        return None
    candidates = [node] + node.find_all(class_=STAR_CLASS)
    for el in candidates:
        for cls in el.get("class") or []:
            m = STAR_CLASS.match(cls)
            if m:
                stars = int(m.group(1))
                if 1 <= stars <= 5:
                    return SingleStar(stars=stars)
    return None
