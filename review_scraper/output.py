# review_scraper/output.py
import json
from pathlib import Path
from typing import List, Union

from review_scraper.models import Review, ReviewsDocument
from review_scraper.utils import ensure_outputs_dir


def output_path(source: str, output_dir: Union[str, Path] = "outputs") -> Path:
    return Path(output_dir) / f"reviews-{source}.json"


def write_result(reviews: List[Review], source: str, output_dir: Union[str, Path] = "outputs") -> str:
    ensure_outputs_dir(output_dir)
    path = output_path(source, output_dir)
    doc = ReviewsDocument(reviews=reviews).model_dump(mode="json", exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2, ensure_ascii=False)
    return str(path)


def load_result(path: Union[str, Path]) -> List[Review]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ReviewsDocument.model_validate(data).reviews
