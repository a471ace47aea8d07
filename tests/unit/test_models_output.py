"""
Unit tests for review models and the JSON artifact.
"""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from review_scraper.models import (
    NamedSubratings,
    PageResult,
    Review,
    ReviewBody,
    ScrapeOutcome,
    ScrapeStatus,
    SingleStar,
)
from review_scraper.output import load_result, output_path, write_result


@pytest.fixture
def reviews():
    return [
        Review(
            reviewer_name="Jane D.",
            reviewer_role="Marketing Manager",
            rating=SingleStar(stars=4),
            date=date(2024, 3, 15),
            title="Great for team collaboration",
            description="We use it daily — «quotes» and emoji 👍",
        ),
        Review(
            reviewer_name="Priya S.",
            reviewer_time_used_product="1-2 years",
            rating=NamedSubratings(ease_of_use="4.0", features="4.0"),
            body=ReviewBody(overall="Solid.", pros="Great support"),
            vendor_response="Thanks!",
        ),
        Review(reviewer_name="Anonymous"),
    ]


class TestReviewModel:
    def test_reviews_are_immutable(self):
        review = Review(reviewer_name="Jane")
        with pytest.raises(ValidationError):
            review.reviewer_name = "Other"

    def test_subratings_are_immutable(self):
        review = Review(rating=NamedSubratings(features="5.0"))
        with pytest.raises(ValidationError):
            review.rating.features = "1.0"
        assert review.rating.features == "5.0"
        # plain strings only, nothing that could be changed in place
        assert all(v is None or isinstance(v, str) for v in review.rating.model_dump().values())

    def test_star_scale(self):
        with pytest.raises(ValidationError):
            SingleStar(stars=6)
        with pytest.raises(ValidationError):
            SingleStar(stars=0)

    def test_rating_union_is_tagged(self):
        single = Review.model_validate({"rating": {"kind": "single_star", "stars": 3}})
        named = Review.model_validate({"rating": {"kind": "named_subratings", "features": "5.0"}})
        assert isinstance(single.rating, SingleStar)
        assert isinstance(named.rating, NamedSubratings)

    def test_page_result_exhausted(self):
        assert PageResult(page=2, containers=0).exhausted
        assert not PageResult(page=1, containers=3).exhausted

    def test_outcome_failed(self):
        assert ScrapeOutcome(source="g2", status=ScrapeStatus.FETCH_FAILED).failed
        assert not ScrapeOutcome(source="g2", status=ScrapeStatus.EXHAUSTED).failed


class TestOutput:
    def test_fixed_filename_per_source(self, tmp_path):
        assert output_path("g2", tmp_path) == tmp_path / "reviews-g2.json"
        assert output_path("capterra", tmp_path) == tmp_path / "reviews-capterra.json"

    def test_document_shape(self, tmp_path, reviews):
        path = write_result(reviews, "g2", tmp_path / "out")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert list(data.keys()) == ["reviews"]
        assert len(data["reviews"]) == 3
        assert data["reviews"][0]["date"] == "2024-03-15"
        assert data["reviews"][0]["rating"] == {"kind": "single_star", "stars": 4}
        # absent fields are omitted, not written as null
        assert data["reviews"][2] == {"reviewer_name": "Anonymous"}

    def test_round_trip(self, tmp_path, reviews):
        path = write_result(reviews, "capterra", tmp_path)
        assert load_result(path) == reviews

    def test_overwrites_previous_run(self, tmp_path, reviews):
        write_result(reviews, "g2", tmp_path)
        path = write_result(reviews[:1], "g2", tmp_path)
        assert len(load_result(path)) == 1

    def test_empty_run(self, tmp_path):
        path = write_result([], "g2", tmp_path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"reviews": []}
