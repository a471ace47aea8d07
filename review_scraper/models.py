# review_scraper/models.py
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Union, Literal, Annotated
from datetime import date as Date


class SingleStar(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["single_star"] = "single_star"
    stars: int = Field(..., ge=1, le=5)


class NamedSubratings(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["named_subratings"] = "named_subratings"
    # raw text as shown on the page, e.g. "4.0"
    ease_of_use: Optional[str] = None
    customer_service: Optional[str] = None
    features: Optional[str] = None
    value_for_money: Optional[str] = None


Rating = Annotated[Union[SingleStar, NamedSubratings], Field(discriminator="kind")]


class ReviewBody(BaseModel):
    model_config = ConfigDict(frozen=True)
    overall: Optional[str] = None
    pros: Optional[str] = None
    cons: Optional[str] = None


class Review(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    reviewer_name: Optional[str] = None
    reviewer_role: Optional[str] = None
    reviewer_company_size: Optional[str] = None
    reviewer_job_title: Optional[str] = None
    reviewer_industry: Optional[str] = None
    reviewer_time_used_product: Optional[str] = None
    rating: Optional[Rating] = None
    date: Optional[Date] = None
    title: Optional[str] = None
    body: Optional[ReviewBody] = None
    description: Optional[str] = None
    vendor_response: Optional[str] = None


class ReviewsDocument(BaseModel):
    reviews: List[Review] = Field(default_factory=list)


class PageResult(BaseModel):
    page: int = 1
    containers: int = 0
    reviews: List[Review] = Field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.containers == 0


class ScrapeStatus(str, Enum):
    EXHAUSTED = "exhausted"
    COMPLETE = "complete"
    FETCH_FAILED = "fetch_failed"


class ScrapeOutcome(BaseModel):
    source: str
    status: ScrapeStatus
    reviews: List[Review] = Field(default_factory=list)
    pages_fetched: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == ScrapeStatus.FETCH_FAILED
