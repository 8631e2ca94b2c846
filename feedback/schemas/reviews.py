"""Review record, analytics and response envelope schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReviewRecord(CamelModel):
    """A persisted, enriched review. Never mutated after creation."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    rating: int = Field(ge=1, le=5)
    review: str
    ai_response: str
    ai_summary: str
    ai_recommended_actions: list[str] = Field(default_factory=list, max_length=3)
    created_at: str
    processed_at: str | None = None


class Analytics(CamelModel):
    average_rating: float = 0.0
    rating_distribution: dict[str, int] = Field(
        default_factory=lambda: {str(star): 0 for star in range(1, 6)}
    )
    total_reviews: int = 0
    reviews_today: int = 0
    reviews_this_week: int = 0


class SubmissionData(CamelModel):
    id: str
    ai_response: str


class SubmissionResponse(CamelModel):
    success: bool = True
    data: SubmissionData


class ReviewListData(CamelModel):
    reviews: list[ReviewRecord]
    total: int
    analytics: Analytics


class ReviewListResponse(CamelModel):
    success: bool = True
    data: ReviewListData
