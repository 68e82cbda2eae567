"""Review use cases."""

from .common import ReviewResponse
from .create_review import (
    CreateReviewRequest,
    CreateReviewResponse,
    CreateReviewUseCase,
)
from .get_review import GetReviewRequest, GetReviewResponse, GetReviewUseCase
from .list_reviews import ListReviewsRequest, ListReviewsResponse, ListReviewsUseCase
from .update_review import (
    UpdateReviewRequest,
    UpdateReviewResponse,
    UpdateReviewUseCase,
)

__all__ = [
    "CreateReviewRequest",
    "CreateReviewResponse",
    "CreateReviewUseCase",
    "GetReviewRequest",
    "GetReviewResponse",
    "GetReviewUseCase",
    "ListReviewsRequest",
    "ListReviewsResponse",
    "ListReviewsUseCase",
    "ReviewResponse",
    "UpdateReviewRequest",
    "UpdateReviewResponse",
    "UpdateReviewUseCase",
]
