"""Application layer DI providers."""

from dishka import Scope, provide

from algonote.application.usecase.problem import (
    CreateProblemUseCase,
    GetProblemUseCase,
    ListProblemsUseCase,
    UpdateProblemUseCase,
)
from algonote.application.usecase.review import (
    CreateReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from algonote.domain.repository import ProblemRepository, ReviewRepository
from algonote.domain.service import ProblemService, ReviewService
from algonote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Problem use cases
    @provide(scope=Scope.REQUEST)
    def get_create_problem_use_case(
        self, problem_service: ProblemService
    ) -> CreateProblemUseCase:
        """Provide create problem use case."""
        return CreateProblemUseCase(problem_service=problem_service)

    @provide(scope=Scope.REQUEST)
    def get_update_problem_use_case(
        self, problem_service: ProblemService
    ) -> UpdateProblemUseCase:
        """Provide update problem use case."""
        return UpdateProblemUseCase(problem_service=problem_service)

    @provide(scope=Scope.REQUEST)
    def get_get_problem_use_case(
        self, problem_repository: ProblemRepository
    ) -> GetProblemUseCase:
        """Provide get problem use case."""
        return GetProblemUseCase(problem_repository=problem_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_problems_use_case(
        self, problem_service: ProblemService
    ) -> ListProblemsUseCase:
        """Provide list problems use case."""
        return ListProblemsUseCase(problem_service=problem_service)

    # Review use cases
    @provide(scope=Scope.REQUEST)
    def get_create_review_use_case(
        self, review_service: ReviewService
    ) -> CreateReviewUseCase:
        """Provide create review use case."""
        return CreateReviewUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_update_review_use_case(
        self, review_service: ReviewService
    ) -> UpdateReviewUseCase:
        """Provide update review use case."""
        return UpdateReviewUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_get_review_use_case(
        self, review_repository: ReviewRepository
    ) -> GetReviewUseCase:
        """Provide get review use case."""
        return GetReviewUseCase(review_repository=review_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_reviews_use_case(
        self, review_service: ReviewService
    ) -> ListReviewsUseCase:
        """Provide list reviews use case."""
        return ListReviewsUseCase(review_service=review_service)
