"""Problem use cases."""

from .common import ProblemResponse
from .create_problem import (
    CreateProblemRequest,
    CreateProblemResponse,
    CreateProblemUseCase,
)
from .get_problem import GetProblemRequest, GetProblemResponse, GetProblemUseCase
from .list_problems import (
    ListProblemsRequest,
    ListProblemsResponse,
    ListProblemsUseCase,
)
from .update_problem import (
    UpdateProblemRequest,
    UpdateProblemResponse,
    UpdateProblemUseCase,
)

__all__ = [
    "CreateProblemRequest",
    "CreateProblemResponse",
    "CreateProblemUseCase",
    "GetProblemRequest",
    "GetProblemResponse",
    "GetProblemUseCase",
    "ListProblemsRequest",
    "ListProblemsResponse",
    "ListProblemsUseCase",
    "ProblemResponse",
    "UpdateProblemRequest",
    "UpdateProblemResponse",
    "UpdateProblemUseCase",
]
