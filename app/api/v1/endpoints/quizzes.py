"""Quiz API endpoints."""

import logging

from fastapi import APIRouter, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.errors import ProblemDetailException
from app.models.common import ProblemDetails
from app.models.quiz import AnswerRequest, AnswerResponse, QuizListResponse, QuizQuestion
from app.services.quiz_service import get_quizzes_by_animal_id, get_random_quizzes, validate_answer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes")
limiter = Limiter(key_func=get_remote_address)


@router.get(
    "/animal",
    response_model=QuizListResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Quizzes about one animal",
)
@limiter.limit(settings.RATE_LIMIT)
async def quizzes_for_animal(
    request: Request,
    animal_id: str | None = Query(None, alias="animalId"),
) -> QuizListResponse:
    """Questions about an animal, without their answers."""
    if not animal_id or not animal_id.strip():
        raise ProblemDetailException(400, "animalId is required")
    quizzes = get_quizzes_by_animal_id(animal_id)
    return QuizListResponse(quizzes=[QuizQuestion.from_quiz(q) for q in quizzes])


@router.get(
    "/random",
    response_model=QuizListResponse,
    response_model_exclude_none=True,
    responses={429: {"model": ProblemDetails}},
    summary="Random quizzes",
)
@limiter.limit(settings.RATE_LIMIT)
async def random_quizzes(
    request: Request,
    count: int = Query(5, description="Number of questions"),
) -> QuizListResponse:
    quizzes = get_random_quizzes(count)
    return QuizListResponse(quizzes=[QuizQuestion.from_quiz(q) for q in quizzes])


@router.post(
    "/answer",
    response_model=AnswerResponse,
    responses={400: {"model": ProblemDetails}, 404: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Check a quiz answer",
)
@limiter.limit(settings.RATE_LIMIT)
async def post_answer(
    request: Request,
    quiz_id: str | None = Query(None, alias="quizId"),
    body: AnswerRequest | None = None,
) -> AnswerResponse:
    """Submit an answer. Returns whether it is correct, the expected answer and feedback."""
    if not quiz_id or not quiz_id.strip():
        raise ProblemDetailException(400, "quizId is required")
    if body is None or body.answer is None:
        raise ProblemDetailException(400, "answer is required")

    result = validate_answer(quiz_id, body.answer)
    if result is None:
        raise ProblemDetailException(404, f"Quiz '{quiz_id}' not found")

    return AnswerResponse(
        correct=result.is_correct,
        correct_answer=result.correct_answer,
        feedback_zh=result.feedback_zh,
        feedback_en=result.feedback_en,
    )
