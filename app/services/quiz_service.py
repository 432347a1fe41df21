"""Business logic for quiz questions and answer checking."""

import logging
import random
from typing import Any

from app.db.database import load_quizzes
from app.models.animal import Animal
from app.models.quiz import Quiz, QuizAnswerResult, QuizType
from app.services.animal_service import get_all_animals

logger = logging.getLogger(__name__)

_rng = random.Random()


def get_all_quizzes() -> list[Quiz]:
    """Return all quiz questions."""
    return load_quizzes()


def get_quizzes_by_animal_id(animal_id: str | None) -> list[Quiz]:
    """Return the questions about one animal."""
    if not animal_id or not animal_id.strip():
        logger.warning("Animal ID must not be blank")
        return []

    wanted = animal_id.casefold()
    quizzes = [q for q in get_all_quizzes() if q.animal_id.casefold() == wanted]
    if not quizzes:
        logger.warning("No quizzes found for animal %s", animal_id)
    return quizzes


def get_quiz_by_id(quiz_id: str | None) -> Quiz | None:
    """Return a quiz by ID (case-insensitive)."""
    if not quiz_id or not quiz_id.strip():
        logger.warning("Quiz ID must not be blank")
        return None

    wanted = quiz_id.casefold()
    quiz = next((q for q in get_all_quizzes() if q.id.casefold() == wanted), None)
    if quiz is None:
        logger.warning("Quiz '%s' not found", quiz_id)
    return quiz


def get_random_quizzes(count: int) -> list[Quiz]:
    """Return up to ``count`` questions in random order."""
    if count <= 0:
        logger.warning("Quiz count must be positive, got %d", count)
        return []

    quizzes = get_all_quizzes()
    if not quizzes:
        logger.warning("No quizzes available")
        return []
    return _rng.sample(quizzes, min(count, len(quizzes)))


def get_animals_with_quizzes() -> list[Animal]:
    """Return the animals that have at least one question, in catalog order."""
    animal_ids = {q.animal_id.casefold() for q in get_all_quizzes()}
    return [a for a in get_all_animals() if a.id.casefold() in animal_ids]


def _as_index(value: Any) -> int | None:
    """Interpret a submitted value as an option index."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> bool | None:
    """Interpret a submitted value as a true/false answer."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return None


def is_answer_correct(quiz: Quiz, answer: Any) -> bool:
    """Compare a submitted answer with the expected one for the quiz type."""
    if quiz.type is QuizType.TRUE_FALSE:
        submitted = _as_bool(answer)
    else:
        submitted = _as_index(answer)
    return submitted is not None and submitted == quiz.answer


def validate_answer(quiz_id: str | None, answer: Any) -> QuizAnswerResult | None:
    """Check an answer. Returns None if the quiz does not exist."""
    quiz = get_quiz_by_id(quiz_id)
    if quiz is None:
        return None

    correct = is_answer_correct(quiz, answer)
    logger.info("Quiz %s answered %r -> correct=%s", quiz.id, answer, correct)
    return QuizAnswerResult(
        is_correct=correct,
        correct_answer=quiz.answer,
        feedback_zh=quiz.correct_feedback_zh,
        feedback_en=quiz.correct_feedback_en,
    )
