"""Pydantic models for quiz questions and answers."""

from typing import Any, Optional, Union

from pydantic import Field, StrictBool, StrictInt, model_validator

from app.models.common import CamelModel, Entity, LenientEnum


class QuizType(LenientEnum):
    MULTIPLE_CHOICE = "MultipleChoice"
    TRUE_FALSE = "TrueFalse"


class QuizOption(Entity):
    text_zh: str
    text_en: str


class Quiz(Entity):
    """A quiz question about one animal.

    ``answer`` is discriminated by ``type``: a zero-based option index for
    multiple-choice questions, a boolean for true/false questions. The pairing
    is checked once when the data file is loaded.
    """

    id: str
    animal_id: str
    type: QuizType
    question_zh: str
    question_en: str
    options: Optional[list[QuizOption]] = None
    answer: Union[StrictBool, StrictInt]
    correct_feedback_zh: str = ""
    correct_feedback_en: str = ""

    @model_validator(mode="after")
    def _check_answer_matches_type(self) -> "Quiz":
        if self.type is QuizType.TRUE_FALSE:
            if not isinstance(self.answer, bool):
                raise ValueError(f"quiz {self.id}: true/false answer must be a boolean")
        else:
            if isinstance(self.answer, bool):
                raise ValueError(f"quiz {self.id}: multiple-choice answer must be an option index")
            if self.answer < 0 or (self.options is not None and self.answer >= len(self.options)):
                raise ValueError(f"quiz {self.id}: answer index {self.answer} out of range")
        return self


class QuizAnswerResult(CamelModel):
    """Outcome of checking a visitor's answer."""

    is_correct: bool
    correct_answer: Union[bool, int]
    feedback_zh: str
    feedback_en: str


# ---------------------------------------------------------------------------
# API schemas
# ---------------------------------------------------------------------------

class QuizOptionOut(CamelModel):
    text_zh: str
    text_en: str


class QuizQuestion(CamelModel):
    """Quiz as sent to the browser; the answer is withheld."""

    id: str
    animal_id: str
    type: QuizType
    question_zh: str
    question_en: str
    options: Optional[list[QuizOptionOut]] = None

    @classmethod
    def from_quiz(cls, quiz: Quiz) -> "QuizQuestion":
        options = None
        if quiz.options is not None:
            options = [QuizOptionOut(text_zh=o.text_zh, text_en=o.text_en) for o in quiz.options]
        return cls(
            id=quiz.id,
            animal_id=quiz.animal_id,
            type=quiz.type,
            question_zh=quiz.question_zh,
            question_en=quiz.question_en,
            options=options,
        )


class QuizListResponse(CamelModel):
    quizzes: list[QuizQuestion]


class AnswerRequest(CamelModel):
    """Request schema for submitting a quiz answer."""

    answer: Any = Field(None, description="Option index for multiple-choice, boolean for true/false")


class AnswerResponse(CamelModel):
    """Response schema for a quiz answer submission."""

    correct: bool = Field(..., description="Whether the answer was correct")
    correct_answer: Union[bool, int] = Field(..., description="The expected answer")
    feedback_zh: str
    feedback_en: str
