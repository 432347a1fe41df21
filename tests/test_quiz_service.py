"""Tests for quiz lookup and answer checking."""

import pytest

from app.services import quiz_service
from app.services.quiz_service import (
    get_animals_with_quizzes,
    get_quiz_by_id,
    get_quizzes_by_animal_id,
    get_random_quizzes,
    validate_answer,
)


@pytest.fixture
def no_loader(monkeypatch):
    """Fail the test if the quiz service touches the data store."""

    def _fail():
        raise AssertionError("loader should not be called")

    monkeypatch.setattr(quiz_service, "load_quizzes", _fail)


@pytest.mark.usefixtures("data_dir")
class TestQuizLookup:
    """Quiz query tests."""

    def test_by_animal_is_case_insensitive(self):
        assert [q.id for q in get_quizzes_by_animal_id("LION-001")] == ["quiz-lion-001"]

    def test_by_animal_without_quizzes(self):
        assert get_quizzes_by_animal_id("elephant-001") == []

    @pytest.mark.parametrize("blank", [None, "", "  "])
    def test_blank_ids_skip_loader(self, no_loader, blank):
        assert get_quizzes_by_animal_id(blank) == []
        assert get_quiz_by_id(blank) is None
        assert validate_answer(blank, 1) is None

    def test_animals_with_quizzes_in_catalog_order(self):
        assert [a.id for a in get_animals_with_quizzes()] == ["lion-001", "penguin-001"]


@pytest.mark.usefixtures("data_dir")
class TestRandomQuizzes:
    def test_count_is_bounded_by_available(self):
        assert len(get_random_quizzes(10)) == 2

    def test_no_duplicates(self):
        quizzes = get_random_quizzes(2)
        assert len({q.id for q in quizzes}) == 2

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count(self, count):
        assert get_random_quizzes(count) == []


@pytest.mark.usefixtures("data_dir")
class TestValidateAnswer:
    """Answer checking for both question types."""

    @pytest.mark.parametrize("answer", [1, 1.0, "1", " 1 "])
    def test_multiple_choice_correct(self, answer):
        result = validate_answer("quiz-lion-001", answer)
        assert result.is_correct is True
        assert result.correct_answer == 1
        assert result.feedback_en == "Lionesses hunt"

    @pytest.mark.parametrize("answer", [0, 2, "one", True, 1.5, None, [1]])
    def test_multiple_choice_incorrect(self, answer):
        assert validate_answer("quiz-lion-001", answer).is_correct is False

    @pytest.mark.parametrize("answer", [False, "false", "FALSE", 0])
    def test_true_false_correct(self, answer):
        result = validate_answer("quiz-penguin-001", answer)
        assert result.is_correct is True
        assert result.correct_answer is False

    @pytest.mark.parametrize("answer", [True, "true", 1, 7, "no", None])
    def test_true_false_incorrect(self, answer):
        assert validate_answer("quiz-penguin-001", answer).is_correct is False

    def test_unknown_quiz(self):
        assert validate_answer("quiz-nope", 1) is None

    def test_quiz_id_is_case_insensitive(self):
        assert validate_answer("QUIZ-LION-001", 1).is_correct is True
