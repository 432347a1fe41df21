"""Tests for the quiz API endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


@pytest.mark.usefixtures("data_dir")
class TestQuizzesForAnimal:
    """GET /api/v1/quizzes/animal tests."""

    def test_questions_without_answers(self):
        response = client.get("/api/v1/quizzes/animal?animalId=lion-001")
        assert response.status_code == 200
        quiz = response.json()["quizzes"][0]
        assert quiz["id"] == "quiz-lion-001"
        assert quiz["type"] == "MultipleChoice"
        assert quiz["options"][1] == {"textZh": "母獅", "textEn": "Females"}
        assert "answer" not in quiz
        assert "correctFeedbackZh" not in quiz

    def test_true_false_has_no_options(self):
        quiz = client.get("/api/v1/quizzes/animal?animalId=penguin-001").json()["quizzes"][0]
        assert quiz["type"] == "TrueFalse"
        assert "options" not in quiz

    def test_animal_without_quizzes(self):
        assert client.get("/api/v1/quizzes/animal?animalId=elephant-001").json()["quizzes"] == []

    @pytest.mark.parametrize("query", ["", "?animalId=", "?animalId=%20"])
    def test_blank_animal_id(self, query):
        response = client.get(f"/api/v1/quizzes/animal{query}")
        assert response.status_code == 400
        assert response.json()["detail"] == "animalId is required"


@pytest.mark.usefixtures("data_dir")
class TestRandomQuizzes:
    def test_bounded_by_available(self):
        quizzes = client.get("/api/v1/quizzes/random?count=10").json()["quizzes"]
        assert sorted(q["id"] for q in quizzes) == ["quiz-lion-001", "quiz-penguin-001"]
        assert all("answer" not in q for q in quizzes)

    def test_count(self):
        assert len(client.get("/api/v1/quizzes/random?count=1").json()["quizzes"]) == 1


@pytest.mark.usefixtures("data_dir")
class TestSubmitAnswer:
    """POST /api/v1/quizzes/answer tests."""

    def test_correct_multiple_choice(self):
        response = client.post("/api/v1/quizzes/answer?quizId=quiz-lion-001", json={"answer": 1})
        assert response.status_code == 200
        assert response.json() == {
            "correct": True,
            "correctAnswer": 1,
            "feedbackZh": "母獅負責狩獵",
            "feedbackEn": "Lionesses hunt",
        }

    def test_wrong_multiple_choice(self):
        body = client.post("/api/v1/quizzes/answer?quizId=quiz-lion-001", json={"answer": 0}).json()
        assert body["correct"] is False
        assert body["correctAnswer"] == 1

    def test_true_false_accepts_string(self):
        body = client.post("/api/v1/quizzes/answer?quizId=quiz-penguin-001", json={"answer": "false"}).json()
        assert body["correct"] is True
        assert body["correctAnswer"] is False

    def test_missing_quiz_id(self):
        response = client.post("/api/v1/quizzes/answer", json={"answer": 1})
        assert response.status_code == 400
        assert response.json()["detail"] == "quizId is required"

    @pytest.mark.parametrize("payload", [None, {}, {"answer": None}])
    def test_missing_answer(self, payload):
        response = client.post("/api/v1/quizzes/answer?quizId=quiz-lion-001", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "answer is required"

    def test_unknown_quiz(self):
        response = client.post("/api/v1/quizzes/answer?quizId=quiz-nope", json={"answer": 1})
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/problem+json")
