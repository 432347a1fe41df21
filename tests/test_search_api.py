"""Tests for the search suggestion endpoint."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


@pytest.mark.usefixtures("data_dir")
class TestSuggest:
    """GET /api/v1/search/suggest tests."""

    def test_suggestions(self):
        response = client.get("/api/v1/search/suggest?q=企鵝")
        assert response.status_code == 200
        assert response.json()["suggestions"] == [
            {
                "id": "penguin-001",
                "name": "國王企鵝",
                "englishName": "King Penguin",
                "thumbnailUrl": "/static/images/penguin-001.jpg",
            }
        ]

    @pytest.mark.parametrize("limit, expected", [(0, 1), (-5, 1), (1, 1), (50, 2)])
    def test_limit_is_clamped(self, limit, expected):
        body = client.get(f"/api/v1/search/suggest?q=African&limit={limit}").json()
        assert len(body["suggestions"]) == expected

    @pytest.mark.parametrize("query", ["", "?q=", "?q=%20%20"])
    def test_blank_keyword(self, query):
        response = client.get(f"/api/v1/search/suggest{query}")
        assert response.status_code == 400
        assert response.json()["detail"] == "q is required"

    def test_no_match(self):
        assert client.get("/api/v1/search/suggest?q=dragon").json()["suggestions"] == []
