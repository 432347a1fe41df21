"""Tests for the server-rendered pages and language switching."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


@pytest.mark.usefixtures("data_dir")
class TestPages:
    """Every page renders."""

    @pytest.mark.parametrize(
        "path",
        ["/", "/animals", "/search", "/search?q=獅&class=mammal", "/map", "/routes", "/quiz", "/favorites", "/about"],
    )
    def test_page_renders(self, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")

    def test_home_lists_featured_animals(self):
        html = client.get("/").text
        assert "非洲象" in html
        assert "/animals/details?id=elephant-001" in html

    def test_catalog_lists_every_animal(self):
        html = client.get("/animals").text
        for animal_id in ("lion-001", "elephant-001", "penguin-001"):
            assert f'data-animal-id="{animal_id}"' in html

    def test_search_results(self):
        html = client.get("/search?q=企鵝").text
        assert 'data-animal-id="penguin-001"' in html
        assert 'data-animal-id="lion-001"' not in html

    def test_route_page_has_zone_names(self):
        assert "Polar World" in client.get("/routes").text

    def test_layout_loads_shared_scripts(self):
        html = client.get("/about").text
        for script in ("favorites.js", "history.js", "search.js", "site.js", "performance-monitor.js"):
            assert f'src="/static/js/{script}"' in html

    def test_performance_monitor_is_served(self):
        response = client.get("/static/js/performance-monitor.js")
        assert response.status_code == 200
        assert "PerformanceMonitor" in response.text


@pytest.mark.usefixtures("data_dir")
class TestAnimalDetailsPage:
    """GET /animals/details tests."""

    def test_details(self):
        response = client.get("/animals/details?id=LION-001")
        assert response.status_code == 200
        assert "Panthera leo" in response.text
        # Related animal and next animal in catalog order
        assert "/animals/details?id=elephant-001" in response.text

    @pytest.mark.parametrize("query", ["", "?id=", "?id=%20"])
    def test_blank_id_redirects_to_catalog(self, query):
        response = client.get(f"/animals/details{query}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/animals"

    def test_unknown_animal_renders_error_page(self):
        response = client.get("/animals/details?id=unicorn-001")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "unicorn-001" in response.text

    def test_unknown_page(self):
        response = client.get("/no-such-page")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")


class TestBrokenDataPage:
    def test_malformed_data_renders_error_page(self, data_dir):
        (data_dir / "zones.json").write_text("[", encoding="utf-8")
        response = client.get("/map")
        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/html")


class TestLocale:
    """UI language resolution."""

    def test_default_is_traditional_chinese(self):
        assert '<html lang="zh-TW">' in client.get("/about").text

    def test_accept_language(self):
        html = client.get("/about", headers={"Accept-Language": "fr-FR, en-US;q=0.8"}).text
        assert '<html lang="en">' in html

    def test_cookie_wins_over_accept_language(self):
        html = client.get("/about", headers={"Accept-Language": "en", "Cookie": "culture=zh-TW"}).text
        assert '<html lang="zh-TW">' in html


class TestSetLanguage:
    """POST /set-language tests."""

    def test_sets_cookie_and_returns(self):
        local = TestClient(app)
        response = local.post(
            "/set-language",
            data={"culture": "en", "returnUrl": "/map"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/map"
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("culture=en")
        assert "Max-Age=31536000" in set_cookie
        assert "samesite=lax" in set_cookie.lower()

    def test_cookie_changes_later_pages(self):
        local = TestClient(app)
        local.post("/set-language", data={"culture": "en", "returnUrl": "/"}, follow_redirects=False)
        assert '<html lang="en">' in local.get("/about").text

    @pytest.mark.parametrize("return_url", ["https://example.com/", "//example.com", "", "map"])
    def test_non_local_return_url_goes_home(self, return_url):
        response = TestClient(app).post(
            "/set-language",
            data={"culture": "en", "returnUrl": return_url},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/"

    def test_unsupported_culture_falls_back(self):
        response = TestClient(app).post(
            "/set-language",
            data={"culture": "fr", "returnUrl": "/"},
            follow_redirects=False,
        )
        assert response.headers["set-cookie"].startswith("culture=zh-TW")
