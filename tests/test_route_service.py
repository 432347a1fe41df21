"""Tests for tour routes and custom route planning."""

import pytest

from app.services import route_service
from app.services.route_service import (
    MINUTES_PER_ANIMAL,
    MINUTES_PER_ZONE,
    NO_ANIMALS_SELECTED,
    NO_VALID_ANIMALS,
    calculate_estimated_minutes,
    decode_share_code,
    encode_share_code,
    get_route_animals,
    get_route_by_id,
    get_route_zones,
    plan_custom_route,
)


@pytest.fixture
def no_loader(monkeypatch):
    """Fail the test if the route service touches the data store."""

    def _fail():
        raise AssertionError("loader should not be called")

    monkeypatch.setattr(route_service, "load_routes", _fail)
    monkeypatch.setattr(route_service, "get_all_animals", _fail)
    monkeypatch.setattr(route_service, "get_all_zones", _fail)


class TestShareCode:
    """Share code encoding tests."""

    @pytest.mark.parametrize(
        "ids",
        [
            ["lion-001"],
            ["penguin-001", "lion-001", "elephant-001"],
            ["獅子", "企鵝"],
        ],
    )
    def test_decode_reverses_encode(self, ids):
        assert decode_share_code(encode_share_code(ids)) == ids

    def test_code_is_url_safe_without_padding(self):
        code = encode_share_code(["a", "bb", "ccc~~~???"])
        assert "=" not in code
        assert "+" not in code
        assert "/" not in code

    @pytest.mark.parametrize("code", [None, "", "   ", "!!!not-base64!!!", "a", "////"])
    def test_garbage_decodes_to_empty(self, code):
        assert decode_share_code(code) == []

    def test_invalid_utf8_decodes_to_empty(self):
        # "_w" is base64 for the single byte 0xFF
        assert decode_share_code("_w") == []


class TestEstimatedMinutes:
    def test_formula(self):
        assert calculate_estimated_minutes(0, 0) == 0
        assert calculate_estimated_minutes(1, 1) == MINUTES_PER_ANIMAL
        assert calculate_estimated_minutes(3, 2) == MINUTES_PER_ZONE + 3 * MINUTES_PER_ANIMAL

    def test_non_decreasing(self):
        for animals in range(0, 6):
            for zones in range(0, 6):
                base = calculate_estimated_minutes(animals, zones)
                assert calculate_estimated_minutes(animals + 1, zones) >= base
                assert calculate_estimated_minutes(animals, zones + 1) >= base


@pytest.mark.usefixtures("data_dir")
class TestPlanCustomRoute:
    """plan_custom_route tests."""

    @pytest.mark.parametrize("ids", [None, []])
    def test_empty_selection_fails(self, ids):
        result = plan_custom_route(ids)
        assert result.success is False
        assert result.error_message == NO_ANIMALS_SELECTED
        assert result.animal_ids == []
        assert result.zone_ids == []
        assert result.estimated_minutes == 0
        assert result.share_code is None

    def test_all_unknown_fails(self):
        result = plan_custom_route(["ghost-001", "ghost-002"])
        assert result.success is False
        assert result.error_message == NO_VALID_ANIMALS
        assert result.animal_ids == []

    def test_orders_by_zone_position(self):
        # polar-zone is at (400, 300), africa-zone at (100, 100)
        result = plan_custom_route(["penguin-001", "LION-001", "elephant-001"])
        assert result.success is True
        assert result.animal_ids == ["lion-001", "elephant-001", "penguin-001"]
        assert result.zone_ids == ["africa-zone", "polar-zone"]
        assert result.estimated_minutes == MINUTES_PER_ZONE + 3 * MINUTES_PER_ANIMAL

    def test_unknown_ids_are_dropped(self):
        result = plan_custom_route(["ghost-001", "penguin-001"])
        assert result.success is True
        assert result.animal_ids == ["penguin-001"]
        assert result.estimated_minutes == MINUTES_PER_ANIMAL

    def test_share_code_round_trips_to_same_route(self):
        result = plan_custom_route(["penguin-001", "lion-001"])
        replanned = plan_custom_route(decode_share_code(result.share_code))
        assert replanned.animal_ids == result.animal_ids
        assert replanned.share_code == result.share_code

    def test_unknown_zone_position_sorts_last(self, monkeypatch):
        polar_only = [z for z in route_service.get_all_zones() if z.id == "polar-zone"]
        monkeypatch.setattr(route_service, "get_all_zones", lambda: polar_only)
        result = plan_custom_route(["lion-001", "penguin-001"])
        assert result.animal_ids == ["penguin-001", "lion-001"]
        assert result.zone_ids == ["polar-zone", "africa-zone"]


@pytest.mark.usefixtures("data_dir")
class TestStoredRoutes:
    """Curated route lookup tests."""

    def test_lookup_is_case_insensitive(self):
        assert get_route_by_id("ROUTE-HIGHLIGHTS").name_en == "Highlights"

    @pytest.mark.parametrize("blank", [None, "", "  "])
    def test_blank_id_skips_loader(self, no_loader, blank):
        assert get_route_by_id(blank) is None
        assert get_route_animals(blank) == []
        assert get_route_zones(blank) == []

    def test_route_animals_keep_order_and_drop_unknown(self):
        assert [a.id for a in get_route_animals("route-highlights")] == ["penguin-001", "lion-001"]

    def test_route_zones_keep_order(self):
        assert [z.id for z in get_route_zones("route-highlights")] == ["polar-zone", "africa-zone"]

    def test_unknown_route(self):
        assert get_route_by_id("route-nowhere") is None
        assert get_route_zones("route-nowhere") == []
