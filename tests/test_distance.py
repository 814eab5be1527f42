"""Unit tests for haversine distance and distance ranking."""

import math
from dataclasses import dataclass
from typing import Optional

import pytest

from src.domain.distance import haversine_km
from src.domain.entities import ClientError, Location
from src.domain.ranking import INVALID_REFERENCE, parse_reference, rank_by_distance


@dataclass
class _Row:
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0896, 72.8656, 19.0896, 72.8656) == pytest.approx(0.0, abs=1e-9)

    def test_one_degree_of_longitude_at_equator(self):
        assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)

    def test_symmetric(self):
        a = haversine_km(40.7128, -74.0060, 51.5074, -0.1278)
        b = haversine_km(51.5074, -0.1278, 40.7128, -74.0060)
        assert a == pytest.approx(b)

    def test_new_york_to_london(self):
        # ~5570 km
        assert haversine_km(40.7128, -74.0060, 51.5074, -0.1278) == pytest.approx(5570, rel=0.01)

    def test_antipodes(self):
        assert haversine_km(0, 0, 0, 180) == pytest.approx(6371.0 * 3.141592653589793)

    def test_rounding_past_one_is_clamped(self):
        # a comes out as 1.0000000000000002 for this exact antipodal pair
        assert haversine_km(-0.08, 180, 0.08, 0) == pytest.approx(6371.0 * math.pi)


class TestParseReference:
    def test_parses_floats(self):
        assert parse_reference("19.5", " -72 ") == Location(19.5, -72.0)

    @pytest.mark.parametrize(
        "lat, lng",
        [(None, "1"), ("1", None), ("abc", "1"), ("1", ""), ("nan", "1"), ("1", "inf"), ("1_0", "1")],
    )
    def test_rejects_bad_values(self, lat, lng):
        with pytest.raises(ClientError) as exc_info:
            parse_reference(lat, lng)
        assert exc_info.value.message == INVALID_REFERENCE

    def test_out_of_range_is_accepted(self):
        assert parse_reference("200", "400") == Location(200.0, 400.0)


class TestRankByDistance:
    def test_sorted_ascending(self):
        rows = [
            _Row(1, "Far", "X", 0, 3),
            _Row(2, "Near", "X", 0, 1),
            _Row(3, "Here", "X", 0, 0),
        ]
        ranked = rank_by_distance(Location(0, 0), rows)
        assert [r.name for r in ranked] == ["Here", "Near", "Far"]
        assert all(a.distance <= b.distance for a, b in zip(ranked, ranked[1:]))

    def test_ties_keep_retrieval_order(self):
        rows = [
            _Row(1, "East", "X", 0, 1),
            _Row(2, "West", "X", 0, -1),
            _Row(3, "North", "X", 1, 0),
        ]
        ranked = rank_by_distance(Location(0, 0), rows)
        # all three are exactly one degree away
        assert [r.id for r in ranked] == [1, 2, 3]

    def test_attaches_distance_and_copies_fields(self):
        (ranked,) = rank_by_distance(Location(0, 0), [_Row(7, "A", "Addr", 0, 1)])
        assert (ranked.id, ranked.name, ranked.address) == (7, "A", "Addr")
        assert ranked.distance == pytest.approx(111.19, abs=0.01)

    def test_empty(self):
        assert rank_by_distance(Location(0, 0), []) == []
