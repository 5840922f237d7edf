"""
Unit tests for AMH percentile lookup, classification and bar placement.
"""

import pytest

from pathways.data import amh_reference
from pathways.errors import InvalidInputError
from pathways.simulation.percentile import (
    amh_marker_position,
    classify_amh_percentile,
    lookup_amh_percentile,
    place_amh,
)


@pytest.fixture
def row_35():
    return lookup_amh_percentile(35)


class TestLookupAMHPercentile:

    def test_reference_row(self, row_35):
        assert row_35.age == 35
        assert (row_35.p25, row_35.median, row_35.p75) == (0.5, 1.4, 2.9)
        assert row_35.percentile_dor == 45.7

    def test_rounds_to_nearest_year(self):
        assert lookup_amh_percentile(35.4).age == 35
        assert lookup_amh_percentile(35.5).age == 36

    def test_clamps_age(self):
        assert lookup_amh_percentile(12).age == 18
        assert lookup_amh_percentile(50).age == 43

    def test_missing_row_is_none(self, monkeypatch):
        monkeypatch.delitem(amh_reference.AMH_REFERENCE, 35)
        assert lookup_amh_percentile(35) is None


class TestClassifyAMHPercentile:

    @pytest.mark.parametrize("amh,expected", [
        (0.1, "<25th"),
        (0.49, "<25th"),
        (0.5, "25th-50th"),
        (1.4, "25th-50th"),
        (2.0, "50th-75th"),
        (2.9, "50th-75th"),
        (3.0, ">75th"),
    ])
    def test_bands_at_35(self, amh, expected):
        assert classify_amh_percentile(amh, 35) == expected

    def test_no_reference_data(self, monkeypatch):
        monkeypatch.delitem(amh_reference.AMH_REFERENCE, 35)
        assert classify_amh_percentile(2.0, 35) == "N/A"

    def test_rejects_negative_amh(self):
        with pytest.raises(InvalidInputError):
            classify_amh_percentile(-1, 35)


class TestMarkerPosition:

    def test_reference_value(self, row_35):
        """50 + ((2.0 - 1.4) / (2.9 - 1.4)) * 25"""
        assert amh_marker_position(2.0, row_35) == pytest.approx(60.0)

    @pytest.mark.parametrize("amh,expected", [
        (0.0, 0.0),
        (0.25, 12.5),
        (0.5, 25.0),
        (1.4, 50.0),
        (2.9, 75.0),
        (4.35, 87.5),
        (5.8, 100.0),
        (12.0, 100.0),
    ])
    def test_segments(self, row_35, amh, expected):
        assert amh_marker_position(amh, row_35) == pytest.approx(expected)

    def test_monotonic(self, row_35):
        positions = [amh_marker_position(x / 10, row_35) for x in range(0, 80)]
        assert positions == sorted(positions)
        assert all(0.0 <= p <= 100.0 for p in positions)


class TestPlaceAMH:

    def test_reference_placement(self):
        placement = place_amh(2.0, 35)
        assert placement.row.age == 35
        assert placement.classification == "50th-75th"
        assert placement.position == pytest.approx(60.0)

    def test_no_reference_data(self, monkeypatch):
        monkeypatch.delitem(amh_reference.AMH_REFERENCE, 43)
        assert place_amh(0.5, 47) is None
