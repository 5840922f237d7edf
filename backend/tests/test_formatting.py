"""
Unit tests for display formatting.
"""

from pathways.formatting import format_cycles_needed, format_number, format_percent


def test_format_percent():
    assert format_percent(0.6271) == "62.7%"
    assert format_percent(0.6271, decimals=0) == "63%"
    assert format_percent(1.0) == "100.0%"
    assert format_percent(0.0) == "0.0%"


def test_format_number():
    assert format_number(11.5) == "11.5"
    assert format_number(3.12637, decimals=2) == "3.13"


def test_format_cycles_needed():
    assert format_cycles_needed(None) == "N/A"
    assert format_cycles_needed(2.0) == "2"
    assert format_cycles_needed(2.4) == "2–3"
    assert format_cycles_needed(11.08) == "11–12"
