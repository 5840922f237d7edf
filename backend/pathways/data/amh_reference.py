"""
AMH Reference Data (Aslan 2025, n=22,920)

Age-matched AMH distribution (ng/mL) by single year of age, 18-43.
percentile_dor is the share of women that age with diminished ovarian reserve.
"""

from pathways.data.banding import check_query

AMH_MIN_AGE = 18
AMH_MAX_AGE = 43

AMH_REFERENCE: dict[int, dict[str, float]] = {
    18: {"median": 3.8, "p25": 1.9, "p75": 7.0, "percentile_dor": 15.9},
    19: {"median": 4.0, "p25": 2.3, "p75": 6.8, "percentile_dor": 11.7},
    20: {"median": 4.2, "p25": 2.5, "p75": 6.7, "percentile_dor": 8.5},
    21: {"median": 4.2, "p25": 2.6, "p75": 6.8, "percentile_dor": 8.2},
    22: {"median": 4.1, "p25": 2.2, "p75": 6.4, "percentile_dor": 10.5},
    23: {"median": 3.9, "p25": 2.1, "p75": 6.3, "percentile_dor": 11.2},
    24: {"median": 3.6, "p25": 2.0, "p75": 6.1, "percentile_dor": 12.2},
    25: {"median": 3.3, "p25": 1.9, "p75": 5.7, "percentile_dor": 13.5},
    26: {"median": 3.4, "p25": 1.9, "p75": 6.0, "percentile_dor": 14.6},
    27: {"median": 3.1, "p25": 1.7, "p75": 5.3, "percentile_dor": 16.2},
    28: {"median": 2.8, "p25": 1.5, "p75": 4.9, "percentile_dor": 18.6},
    29: {"median": 2.6, "p25": 1.3, "p75": 4.6, "percentile_dor": 23.2},
    30: {"median": 2.5, "p25": 1.2, "p75": 4.3, "percentile_dor": 24.3},
    31: {"median": 2.3, "p25": 1.1, "p75": 3.9, "percentile_dor": 27.3},
    32: {"median": 2.0, "p25": 0.9, "p75": 3.8, "percentile_dor": 33.2},
    33: {"median": 1.8, "p25": 0.8, "p75": 3.3, "percentile_dor": 36.7},
    34: {"median": 1.7, "p25": 0.7, "p75": 3.3, "percentile_dor": 39.3},
    35: {"median": 1.4, "p25": 0.5, "p75": 2.9, "percentile_dor": 45.7},
    36: {"median": 1.1, "p25": 0.4, "p75": 2.3, "percentile_dor": 52.9},
    37: {"median": 1.0, "p25": 0.3, "p75": 2.3, "percentile_dor": 55.8},
    38: {"median": 0.7, "p25": 0.2, "p75": 1.7, "percentile_dor": 64.0},
    39: {"median": 0.7, "p25": 0.2, "p75": 1.6, "percentile_dor": 66.0},
    40: {"median": 0.5, "p25": 0.2, "p75": 1.3, "percentile_dor": 73.0},
    41: {"median": 0.4, "p25": 0.1, "p75": 0.9, "percentile_dor": 82.0},
    42: {"median": 0.3, "p25": 0.1, "p75": 0.8, "percentile_dor": 85.0},
    43: {"median": 0.2, "p25": 0.1, "p75": 0.6, "percentile_dor": 89.0},
}


def reference_age(age: float) -> int:
    """Round to the nearest whole year and clamp to the tabulated 18-43."""
    age = check_query(age, "age")
    # int(x + 0.5) rounds halves up, unlike round()'s banker's rounding
    return max(AMH_MIN_AGE, min(AMH_MAX_AGE, int(age + 0.5)))


def get_reference_row(age: float) -> dict[str, float] | None:
    """Raw reference row for the clamped age, or None if it has no entry."""
    return AMH_REFERENCE.get(reference_age(age))
