"""
AMH percentile positioning against the age-matched reference.
"""

from pathways.data.amh_reference import get_reference_row, reference_age
from pathways.data.banding import check_query
from pathways.models.results import AMHPercentileRow, AMHPlacement, PercentileBand


def lookup_amh_percentile(age: float) -> AMHPercentileRow | None:
    """Reference row for the nearest tabulated age (clamped to 18-43)."""
    row = get_reference_row(age)
    if row is None:
        return None
    return AMHPercentileRow(age=reference_age(age), **row)


def _band(amh: float, row: AMHPercentileRow) -> PercentileBand:
    if amh < row.p25:
        return "<25th"
    elif amh <= row.median:
        return "25th-50th"
    elif amh <= row.p75:
        return "50th-75th"
    else:
        return ">75th"


def classify_amh_percentile(amh: float, age: float) -> PercentileBand:
    """Which quartile band the AMH value falls in for the patient's age."""
    amh = check_query(amh, "amh")
    row = lookup_amh_percentile(age)
    if row is None:
        return "N/A"
    return _band(amh, row)


def amh_marker_position(amh: float, row: AMHPercentileRow) -> float:
    """
    Map an AMH value onto a 0-100 bar by piecewise-linear interpolation:

        0      -> p25     :  0 -> 25
        p25    -> median  : 25 -> 50
        median -> p75     : 50 -> 75
        p75    -> 2 * p75 : 75 -> 100   (2 * p75 taken as the bar's maximum)
    """
    amh = check_query(amh, "amh")
    if amh <= 0:
        return 0.0

    segments = [
        (0.0, row.p25, 0.0),
        (row.p25, row.median, 25.0),
        (row.median, row.p75, 50.0),
        (row.p75, row.p75 * 2, 75.0),
    ]
    for lo, hi, start in segments:
        if amh <= hi:
            # zero-width segment (p25 == median etc.) sits at its end position
            ratio = (amh - lo) / (hi - lo) if hi > lo else 1.0
            return max(0.0, min(100.0, start + ratio * 25))
    return 100.0


def place_amh(amh: float, age: float) -> AMHPlacement | None:
    """Row, quartile band and bar position together; None without reference data."""
    row = lookup_amh_percentile(age)
    if row is None:
        return None
    amh = check_query(amh, "amh")
    return AMHPlacement(
        row=row,
        classification=_band(amh, row),
        position=amh_marker_position(amh, row),
    )
