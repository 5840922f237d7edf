"""
Banded / Keyed Lookup Resolution

Resolution strategies shared by every clinical lookup table:

- floor_key:    greatest key <= query (fecundability, miscarriage, aneuploidy)
- nearest_key:  key with the smallest absolute distance, ties to the lower key
                (trisomy-21 tables)
- band_index:   explicit inclusive [min, max] intervals, resolved by the
                greatest lower bound <= query (live birth per euploid,
                cancellation and retrieval strata)
- exact_key:    single-year tables with a fixed fallback row for in-range
                queries that have no entry (blastulation, euploidy)

Queries outside a table's domain clamp to the boundary row. Nothing here
extrapolates.
"""

import logging
import math
from typing import Mapping, Sequence, TypeVar

import numpy as np

from pathways.errors import InvalidInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_query(value: float, name: str = "value") -> float:
    """Reject queries the clamping rules cannot order (NaN, inf, negative)."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def band_index(lower_bounds: Sequence[float], value: float, name: str = "value") -> int:
    """
    Index of the band whose lower bound is the greatest one <= value.

    lower_bounds must be ascending. Values below the first bound clamp to
    band 0, values beyond the last band clamp to the last band.
    """
    value = check_query(value, name)
    idx = int(np.searchsorted(np.asarray(lower_bounds, dtype=np.float64), value, side="right")) - 1
    return max(0, min(idx, len(lower_bounds) - 1))


def floor_key(table: Mapping[float, T], value: float, name: str = "value") -> T:
    """Row of the last threshold crossed (greatest key <= value)."""
    keys = sorted(table)
    return table[keys[band_index(keys, value, name)]]


def nearest_key(table: Mapping[float, T], value: float, name: str = "value") -> T:
    """Row of the key closest to value; ties resolve to the smaller key."""
    value = check_query(value, name)
    keys = sorted(table)
    distances = np.abs(np.asarray(keys, dtype=np.float64) - value)
    # argmin returns the first minimum, i.e. the smaller key on a tie
    return table[keys[int(np.argmin(distances))]]


def exact_key(
    table: Mapping[int, T],
    value: float,
    fallback_key: int,
    name: str = "table",
    query: str = "value",
) -> T:
    """
    Single-year lookup.

    At or below the smallest key -> smallest row; at or above the largest
    key -> largest row; an in-range value with no entry (e.g. a fractional
    age) -> the fallback row.
    """
    value = check_query(value, query)
    lowest = min(table)
    highest = max(table)
    if value <= lowest:
        return table[lowest]
    if value >= highest:
        return table[highest]
    if value.is_integer() and int(value) in table:
        return table[int(value)]
    logger.debug("%s has no row for %s, using fallback row %s", name, value, fallback_key)
    return table[fallback_key]
