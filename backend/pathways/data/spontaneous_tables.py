"""
Spontaneous Conception Lookup Tables

Published point estimates for the natural-conception pathway, keyed by
maternal age. All tables are module-level constants, built once at import
and never mutated.
"""

from pathways.data.banding import floor_key, nearest_key
from pathways.errors import InvalidInputError
from pathways.models.patient import Gravidity

# Monthly fecundability by age band (Steiner 2016).
# Key is the lower edge of a two-year band; ages below 30 use the 30 row.
FECUNDABILITY: dict[int, dict[str, float]] = {
    30: {"nulligravid": 0.173, "prior_pregnancy": 0.234},
    32: {"nulligravid": 0.188, "prior_pregnancy": 0.232},
    34: {"nulligravid": 0.113, "prior_pregnancy": 0.222},
    36: {"nulligravid": 0.120, "prior_pregnancy": 0.160},
    38: {"nulligravid": 0.052, "prior_pregnancy": 0.171},
    40: {"nulligravid": 0.029, "prior_pregnancy": 0.098},
    42: {"nulligravid": 0.032, "prior_pregnancy": 0.089},
}

# Miscarriage risk by age band (Magnus 2019).
# nulligravid -> nulliparous, prior_pregnancy -> parous
MISCARRIAGE: dict[int, dict[str, float]] = {
    20: {"nulligravid": 0.10, "prior_pregnancy": 0.05},
    25: {"nulligravid": 0.10, "prior_pregnancy": 0.05},
    30: {"nulligravid": 0.12, "prior_pregnancy": 0.06},
    35: {"nulligravid": 0.18, "prior_pregnancy": 0.09},
    40: {"nulligravid": 0.34, "prior_pregnancy": 0.17},
    45: {"nulligravid": 0.53, "prior_pregnancy": 0.53},
}

# Aneuploidy risk at delivery (ACOG 2020), "1 in N" converted to decimals
ANEUPLOIDY: dict[int, float] = {
    20: 1 / 122,
    25: 1 / 119,
    30: 1 / 110,
    35: 1 / 84,
    40: 0.025,
    41: 0.025,
    42: 0.025,
    43: 0.025,
    44: 0.025,
    45: 0.025,
}

# Maternal-age risk of trisomy 21, as the N in "1 in N" (Snijders 1999).
# Three gestational timepoints; resolved by nearest tabulated age.
TRISOMY21_FIRST_TRIMESTER: dict[int, int] = {  # 12 weeks
    20: 1068,
    25: 946,
    30: 626,
    31: 543,
    32: 461,
    33: 383,
    34: 312,
    35: 249,
    36: 196,
    37: 152,
    38: 117,
    39: 89,
    40: 68,
    41: 51,
    42: 38,
    43: 29,
    44: 21,
    45: 16,
}

TRISOMY21_SECOND_TRIMESTER: dict[int, int] = {  # 16 weeks
    20: 1200,
    25: 1062,
    30: 703,
    31: 610,
    32: 518,
    33: 430,
    34: 350,
    35: 280,
    36: 220,
    37: 171,
    38: 131,
    39: 100,
    40: 76,
    41: 57,
    42: 43,
    43: 32,
    44: 24,
    45: 18,
}

TRISOMY21_AT_BIRTH: dict[int, int] = {
    20: 1527,
    25: 1352,
    30: 895,
    31: 776,
    32: 659,
    33: 547,
    34: 446,
    35: 356,
    36: 280,
    37: 218,
    38: 167,
    39: 128,
    40: 97,
    41: 73,
    42: 55,
    43: 41,
    44: 30,
    45: 23,
}


def _by_gravidity(row: dict[str, float], gravidity: str) -> float:
    if gravidity not in row:
        raise InvalidInputError(f"Unknown gravidity {gravidity!r}")
    return row[gravidity]


def lookup_fecundability(age: float, gravidity: Gravidity) -> float:
    """Monthly probability of conception for the patient's age band."""
    return _by_gravidity(floor_key(FECUNDABILITY, age, name="age"), gravidity)


def lookup_miscarriage(age: float, gravidity: Gravidity) -> float:
    return _by_gravidity(floor_key(MISCARRIAGE, age, name="age"), gravidity)


def lookup_aneuploidy(age: float) -> float:
    return floor_key(ANEUPLOIDY, age, name="age")


def lookup_trisomy21(age: float) -> tuple[int, int, int]:
    """Trisomy-21 "1 in N" denominators at 12 weeks, 16 weeks and birth."""
    return (
        nearest_key(TRISOMY21_FIRST_TRIMESTER, age, name="age"),
        nearest_key(TRISOMY21_SECOND_TRIMESTER, age, name="age"),
        nearest_key(TRISOMY21_AT_BIRTH, age, name="age"),
    )
