"""
IVF + PGT-A Lookup Tables

Age-specific embryology rates and the fixed lab constants used by the IVF
pathway. The AMH x age strata (cycle cancellation, oocyte retrieval) live in
strata_loader.py because they are shipped as CSV.
"""

from pathways.data.banding import band_index, exact_key

# Fixed rates
MATURATION_RATE = 0.82     # MII rate
FERTILIZATION_RATE = 0.72  # 2PN rate

# Oocyte prediction model constants (La Marca 2012, Model 1)
#   ln(oocytes) = intercept - age_coefficient * age + amh_coefficient * amh
# AMH above amh_max clamps to it; the model is not extrapolated.
OOCYTE_MODEL = {
    "intercept": 3.21,
    "age_coefficient": 0.036,
    "amh_coefficient": 0.089,
    "amh_max": 20.0,  # ng/mL
}

# Blastulation rate per 2PN embryo (Romanski 2022).
# 30 covers <=30 and is the fallback for unlisted ages; 44 covers >=44.
BLASTULATION: dict[int, float] = {
    30: 0.667,
    31: 0.700,
    32: 0.707,
    33: 0.667,
    34: 0.667,
    35: 0.703,
    36: 0.667,
    37: 0.667,
    38: 0.667,
    39: 0.667,
    40: 0.667,
    41: 0.600,
    42: 0.547,
    43: 0.571,
    44: 0.429,
}
_BLASTULATION_FALLBACK_AGE = 30

# Euploidy rate per biopsied blastocyst (Franasiak 2014).
# 35 is the fallback for unlisted ages.
EUPLOIDY: dict[int, float] = {
    22: 0.556,
    23: 0.592,
    24: 0.722,
    25: 0.556,
    26: 0.754,
    27: 0.729,
    28: 0.773,
    29: 0.793,
    30: 0.768,
    31: 0.690,
    32: 0.689,
    33: 0.690,
    34: 0.687,
    35: 0.655,
    36: 0.645,
    37: 0.574,
    38: 0.521,
    39: 0.471,
    40: 0.418,
    41: 0.311,
    42: 0.249,
    43: 0.166,
    44: 0.118,
    45: 0.157,
}
_EUPLOIDY_FALLBACK_AGE = 35

# Live birth rate per euploid transfer (Yan 2021, Linder 2025).
# Inclusive [age_min, age_max] bands.
LIVE_BIRTH_PER_EUPLOID: list[dict] = [
    {"age_min": 0, "age_max": 30, "rate": 0.668},
    {"age_min": 31, "age_max": 35, "rate": 0.617},
    {"age_min": 36, "age_max": 37, "rate": 0.558},
    {"age_min": 38, "age_max": 40, "rate": 0.525},
    {"age_min": 41, "age_max": 42, "rate": 0.489},
    {"age_min": 43, "age_max": 44, "rate": 0.478},
    {"age_min": 45, "age_max": 99, "rate": 0.434},
]
_LIVE_BIRTH_LOWER_BOUNDS = [band["age_min"] for band in LIVE_BIRTH_PER_EUPLOID]


def lookup_blastulation(age: float) -> float:
    return exact_key(BLASTULATION, age, _BLASTULATION_FALLBACK_AGE, name="blastulation", query="age")


def lookup_euploidy(age: float) -> float:
    return exact_key(EUPLOIDY, age, _EUPLOIDY_FALLBACK_AGE, name="euploidy", query="age")


def lookup_live_birth_per_euploid(age: float) -> float:
    """Live birth rate for a single euploid transfer at the patient's age."""
    idx = band_index(_LIVE_BIRTH_LOWER_BOUNDS, age, name="age")
    return LIVE_BIRTH_PER_EUPLOID[idx]["rate"]
