"""
Oocyte yield estimators.

Two clinical formulations are kept side by side:

- "strata"      oocytes retrieved by AMH x age stratum, with IQR (canonical)
- "regression"  La Marca 2012 log-linear model, point estimate only

The default comes from OOCYTE_ESTIMATOR in config.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from pathways.config import OOCYTE_ESTIMATOR
from pathways.data.banding import check_query
from pathways.data.ivf_tables import OOCYTE_MODEL
from pathways.data.strata_loader import lookup_oocyte_retrieval
from pathways.errors import InvalidInputError


@dataclass
class OocyteEstimate:
    mean: float
    lower_quartile: Optional[float] = None
    upper_quartile: Optional[float] = None


def estimate_from_strata(age: float, amh: float) -> OocyteEstimate:
    stratum = lookup_oocyte_retrieval(age, amh)
    return OocyteEstimate(
        mean=stratum["mean"],
        lower_quartile=stratum["lower_quartile"],
        upper_quartile=stratum["upper_quartile"],
    )


def estimate_from_regression(age: float, amh: float) -> OocyteEstimate:
    """ln(oocytes) = 3.21 - 0.036*age + 0.089*min(amh, 20)"""
    age = check_query(age, "age")
    amh = min(check_query(amh, "amh"), OOCYTE_MODEL["amh_max"])
    ln_oocytes = (
        OOCYTE_MODEL["intercept"]
        - OOCYTE_MODEL["age_coefficient"] * age
        + OOCYTE_MODEL["amh_coefficient"] * amh
    )
    return OocyteEstimate(mean=math.exp(ln_oocytes))


ESTIMATORS: dict[str, Callable[[float, float], OocyteEstimate]] = {
    "strata": estimate_from_strata,
    "regression": estimate_from_regression,
}


def resolve_estimator(name: str | None = None) -> str:
    """Validate an estimator name, falling back to the configured default."""
    name = (name or OOCYTE_ESTIMATOR).lower()
    if name not in ESTIMATORS:
        raise InvalidInputError(
            f"Unknown oocyte estimator {name!r}; expected one of {sorted(ESTIMATORS)}"
        )
    return name


def estimate_oocytes(age: float, amh: float, estimator: str | None = None) -> OocyteEstimate:
    return ESTIMATORS[resolve_estimator(estimator)](age, amh)
