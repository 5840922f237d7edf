"""
Pathway B: one IVF cycle with preimplantation genetic testing (PGT-A).

cancellation -> oocytes -> MII -> 2PN -> blastocysts -> euploid -> live birth
"""

import logging
import math

from pathways.data.ivf_tables import (
    FERTILIZATION_RATE,
    MATURATION_RATE,
    lookup_blastulation,
    lookup_euploidy,
    lookup_live_birth_per_euploid,
)
from pathways.data.strata_loader import lookup_cycle_cancellation_risk
from pathways.models.patient import PatientInputs
from pathways.models.results import IVFResults
from pathways.simulation.oocytes import estimate_oocytes, resolve_estimator

logger = logging.getLogger(__name__)


def p_at_least_one(rate: float, trials: float) -> float:
    """
    1 - (1 - rate)^trials.

    For P(>=1 euploid), trials is the *expected* blastocyst count, so the
    exponent is usually fractional. That is an approximation of the source
    model, kept as published rather than summed over integer embryo counts.
    """
    return 1 - (1 - rate) ** trials


def cycles_needed_range(cycles: float | None) -> tuple[int, int] | None:
    """Floor/ceiling bounds for presenting a fractional cycles-needed figure."""
    if cycles is None:
        return None
    return math.floor(cycles), math.ceil(cycles)


def calculate_ivf(inputs: PatientInputs, estimator: str | None = None) -> IVFResults:
    """Calculate IVF + PGT-A outcomes for a single stimulation cycle."""
    estimator = resolve_estimator(estimator)

    # 1. Risk the cycle is cancelled before retrieval (AMH x age strata)
    cycle_cancellation_risk = lookup_cycle_cancellation_risk(inputs.age, inputs.amh)

    # 2. Oocytes retrieved
    yield_ = estimate_oocytes(inputs.age, inputs.amh, estimator)
    oocytes = yield_.mean

    # 3-4. Mature (MII) and fertilized (2PN)
    mature_oocytes = oocytes * MATURATION_RATE
    fertilized = mature_oocytes * FERTILIZATION_RATE

    # 5-6. Blastocysts and euploid blastocysts
    blastocysts = fertilized * lookup_blastulation(inputs.age)
    euploidy_rate = lookup_euploidy(inputs.age)
    euploid_blasts = blastocysts * euploidy_rate

    # 7. P(>=1 euploid embryo)
    p_at_least_one_euploid = p_at_least_one(euploidy_rate, blastocysts)

    # 8-9. Live birth per euploid transfer, expected live births
    live_birth_per_euploid = lookup_live_birth_per_euploid(inputs.age)
    expected_live_births = euploid_blasts * live_birth_per_euploid

    # 10-11. Healthy baby, conditional on retrieval and overall
    healthy_baby_conditional = p_at_least_one_euploid * live_birth_per_euploid
    healthy_baby = (1 - cycle_cancellation_risk) * healthy_baby_conditional

    # 12. Cycles to bank one euploid embryo, only meaningful below one per cycle
    cycles_needed = 1 / euploid_blasts if 0 < euploid_blasts < 1 else None

    logger.debug(
        "IVF age=%s amh=%s estimator=%s -> oocytes=%.2f euploid=%.2f healthy_baby=%.4f",
        inputs.age, inputs.amh, estimator, oocytes, euploid_blasts, healthy_baby,
    )

    return IVFResults(
        oocyte_estimator=estimator,
        cycle_cancellation_risk=cycle_cancellation_risk,
        oocytes=oocytes,
        oocytes_lower_quartile=yield_.lower_quartile,
        oocytes_upper_quartile=yield_.upper_quartile,
        mature_oocytes=mature_oocytes,
        fertilized=fertilized,
        blastocysts=blastocysts,
        euploid_blasts=euploid_blasts,
        p_at_least_one_euploid=p_at_least_one_euploid,
        live_birth_per_euploid=live_birth_per_euploid,
        expected_live_births=expected_live_births,
        healthy_baby_conditional=healthy_baby_conditional,
        healthy_baby=healthy_baby,
        cycles_needed_for_one_euploid=cycles_needed,
    )
