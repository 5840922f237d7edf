"""
Pathway A: spontaneous conception over a time horizon.

fecundability -> cumulative pregnancy -> miscarriage -> aneuploidy -> healthy baby
"""

import logging

from pathways.data.spontaneous_tables import (
    lookup_aneuploidy,
    lookup_fecundability,
    lookup_miscarriage,
    lookup_trisomy21,
)
from pathways.models.patient import PatientInputs
from pathways.models.results import SpontaneousResults

logger = logging.getLogger(__name__)


def cumulative_probability(monthly_rate: float, months: int) -> float:
    """P(at least one success) over independent, identical monthly trials."""
    return 1 - (1 - monthly_rate) ** months


def calculate_spontaneous(inputs: PatientInputs) -> SpontaneousResults:
    """Calculate spontaneous conception outcomes for the given patient."""
    # 1. Monthly fecundability (age + gravidity)
    fecundability = lookup_fecundability(inputs.age, inputs.gravidity)

    # 2. Cumulative pregnancy probability after N months
    cumulative_pregnancy = cumulative_probability(fecundability, inputs.time_horizon)

    # 3-4. Ongoing pregnancy after miscarriage loss
    miscarriage_rate = lookup_miscarriage(inputs.age, inputs.gravidity)
    ongoing_pregnancy = cumulative_pregnancy * (1 - miscarriage_rate)

    # 5. Aneuploidy risk at delivery
    aneuploidy_risk = lookup_aneuploidy(inputs.age)

    # 6. Trisomy 21 "1 in N" (informational, not part of the chain)
    t21_first, t21_second, t21_birth = lookup_trisomy21(inputs.age)

    # 7. Final healthy baby probability
    healthy_baby = ongoing_pregnancy * (1 - aneuploidy_risk)

    logger.debug(
        "Spontaneous age=%s gravidity=%s months=%s -> healthy_baby=%.4f",
        inputs.age, inputs.gravidity, inputs.time_horizon, healthy_baby,
    )

    return SpontaneousResults(
        fecundability=fecundability,
        cumulative_pregnancy=cumulative_pregnancy,
        miscarriage_rate=miscarriage_rate,
        ongoing_pregnancy=ongoing_pregnancy,
        aneuploidy_risk=aneuploidy_risk,
        trisomy21_first_trimester=t21_first,
        trisomy21_second_trimester=t21_second,
        trisomy21_at_birth=t21_birth,
        healthy_baby=healthy_baby,
    )
