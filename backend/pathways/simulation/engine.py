"""
Fertility Pathways Engine

Runs both pathways for a patient and puts them side by side:

    Pathway A  spontaneous conception over `time_horizon` months
    Pathway B  one IVF + PGT-A cycle

together with the patient's AMH percentile placement and the comparison
summary. Every call recomputes from the read-only lookup tables; there is no
state between calls.
"""

import logging

from pathways.models.patient import PatientInputs
from pathways.models.results import PathwayReport
from pathways.simulation.comparison import compare_outcomes
from pathways.simulation.ivf import calculate_ivf
from pathways.simulation.oocytes import resolve_estimator
from pathways.simulation.percentile import place_amh
from pathways.simulation.spontaneous import calculate_spontaneous

logger = logging.getLogger(__name__)


def evaluate_patient(inputs: PatientInputs, estimator: str | None = None) -> PathwayReport:
    """Full report for one set of patient inputs."""
    spontaneous = calculate_spontaneous(inputs)
    ivf = calculate_ivf(inputs, estimator)
    comparison = compare_outcomes(spontaneous, ivf, inputs.time_horizon)

    logger.debug(
        "Report age=%s amh=%s: spontaneous=%.4f ivf=%.4f (%s)",
        inputs.age, inputs.amh, spontaneous.healthy_baby, ivf.healthy_baby,
        comparison.classification,
    )

    return PathwayReport(
        inputs=inputs,
        spontaneous=spontaneous,
        ivf=ivf,
        amh_placement=place_amh(inputs.amh, inputs.age),
        comparison=comparison,
    )


def compare_scenarios(
    scenarios: list[PatientInputs],
    estimator: str | None = None,
) -> list[PathwayReport]:
    """Evaluate several input sets side by side, in the order given."""
    estimator = resolve_estimator(estimator)
    return [evaluate_patient(inputs, estimator) for inputs in scenarios]
