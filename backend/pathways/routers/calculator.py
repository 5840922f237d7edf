from fastapi import APIRouter, Query

from pathways.models.patient import PatientInputs, ScenarioRequest
from pathways.models.results import IVFResults, PathwayReport, SpontaneousResults
from pathways.simulation.engine import compare_scenarios, evaluate_patient
from pathways.simulation.ivf import calculate_ivf
from pathways.simulation.spontaneous import calculate_spontaneous

router = APIRouter()

_ESTIMATOR_QUERY = Query(None, description="Oocyte estimator: 'strata' or 'regression'")


@router.post("/spontaneous", response_model=SpontaneousResults)
async def spontaneous(inputs: PatientInputs):
    """Spontaneous conception outcomes over the patient's time horizon."""
    return calculate_spontaneous(inputs)


@router.post("/ivf", response_model=IVFResults)
async def ivf(inputs: PatientInputs, estimator: str | None = _ESTIMATOR_QUERY):
    """IVF + PGT-A outcomes for a single cycle."""
    return calculate_ivf(inputs, estimator)


@router.post("/report", response_model=PathwayReport)
async def report(inputs: PatientInputs, estimator: str | None = _ESTIMATOR_QUERY):
    """Both pathways, AMH placement and the comparison summary."""
    return evaluate_patient(inputs, estimator)


@router.post("/compare")
async def compare(request: ScenarioRequest, estimator: str | None = _ESTIMATOR_QUERY):
    """Compare multiple patient scenarios side by side."""
    reports = compare_scenarios(request.scenarios, estimator)
    return {"scenarios": reports}
