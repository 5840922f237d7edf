from fastapi import APIRouter, Query

from pathways.models.results import AMHPlacement
from pathways.simulation.percentile import place_amh

router = APIRouter()


@router.get("/amh-percentile", response_model=AMHPlacement)
async def amh_percentile(
    age: float = Query(..., ge=0, allow_inf_nan=False, description="Age in years"),
    amh: float = Query(..., ge=0, allow_inf_nan=False, description="AMH in ng/mL"),
):
    """Where an AMH value sits against the age-matched reference."""
    placement = place_amh(amh, age)
    if placement is None:
        return AMHPlacement()
    return placement
