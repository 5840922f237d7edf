from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Gravidity = Literal["nulligravid", "prior_pregnancy"]


class PatientInputs(BaseModel):
    """
    Caller-supplied parameters for one calculation.

    Clinical ranges (age 20-45, AMH >= 0.01, horizon 1-24 months) are the
    form's business; here only values the lookup tables cannot order are
    rejected: NaN, infinite or negative.
    """

    model_config = ConfigDict(frozen=True)

    age: float = Field(ge=0, allow_inf_nan=False)
    amh: float = Field(2.0, ge=0, allow_inf_nan=False)  # ng/mL (IVF pathway)
    gravidity: Gravidity = "nulligravid"
    time_horizon: int = Field(12, ge=0)  # months (spontaneous pathway)


class ScenarioRequest(BaseModel):
    scenarios: list[PatientInputs]
