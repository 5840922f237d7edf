from typing import Literal

from pydantic import BaseModel

from pathways.models.patient import PatientInputs

PercentileBand = Literal["<25th", "25th-50th", "50th-75th", ">75th", "N/A"]
ComparisonClass = Literal["ivf_better", "spontaneous_better", "comparable"]


class SpontaneousResults(BaseModel):
    fecundability: float
    cumulative_pregnancy: float
    miscarriage_rate: float
    ongoing_pregnancy: float
    aneuploidy_risk: float
    trisomy21_first_trimester: int  # "1 in N" at 12 weeks
    trisomy21_second_trimester: int  # "1 in N" at 16 weeks
    trisomy21_at_birth: int  # "1 in N" at delivery
    healthy_baby: float


class IVFResults(BaseModel):
    oocyte_estimator: str  # "strata" or "regression"
    cycle_cancellation_risk: float
    oocytes: float
    oocytes_lower_quartile: float | None = None  # strata estimator only
    oocytes_upper_quartile: float | None = None
    mature_oocytes: float
    fertilized: float
    blastocysts: float
    euploid_blasts: float
    p_at_least_one_euploid: float
    live_birth_per_euploid: float
    expected_live_births: float
    healthy_baby_conditional: float  # given the cycle reaches retrieval
    healthy_baby: float
    cycles_needed_for_one_euploid: float | None = None  # only when euploid_blasts < 1


class AMHPercentileRow(BaseModel):
    age: int
    median: float
    p25: float
    p75: float
    percentile_dor: float


class AMHPlacement(BaseModel):
    row: AMHPercentileRow | None = None
    classification: PercentileBand = "N/A"
    position: float | None = None  # 0-100 along the percentile bar


class OutcomeComparison(BaseModel):
    absolute_diff: float
    relative_diff: float
    classification: ComparisonClass
    time_horizon: int


class PathwayReport(BaseModel):
    inputs: PatientInputs
    spontaneous: SpontaneousResults
    ivf: IVFResults
    amh_placement: AMHPlacement | None = None
    comparison: OutcomeComparison
