from pathways.models.results import (
    ComparisonClass,
    IVFResults,
    OutcomeComparison,
    SpontaneousResults,
)

# Absolute difference in healthy-baby probability that counts as material
COMPARISON_THRESHOLD = 0.05


def compare_outcomes(
    spontaneous: SpontaneousResults,
    ivf: IVFResults,
    time_horizon: int,
) -> OutcomeComparison:
    """IVF advantage over spontaneous conception, absolute and relative."""
    absolute_diff = ivf.healthy_baby - spontaneous.healthy_baby
    if spontaneous.healthy_baby > 0:
        relative_diff = absolute_diff / spontaneous.healthy_baby
    else:
        relative_diff = 0.0

    classification: ComparisonClass
    if absolute_diff > COMPARISON_THRESHOLD:
        classification = "ivf_better"
    elif absolute_diff < -COMPARISON_THRESHOLD:
        classification = "spontaneous_better"
    else:
        classification = "comparable"

    return OutcomeComparison(
        absolute_diff=absolute_diff,
        relative_diff=relative_diff,
        classification=classification,
        time_horizon=time_horizon,
    )
