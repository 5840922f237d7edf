"""
Unit tests for the spontaneous conception pathway.
"""

import pytest

from pathways.models.patient import PatientInputs
from pathways.simulation.spontaneous import calculate_spontaneous, cumulative_probability


class TestCumulativeProbability:

    def test_one_month_equals_monthly_rate(self):
        assert cumulative_probability(0.113, 1) == pytest.approx(0.113)

    def test_zero_months(self):
        assert cumulative_probability(0.2, 0) == 0.0

    def test_non_decreasing_in_months(self):
        values = [cumulative_probability(0.113, m) for m in range(1, 25)]
        assert values == sorted(values)

    def test_formula_exact(self):
        assert cumulative_probability(0.25, 2) == pytest.approx(1 - 0.75 ** 2)


class TestCalculateSpontaneous:

    def test_reference_scenario(self, reference_patient):
        """35y, nulligravid, 12 months: age 35 floors to the 34 fecundability band."""
        r = calculate_spontaneous(reference_patient)
        assert r.fecundability == 0.113
        assert r.cumulative_pregnancy == pytest.approx(0.7628, abs=1e-4)
        assert r.miscarriage_rate == 0.18
        assert r.ongoing_pregnancy == pytest.approx(0.6255, abs=1e-4)
        assert r.aneuploidy_risk == pytest.approx(0.0119, abs=1e-4)
        assert r.healthy_baby == pytest.approx(0.6181, abs=1e-4)

    def test_trisomy21_figures(self, reference_patient):
        r = calculate_spontaneous(reference_patient)
        assert r.trisomy21_first_trimester == 249
        assert r.trisomy21_second_trimester == 280
        assert r.trisomy21_at_birth == 356

    def test_chain_is_consistent(self, reference_patient):
        r = calculate_spontaneous(reference_patient)
        assert r.ongoing_pregnancy == pytest.approx(r.cumulative_pregnancy * (1 - r.miscarriage_rate))
        assert r.healthy_baby == pytest.approx(r.ongoing_pregnancy * (1 - r.aneuploidy_risk))

    def test_one_month_horizon(self):
        r = calculate_spontaneous(PatientInputs(age=30, gravidity="prior_pregnancy", time_horizon=1))
        assert r.cumulative_pregnancy == pytest.approx(r.fecundability)
        assert r.fecundability == 0.234

    def test_prior_pregnancy_improves_outlook(self):
        nulli = calculate_spontaneous(PatientInputs(age=38, gravidity="nulligravid"))
        prior = calculate_spontaneous(PatientInputs(age=38, gravidity="prior_pregnancy"))
        assert prior.healthy_baby > nulli.healthy_baby

    def test_idempotent(self, reference_patient):
        assert calculate_spontaneous(reference_patient) == calculate_spontaneous(reference_patient)

    @pytest.mark.parametrize("gravidity", ["nulligravid", "prior_pregnancy"])
    def test_probabilities_stay_in_unit_interval(self, gravidity):
        for age10 in range(200, 451, 5):
            for months in range(1, 25):
                r = calculate_spontaneous(
                    PatientInputs(age=age10 / 10, gravidity=gravidity, time_horizon=months)
                )
                for value in (
                    r.fecundability,
                    r.cumulative_pregnancy,
                    r.miscarriage_rate,
                    r.ongoing_pregnancy,
                    r.aneuploidy_risk,
                    r.healthy_baby,
                ):
                    assert 0.0 <= value <= 1.0
                assert r.trisomy21_at_birth >= 1
