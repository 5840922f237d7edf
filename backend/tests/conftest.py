"""Shared pytest fixtures for the fertility pathways test suite."""

import pytest

from pathways.models.patient import PatientInputs


@pytest.fixture
def reference_patient():
    """35-year-old, AMH 2.0, never pregnant, trying for a year."""
    return PatientInputs(age=35, amh=2.0, gravidity="nulligravid", time_horizon=12)


@pytest.fixture
def low_reserve_patient():
    """44-year-old with very low AMH: under one euploid blastocyst per cycle."""
    return PatientInputs(age=44, amh=0.1, gravidity="prior_pregnancy", time_horizon=6)
