"""Pytest fixtures and configuration for test suite."""
import pandas as pd
import pytest


@pytest.fixture
def sample_set():
    """A 100 x 5 set, the reference input for the formula table."""
    return {"weight": 100.0, "reps": 5}


@pytest.fixture
def reference_estimates():
    """Expected 2-decimal estimates for 100 x 5."""
    return {
        "epley": 116.67,
        "brzycki": 112.5,
        "lombardi": 117.46,
        "mayhew": 119.01,
        "oconner": 112.5,
        "wathan": 116.58,
        "landers": 113.71,
    }


@pytest.fixture
def lift_log_df():
    """Small lift log with one incomplete row."""
    return pd.DataFrame({
        "exercise": ["Squat", "Bench", "Deadlift", "Squat"],
        "weight": [100.0, 80.0, 140.0, None],
        "reps": [5, 8, 3, 5],
    })


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all ONEREPMAX_* variables for the duration of a test."""
    for name in [
        "ONEREPMAX_LOG_LEVEL",
        "ONEREPMAX_LOG_FILE",
        "ONEREPMAX_DECIMALS",
        "ONEREPMAX_MAX_REPS",
        "ONEREPMAX_DEFAULT_WEIGHT",
        "ONEREPMAX_DEFAULT_REPS",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
