"""Pytest configuration and shared fixtures for the quantstream test suite."""

from typing import Any

import numpy as np
import pytest


def pytest_configure(config: Any) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "performance: marks tests as performance suites")


@pytest.fixture(scope="session")
def random_walk() -> list[float]:
    """Reproducible price path used by property style tests."""
    rng = np.random.default_rng(42)
    returns = rng.normal(0.0005, 0.02, 200)
    return (100.0 * np.cumprod(1 + returns)).tolist()
