"""Shared fixtures for indicator tests."""

import numpy as np
import pandas as pd
import pytest

# =============================================================================
# OHLCV Data Fixtures
# =============================================================================


@pytest.fixture
def sample_ohlcv_data() -> pd.DataFrame:
    """Create sample OHLCV data for DataFrame helper tests.

    Returns:
        DataFrame with realistic but simple OHLCV data
    """
    dates = pd.date_range('2023-01-01', periods=50, freq='D')

    rng = np.random.default_rng(42)
    base_price = 100
    price_changes = rng.standard_normal(50) * 0.5

    data = pd.DataFrame(index=dates)
    data['close'] = base_price + price_changes.cumsum()
    data['open'] = data['close'] + rng.standard_normal(50) * 0.1
    data['high'] = np.maximum(data['open'], data['close']) + np.abs(rng.standard_normal(50)) * 0.1
    data['low'] = np.minimum(data['open'], data['close']) - np.abs(rng.standard_normal(50)) * 0.1
    data['volume'] = rng.integers(100000, 1000000, 50)

    return data


@pytest.fixture
def empty_data() -> pd.DataFrame:
    """Empty DataFrame with OHLC columns."""
    return pd.DataFrame(
        {
            'open': pd.Series([], dtype=float),
            'high': pd.Series([], dtype=float),
            'low': pd.Series([], dtype=float),
            'close': pd.Series([], dtype=float),
        },
        index=pd.DatetimeIndex([]),
    )


