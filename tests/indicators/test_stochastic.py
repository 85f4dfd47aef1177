"""Unit tests for the Stochastic Momentum Oscillator."""

import pandas as pd
import pytest

from quantstream.core.errors import IndicatorError
from quantstream.indicators.stochastic import StochasticMomentumOscillator


class TestStochasticMomentumOscillator:
    """Test StochasticMomentumOscillator class methods."""

    def test_invalid_period(self) -> None:
        """A zero period is rejected at construction."""
        with pytest.raises(IndicatorError):
            StochasticMomentumOscillator(0)

    def test_initial_current(self) -> None:
        """Before any bar the oscillator reads the midpoint."""
        assert StochasticMomentumOscillator(3).current() == 50.0

    def test_flat_range(self) -> None:
        """Equal highs and lows read 50 for any history length."""
        smo = StochasticMomentumOscillator(3)
        for _ in range(6):
            assert smo.evaluate((3.0, 3.0, 3.0)) == 50.0
            assert smo.apply((3.0, 3.0, 3.0)) == 50.0
            assert smo.current() == 50.0

    def test_apply(self) -> None:
        """Close position within the period's range, scaled to 0-100."""
        smo = StochasticMomentumOscillator(3)

        assert smo.apply((10.0, 8.0, 9.0)) == 50.0
        assert smo.apply((12.0, 9.0, 11.0)) == 75.0
        assert smo.apply((11.0, 7.0, 8.0)) == 20.0
        assert smo.current() == 20.0

    def test_evaluate(self) -> None:
        """Evaluate previews with the oldest bar dropped and stores nothing."""
        smo = StochasticMomentumOscillator(3)
        smo.apply_all([(10.0, 8.0, 9.0), (12.0, 9.0, 11.0), (11.0, 7.0, 8.0)])

        assert smo.evaluate((13.0, 10.0, 12.0)) == pytest.approx(500.0 / 6.0)
        assert smo.current() == 20.0
        assert smo.apply((13.0, 10.0, 12.0)) == pytest.approx(500.0 / 6.0)

    def test_calculate(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """calculate() matches a pandas rolling %K."""
        result = StochasticMomentumOscillator(5).calculate(sample_ohlcv_data)

        highest = sample_ohlcv_data["high"].rolling(5, min_periods=1).max()
        lowest = sample_ohlcv_data["low"].rolling(5, min_periods=1).min()
        expected = 100.0 * (sample_ohlcv_data["close"] - lowest) / (highest - lowest)

        assert result["stochastic_k"].to_numpy() == pytest.approx(expected.to_numpy())
        assert result["stochastic_k"].between(0.0, 100.0).all()
