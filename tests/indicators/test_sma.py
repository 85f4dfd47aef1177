"""Unit tests for the Simple Moving Average indicator."""

import pandas as pd
import pytest

from quantstream.core.errors import ErrorKind, IndicatorError
from quantstream.indicators.indicator_configs import IndicatorConfig
from quantstream.indicators.sma import SimpleMovingAverage


class TestSimpleMovingAverage:
    """Test SimpleMovingAverage class methods."""

    def test_init(self) -> None:
        """Test SMA initialization."""
        sma = SimpleMovingAverage(3)

        assert sma.name == "sma"
        assert sma.type == "trend"
        assert sma.config.period == 3
        assert sma.config.price_column == "close"

    def test_invalid_period(self) -> None:
        """A zero period is rejected at construction."""
        with pytest.raises(IndicatorError) as exc_info:
            SimpleMovingAverage(0)

        assert exc_info.value.kind == ErrorKind.INVALID_INPUT
        assert exc_info.value.message == "Period must be greater than 0"

    def test_apply(self) -> None:
        """Outputs average the most recent period observations."""
        sma = SimpleMovingAverage(3)

        assert sma.apply(1.0) == 1.0
        assert sma.apply(2.0) == 1.5
        assert sma.apply(3.0) == 2.0
        assert sma.apply(4.0) == 3.0
        assert sma.apply(5.0) == 4.0

    def test_evaluate(self) -> None:
        """Evaluate previews the next commit without changing state."""
        sma = SimpleMovingAverage(3)
        for value in [1.0, 2.0, 3.0, 4.0]:
            sma.apply(value)

        assert sma.evaluate(5.0) == 4.0
        assert sma.evaluate(100.0) == pytest.approx(107.0 / 3)
        assert sma.current() == 3.0
        assert sma.apply(5.0) == 4.0

    def test_current(self) -> None:
        """current() reports the committed mean, 0.0 before any input."""
        sma = SimpleMovingAverage(3)
        assert sma.current() == 0.0

        for value in [1.0, 2.0, 3.0, 4.0]:
            sma.apply(value)

        assert sma.current() == 3.0
        assert sma.current() == 3.0

    @pytest.mark.parametrize("period", [1, 2, 5, 10])
    def test_mean_of_first_observations(self, period: int) -> None:
        """Fewer than period inputs average what has been seen so far."""
        values = [float(v * v) for v in range(1, period + 1)]
        sma = SimpleMovingAverage(period)

        for count, value in enumerate(values, start=1):
            assert sma.apply(value) == pytest.approx(sum(values[:count]) / count)

    def test_from_config(self) -> None:
        """Indicators can be built from a validated config."""
        config = IndicatorConfig(indicator_name="SMA_fast", period=2)
        sma = SimpleMovingAverage.from_config(config)

        assert sma.name == "SMA_fast"
        assert sma.apply_all([2.0, 4.0, 8.0]) == [2.0, 3.0, 6.0]

    def test_calculate(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """calculate() appends the SMA column and preserves the input."""
        sma = SimpleMovingAverage(5)
        result = sma.calculate(sample_ohlcv_data)

        assert "sma_sma" in result.columns
        pd.testing.assert_frame_equal(result.drop("sma_sma", axis=1), sample_ohlcv_data)
        assert result["sma_sma"].iloc[0] == sample_ohlcv_data["close"].iloc[0]
        assert result["sma_sma"].iloc[-1] == pytest.approx(
            sample_ohlcv_data["close"].tail(5).mean()
        )
        assert sma.current() == result["sma_sma"].iloc[-1]

    def test_calculate_custom_price_column(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """calculate() reads the configured price column."""
        sma = SimpleMovingAverage(1, name="open_sma", price_column="open")
        result = sma.calculate(sample_ohlcv_data)

        assert sma.get_indicator_columns() == ["open_sma_sma"]
        assert result["open_sma_sma"].tolist() == sample_ohlcv_data["open"].tolist()

    def test_calculate_empty_data(self, empty_data: pd.DataFrame) -> None:
        """Empty frames are rejected."""
        with pytest.raises(ValueError, match="cannot be None or empty"):
            SimpleMovingAverage(3).calculate(empty_data)

    def test_calculate_missing_column(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """Frames without the price column are rejected."""
        with pytest.raises(ValueError, match="Missing required columns"):
            SimpleMovingAverage(3).calculate(sample_ohlcv_data.drop(columns=["close"]))
