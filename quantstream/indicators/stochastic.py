"""Stochastic Momentum Oscillator implementation."""

import logging

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import StochasticConfig
from .maximum_period import MaximumPeriod
from .minimum_period import MinimumPeriod

Bar = tuple[float, float, float]

FLAT_RANGE_VALUE = 50.0


class StochasticMomentumOscillator(BaseIndicator[Bar, float]):
    """Stochastic Momentum Oscillator.

    Consumes (high, low, close) bars and reports where the close sits within
    the highest high and lowest low of the last ``period`` bars, scaled to
    0-100. A flat range (highest high equal to lowest low) reads as 50.
    """

    config_class = StochasticConfig
    input_columns = ('high', 'low', 'close')
    output_suffixes = ('k',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "stochastic",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a Stochastic Momentum Oscillator.

        Raises:
            IndicatorError: If ``period`` is 0
        """
        config = build_config(StochasticConfig, indicator_name=name, period=period)
        super().__init__(config, logger)

    @classmethod
    def default_config(cls) -> StochasticConfig:
        """Return the canonical Stochastic configuration."""
        return StochasticConfig(indicator_name="stochastic", period=14)

    def _initialize_state(self) -> None:
        self._highest = MaximumPeriod(
            self.config.period, name=f"{self.name}_high", logger=self.logger
        )
        self._lowest = MinimumPeriod(
            self.config.period, name=f"{self.name}_low", logger=self.logger
        )
        self._current = FLAT_RANGE_VALUE

    def execute(self, value: Bar, mode: ExecutionMode) -> float:
        high, low, close = value
        highest = self._highest.execute(high, mode)
        lowest = self._lowest.execute(low, mode)
        if highest == lowest:
            result = FLAT_RANGE_VALUE
        else:
            result = 100.0 * (close - lowest) / (highest - lowest)
        if mode is ExecutionMode.COMMIT:
            self._current = result
        return result

    def current(self) -> float:
        return self._current
