"""Moving Average Convergence/Divergence (MACD) indicator implementation."""

import logging

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .ema import ExponentialMovingAverage
from .indicator_configs import MACDConfig


class MovingAverageConvergenceDivergence(BaseIndicator[float, float]):
    """Difference between a short and a long Exponential Moving Average.

    Both EMAs receive every observation under the caller's execution mode, so
    peeking leaves them untouched. The first output is always 0 since both EMAs
    emit their first input unchanged.
    """

    config_class = MACDConfig
    output_suffixes = ('macd',)

    def __init__(
        self,
        short_period: int,
        long_period: int,
        *,
        name: str = "macd",
        price_column: str = "close",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a MACD from two EMA periods.

        The periods are independent and need not be ordered.

        Raises:
            IndicatorError: If either period is 0
        """
        config = build_config(
            MACDConfig,
            indicator_name=name,
            short_period=short_period,
            long_period=long_period,
            price_column=price_column,
        )
        super().__init__(config, logger)

    @classmethod
    def default_config(cls) -> MACDConfig:
        """Return the canonical MACD configuration."""
        return MACDConfig(indicator_name="macd", short_period=12, long_period=26)

    def _initialize_state(self) -> None:
        self._short_ema = ExponentialMovingAverage(
            self.config.short_period, name=f"{self.name}_short", logger=self.logger
        )
        self._long_ema = ExponentialMovingAverage(
            self.config.long_period, name=f"{self.name}_long", logger=self.logger
        )

    def execute(self, value: float, mode: ExecutionMode) -> float:
        short_ema = self._short_ema.execute(value, mode)
        long_ema = self._long_ema.execute(value, mode)
        return short_ema - long_ema

    def current(self) -> float:
        return self._short_ema.current() - self._long_ema.current()
