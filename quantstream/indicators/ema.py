"""Exponential Moving Average (EMA) indicator implementation."""

import logging

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import IndicatorConfig


def calculate_ema(value: float, k: float, current: float, is_new: bool) -> float:
    """One step of the EMA recurrence; the first observation seeds the average."""
    if is_new:
        return value
    return (value - current) * k + current


class ExponentialMovingAverage(BaseIndicator[float, float]):
    """Exponential Moving Average trend indicator.

    The smoothing constant is ``k = 2 / (period + 1)``. The first committed
    observation is emitted unchanged and seeds the average.
    """

    output_suffixes = ('ema',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "ema",
        price_column: str = "close",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create an EMA with the given period.

        Raises:
            IndicatorError: If ``period`` is 0
        """
        config = build_config(
            IndicatorConfig,
            indicator_name=name,
            indicator_type="trend",
            period=period,
            price_column=price_column,
        )
        super().__init__(config, logger)

    @classmethod
    def default_config(cls) -> IndicatorConfig:
        """Return the canonical EMA configuration."""
        return IndicatorConfig(indicator_name="ema", indicator_type="trend", period=12)

    def _initialize_state(self) -> None:
        self.k = 2.0 / (self.config.period + 1)
        self._current = 0.0
        self._is_new = True

    def execute(self, value: float, mode: ExecutionMode) -> float:
        result = calculate_ema(value, self.k, self._current, self._is_new)
        if mode is ExecutionMode.COMMIT:
            self._current = result
            self._is_new = False
        return result

    def current(self) -> float:
        return self._current
