"""Simple Moving Average (SMA) indicator implementation."""

import logging

from quantstream.utils.window import BoundedWindow

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import IndicatorConfig


class SimpleMovingAverage(BaseIndicator[float, float]):
    """Simple Moving Average trend indicator.

    Emits from the first observation: the output is the arithmetic mean of the
    most recent ``min(n, period)`` committed observations.
    """

    output_suffixes = ('sma',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "sma",
        price_column: str = "close",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create an SMA over ``period`` observations.

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
        """Return the canonical SMA configuration."""
        return IndicatorConfig(indicator_name="sma", indicator_type="trend", period=20)

    def _initialize_state(self) -> None:
        self._values = BoundedWindow(self.config.period)

    def execute(self, value: float, mode: ExecutionMode) -> float:
        """Push ``value`` into the window (a copy of it when peeking) and average it."""
        window = self._values if mode is ExecutionMode.COMMIT else self._values.copy()
        window.push(value)
        return window.mean()

    def current(self) -> float:
        """Mean of the committed window, ``0.0`` before the first observation."""
        return self._values.mean()
