"""Minimum-over-Period indicator implementation."""

import logging

from quantstream.utils.window import BoundedWindow

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import IndicatorConfig


class MinimumPeriod(BaseIndicator[float, float]):
    """Lowest observation over the last ``period`` commits.

    Peeking ignores the oldest retained observation, i.e. it reports the
    minimum the window would have after the eviction a following commit
    performs. This holds whether or not the window is full yet.
    """

    output_suffixes = ('min',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "min",
        price_column: str = "low",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a rolling minimum over ``period`` observations.

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
        """Return the canonical rolling minimum configuration."""
        return IndicatorConfig(
            indicator_name="min", indicator_type="trend", period=14, price_column="low"
        )

    def _initialize_state(self) -> None:
        self._values = BoundedWindow(self.config.period)

    def execute(self, value: float, mode: ExecutionMode) -> float:
        if mode is ExecutionMode.PEEK:
            return self._values.min_after_eviction(value)
        self._values.push(value)
        return self._values.min()

    def current(self) -> float:
        return self._values.min()
