"""Maximum-over-Period indicator implementation."""

import logging

from quantstream.utils.window import BoundedWindow

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import IndicatorConfig


class MaximumPeriod(BaseIndicator[float, float]):
    """Highest observation over the last ``period`` commits.

    Peeking ignores the oldest retained observation, i.e. it reports the
    maximum the window would have after the eviction a following commit
    performs. This holds whether or not the window is full yet.
    """

    output_suffixes = ('max',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "max",
        price_column: str = "high",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a rolling maximum over ``period`` observations.

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
        """Return the canonical rolling maximum configuration."""
        return IndicatorConfig(
            indicator_name="max", indicator_type="trend", period=14, price_column="high"
        )

    def _initialize_state(self) -> None:
        self._values = BoundedWindow(self.config.period)

    def execute(self, value: float, mode: ExecutionMode) -> float:
        if mode is ExecutionMode.PEEK:
            return self._values.max_after_eviction(value)
        self._values.push(value)
        return self._values.max()

    def current(self) -> float:
        return self._values.max()
