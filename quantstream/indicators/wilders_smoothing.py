"""Wilders Smoothing indicator implementation."""

import logging

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import IndicatorConfig


def calculate_wilders(value: float, previous: float, period: int) -> float:
    """Wilders recurrence: ``(previous * (period - 1) + value) / period``."""
    return (previous * (period - 1) + value) / period


class WildersSmoothing(BaseIndicator[float, float | None]):
    """Wilders Smoothing (running moving average).

    The first ``period - 1`` committed observations seed the average and
    produce no output. The next commit emits the mean of the first ``period``
    observations; from then on the Wilders recurrence applies.
    """

    output_suffixes = ('wilders',)

    def __init__(
        self,
        period: int,
        *,
        name: str = "wilders",
        price_column: str = "close",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create a Wilders Smoothing with the given period.

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
        """Return the canonical Wilders Smoothing configuration."""
        return IndicatorConfig(indicator_name="wilders", indicator_type="trend", period=14)

    def _initialize_state(self) -> None:
        self._current = 0.0
        self._previous = 0.0
        self._seed_count = 1
        self._output: float | None = None

    @property
    def is_seeding(self) -> bool:
        return self._seed_count < self.config.period

    def execute(self, value: float, mode: ExecutionMode) -> float | None:
        period = self.config.period
        if self.is_seeding:
            if mode is ExecutionMode.COMMIT:
                # running sum in _current, running mean in _previous
                self._current += value
                self._previous = self._current / self._seed_count
                self._seed_count += 1
            return None

        result = calculate_wilders(value, self._previous, period)
        if mode is ExecutionMode.COMMIT:
            self._current = result
            self._previous = result
            self._output = result
        return result

    def current(self) -> float | None:
        """Last committed smoothed value, ``None`` until one has been produced."""
        return self._output
