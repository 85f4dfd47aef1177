"""Relative Strength Index (RSI) indicator implementation."""

import logging

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import RSIConfig
from .wilders_smoothing import WildersSmoothing


def split_change(value: float, previous: float) -> tuple[float, float]:
    """Split the change from ``previous`` to ``value`` into (gain, loss)."""
    if value > previous:
        return value - previous, 0.0
    return 0.0, previous - value


def relative_strength_index(average_gain: float | None, average_loss: float | None) -> float | None:
    """Combine smoothed gains and losses into an RSI reading.

    A zero average loss reads as 100 instead of dividing by zero.
    """
    if average_gain is None or average_loss is None:
        return None
    if average_loss == 0.0:
        return 100.0
    return 100.0 - 100.0 / (1.0 + average_gain / average_loss)


class RelativeStrengthIndex(BaseIndicator[float, float | None]):
    """Relative Strength Index momentum oscillator.

    Average gains and losses are tracked with two Wilders Smoothings. The
    indicator moves through three states:

    1. Awaiting the first observation, which only becomes the reference price.
    2. Seeding: changes are fed to both smoothings, no output is produced. This
       lasts until ``period + seed_period`` observations have been committed.
    3. Seeded: ``100 - 100 / (1 + gain / loss)``, or 100 when the average loss
       is exactly zero.
    """

    config_class = RSIConfig
    output_suffixes = ('rsi',)

    def __init__(
        self,
        period: int,
        seed_period: int = 0,
        *,
        name: str = "rsi",
        price_column: str = "close",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create an RSI.

        Args:
            period: Period of both Wilders Smoothings
            seed_period: Extra observations to absorb before producing values
            name: Indicator name, used as DataFrame column prefix
            price_column: Column read by ``calculate``
            logger: Optional logger instance

        Raises:
            IndicatorError: If ``period`` is 0
        """
        config = build_config(
            RSIConfig,
            indicator_name=name,
            period=period,
            seed_period=seed_period,
            price_column=price_column,
        )
        super().__init__(config, logger)

    @classmethod
    def default_config(cls) -> RSIConfig:
        """Return the canonical RSI configuration."""
        return RSIConfig(indicator_name="rsi", period=14)

    def _initialize_state(self) -> None:
        self._gains = WildersSmoothing(
            self.config.period, name=f"{self.name}_gain", logger=self.logger
        )
        self._losses = WildersSmoothing(
            self.config.period, name=f"{self.name}_loss", logger=self.logger
        )
        self._is_seeded = False
        self._seed_values = 0
        self._has_output = False
        self._previous: float | None = None

    @property
    def is_seeded(self) -> bool:
        return self._is_seeded

    def execute(self, value: float, mode: ExecutionMode) -> float | None:
        commit = mode is ExecutionMode.COMMIT
        if self._previous is None:
            if commit:
                self._previous = value
                self._seed_values += 1
            return None

        gain, loss = split_change(value, self._previous)
        average_gain = self._gains.execute(gain, mode)
        average_loss = self._losses.execute(loss, mode)

        if not self._is_seeded:
            if commit:
                self._seed_values += 1
                if self._seed_values >= self.config.seed_threshold:
                    self._is_seeded = True
                self._previous = value
            return None

        if commit:
            self._previous = value
            self._has_output = True
        return relative_strength_index(average_gain, average_loss)

    def current(self) -> float | None:
        if not self._has_output:
            return None
        return relative_strength_index(self._gains.current(), self._losses.current())
