"""Bollinger Bands indicator implementation."""

import logging

from quantstream.utils.window import BoundedWindow

from .base_indicator import BaseIndicator, ExecutionMode, build_config
from .indicator_configs import BollingerBandsConfig

Bar = tuple[float, float, float]
Bands = tuple[float, float, float]


class BollingerBands(BaseIndicator[Bar, Bands]):
    """Bollinger Bands volatility indicator.

    Consumes (high, low, close) bars and tracks the typical price
    ``(high + low + close) / 3`` over a window of ``period`` bars. Outputs
    ``(mean + k * std, mean, mean - k * std)`` where ``std`` is the population
    standard deviation and ``k`` is ``standard_deviations``.
    """

    config_class = BollingerBandsConfig
    input_columns = ('high', 'low', 'close')
    output_suffixes = ('upper', 'middle', 'lower')

    def __init__(
        self,
        period: int,
        standard_deviations: float = 2.0,
        *,
        name: str = "bollinger",
        logger: logging.Logger | None = None,
    ) -> None:
        """Create Bollinger Bands.

        Raises:
            IndicatorError: If ``period`` is 0
        """
        config = build_config(
            BollingerBandsConfig,
            indicator_name=name,
            period=period,
            standard_deviations=standard_deviations,
        )
        super().__init__(config, logger)

    @classmethod
    def default_config(cls) -> BollingerBandsConfig:
        """Return the canonical Bollinger Bands configuration."""
        return BollingerBandsConfig(indicator_name="bollinger", period=20, standard_deviations=2.0)

    def _initialize_state(self) -> None:
        self._typical_prices = BoundedWindow(self.config.period)

    def execute(self, value: Bar, mode: ExecutionMode) -> Bands:
        high, low, close = value
        window = self._typical_prices
        if mode is ExecutionMode.PEEK:
            window = window.copy()
        window.push((high + low + close) / 3.0)
        return self._bands(window)

    def current(self) -> Bands:
        return self._bands(self._typical_prices)

    def _bands(self, window: BoundedWindow) -> Bands:
        mean = window.mean()
        width = window.standard_deviation() * self.config.standard_deviations
        return mean + width, mean, mean - width
