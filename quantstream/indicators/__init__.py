"""Streaming technical indicators.

Every indicator follows the same execution contract: ``apply`` commits an
observation, ``evaluate`` previews one without changing state, and ``current``
reports the last committed output.
"""

from .base_indicator import BaseIndicator, ExecutionMode
from .bollinger_bands import BollingerBands
from .config_loader import ConfigSourceError, load_indicator_config
from .ema import ExponentialMovingAverage
from .indicator_configs import (
    BollingerBandsConfig,
    IndicatorConfig,
    MACDConfig,
    RSIConfig,
    StochasticConfig,
)
from .macd import MovingAverageConvergenceDivergence
from .maximum_period import MaximumPeriod
from .minimum_period import MinimumPeriod
from .rsi import RelativeStrengthIndex
from .sma import SimpleMovingAverage
from .stochastic import StochasticMomentumOscillator
from .wilders_smoothing import WildersSmoothing

__all__ = [
    "BaseIndicator",
    "ExecutionMode",
    "IndicatorConfig",
    "MACDConfig",
    "RSIConfig",
    "BollingerBandsConfig",
    "StochasticConfig",
    "ConfigSourceError",
    "load_indicator_config",
    # Leaf indicators
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "WildersSmoothing",
    "MaximumPeriod",
    "MinimumPeriod",
    # Composite indicators
    "MovingAverageConvergenceDivergence",
    "RelativeStrengthIndex",
    "BollingerBands",
    "StochasticMomentumOscillator",
]
