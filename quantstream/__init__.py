"""quantstream: streaming statistical indicators over sequential observations."""

from quantstream.core.errors import ErrorKind, IndicatorError
from quantstream.indicators import (
    BaseIndicator,
    BollingerBands,
    ExecutionMode,
    ExponentialMovingAverage,
    MaximumPeriod,
    MinimumPeriod,
    MovingAverageConvergenceDivergence,
    RelativeStrengthIndex,
    SimpleMovingAverage,
    StochasticMomentumOscillator,
    WildersSmoothing,
)
from quantstream.utils.window import BoundedWindow

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "IndicatorError",
    "ExecutionMode",
    "BaseIndicator",
    "BoundedWindow",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "WildersSmoothing",
    "MaximumPeriod",
    "MinimumPeriod",
    "MovingAverageConvergenceDivergence",
    "RelativeStrengthIndex",
    "BollingerBands",
    "StochasticMomentumOscillator",
]
