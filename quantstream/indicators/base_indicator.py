"""Execution contract shared by every streaming indicator.

Indicators consume one observation at a time. A single primitive, ``execute``,
handles both execution modes:

* ``ExecutionMode.COMMIT`` permanently incorporates the observation.
* ``ExecutionMode.PEEK`` computes the output the observation *would* produce,
  leaving every piece of internal state (including that of nested
  sub-indicators) untouched.

``apply``, ``evaluate`` and ``current`` are the caller facing operations built on
top of it. Only construction can fail; the streaming calls never raise.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import StrEnum
from typing import Any, ClassVar, Generic, Self, TypeVar

import numpy as np
import pandas as pd
from pydantic import ValidationError

from quantstream.core.errors import ErrorKind, IndicatorError
from quantstream.core.logger import get_quantstream_logger

from .indicator_configs import IndicatorConfig

InputT = TypeVar('InputT')
OutputT = TypeVar('OutputT')
ConfigT = TypeVar('ConfigT', bound=IndicatorConfig)


class ExecutionMode(StrEnum):
    """Whether an execution mutates indicator state."""

    COMMIT = "commit"
    PEEK = "peek"


def build_config(config_cls: type[ConfigT], **values: Any) -> ConfigT:
    """Validate ``values`` into ``config_cls``.

    Raises:
        IndicatorError: With kind ``InvalidInput`` when validation fails
    """
    try:
        return config_cls(**values)
    except ValidationError as e:
        messages = "; ".join(_clean_message(error['msg']) for error in e.errors())
        raise IndicatorError(ErrorKind.INVALID_INPUT, messages) from e


def _clean_message(message: str) -> str:
    # pydantic prefixes messages raised from validators
    return message.removeprefix("Value error, ")


class BaseIndicator(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all streaming indicators.

    Subclasses implement ``execute`` and ``current``. Each instance is owned by
    exactly one caller; give every concurrently processed series its own
    instance.
    """

    config_class: ClassVar[type[IndicatorConfig]] = IndicatorConfig
    input_columns: ClassVar[tuple[str, ...] | None] = None
    output_suffixes: ClassVar[tuple[str, ...]] = ('value',)

    def __init__(self, config: IndicatorConfig, logger: logging.Logger | None = None) -> None:
        """Initialize the indicator with a validated configuration.

        Args:
            config: Indicator configuration parameters
            logger: Optional logger instance
        """
        if not isinstance(config, self.config_class):
            raise IndicatorError(
                ErrorKind.INVALID_INPUT,
                f"{type(self).__name__} requires a {self.config_class.__name__}, "
                f"got {type(config).__name__}",
            )
        self.config = config
        self.logger = logger or get_quantstream_logger(__name__)
        self.name = config.indicator_name
        self.type = config.indicator_type
        self._initialize_state()

        self.logger.debug(f"Initialized indicator: {self.name} (type: {self.type})")

    @classmethod
    def default_config(cls) -> IndicatorConfig:
        """Return the default configuration for the indicator implementation."""
        raise NotImplementedError(f"{cls.__name__} must define default_config()")

    @classmethod
    def from_config(cls, config: IndicatorConfig, logger: logging.Logger | None = None) -> Self:
        """Create an indicator from an already validated configuration."""
        instance = cls.__new__(cls)
        BaseIndicator.__init__(instance, config, logger)
        return instance

    @abstractmethod
    def _initialize_state(self) -> None:
        """Create the mutable state described by ``self.config``."""

    @abstractmethod
    def execute(self, value: InputT, mode: ExecutionMode) -> OutputT:
        """Run one observation through the indicator.

        Args:
            value: The new observation
            mode: ``COMMIT`` to incorporate it, ``PEEK`` to leave state untouched

        Returns:
            The output after incorporating ``value``
        """

    @abstractmethod
    def current(self) -> OutputT:
        """Return the last committed output without consuming new input."""

    def apply(self, value: InputT) -> OutputT:
        """Incorporate ``value`` permanently and return the new output."""
        return self.execute(value, ExecutionMode.COMMIT)

    def evaluate(self, value: InputT) -> OutputT:
        """Return the output ``value`` would produce without incorporating it."""
        return self.execute(value, ExecutionMode.PEEK)

    def apply_all(self, values: Iterable[InputT]) -> list[OutputT]:
        """Commit a sequence of observations, returning every output in order."""
        return [self.apply(value) for value in values]

    def get_indicator_info(self) -> dict[str, Any]:
        """Get indicator information and current configuration.

        Returns:
            Dictionary with indicator information
        """
        return {
            "name": self.name,
            "type": self.type,
            "class": type(self).__name__,
            "config": self.config.model_dump(),
        }

    def get_indicator_columns(self) -> list[str]:
        """Get the column names that ``calculate`` adds to a DataFrame."""
        base_name = self.name.lower()
        return [f"{base_name}_{suffix}" for suffix in self.output_suffixes]

    def get_required_columns(self) -> list[str]:
        """Get list of data columns read by ``calculate``."""
        if self.input_columns is None:
            return [self.config.price_column]
        return list(self.input_columns)

    def validate_data(self, data: pd.DataFrame) -> bool:
        """Validate input data format and required columns.

        Args:
            data: DataFrame to validate

        Returns:
            True if data is valid, raises exception otherwise
        """
        if data is None or data.empty:
            raise ValueError("Input data cannot be None or empty")

        missing_columns = [col for col in self.get_required_columns() if col not in data.columns]
        if missing_columns:
            raise ValueError(f"Missing required columns: {missing_columns}")
        return True

    def calculate(self, data: pd.DataFrame) -> pd.DataFrame:
        """Commit every row of ``data`` in order and append the outputs as columns.

        Args:
            data: Observations, oldest first

        Returns:
            Copy of ``data`` with the indicator columns added; absent outputs are NaN

        Raises:
            ValueError: If data is empty or missing required columns
        """
        self.validate_data(data)
        result = data.copy()

        columns = self.get_required_columns()
        rows = data[columns].to_numpy(dtype=float)
        outputs = np.full((len(rows), len(self.output_suffixes)), np.nan)
        for index, row in enumerate(rows):
            outputs[index] = self._to_row(self.apply(self._from_row(row)))

        for position, column in enumerate(self.get_indicator_columns()):
            result[column] = outputs[:, position]

        self.logger.debug(f"Calculated {self.name} over {len(rows)} rows")
        return result

    def _from_row(self, row: np.ndarray) -> Any:
        if self.input_columns is None:
            return float(row[0])
        return tuple(float(x) for x in row)

    @staticmethod
    def _to_row(output: Any) -> tuple[float, ...]:
        if output is None:
            return (np.nan,)
        if isinstance(output, tuple):
            return output
        return (output,)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
