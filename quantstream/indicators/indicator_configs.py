"""Indicator configuration models.

Every indicator is parameterised by a frozen pydantic model. Validation runs
once when the model is built, which is the only point at which an indicator can
fail; after construction the configuration never changes.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PERIOD_ERROR_MESSAGE = "Period must be greater than 0"


class IndicatorConfig(BaseModel):
    """Configuration shared by all single-period indicators."""

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        json_schema_extra={
            'component': 'indicator',
            'yaml_example': {
                '__config_class__': 'IndicatorConfig',
                'indicator_name': 'sma',
                'indicator_type': 'trend',
                'period': 14,
            },
        },
    )

    indicator_name: str = Field(description="Name of the indicator, used as column prefix")
    indicator_type: Literal['trend', 'momentum', 'volatility'] = Field(
        default='trend', description="Type/category of indicator"
    )
    period: int = Field(default=14, description="Lookback period for calculations")
    price_column: str = Field(
        default="close", description="Column read by the DataFrame helper for scalar inputs"
    )

    @field_validator('indicator_name')
    @classmethod
    def validate_indicator_name(cls, v: str) -> str:
        """Ensure indicator name is a non-empty string."""
        if not v.strip():
            raise ValueError("indicator_name must be a non-empty string")
        return v.strip()

    @field_validator('indicator_type', mode='before')
    @classmethod
    def normalise_indicator_type(cls, v: Any) -> Any:
        """Accept indicator types regardless of case and surrounding whitespace."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator('period')
    @classmethod
    def validate_positive_period(cls, v: int) -> int:
        """Validate that the period is positive."""
        if v <= 0:
            raise ValueError(PERIOD_ERROR_MESSAGE)
        return v


class MACDConfig(IndicatorConfig):
    """Configuration for Moving Average Convergence/Divergence.

    The two periods are independent; no ordering between them is enforced.
    """

    indicator_type: Literal['trend', 'momentum', 'volatility'] = 'momentum'
    short_period: int = Field(default=12, description="Period of the short EMA")
    long_period: int = Field(default=26, description="Period of the long EMA")

    @field_validator('short_period', 'long_period')
    @classmethod
    def validate_positive_periods(cls, v: int) -> int:
        """Validate that both EMA periods are positive."""
        if v <= 0:
            raise ValueError(PERIOD_ERROR_MESSAGE)
        return v


class RSIConfig(IndicatorConfig):
    """Configuration for the Relative Strength Index."""

    indicator_type: Literal['trend', 'momentum', 'volatility'] = 'momentum'
    seed_period: int = Field(
        default=0,
        description="Extra observations required beyond period before values are produced",
    )

    @field_validator('seed_period')
    @classmethod
    def validate_seed_period(cls, v: int) -> int:
        """Validate that the extra seeding period is not negative."""
        if v < 0:
            raise ValueError("Seed period must not be negative")
        return v

    @property
    def seed_threshold(self) -> int:
        """Number of committed observations after which the RSI is seeded."""
        return self.period + self.seed_period


class BollingerBandsConfig(IndicatorConfig):
    """Configuration for Bollinger Bands."""

    indicator_type: Literal['trend', 'momentum', 'volatility'] = 'volatility'
    standard_deviations: float = Field(
        default=2.0, description="Standard deviation multiplier for the outer bands"
    )


class StochasticConfig(IndicatorConfig):
    """Configuration for the Stochastic Momentum Oscillator."""

    indicator_type: Literal['trend', 'momentum', 'volatility'] = 'momentum'
