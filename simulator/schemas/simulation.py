"""Data contracts for the simulation endpoints."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from simulator.models import InvestmentParameters, SimulationSummary, YearlyProjection

# Values arrive exactly as typed by the user; parsing happens in the validator.
RawValue = Optional[Union[StrictInt, StrictFloat, StrictStr]]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SimulationRequest(_CamelModel):
    """Raw inputs for one simulation run."""

    initial_capital: RawValue = Field(None, description="Initial capital, currency units.")
    monthly_contribution: RawValue = Field(None, description="Monthly deposit, currency units.")
    term_years: RawValue = Field(None, description="Term in whole years.")
    annual_rate: RawValue = Field(
        None,
        description="Annual interest rate in percent (e.g. 8.5 for 8.5%).",
    )


class FieldError(_CamelModel):
    field: str
    message: str


class ValidationErrorResponse(_CamelModel):
    detail: List[FieldError]


class LimitsResponse(_CamelModel):
    min_years: int
    max_years: int


class SimulationResponse(_CamelModel):
    """Projection table plus its summary."""

    parameters: InvestmentParameters
    projection: List[YearlyProjection]
    summary: SimulationSummary
