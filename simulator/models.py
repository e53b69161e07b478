from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

MONTHS_PER_YEAR = 12


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class InvestmentParameters(_FrozenModel):
    """Validated inputs for one simulation run."""

    initial_capital: float = Field(..., ge=0, description="Capital invested at the start.")
    monthly_contribution: float = Field(..., ge=0, description="Deposit made every month.")
    term_years: int = Field(..., ge=1, description="Number of years to project.")
    annual_rate: float = Field(
        ...,
        gt=0,
        description="Annual interest rate as a decimal (e.g. 0.085 for 8.5%).",
    )

    @property
    def annual_contribution(self) -> float:
        return self.monthly_contribution * MONTHS_PER_YEAR

    @property
    def annual_rate_percent(self) -> float:
        return self.annual_rate * 100


class YearlyProjection(_FrozenModel):
    """State of the account at the end of one year."""

    year: int = Field(..., ge=1)
    interest_earned: float
    cumulative_contributions: float
    cumulative_return: float
    ending_balance: float


class ProjectionResult(_FrozenModel):
    """Year-by-year projection for a single set of parameters."""

    parameters: InvestmentParameters
    years: Tuple[YearlyProjection, ...]

    @model_validator(mode="after")
    def ensure_complete(self) -> "ProjectionResult":
        if len(self.years) != self.parameters.term_years:
            raise ValueError("projection must contain one row per year of the term")
        for index, row in enumerate(self.years, start=1):
            if row.year != index:
                raise ValueError(f"projection rows out of order at year {row.year}")
        return self

    def __len__(self) -> int:
        return len(self.years)

    def __getitem__(self, index: int) -> YearlyProjection:
        return self.years[index]

    @property
    def final(self) -> YearlyProjection:
        return self.years[-1]


class SimulationSummary(_FrozenModel):
    """Headline figures shown once the projection is complete."""

    term_years: int
    initial_capital: float
    annual_rate: float
    total_contributions: float
    total_return: float
    final_balance: float
