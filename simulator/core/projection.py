"""Year-by-year compound interest projection."""

from __future__ import annotations

import logging
from typing import List

from simulator.models import (
    MONTHS_PER_YEAR,
    InvestmentParameters,
    ProjectionResult,
    SimulationSummary,
    YearlyProjection,
)

logger = logging.getLogger(__name__)


def projected_balance(
    initial_capital: float,
    monthly_contribution: float,
    term_years: int,
    annual_rate: float,
) -> float:
    """Final balance only, using the same order of operations as :func:`project`."""
    annual_contribution = monthly_contribution * MONTHS_PER_YEAR
    balance = initial_capital
    for _ in range(term_years):
        balance += annual_contribution
        balance += balance * annual_rate
    return balance


def project(params: InvestmentParameters) -> ProjectionResult:
    """
    Build the projection table for years 1..term_years.

    Order of operations (per year):
      1) Add the whole year's contributions (monthly * 12) as a lump sum.
      2) Apply interest on the post-contribution balance (annual compounding).
      3) Record the row; no rounding, that is left to presentation.
    """
    annual_contribution = params.annual_contribution
    balance = params.initial_capital

    rows: List[YearlyProjection] = []
    for year in range(1, params.term_years + 1):
        balance += annual_contribution
        interest = balance * params.annual_rate
        balance += interest

        contributions = annual_contribution * year
        rows.append(
            YearlyProjection(
                year=year,
                interest_earned=interest,
                cumulative_contributions=contributions,
                cumulative_return=balance - params.initial_capital - contributions,
                ending_balance=balance,
            )
        )

    logger.debug(
        "projected %d years, final balance %.2f", params.term_years, balance
    )
    return ProjectionResult(parameters=params, years=tuple(rows))


def summarize(result: ProjectionResult) -> SimulationSummary:
    """Headline figures taken from the last year of the projection."""
    final = result.final
    return SimulationSummary(
        term_years=result.parameters.term_years,
        initial_capital=result.parameters.initial_capital,
        annual_rate=result.parameters.annual_rate,
        total_contributions=final.cumulative_contributions,
        total_return=final.cumulative_return,
        final_balance=final.ending_balance,
    )
