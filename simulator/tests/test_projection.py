from __future__ import annotations

from math import isclose, isfinite

import pytest
from pydantic import ValidationError

from simulator.core.projection import project, summarize
from simulator.models import InvestmentParameters


def params(initial=1000.0, monthly=100.0, years=1, rate=0.12) -> InvestmentParameters:
    return InvestmentParameters(
        initial_capital=initial,
        monthly_contribution=monthly,
        term_years=years,
        annual_rate=rate,
    )


def test_single_year_adds_contributions_before_interest():
    """
    1000 start + 1200 contributions = 2200, then 12% interest = 264.
    """
    result = project(params())

    assert len(result) == 1
    row = result[0]
    assert row.year == 1
    assert isclose(row.cumulative_contributions, 1200.0)
    assert isclose(row.interest_earned, 264.0)
    assert isclose(row.ending_balance, 2464.0)
    assert isclose(row.cumulative_return, 264.0)


def test_zero_contribution_is_pure_compounding():
    result = project(params(monthly=0.0, years=2, rate=0.10))

    assert isclose(result[0].ending_balance, 1100.0)
    assert isclose(result[1].ending_balance, 1210.0)
    for row in result.years:
        assert isclose(row.ending_balance, 1000.0 * 1.10 ** row.year)
        assert row.cumulative_contributions == 0.0


def test_second_year_contributions_earn_interest_the_same_year():
    result = project(params(initial=0.0, monthly=100.0, years=2, rate=0.10))

    # year 1: 1200 * 1.1 = 1320; year 2: (1320 + 1200) * 1.1 = 2772
    assert isclose(result[0].ending_balance, 1320.0)
    assert isclose(result[1].ending_balance, 2772.0)
    assert isclose(result[1].cumulative_contributions, 2400.0)
    assert isclose(result[1].cumulative_return, 372.0)


@pytest.mark.parametrize("years", [1, 7, 50])
def test_one_row_per_year_in_order(years):
    result = project(params(years=years, rate=0.085))

    assert len(result) == years
    assert [row.year for row in result.years] == list(range(1, years + 1))
    assert result.final.year == years


def test_rows_reconcile_and_never_decrease():
    p = params(initial=2500.0, monthly=250.0, years=30, rate=0.07)
    result = project(p)

    prev = p.initial_capital
    for row in result.years:
        total = p.initial_capital + row.cumulative_contributions + row.cumulative_return
        assert isclose(row.ending_balance, total, rel_tol=1e-9)
        assert isclose(row.cumulative_contributions, 250.0 * 12 * row.year)
        assert row.ending_balance >= prev
        prev = row.ending_balance


def test_projection_is_deterministic():
    p = params(initial=1234.56, monthly=78.9, years=25, rate=0.0625)

    assert project(p) == project(p)


def test_zero_start_and_zero_contribution_stays_at_zero():
    result = project(params(initial=0.0, monthly=0.0, years=3, rate=0.05))

    for row in result.years:
        assert row.ending_balance == 0.0
        assert row.cumulative_return == 0.0


def test_summary_uses_final_row():
    result = project(params(initial=1000.0, monthly=100.0, years=3, rate=0.12))
    summary = summarize(result)

    assert summary.term_years == 3
    assert summary.initial_capital == 1000.0
    assert isclose(summary.annual_rate, 0.12)
    assert summary.final_balance == result.final.ending_balance
    assert summary.total_contributions == result.final.cumulative_contributions
    assert summary.total_return == result.final.cumulative_return


def test_result_is_read_only():
    result = project(params())

    with pytest.raises(ValidationError):
        result.years[0].ending_balance = 0.0  # type: ignore[misc]
    assert isinstance(result.years, tuple)


def test_accepted_extreme_inputs_project_to_finite_rows():
    from simulator.core.validation import validate

    p = validate(
        {"initialCapital": "1e300", "monthlyContribution": "1e290", "termYears": "50", "annualRate": "10"}
    )
    assert isinstance(p, InvestmentParameters)

    result = project(p)

    assert len(result) == 50
    assert isfinite(result.final.ending_balance)
    assert isfinite(result.final.cumulative_return)
