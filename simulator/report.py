"""Console rendering of a projection with rich."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from simulator.core.projection import summarize
from simulator.models import InvestmentParameters, ProjectionResult


def fmt_money(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def fmt_rate(rate: float) -> str:
    return f"{rate * 100:.2f}%"


def render_parameters(console: Console, params: InvestmentParameters) -> None:
    t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Field", style="cyan")
    t.add_column("Value", justify="right")
    t.add_row("Initial capital", fmt_money(params.initial_capital))
    t.add_row("Monthly contribution", fmt_money(params.monthly_contribution))
    t.add_row("Term", f"{params.term_years} years")
    t.add_row("Annual rate", fmt_rate(params.annual_rate))
    console.print(t)


def render_table(console: Console, result: ProjectionResult) -> None:
    t = Table(title="Year-by-year projection", box=box.SIMPLE_HEAVY)
    t.add_column("Year", justify="right", style="cyan")
    t.add_column("Ending balance", justify="right")
    t.add_column("Total contributions", justify="right")
    t.add_column("Total return", justify="right", style="green")
    for row in result.years:
        t.add_row(
            str(row.year),
            fmt_money(row.ending_balance),
            fmt_money(row.cumulative_contributions),
            fmt_money(row.cumulative_return),
        )
    console.print(t)


def render_summary(console: Console, result: ProjectionResult) -> None:
    summary = summarize(result)
    console.print(Panel(
        f"After {summary.term_years} years your investment would reach "
        f"[bold green]{fmt_money(summary.final_balance)}[/bold green]\n\n"
        f"Initial capital:      {fmt_money(summary.initial_capital)}\n"
        f"Total contributions:  {fmt_money(summary.total_contributions)}\n"
        f"Return (gain):        {fmt_money(summary.total_return)}",
        title="Summary",
        expand=False,
    ))


def render_projection(console: Console, result: ProjectionResult) -> None:
    """Parameters header, the yearly table and the final summary."""
    console.print()
    console.print(Panel("[bold]Detailed investment projection[/bold]", expand=False))
    render_parameters(console, result.parameters)
    render_table(console, result)
    render_summary(console, result)
