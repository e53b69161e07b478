"""Command line entry points: interactive loop, one-shot projection, HTTP server."""

from __future__ import annotations

import logging
from typing import Optional

import click
from rich.console import Console

from simulator.config import SimulatorConfig, ValidationLimits
from simulator.core.projection import project, summarize
from simulator.core.validation import (
    ANNUAL_RATE,
    INITIAL_CAPITAL,
    MONTHLY_CONTRIBUTION,
    TERM_YEARS,
    ValidationFailure,
    collect_parameters,
    validate,
)
from simulator.errors import InputAbandoned, InvalidInput
from simulator.logging_config import configure_logging
from simulator.report import render_projection
from simulator.schemas.simulation import SimulationResponse

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True, style="bold red")

CANCEL_WORDS = {"q", "quit", "cancel"}


def _ask(field: str, message: str) -> Optional[str]:
    """Prompt once; ``None`` when the user cancels."""
    try:
        answer = click.prompt(message, default="", show_default=False)
    except click.Abort:
        return None
    if answer.strip().lower() in CANCEL_WORDS:
        return None
    return answer


def _notify(exc: InvalidInput) -> None:
    err_console.print(f"Error: {exc.message}")


def _confirm(message: str) -> bool:
    try:
        return click.confirm(message, default=False)
    except click.Abort:
        return False


def run_session(limits: ValidationLimits) -> None:
    """Ask, compute, show; repeat until the user declines another run."""
    console.print("[bold]Welcome to the investment simulator.[/bold] "
                  "Type 'q' at any prompt to cancel.")
    while True:
        try:
            params = collect_parameters(_ask, notify=_notify, limits=limits)
        except InputAbandoned:
            console.print("[yellow]Simulation cancelled by the user.[/yellow]")
        else:
            render_projection(console, project(params))

        if not _confirm("Run another simulation?"):
            break

    console.print("Thanks for using the investment simulator. Goodbye!")


@click.group(invoke_without_command=True)
@click.option("--log-level", default=None, help="Logging level (default from SIMULATOR_LOG_LEVEL or INFO).")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Compound-interest investment simulator."""
    config = SimulatorConfig()
    configure_logging(log_level or config.log_level)
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        run_session(config.limits)


@main.command()
@click.pass_obj
def run(config: SimulatorConfig) -> None:
    """Interactive simulation loop."""
    run_session(config.limits)


@main.command("project")
@click.option("--initial-capital", required=True, help="Initial capital.")
@click.option("--monthly-contribution", required=True, help="Monthly contribution.")
@click.option("--years", "term_years", required=True, help="Investment term in years.")
@click.option("--rate", "annual_rate", required=True, help="Annual interest rate in percent.")
@click.option("--json", "as_json", is_flag=True, help="Print the projection as JSON.")
@click.pass_context
def project_command(
    ctx: click.Context,
    initial_capital: str,
    monthly_contribution: str,
    term_years: str,
    annual_rate: str,
    as_json: bool,
) -> None:
    """Project a single scenario without prompting."""
    config: SimulatorConfig = ctx.obj
    outcome = validate(
        {
            INITIAL_CAPITAL: initial_capital,
            MONTHLY_CONTRIBUTION: monthly_contribution,
            TERM_YEARS: term_years,
            ANNUAL_RATE: annual_rate,
        },
        limits=config.limits,
    )
    if isinstance(outcome, ValidationFailure):
        for error in outcome.errors:
            err_console.print(f"Error: {error.message}")
        ctx.exit(2)

    result = project(outcome)
    if as_json:
        response = SimulationResponse(
            parameters=outcome,
            projection=list(result.years),
            summary=summarize(result),
        )
        click.echo(response.model_dump_json(by_alias=True, indent=2))
    else:
        render_projection(console, result)


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--debug", is_flag=True)
@click.pass_obj
def serve(config: SimulatorConfig, host: str, port: int, debug: bool) -> None:
    """Run the HTTP API."""
    from simulator.app import create_app

    logger.info("serving simulator API on %s:%d", host, port)
    create_app(config).run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
