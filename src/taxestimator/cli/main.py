"""CLI entry point for taxestimator."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from taxestimator.config.defaults import default_history_settings, default_store_path
from taxestimator.config.schema import FILING_STATUSES, STATE_CATEGORIES, CalculationInput
from taxestimator.core.engine import TaxCalculator
from taxestimator.history.backends import JsonFileStore
from taxestimator.history.store import HistoryStore
from taxestimator.io.report import breakdown_lines, history_lines, summary_lines
from taxestimator.io.serialize import dump_result
from taxestimator.utils.exceptions import InvalidInputError


def _open_history(ctx: click.Context) -> HistoryStore:
    store_path: Path = ctx.obj["store_path"]
    return HistoryStore.open(JsonFileStore(store_path), default_history_settings())


@click.group()
@click.version_option(package_name="taxestimator")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="TAXESTIMATOR_STORE",
    help="JSON file holding calculation history.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, store_path: Path | None, verbose: bool) -> None:
    """Progressive income tax estimates with history."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["store_path"] = store_path if store_path is not None else default_store_path()


@cli.command()
@click.option("--income", type=float, default=None, help="Gross annual income.")
@click.option(
    "--filing-status",
    type=click.Choice(FILING_STATUSES),
    default=None,
    help="Filing status.",
)
@click.option(
    "--deductions",
    type=float,
    default=0.0,
    show_default=True,
    help="Custom deduction; 0 uses the standard deduction.",
)
@click.option(
    "--state",
    type=click.Choice(STATE_CATEGORIES),
    default="none",
    show_default=True,
    help="State tax category.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write result JSON.",
)
@click.option("--no-history", is_flag=True, help="Do not record this calculation.")
@click.pass_context
def calculate(
    ctx: click.Context,
    income: float | None,
    filing_status: str | None,
    deductions: float,
    state: str,
    output_path: Path | None,
    no_history: bool,
) -> None:
    """Calculate federal and state income tax."""
    try:
        calc_input = CalculationInput(
            income=income,
            filing_status=filing_status,
            custom_deductions=deductions,
            state=state,
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc

    history_store = None if no_history else _open_history(ctx)
    calculator = TaxCalculator(history=history_store)
    try:
        result = calculator.calculate(calc_input)
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc

    for line in summary_lines(result):
        click.echo(line)
    click.echo("\nTax Breakdown")
    for line in breakdown_lines(result):
        click.echo(f"  {line}")

    if output_path is not None:
        output_path.write_text(dump_result(result))
        click.echo(f"\nResult written to {output_path}")


@cli.command()
@click.pass_context
def history(ctx: click.Context) -> None:
    """Show recent calculations, most recent first."""
    for line in history_lines(_open_history(ctx).entries):
        click.echo(line)


@cli.command("clear-history")
@click.pass_context
def clear_history(ctx: click.Context) -> None:
    """Delete all saved calculations."""
    _open_history(ctx).clear()
    click.echo("History cleared.")


if __name__ == "__main__":
    cli()
