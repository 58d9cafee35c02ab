from __future__ import annotations

import sys
from typing import List, Optional

import typer
from pydantic import ValidationError

from country_record.config import get_settings
from country_record.domain.actions import CountryAction, action_kinds, parse_action
from country_record.domain.country import Country, InvalidCountryValueError
from country_record.reporter import render_countries
from country_record.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Country record CLI.")
log = get_logger(__name__)


def _parse_action_token(token: str) -> CountryAction:
    """
    Turn `kind=value` into an action. `kind` may omit the `set_` prefix,
    e.g. `capital=New Capital` or `set_area=250000`.
    """
    kind, sep, value = token.partition("=")
    if not sep:
        raise typer.BadParameter(f"Expected kind=value, got '{token}'.")
    kind = kind.strip().lower()
    if not kind.startswith("set_"):
        kind = f"set_{kind}"
    try:
        return parse_action({"kind": kind, "value": value})
    except ValidationError as exc:
        raise typer.BadParameter(
            f"Invalid action '{token}'. Kinds: {', '.join(action_kinds())}. ({exc.error_count()} error(s))"
        ) from exc


def _build_country(
    name: str,
    population: float,
    area: float,
    capital: str,
    action_tokens: Optional[List[str]],
) -> Country:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    actions = [_parse_action_token(token) for token in action_tokens or []]
    try:
        country = Country(
            name, population, area, capital, actions, strict=settings.strict_validation
        )
        country.execute()
    except InvalidCountryValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    log.info(
        f"Built {name} with {len(actions)} action(s)",
        extra={"country": name, "actions": len(actions)},
    )
    return country


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"strict={settings.strict_validation} density_decimals={settings.density_decimals}"
    )


@app.command()
def show(
    name: str = typer.Argument(..., help="Country name."),
    population: float = typer.Argument(..., help="Population."),
    area: float = typer.Argument(..., help="Area in km^2."),
    capital: str = typer.Argument(..., help="Capital city."),
    action: Optional[List[str]] = typer.Option(
        None,
        "--action",
        "-a",
        help="Action to replay, as kind=value (population, area, capital). Repeatable.",
    ),
    table: bool = typer.Option(False, "--table", "-t", help="Render as a table."),
) -> None:
    """
    Build a country, replay the given actions and print it.
    """
    country = _build_country(name, population, area, capital, action)
    decimals = get_settings().density_decimals

    if table:
        render_countries([country], density_decimals=decimals)
        return

    typer.echo(country.dump(), nl=False)
    typer.echo(f"Density: {country.population_density():.{decimals}f} per km^2")


@app.command()
def density(
    name: str = typer.Argument(..., help="Country name."),
    population: float = typer.Argument(..., help="Population."),
    area: float = typer.Argument(..., help="Area in km^2."),
    capital: str = typer.Argument(..., help="Capital city."),
) -> None:
    """
    Print only the population density.
    """
    country = _build_country(name, population, area, capital, None)
    typer.echo(f"{country.population_density():.{get_settings().density_decimals}f}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
