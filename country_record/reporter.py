from __future__ import annotations

from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from country_record.domain.country import Country


def country_row(country: Country, density_decimals: int = 2) -> List[str]:
    """
    Format one record as table cells: name, population, area, capital, density.
    """
    return [
        country.name,
        f"{country.population:,.0f}",
        f"{country.area:,.0f}",
        country.capital,
        f"{country.population_density():,.{density_decimals}f}",
    ]


def render_countries(
    countries: Iterable[Country],
    console: Optional[Console] = None,
    density_decimals: int = 2,
) -> None:
    """
    Render records as a rich table, densest first.
    """
    console = console or Console()
    countries = list(countries)

    if not countries:
        console.print("[yellow]No countries to display.[/yellow]")
        return

    table = Table(
        title="Countries",
        box=box.ROUNDED,
        caption="Sorted by Density (descending)",
    )

    table.add_column("Country", style="cyan", no_wrap=True)
    table.add_column("Population", justify="right", style="magenta")
    table.add_column("Area (km^2)", justify="right", style="green")
    table.add_column("Capital", style="blue")
    table.add_column("Density (/km^2)", justify="right", style="bold green")

    for country in sorted(countries, key=lambda c: c.population_density(), reverse=True):
        table.add_row(*country_row(country, density_decimals))

    console.print(table)


__all__ = ["country_row", "render_countries"]
