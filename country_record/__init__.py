"""
country_record - a mutable country record with replayable mutation actions.

This package provides:

- `Country`, a record of name, population, area and capital with an on-demand
  population density (zero when the area is zero)
- Frozen action models (`SetPopulation`, `SetArea`, `SetCapital`) that a
  record owns and replays in order on `execute()`
- Settings, logging helpers, a rich reporter and a typer CLI
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from country_record.config import Settings, get_settings
from country_record.domain.actions import (
    Action,
    CountryAction,
    SetArea,
    SetCapital,
    SetPopulation,
    UnsupportedActionError,
    apply_action,
    parse_action,
)
from country_record.domain.country import Country, InvalidCountryValueError
from country_record.reporter import country_row, render_countries
from country_record.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Country",
    "InvalidCountryValueError",
    "Action",
    "CountryAction",
    "SetPopulation",
    "SetArea",
    "SetCapital",
    "UnsupportedActionError",
    "apply_action",
    "parse_action",
    # Reporting
    "country_row",
    "render_countries",
    # Logging
    "configure_logging",
    "get_logger",
]
