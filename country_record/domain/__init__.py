"""
Domain package for country_record.

Exports the country record and the actions that mutate it. Keep this package
free of configuration and presentation concerns.
"""

from country_record.domain.actions import (
    Action,
    CountryAction,
    SetArea,
    SetCapital,
    SetPopulation,
    UnsupportedActionError,
    action_kinds,
    apply_action,
    parse_action,
)
from country_record.domain.country import Country, InvalidCountryValueError

__all__ = [
    "Action",
    "Country",
    "CountryAction",
    "InvalidCountryValueError",
    "SetArea",
    "SetCapital",
    "SetPopulation",
    "UnsupportedActionError",
    "action_kinds",
    "apply_action",
    "parse_action",
]
