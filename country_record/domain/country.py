"""
The mutable country record.

A `Country` holds a name, population, area (km^2) and capital, computes
population density on demand and owns an ordered list of actions that it
replays on `execute()`.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from country_record.domain.actions import CountryAction, apply_action
from country_record.utils.logging import get_logger

log = get_logger(__name__)


class InvalidCountryValueError(ValueError):
    """Raised in strict mode when population or area is negative."""


def _format_number(value: float) -> str:
    # Six significant digits, matching default iostream output (5e+06, 50000).
    return f"{value:g}"


class Country:
    """
    A single country record.

    Parameters
    ----------
    name : str
        Immutable identifier.
    population : float
        Number of inhabitants. Not validated unless `strict` is set.
    area : float
        Surface in km^2. Zero is valid; density is then reported as 0.
    capital : str
        Capital city.
    actions : iterable[CountryAction]
        Actions replayed by `execute()`. The record keeps its own copy.
    strict : bool
        Reject negative population or area with `InvalidCountryValueError`.
    """

    __slots__ = ("_name", "_population", "_area", "_capital", "_actions", "_strict")

    def __init__(
        self,
        name: str,
        population: float,
        area: float,
        capital: str,
        actions: Iterable[CountryAction] = (),
        strict: bool = False,
    ) -> None:
        self._strict = strict
        self._name = name
        self._population = self._checked("population", population)
        self._area = self._checked("area", area)
        self._capital = capital
        self._actions: Tuple[CountryAction, ...] = tuple(actions)
        log.debug(
            "Country created",
            extra={"country": name, "actions": len(self._actions), "strict": strict},
        )

    def _checked(self, field: str, value: float) -> float:
        if self._strict and value < 0:
            raise InvalidCountryValueError(
                f"{field} must be non-negative for '{self._name}', got {value}"
            )
        return value

    # --- Accessors ---

    def get_name(self) -> str:
        return self._name

    def get_population(self) -> float:
        return self._population

    def get_area(self) -> float:
        return self._area

    def get_capital(self) -> str:
        return self._capital

    def set_population(self, population: float) -> None:
        self._population = self._checked("population", population)

    def set_area(self, area: float) -> None:
        self._area = self._checked("area", area)

    def set_capital(self, capital: str) -> None:
        self._capital = capital

    @property
    def name(self) -> str:
        return self._name

    @property
    def population(self) -> float:
        return self._population

    @population.setter
    def population(self, value: float) -> None:
        self.set_population(value)

    @property
    def area(self) -> float:
        return self._area

    @area.setter
    def area(self, value: float) -> None:
        self.set_area(value)

    @property
    def capital(self) -> str:
        return self._capital

    @capital.setter
    def capital(self, value: str) -> None:
        self.set_capital(value)

    @property
    def actions(self) -> Tuple[CountryAction, ...]:
        """The owned action list, in replay order."""
        return self._actions

    @property
    def strict(self) -> bool:
        return self._strict

    # --- Derived values ---

    def population_density(self) -> float:
        """
        Inhabitants per km^2.

        Returns 0 when the area is exactly zero instead of dividing.
        """
        if self._area == 0:
            return 0.0
        return self._population / self._area

    density = population_density

    # --- Replay ---

    def execute(self) -> None:
        """
        Apply every owned action to this record, in order.

        Each call replays the full list; since actions are assignments the
        outcome of repeated calls equals that of a single call.
        """
        for action in self._actions:
            apply_action(self, action)
            log.debug(
                action.describe(),
                extra={"country": self._name, "kind": action.kind, "value": action.value},
            )
        log.debug(
            "Actions replayed",
            extra={"country": self._name, "actions": len(self._actions)},
        )

    # --- Diagnostics ---

    def dump(self) -> str:
        return (
            f"Country: {self._name}\n"
            f"Population: {_format_number(self._population)}\n"
            f"Area: {_format_number(self._area)} km^2\n"
            f"Capital: {self._capital}\n"
        )

    def print(self, file: Optional[Any] = None) -> None:
        print(self.dump(), end="", file=file)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return (
            f"Country(name={self._name!r}, population={self._population!r}, "
            f"area={self._area!r}, capital={self._capital!r}, "
            f"actions={len(self._actions)})"
        )

    # A record exclusively owns its actions; duplicates are not allowed.
    def __copy__(self) -> "Country":
        raise TypeError("Country records cannot be copied")

    def __deepcopy__(self, memo: dict) -> "Country":
        raise TypeError("Country records cannot be copied")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError("Country records cannot be copied")


__all__ = ["Country", "InvalidCountryValueError"]
