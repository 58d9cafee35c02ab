"""
Country mutation actions (Command Pattern).

Actions are frozen pydantic models forming a closed tagged union discriminated
on `kind`. A record never needs to know which concrete action it is replaying:
`apply_action` routes each variant to the matching setter via structural
pattern matching.

Usage:
    from country_record.domain.actions import SetArea, SetCapital, parse_action

    actions = [SetArea(250_000), SetCapital("New Capital")]
    actions.append(parse_action({"kind": "set_population", "value": 1_500_000}))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

if TYPE_CHECKING:  # pragma: no cover
    from country_record.domain.country import Country

_MISSING: Any = object()


class UnsupportedActionError(TypeError):
    """Raised when an object that is not a known action is dispatched."""


class CountryAction(BaseModel):
    """
    Base class for all country actions.

    Each subclass holds exactly one `value` and assigns it to one field of the
    target record. Assignments are idempotent: replaying an action twice leaves
    the record in the same state as replaying it once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: ClassVar[str] = "Action"

    def __init__(self, value: Any = _MISSING, /, **data: Any) -> None:
        # Allow SetArea(100.0) as well as SetArea(value=100.0).
        if value is not _MISSING:
            data["value"] = value
        super().__init__(**data)

    def describe(self) -> str:
        """Static human-readable label, for diagnostics only."""
        return self.label

    def apply(self, country: "Country") -> None:
        apply_action(country, self)


class SetPopulation(CountryAction):
    """Assigns a new population."""

    label: ClassVar[str] = "Set population"

    kind: Literal["set_population"] = "set_population"
    value: float = Field(..., description="New population.")


class SetArea(CountryAction):
    """Assigns a new area, in km^2."""

    label: ClassVar[str] = "Set area"

    kind: Literal["set_area"] = "set_area"
    value: float = Field(..., description="New area in km^2.")


class SetCapital(CountryAction):
    """Assigns a new capital."""

    label: ClassVar[str] = "Set capital"

    kind: Literal["set_capital"] = "set_capital"
    value: str = Field(..., description="New capital city.")


Action = Annotated[
    Union[SetPopulation, SetArea, SetCapital],
    Field(discriminator="kind"),
]

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def action_kinds() -> list[str]:
    """List the accepted `kind` discriminators."""
    return ["set_area", "set_capital", "set_population"]


def parse_action(data: Mapping[str, Any]) -> CountryAction:
    """
    Validate a mapping into the matching action variant.

    Raises
    ------
    pydantic.ValidationError
        If `kind` is unknown or `value` has the wrong type.
    """
    return _action_adapter.validate_python(dict(data))


def apply_action(country: "Country", action: object) -> None:
    """
    Route a single action to the setter it targets.
    """
    match action:
        case SetPopulation(value=value):
            country.set_population(value)
        case SetArea(value=value):
            country.set_area(value)
        case SetCapital(value=value):
            country.set_capital(value)
        case _:
            raise UnsupportedActionError(
                f"Unsupported action type: {type(action).__name__}"
            )


__all__ = [
    "Action",
    "CountryAction",
    "SetArea",
    "SetCapital",
    "SetPopulation",
    "UnsupportedActionError",
    "action_kinds",
    "apply_action",
    "parse_action",
]
