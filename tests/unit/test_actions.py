from __future__ import annotations

import pytest
from pydantic import ValidationError

from country_record.domain.actions import (
    SetArea,
    SetCapital,
    SetPopulation,
    UnsupportedActionError,
    action_kinds,
    apply_action,
    parse_action,
)
from country_record.domain.country import Country


@pytest.mark.parametrize(
    ("action", "label"),
    [
        (SetPopulation(1), "Set population"),
        (SetArea(1), "Set area"),
        (SetCapital("x"), "Set capital"),
    ],
)
def test_describe_returns_static_label(action, label):
    assert action.describe() == label


def test_positional_and_keyword_construction_are_equal():
    assert SetArea(250_000) == SetArea(value=250_000)
    assert SetCapital("A") != SetCapital("B")


def test_actions_are_frozen():
    action = SetCapital("Frozen City")
    with pytest.raises(ValidationError):
        action.value = "Thawed City"  # type: ignore[misc]


def test_actions_are_hashable():
    assert len({SetArea(1), SetArea(1), SetArea(2)}) == 2


def test_apply_capital_then_read(sampleland: Country):
    SetCapital("Elsewhere").apply(sampleland)
    assert sampleland.get_capital() == "Elsewhere"


def test_apply_action_dispatches_each_variant(sampleland: Country):
    apply_action(sampleland, SetPopulation(42))
    apply_action(sampleland, SetArea(21))
    assert sampleland.get_population() == 42
    assert sampleland.get_area() == 21
    assert sampleland.population_density() == 2


def test_apply_action_rejects_unknown_objects(sampleland: Country):
    with pytest.raises(UnsupportedActionError, match="dict"):
        apply_action(sampleland, {"kind": "set_area", "value": 1})


def test_unsupported_action_error_is_type_error():
    assert issubclass(UnsupportedActionError, TypeError)


class TestParseAction:
    def test_parses_each_kind(self):
        assert parse_action({"kind": "set_population", "value": "1500000"}) == SetPopulation(
            1_500_000
        )
        assert parse_action({"kind": "set_area", "value": 250_000}) == SetArea(250_000)
        assert parse_action({"kind": "set_capital", "value": "Cap"}) == SetCapital("Cap")

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_action({"kind": "set_name", "value": "Renamed"})

    def test_non_numeric_value_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_action({"kind": "set_area", "value": "large"})

    def test_extra_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            parse_action({"kind": "set_area", "value": 1, "unit": "mi^2"})

    def test_kinds_cover_all_variants(self):
        assert action_kinds() == ["set_area", "set_capital", "set_population"]
