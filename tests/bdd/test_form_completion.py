"""Behaviour tests for attribute completion inside elements.

These pytest-bdd scenarios check the attribute list an editor would offer
after the user opens a tag: the attributes scoped to that tag plus every
global attribute, with globals listed first. The feature file
``form_completion.feature`` drives the scenarios.

Usage
-----
Run ``pytest tests/bdd/test_form_completion.py -v`` after installing the dev
dependencies (``uv sync --group dev``). The scenarios only read the compiled-in
catalog, so no fixtures beyond ``scenario_state`` are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from html_index.catalog import Catalog, default_catalog

if typ.TYPE_CHECKING:
    from html_index.models import AttributeEntry

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "form_completion.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the default HTML catalog")
def given_catalog(scenario_state: dict[str, object]) -> None:
    """Store the compiled-in catalog for later steps."""
    scenario_state["catalog"] = default_catalog()


@when(parsers.parse('I request the attributes for "{element}"'))
def when_request_attributes(scenario_state: dict[str, object], element: str) -> None:
    """Look up the attributes applicable to ``element``."""
    catalog = typ.cast("Catalog", scenario_state["catalog"])
    scenario_state["attributes"] = catalog.attributes_for(catalog.get_element(element))


def _names(scenario_state: dict[str, object]) -> list[str]:
    attributes = typ.cast("tuple[AttributeEntry, ...]", scenario_state["attributes"])
    return [attr.name for attr in attributes]


@then(parsers.parse('the attributes include "{expected}"'))
def then_attributes_include(scenario_state: dict[str, object], expected: str) -> None:
    """Every comma-separated name in ``expected`` should be offered."""
    names = _names(scenario_state)
    wanted = [name.strip() for name in expected.split(",")]
    missing = [name for name in wanted if name not in names]
    assert not missing, f"expected attributes missing from completion: {missing}"


@then("the attributes include every global attribute exactly once")
def then_globals_once(scenario_state: dict[str, object]) -> None:
    """Global attributes should each appear a single time."""
    catalog = typ.cast("Catalog", scenario_state["catalog"])
    names = _names(scenario_state)
    for attribute in catalog.global_attributes():
        assert names.count(attribute.name) == 1, (
            f"expected global attribute {attribute.name!r} exactly once"
        )


@then(parsers.parse('the attributes do not include "{name}"'))
def then_attributes_exclude(scenario_state: dict[str, object], name: str) -> None:
    """Attributes scoped to other elements should not be offered."""
    assert name not in _names(scenario_state), f"did not expect {name!r} in completion"


@then("the first attributes are the global attributes in catalog order")
def then_globals_first(scenario_state: dict[str, object]) -> None:
    """The list should open with the global attributes, in catalog order."""
    catalog = typ.cast("Catalog", scenario_state["catalog"])
    globals_ = [attr.name for attr in catalog.global_attributes()]
    assert _names(scenario_state)[: len(globals_)] == globals_, (
        "expected global attributes to lead the completion list"
    )
