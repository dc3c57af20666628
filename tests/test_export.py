"""Tests for the JSON export of the catalog."""

from __future__ import annotations

import typing as typ

import msgspec

from html_index.catalog import Catalog, default_catalog
from html_index.export import catalog_payload, write_catalog_json
from html_index.models import AttributeEntry, ElementEntry

if typ.TYPE_CHECKING:
    from pathlib import Path


def _by_name(entries: list[dict[str, typ.Any]]) -> dict[str, dict[str, typ.Any]]:
    return {entry["name"]: entry for entry in entries}


def test_payload_follows_catalog_order() -> None:
    catalog = default_catalog()
    payload = catalog_payload(catalog)
    assert [e["name"] for e in payload["elements"]] == [
        e.name for e in catalog.all_elements()
    ]
    assert [a["name"] for a in payload["attributes"]] == [
        a.name for a in catalog.all_attributes()
    ]


def test_payload_element_fields() -> None:
    """Elements carry their category and applicable attribute names."""
    catalog = default_catalog()
    elements = _by_name(catalog_payload(catalog)["elements"])
    form = elements["form"]
    assert form["category"] == "forms"
    assert form["deprecated"] is False
    assert form["attributes"] == [a.name for a in catalog.attributes_for("form")]
    assert elements["dir"]["deprecated"] is True


def test_payload_attribute_fields() -> None:
    """Attributes report whether they are global and the elements they target."""
    attributes = _by_name(catalog_payload(default_catalog())["attributes"])
    assert attributes["class"]["global"] is True
    assert attributes["class"]["elements"] == []
    assert attributes["color"] == {
        "name": "color",
        "description": attributes["color"]["description"],
        "deprecated": True,
        "global": False,
        "elements": ["hr"],
    }
    assert attributes["srcset"]["description"] is None


def test_payload_for_custom_catalog() -> None:
    """Elements without a category export ``None``."""
    note = ElementEntry("x-note", "Custom note element.")
    catalog = Catalog(
        [note], [AttributeEntry("tone", "Tone of the note.", elements=(note,))]
    )
    payload = catalog_payload(catalog)
    assert payload["elements"] == [
        {
            "name": "x-note",
            "description": "Custom note element.",
            "deprecated": False,
            "category": None,
            "attributes": ["tone"],
        }
    ]


def test_write_catalog_json(tmp_path: Path) -> None:
    """The written file decodes back into the same payload."""
    output = tmp_path / "dist" / "catalog.json"
    written = write_catalog_json(default_catalog(), output)
    assert written == output
    raw = output.read_bytes()
    assert raw.endswith(b"\n")
    assert msgspec.json.decode(raw) == catalog_payload(default_catalog())
