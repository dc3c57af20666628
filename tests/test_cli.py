"""Tests for the ``htmlindex`` command-line interface."""

from __future__ import annotations

import typing as typ

import msgspec
import pytest
from bs4 import BeautifulSoup

from html_index import cli
from html_index.catalog import default_catalog
from html_index.models import ElementCategory, EntryKind

if typ.TYPE_CHECKING:
    from pathlib import Path


def _lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_elements_lists_catalog_order(capsys: pytest.CaptureFixture[str]) -> None:
    cli.elements()
    lines = _lines(capsys)
    assert len(lines) == len(default_catalog().all_elements())
    assert lines[0] == "html"
    assert "dir (deprecated)" in lines


def test_elements_filters_by_category(capsys: pytest.CaptureFixture[str]) -> None:
    cli.elements(category=ElementCategory.FORMS)
    lines = _lines(capsys)
    assert lines[0] == "button"
    assert "input" in lines
    assert "div" not in lines


def test_elements_deprecated_only(capsys: pytest.CaptureFixture[str]) -> None:
    cli.elements(deprecated_only=True)
    lines = _lines(capsys)
    assert lines, "expected at least one deprecated element"
    assert all(line.endswith(" (deprecated)") for line in lines), lines


def test_attributes_marks_globals(capsys: pytest.CaptureFixture[str]) -> None:
    cli.attributes("form")
    lines = _lines(capsys)
    assert lines[0] == "accesskey (global)"
    assert lines[-1] == "target"


def test_attributes_scoped_only(capsys: pytest.CaptureFixture[str]) -> None:
    cli.attributes("hr", scoped_only=True)
    assert _lines(capsys) == ["align", "color (deprecated)"]


def test_attributes_unknown_element() -> None:
    with pytest.raises(KeyError, match="Unknown element 'blink'"):
        cli.attributes("blink")


def test_describe_prints_both_kinds(capsys: pytest.CaptureFixture[str]) -> None:
    """Names shared by an element and an attribute print both entries."""
    cli.describe("form")
    out = capsys.readouterr().out
    element_block, attribute_block = out.split("\n\n")
    assert element_block.startswith("form [element]\n")
    assert attribute_block.startswith("form [attribute]\n")


def test_describe_restricted_kind(capsys: pytest.CaptureFixture[str]) -> None:
    cli.describe("class", kind=EntryKind.ATTRIBUTE)
    lines = _lines(capsys)
    assert lines[0] == "class (global) [attribute]"
    assert len(lines) == 2


def test_describe_without_description(capsys: pytest.CaptureFixture[str]) -> None:
    cli.describe("srcset")
    assert _lines(capsys) == ["srcset [attribute]", "No description available."]


def test_describe_unknown_name() -> None:
    with pytest.raises(KeyError, match="No element or attribute named 'nope'"):
        cli.describe("nope")


def test_describe_unknown_for_kind() -> None:
    with pytest.raises(KeyError, match="Unknown element 'class'"):
        cli.describe("class", kind=EntryKind.ELEMENT)


def test_render_writes_elements(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "out" / "elements.html"
    cli.render(output=output)
    assert capsys.readouterr().out.startswith("wrote ")
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    rows = soup.select("li.completion-element")
    assert len(rows) == len(default_catalog().all_elements())


def test_render_element_attributes_with_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "completion.yaml"
    config.write_text(
        "rendering:\n  global_attribute_color: '#abc'\n", encoding="utf-8"
    )
    output = tmp_path / "input.html"
    cli.render(output=output, element="input", config=config)
    assert capsys.readouterr().out.strip().endswith("input.html")

    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    row = soup.find("li", attrs={"data-name": "class"})
    assert row is not None
    label = row.select_one(".completion-label")
    assert label is not None
    assert label["style"] == "color: #aabbcc"


def test_export_writes_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "catalog.json"
    cli.export(output=output)
    assert capsys.readouterr().out.startswith("wrote ")
    payload = msgspec.json.decode(output.read_bytes())
    assert payload["elements"][0]["name"] == "html"


def test_app_dispatches_commands(capsys: pytest.CaptureFixture[str]) -> None:
    """The Cyclopts app parses arguments and runs the command."""
    command, bound, *_ = cli.app.parse_args(["attributes", "hr", "--scoped-only"])
    assert command is cli.attributes
    command(*bound.args, **bound.kwargs)
    assert _lines(capsys) == ["align", "color (deprecated)"]
