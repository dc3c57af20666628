"""Cyclopts CLI entrypoint for browsing and exporting the HTML completion catalog.

The ``htmlindex`` console script defined here lists elements and the
attributes each element accepts, describes individual entries, renders
completion rows as an HTML fragment, and exports the catalog as JSON. Options
can also be supplied through ``HTMLINDEX_*`` environment variables.

Examples
--------
List the form-related elements:

>>> from html_index.cli import app
>>> app(["elements", "--category", "forms"])  # doctest: +SKIP

Render the completion list for ``<input>`` attributes:

>>> app(
...     ["render", "--element", "input", "--output", "dist/input.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .catalog import default_catalog
from .config import RenderConfig, load_render_config
from .export import write_catalog_json
from .models import AttributeEntry, ElementCategory, EntryKind
from .rendering import CompletionListRenderer, ResourceContext

if typ.TYPE_CHECKING:
    from .models import CompletionEntry

app = App(name="htmlindex", config=cyclopts.config.Env("HTMLINDEX_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _describe_line(entry: CompletionEntry) -> str:
    line = entry.name
    if isinstance(entry, AttributeEntry) and entry.is_global():
        line = f"{line} (global)"
    if entry.deprecated:
        line = f"{line} (deprecated)"
    return line


@app.command(help="List HTML elements in catalog order.")
def elements(
    *,
    category: typ.Annotated[
        ElementCategory | None, Parameter(help="Only list elements of this category")
    ] = None,
    deprecated_only: typ.Annotated[
        bool, Parameter(help="Only list obsolete elements")
    ] = False,
) -> None:
    """Print one element per line, marking deprecated ones.

    Parameters
    ----------
    category : ElementCategory or None, optional
        Restrict the listing to one section of the HTML element reference.
    deprecated_only : bool, optional
        When ``True``, list only deprecated elements.
    """
    catalog = default_catalog()
    selected = (
        catalog.elements_in(category) if category else catalog.all_elements()
    )
    for element in selected:
        if deprecated_only and not element.deprecated:
            continue
        print(_describe_line(element))


@app.command(help="List the attributes an element accepts, global ones first.")
def attributes(
    element: typ.Annotated[str, Parameter(help="Tag name, e.g. 'form'")],
    *,
    scoped_only: typ.Annotated[
        bool, Parameter(help="Skip global attributes")
    ] = False,
) -> None:
    """Print the attributes applicable to ``element``.

    Parameters
    ----------
    element : str
        Tag name of a catalog element.
    scoped_only : bool, optional
        When ``True``, omit the attributes every element accepts.

    Raises
    ------
    KeyError
        If ``element`` is not part of the catalog.
    """
    catalog = default_catalog()
    entry = catalog.get_element(element)
    for attribute in catalog.attributes_for(entry):
        if scoped_only and attribute.is_global():
            continue
        print(_describe_line(attribute))


@app.command(help="Show the description of an element or attribute.")
def describe(
    name: typ.Annotated[str, Parameter(help="Element or attribute name")],
    *,
    kind: typ.Annotated[
        EntryKind | None, Parameter(help="Restrict the lookup to one entry kind")
    ] = None,
) -> None:
    """Print every entry called ``name`` with its kind and description.

    Names such as ``form`` or ``title`` exist both as an element and as an
    attribute; both are printed unless ``kind`` narrows the lookup.

    Raises
    ------
    KeyError
        If no entry of the requested kind is called ``name``.
    """
    catalog = default_catalog()
    found: list[CompletionEntry] = []
    if kind in (None, EntryKind.ELEMENT):
        try:
            found.append(catalog.get_element(name))
        except KeyError:
            if kind is EntryKind.ELEMENT:
                raise
    if kind in (None, EntryKind.ATTRIBUTE):
        try:
            found.append(catalog.get_attribute(name))
        except KeyError:
            if kind is EntryKind.ATTRIBUTE:
                raise
    if not found:
        msg = f"No element or attribute named '{name}'."
        raise KeyError(msg)

    for index, entry in enumerate(found):
        if index:
            print()
        print(f"{_describe_line(entry)} [{entry.kind}]")
        print(entry.description or "No description available.")


@app.command(help="Render completion rows as an HTML fragment.")
def render(
    *,
    output: typ.Annotated[Path, Parameter(help="Where to write the HTML fragment")],
    element: typ.Annotated[
        str | None,
        Parameter(help="Render this element's attributes instead of all elements"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to rendering config", env_var="HTMLINDEX_CONFIG"),
    ] = None,
) -> None:
    """Write the completion list for the catalog elements or one element.

    Parameters
    ----------
    output : Path
        Destination HTML file; parent directories are created.
    element : str or None, optional
        Tag name whose attributes are rendered. When ``None`` (default) every
        element is rendered instead.
    config : Path or None, optional
        YAML rendering configuration. Defaults apply when ``None``.
    """
    render_config = load_render_config(config) if config else RenderConfig()
    catalog = default_catalog()
    entries: tuple[CompletionEntry, ...] = (
        catalog.attributes_for(catalog.get_element(element))
        if element
        else catalog.all_elements()
    )
    renderer = CompletionListRenderer(ResourceContext(render_config))
    written = renderer.write(entries, output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Export the catalog as JSON.")
def export(
    *,
    output: typ.Annotated[Path, Parameter(help="Where to write the JSON file")],
) -> None:
    """Write the catalog, including derived attribute lists, as JSON."""
    written = write_catalog_json(default_catalog(), output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `htmlindex` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
