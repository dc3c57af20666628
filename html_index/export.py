"""Serialize a catalog into a JSON document for non-Python consumers.

Elements and attributes refer to each other by name in the exported payload;
the per-element attribute lists are the catalog's derived views, so consumers
do not need to reimplement the global/scoped merge.
"""

from __future__ import annotations

import json
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .catalog import Catalog


def catalog_payload(catalog: Catalog) -> dict[str, list[dict[str, typ.Any]]]:
    """Return a JSON-ready mapping describing every entry in ``catalog``.

    Parameters
    ----------
    catalog : Catalog
        Catalog to describe.

    Returns
    -------
    dict[str, list[dict[str, Any]]]
        ``elements`` and ``attributes`` lists in catalog order. Each element
        lists the names of its applicable attributes; each attribute lists the
        names of the elements it is scoped to (empty for global attributes).
    """
    elements = [
        {
            "name": element.name,
            "description": element.description,
            "deprecated": element.deprecated,
            "category": str(element.category) if element.category else None,
            "attributes": [attr.name for attr in catalog.attributes_for(element)],
        }
        for element in catalog.all_elements()
    ]
    attributes = [
        {
            "name": attribute.name,
            "description": attribute.description,
            "deprecated": attribute.deprecated,
            "global": attribute.is_global(),
            "elements": [element.name for element in attribute.elements],
        }
        for attribute in catalog.all_attributes()
    ]
    return {"elements": elements, "attributes": attributes}


def write_catalog_json(catalog: Catalog, output: Path) -> Path:
    """Write :func:`catalog_payload` for ``catalog`` to ``output`` as UTF-8 JSON."""
    output.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(catalog_payload(catalog), indent=2, ensure_ascii=False)
    output.write_text(text + "\n", encoding="utf-8")
    return output


__all__ = ["catalog_payload", "write_catalog_json"]
