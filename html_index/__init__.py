"""HTML element and attribute reference data for editor autocompletion.

The package ships a fixed catalog of HTML elements and attributes, answers
which attributes an element accepts (global ones included), and renders
entries as completion-list rows.

Exports
-------
- ``Catalog`` / ``default_catalog``: queryable views over the dataset.
- ``ElementEntry`` / ``AttributeEntry``: the catalog records.
- ``render_completion``: turn an entry into a completion row.
- ``app`` / ``main``: the ``htmlindex`` Cyclopts CLI.

Examples
--------
>>> from html_index import default_catalog
>>> catalog = default_catalog()
>>> "class" in [attr.name for attr in catalog.global_attributes()]
True
"""

from __future__ import annotations

from .catalog import Catalog, default_catalog
from .cli import app, main
from .models import (
    AttributeEntry,
    CatalogError,
    ElementCategory,
    ElementEntry,
    EntryKind,
)
from .rendering import render_completion

__all__ = [
    "AttributeEntry",
    "Catalog",
    "CatalogError",
    "ElementCategory",
    "ElementEntry",
    "EntryKind",
    "app",
    "default_catalog",
    "main",
    "render_completion",
]
