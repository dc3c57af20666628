"""Compiled-in HTML element and attribute dataset.

The collections are declared in a fixed order: elements follow the sections of
the HTML element reference, attributes are alphabetical. Individual entries
live in :mod:`html_index.data.elements` and :mod:`html_index.data.attributes`
as ``ELEMENT_*`` and ``ATTRIBUTE_*`` constants. Consumers should wrap the
collections in a :class:`~html_index.catalog.Catalog` instead of filtering the
raw tuples themselves.

Examples
--------
>>> from html_index.data import HTML_ELEMENTS
>>> from html_index.data.elements import ELEMENT_FORM
>>> ELEMENT_FORM in HTML_ELEMENTS
True
"""

from .attributes import HTML_ATTRIBUTES
from .elements import HTML_ELEMENTS

__all__ = ["HTML_ATTRIBUTES", "HTML_ELEMENTS"]
