"""Queryable view over the HTML element and attribute dataset.

:class:`Catalog` owns an ordered collection of elements and attributes and
exposes the views an autocompletion engine needs: every element, every
attribute, the global attributes, and the attributes applicable to a given
element. Derived views are computed once, when the catalog is built, so a
catalog can be shared freely between threads.

Examples
--------
>>> from html_index.catalog import default_catalog
>>> catalog = default_catalog()
>>> [attr.name for attr in catalog.attributes_for("form")][-1]
'target'
>>> catalog.get_element("dir").deprecated
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import functools
import types
import typing as typ

from .data import HTML_ATTRIBUTES, HTML_ELEMENTS
from .models import AttributeEntry, CatalogError, ElementCategory, ElementEntry

_Entry = typ.TypeVar("_Entry", ElementEntry, AttributeEntry)


@dc.dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable collection of HTML elements and attributes.

    Parameters
    ----------
    elements : Sequence[ElementEntry]
        Elements in presentation order. Names must be unique.
    attributes : Sequence[AttributeEntry]
        Attributes in presentation order. Names must be unique and every
        element an attribute refers to must be part of ``elements``.

    Raises
    ------
    CatalogError
        If an element or attribute name is declared twice, or an attribute
        refers to an element outside the catalog.
    """

    elements: tuple[ElementEntry, ...]
    attributes: tuple[AttributeEntry, ...]
    _elements_by_name: cabc.Mapping[str, ElementEntry] = dc.field(
        init=False, repr=False, compare=False
    )
    _attributes_by_name: cabc.Mapping[str, AttributeEntry] = dc.field(
        init=False, repr=False, compare=False
    )
    _globals: tuple[AttributeEntry, ...] = dc.field(
        init=False, repr=False, compare=False
    )
    _by_element: cabc.Mapping[str, tuple[AttributeEntry, ...]] = dc.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        attributes = tuple(self.attributes)
        object.__setattr__(self, "elements", elements)
        object.__setattr__(self, "attributes", attributes)

        elements_by_name = _index_unique(elements, "element")
        attributes_by_name = _index_unique(attributes, "attribute")
        for attribute in attributes:
            for element in attribute.elements:
                if element.name not in elements_by_name:
                    msg = (
                        f"Attribute '{attribute.name}' refers to element "
                        f"'{element.name}' which is not part of the catalog."
                    )
                    raise CatalogError(msg)

        globals_ = tuple(attr for attr in attributes if attr.is_global())
        by_element = {
            element.name: globals_
            + tuple(attr for attr in attributes if element in attr.elements)
            for element in elements
        }

        object.__setattr__(
            self, "_elements_by_name", types.MappingProxyType(elements_by_name)
        )
        object.__setattr__(
            self, "_attributes_by_name", types.MappingProxyType(attributes_by_name)
        )
        object.__setattr__(self, "_globals", globals_)
        object.__setattr__(self, "_by_element", types.MappingProxyType(by_element))

    def all_elements(self) -> tuple[ElementEntry, ...]:
        """Return every element in declaration order."""
        return self.elements

    def all_attributes(self) -> tuple[AttributeEntry, ...]:
        """Return every attribute in declaration order."""
        return self.attributes

    def global_attributes(self) -> tuple[AttributeEntry, ...]:
        """Return the attributes that apply to every element."""
        return self._globals

    def attributes_for(
        self, element: ElementEntry | str
    ) -> tuple[AttributeEntry, ...]:
        """Return the attributes ``element`` may carry.

        Parameters
        ----------
        element : ElementEntry or str
            The element, or its tag name.

        Returns
        -------
        tuple[AttributeEntry, ...]
            Global attributes first, then the attributes scoped to
            ``element``, each group in catalog order. Elements unknown to the
            catalog only receive the global attributes.
        """
        name = element.name if isinstance(element, ElementEntry) else element
        return self._by_element.get(name, self._globals)

    def get_element(self, name: str) -> ElementEntry:
        """Return the element called ``name``."""
        try:
            return self._elements_by_name[name]
        except KeyError as exc:
            msg = f"Unknown element '{name}'."
            raise KeyError(msg) from exc

    def get_attribute(self, name: str) -> AttributeEntry:
        """Return the attribute called ``name``."""
        try:
            return self._attributes_by_name[name]
        except KeyError as exc:
            msg = f"Unknown attribute '{name}'."
            raise KeyError(msg) from exc

    def elements_in(self, category: ElementCategory) -> tuple[ElementEntry, ...]:
        """Return the elements listed under ``category``, in catalog order."""
        return tuple(el for el in self.elements if el.category is category)

    def deprecated_elements(self) -> tuple[ElementEntry, ...]:
        return tuple(el for el in self.elements if el.deprecated)

    def deprecated_attributes(self) -> tuple[AttributeEntry, ...]:
        return tuple(attr for attr in self.attributes if attr.deprecated)


def _index_unique(entries: tuple[_Entry, ...], label: str) -> dict[str, _Entry]:
    """Map entry names to entries, rejecting duplicate names."""
    index: dict[str, _Entry] = {}
    for entry in entries:
        if entry.name in index:
            msg = f"Duplicate {label} name '{entry.name}' in catalog."
            raise CatalogError(msg)
        index[entry.name] = entry
    return index


@functools.cache
def default_catalog() -> Catalog:
    """Return the catalog built from the compiled-in HTML dataset."""
    return Catalog(HTML_ELEMENTS, HTML_ATTRIBUTES)


__all__ = ["Catalog", "default_catalog"]
