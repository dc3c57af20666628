"""Unit tests for the catalog views over the HTML dataset.

The compiled-in dataset is checked against the invariants an autocompletion
engine relies on (unique names, linked scopes, global attributes first), and
small hand-built catalogs exercise construction errors.
"""

from __future__ import annotations

import pytest

from html_index.catalog import Catalog, default_catalog
from html_index.data import HTML_ATTRIBUTES, HTML_ELEMENTS
from html_index.data.attributes import ATTRIBUTE_CHECKED, ATTRIBUTE_CLASS
from html_index.data.elements import ELEMENT_FORM, ELEMENT_INPUT
from html_index.models import (
    AttributeEntry,
    CatalogError,
    ElementCategory,
    ElementEntry,
)

CATALOG = default_catalog()

FORM_ATTRIBUTES = [
    "accept",
    "accept-charset",
    "action",
    "autocomplete",
    "enctype",
    "method",
    "name",
    "novalidate",
    "target",
]


def test_default_catalog_is_cached() -> None:
    """Repeated calls share one catalog instance."""
    assert default_catalog() is CATALOG


def test_collections_follow_declaration_order() -> None:
    """The catalog exposes the literal collections unchanged."""
    assert CATALOG.all_elements() == HTML_ELEMENTS
    assert CATALOG.all_attributes() == HTML_ATTRIBUTES
    assert CATALOG.all_elements()[0].name == "html"
    assert CATALOG.all_elements()[-1].name == "template"
    assert len(CATALOG.all_elements()) == 120
    assert len(CATALOG.all_attributes()) == 108


def test_names_are_unique() -> None:
    """No two elements or attributes share a name."""
    element_names = [element.name for element in CATALOG.all_elements()]
    attribute_names = [attr.name for attr in CATALOG.all_attributes()]
    assert len(element_names) == len(set(element_names))
    assert len(attribute_names) == len(set(attribute_names))


def test_scoped_elements_belong_to_catalog() -> None:
    """Every element an attribute refers to is a catalog element."""
    for attribute in CATALOG.all_attributes():
        for element in attribute.elements:
            assert CATALOG.get_element(element.name) is element, (
                f"{attribute.name!r} refers to an element outside the catalog"
            )


def test_is_global_matches_empty_elements() -> None:
    """``is_global`` is exactly the emptiness of ``elements``."""
    for attribute in CATALOG.all_attributes():
        assert attribute.is_global() == (len(attribute.elements) == 0)


def test_global_attributes_are_a_strict_subset() -> None:
    """Globals are the catalog filtered by ``is_global``, in catalog order."""
    globals_ = CATALOG.global_attributes()
    expected = tuple(attr for attr in CATALOG.all_attributes() if attr.is_global())
    assert globals_ == expected
    assert 0 < len(globals_) < len(CATALOG.all_attributes())
    assert {attr.name for attr in globals_} >= {"class", "id", "style", "title"}


@pytest.mark.parametrize("element", HTML_ELEMENTS, ids=lambda element: element.name)
def test_attributes_for_every_element(element: ElementEntry) -> None:
    """Per-element views hold each global once and exactly the matching scopes."""
    attributes = CATALOG.attributes_for(element)
    names = [attr.name for attr in attributes]
    assert len(names) == len(set(names)), f"duplicate attributes for {element.name!r}"
    for attribute in CATALOG.global_attributes():
        assert names.count(attribute.name) == 1
    for attribute in CATALOG.all_attributes():
        if attribute.is_global():
            continue
        assert (attribute in attributes) == (element in attribute.elements), (
            f"unexpected scope for {attribute.name!r} on {element.name!r}"
        )
    assert attributes == CATALOG.attributes_for(element), "expected stable results"


def test_form_attributes() -> None:
    """A form offers its scoped attributes after the global ones."""
    attributes = CATALOG.attributes_for(ELEMENT_FORM)
    names = [attr.name for attr in attributes]
    globals_ = [attr.name for attr in CATALOG.global_attributes()]
    assert names == globals_ + FORM_ATTRIBUTES
    assert ATTRIBUTE_CLASS in attributes
    assert ATTRIBUTE_CHECKED not in attributes


def test_attributes_for_accepts_tag_name() -> None:
    """Looking up by tag name matches looking up by entry."""
    assert CATALOG.attributes_for("input") == CATALOG.attributes_for(ELEMENT_INPUT)


def test_unknown_element_receives_global_attributes() -> None:
    """An element outside the catalog can still use the global attributes."""
    custom = ElementEntry("my-widget", "A custom element.")
    assert CATALOG.attributes_for(custom) == CATALOG.global_attributes()
    assert CATALOG.attributes_for("blink") == CATALOG.global_attributes()


def test_lookup_by_name() -> None:
    """Entries can be fetched by name; unknown names raise ``KeyError``."""
    assert CATALOG.get_element("form") is ELEMENT_FORM
    assert CATALOG.get_attribute("checked") is ATTRIBUTE_CHECKED
    with pytest.raises(KeyError, match="Unknown element 'blink'"):
        CATALOG.get_element("blink")
    with pytest.raises(KeyError, match="Unknown attribute 'onclick'"):
        CATALOG.get_attribute("onclick")


def test_elements_in_category() -> None:
    """Category filtering keeps catalog order."""
    table = [el.name for el in CATALOG.elements_in(ElementCategory.TABLE_CONTENT)]
    assert table[:3] == ["caption", "col", "colgroup"]
    forms = CATALOG.elements_in(ElementCategory.FORMS)
    assert len(forms) == 14
    assert all(el.category is ElementCategory.FORMS for el in forms)
    assert all(el.category is not None for el in CATALOG.all_elements())


def test_deprecated_entries() -> None:
    """Obsolete elements and attributes are flagged."""
    deprecated = [el.name for el in CATALOG.deprecated_elements()]
    assert deprecated == [
        "dir",
        "tt",
        "applet",
        "noembed",
        "menuitem",
        "content",
        "element",
        "shadow",
    ]
    assert [attr.name for attr in CATALOG.deprecated_attributes()] == ["color"]


def test_custom_catalog_orders_globals_first() -> None:
    """Globals lead the per-element list even when declared later."""
    div = ElementEntry("div", "Division.")
    span = ElementEntry("span", "Span.")
    scoped = AttributeEntry("align", "Alignment.", elements=(div,))
    global_ = AttributeEntry("id", "Identifier.")
    catalog = Catalog((div, span), [scoped, global_])
    assert catalog.attributes_for(div) == (global_, scoped)
    assert catalog.attributes_for(span) == (global_,)
    assert isinstance(catalog.all_attributes(), tuple)


def test_duplicate_element_names_are_rejected() -> None:
    """Two elements with the same name cannot share a catalog."""
    with pytest.raises(CatalogError, match="Duplicate element name 'div'"):
        Catalog((ElementEntry("div", "One."), ElementEntry("div", "Two.")), ())


def test_duplicate_attribute_names_are_rejected() -> None:
    """Two attributes with the same name cannot share a catalog."""
    attributes = (AttributeEntry("id", "One."), AttributeEntry("id", None))
    with pytest.raises(CatalogError, match="Duplicate attribute name 'id'"):
        Catalog((), attributes)


def test_dangling_element_reference_is_rejected() -> None:
    """Attributes may only refer to catalog elements."""
    outsider = ElementEntry("blink", "Obsolete.")
    attribute = AttributeEntry("speed", None, elements=(outsider,))
    with pytest.raises(CatalogError, match="'blink' which is not part"):
        Catalog((ElementEntry("div", "Division."),), (attribute,))
