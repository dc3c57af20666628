"""Typed records describing HTML elements and attributes offered for completion."""

from __future__ import annotations

import dataclasses as dc
import enum


class CatalogError(ValueError):
    """Raised when the element/attribute dataset is internally inconsistent."""


class EntryKind(enum.StrEnum):
    """Discriminates the two kinds of completion entries."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"


class ElementCategory(enum.StrEnum):
    """HTML reference section an element is listed under."""

    MAIN_ROOT = "main-root"
    DOCUMENT_METADATA = "document-metadata"
    SECTIONING_ROOT = "sectioning-root"
    CONTENT_SECTIONING = "content-sectioning"
    TEXT_CONTENT = "text-content"
    INLINE_TEXT_SEMANTICS = "inline-text-semantics"
    IMAGE_AND_MULTIMEDIA = "image-and-multimedia"
    EMBEDDED_CONTENT = "embedded-content"
    SCRIPTING = "scripting"
    DEMARCATING_EDITS = "demarcating-edits"
    TABLE_CONTENT = "table-content"
    FORMS = "forms"
    INTERACTIVE_ELEMENTS = "interactive-elements"
    WEB_COMPONENTS = "web-components"


@dc.dataclass(frozen=True, slots=True, eq=False)
class ElementEntry:
    """A single HTML tag.

    Two entries are the same element when their names match; description,
    category and deprecation do not take part in equality or hashing.

    Attributes
    ----------
    name : str
        Tag name, for example ``"div"``.
    description : str
        Human-readable explanation. May span several lines and mention other
        tags literally (``"<dl>"``).
    deprecated : bool
        ``True`` for obsolete elements.
    category : ElementCategory or None
        Section of the HTML element reference the tag belongs to, when known.
    """

    name: str
    description: str
    deprecated: bool = False
    category: ElementCategory | None = None

    @property
    def kind(self) -> EntryKind:
        """Return :attr:`EntryKind.ELEMENT`."""
        return EntryKind.ELEMENT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementEntry):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dc.dataclass(frozen=True, slots=True)
class AttributeEntry:
    """A single HTML attribute, optionally restricted to a set of elements.

    An attribute without elements is global and may be used on any tag.
    Equality and hashing cover every field.
    """

    name: str
    description: str | None
    deprecated: bool = False
    elements: tuple[ElementEntry, ...] = ()

    @property
    def kind(self) -> EntryKind:
        """Return :attr:`EntryKind.ATTRIBUTE`."""
        return EntryKind.ATTRIBUTE

    def is_global(self) -> bool:
        """Return ``True`` when the attribute applies to every element."""
        return not self.elements

    def applies_to(self, element: ElementEntry) -> bool:
        """Return ``True`` when ``element`` may carry this attribute."""
        return self.is_global() or element in self.elements


CompletionEntry = ElementEntry | AttributeEntry


__all__ = [
    "AttributeEntry",
    "CatalogError",
    "CompletionEntry",
    "ElementCategory",
    "ElementEntry",
    "EntryKind",
]
