"""Turn catalog entries into completion-list rows.

Entries stay plain data; this module owns presentation. A
:class:`RenderContext` supplies the icon resources and the colour reserved for
global attributes, and :func:`render_completion` fills a
:class:`CompletionRow`, recycling the row it is given when possible so list
views can reuse their row objects while scrolling.

Examples
--------
>>> from html_index.config import RenderConfig
>>> from html_index.data.elements import ELEMENT_DIR
>>> row = render_completion(ELEMENT_DIR, ResourceContext(RenderConfig()))
>>> row.label
StyledLabel(text='dir', strikethrough=True, color=None)
>>> row.icon
'icons/ic_element_48dp.svg'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import ICON_FILENAME_TEMPLATE
from ..models import AttributeEntry, EntryKind

if typ.TYPE_CHECKING:
    from ..config import RenderConfig
    from ..models import CompletionEntry


class RenderContext(typ.Protocol):
    """Resources a completion row needs from the surrounding UI."""

    @property
    def global_attribute_color(self) -> str:
        """Colour applied to the label of global attributes."""
        ...

    def icon(self, kind: EntryKind) -> str:
        """Return the icon resource for rows of ``kind``."""
        ...


class ResourceContext:
    """Render context backed by a :class:`~html_index.config.RenderConfig`."""

    def __init__(self, config: RenderConfig) -> None:
        self.config = config

    @property
    def global_attribute_color(self) -> str:
        return self.config.global_attribute_color

    def icon(self, kind: EntryKind) -> str:
        name = (
            self.config.element_icon
            if kind is EntryKind.ELEMENT
            else self.config.attribute_icon
        )
        return ICON_FILENAME_TEMPLATE.format(
            root=self.config.icon_root.rstrip("/"),
            name=name,
            extension=self.config.icon_extension,
        )


@dc.dataclass(frozen=True, slots=True)
class StyledLabel:
    """Row label with decorations spanning the whole text.

    Attributes
    ----------
    text : str
        Entry name.
    strikethrough : bool
        ``True`` when the entry is deprecated.
    color : str or None
        Foreground colour, set only for global attributes.
    """

    text: str
    strikethrough: bool = False
    color: str | None = None


class CompletionRow:
    """Mutable completion-list row that may be recycled between entries."""

    __slots__ = ("description", "icon", "kind", "label")

    def __init__(self) -> None:
        self.kind: EntryKind | None = None
        self.icon: str | None = None
        self.label: StyledLabel | None = None
        self.description: str | None = None

    def __repr__(self) -> str:
        return f"CompletionRow(kind={self.kind!r}, label={self.label!r})"


def build_label(entry: CompletionEntry, context: RenderContext) -> StyledLabel:
    """Return the decorated label for ``entry``."""
    match entry:
        case AttributeEntry() if entry.is_global():
            color = context.global_attribute_color
        case _:
            color = None
    return StyledLabel(text=entry.name, strikethrough=entry.deprecated, color=color)


def render_completion(
    entry: CompletionEntry, context: RenderContext, row: object | None = None
) -> CompletionRow:
    """Populate a completion row for ``entry``.

    Parameters
    ----------
    entry : ElementEntry or AttributeEntry
        Catalog entry to display.
    context : RenderContext
        Supplies icon resources and the global attribute colour.
    row : object, optional
        A previously rendered row. It is reused when it is a
        :class:`CompletionRow`; anything else is ignored.

    Returns
    -------
    CompletionRow
        ``row`` itself when it could be recycled, otherwise a new row.
    """
    target = row if isinstance(row, CompletionRow) else CompletionRow()
    target.kind = entry.kind
    target.icon = context.icon(entry.kind)
    target.label = build_label(entry, context)
    target.description = entry.description
    return target


__all__ = [
    "CompletionRow",
    "RenderContext",
    "ResourceContext",
    "StyledLabel",
    "build_label",
    "render_completion",
]
