"""Render completion rows as an HTML list fragment.

:class:`CompletionListRenderer` feeds the rows produced by
:func:`~html_index.rendering.rows.render_completion` through the
``completion_list.jinja`` template, giving browser-based editors the same
presentation a native completion popup would show: an icon per entry kind,
struck-through labels for deprecated entries, and a distinct colour for
global attributes.

Typical usage:

>>> from html_index.catalog import default_catalog
>>> from html_index.config import RenderConfig
>>> from html_index.rendering import CompletionListRenderer, ResourceContext
>>> renderer = CompletionListRenderer(ResourceContext(RenderConfig()))
>>> html = renderer.render(default_catalog().attributes_for("form"))
>>> html.startswith('<ul class="completion-list">')
True

The renderer reads templates from ``html_index/templates`` unless a custom
directory is provided, autoescapes every value, and writes UTF-8 files.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .rows import CompletionRow, render_completion

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ..models import CompletionEntry
    from .rows import RenderContext


class CompletionListRenderer:
    """Render catalog entries into a completion-list HTML fragment."""

    def __init__(
        self, context: RenderContext, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        context : RenderContext
            Supplies icon resources and the global attribute colour for every
            rendered row.
        templates_dir : Path, optional
            Directory containing ``completion_list.jinja``. Defaults to
            ``html_index/templates`` when ``None``.
        """
        self.context = context
        self.templates_dir = templates_dir or Path(__file__).parent.parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("completion_list.jinja")

    def rows(self, entries: cabc.Iterable[CompletionEntry]) -> list[CompletionRow]:
        """Return one freshly rendered row per entry."""
        return [render_completion(entry, self.context) for entry in entries]

    def render(self, entries: cabc.Iterable[CompletionEntry]) -> str:
        """Render ``entries`` into a ``<ul class="completion-list">`` fragment."""
        html = self.template.render(rows=self.rows(entries))
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, entries: cabc.Iterable[CompletionEntry], output: Path) -> Path:
        """Render ``entries`` and write the fragment to ``output``.

        Parent directories are created as needed; filesystem errors propagate.
        """
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(entries), encoding="utf-8")
        return output


__all__ = ["CompletionListRenderer"]
