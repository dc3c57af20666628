"""Presentation of catalog entries as completion-list rows."""

from .html import CompletionListRenderer
from .rows import (
    CompletionRow,
    RenderContext,
    ResourceContext,
    StyledLabel,
    build_label,
    render_completion,
)

__all__ = [
    "CompletionListRenderer",
    "CompletionRow",
    "RenderContext",
    "ResourceContext",
    "StyledLabel",
    "build_label",
    "render_completion",
]
