"""Typed dataclasses describing completion rendering configuration."""

from __future__ import annotations

import dataclasses as dc

from .._constants import ATTRIBUTE_ICON, ELEMENT_ICON, GLOBAL_ATTRIBUTE_COLOR


class RenderConfigError(ValueError):
    """Raised when the rendering configuration is invalid."""


@dc.dataclass(slots=True)
class RenderConfig:
    """Presentation settings applied when entries become completion rows.

    Attributes
    ----------
    global_attribute_color : str
        Lowercase ``#rrggbb`` colour used for the label of global attributes.
    element_icon : str
        Icon resource name shown next to element rows.
    attribute_icon : str
        Icon resource name shown next to attribute rows.
    icon_root : str
        Directory or URL prefix the icon resources are served from.
    icon_extension : str
        Suffix appended to icon resource names, including the dot.
    """

    global_attribute_color: str = GLOBAL_ATTRIBUTE_COLOR
    element_icon: str = ELEMENT_ICON
    attribute_icon: str = ATTRIBUTE_ICON
    icon_root: str = "icons"
    icon_extension: str = ".svg"


__all__ = ["RenderConfig", "RenderConfigError"]
