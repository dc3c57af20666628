"""Utility helpers shared by the rendering configuration loader."""

from __future__ import annotations

import re

from .models import RenderConfigError

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _normalize_color(value: object) -> str:
    """Return ``value`` as a lowercase ``#rrggbb`` colour string.

    Three-digit shorthand (``#00f``) is expanded to its six-digit form.

    Raises
    ------
    RenderConfigError
        If ``value`` is not a ``#rgb`` or ``#rrggbb`` string.
    """
    if not isinstance(value, str) or not HEX_COLOR_PATTERN.match(value.strip()):
        msg = f"Invalid colour {value!r}; expected '#rgb' or '#rrggbb'."
        raise RenderConfigError(msg)
    digits = value.strip()[1:].lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def _required_str(value: object, field: str) -> str:
    """Return a stripped, non-empty string or raise for ``field``."""
    if not isinstance(value, str) or not value.strip():
        msg = f"'{field}' must be a non-empty string, got {value!r}."
        raise RenderConfigError(msg)
    return value.strip()


__all__ = ["HEX_COLOR_PATTERN", "_normalize_color", "_required_str"]
