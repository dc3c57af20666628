"""Load rendering configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _normalize_color, _required_str
from .models import RenderConfig, RenderConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_render_config(path: Path) -> RenderConfig:
    """Load the YAML file describing how completion rows are presented.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file. Settings are read from
        its ``rendering`` mapping; absent keys keep their defaults.

    Returns
    -------
    RenderConfig
        Parsed rendering configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RenderConfigError
        If the ``rendering`` section is not a mapping or holds an invalid
        colour or icon value.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from html_index.config import load_render_config
    >>> config = load_render_config(Path("config/completion.yaml"))  # doctest: +SKIP
    >>> config.global_attribute_color  # doctest: +SKIP
    '#0000ff'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)

    rendering = loaded.get("rendering") or {}
    if not isinstance(rendering, dict):
        msg = "The 'rendering' section must be a mapping."
        raise RenderConfigError(msg)
    return _build_render_config(rendering)


def _build_render_config(payload: typ.Mapping[str, typ.Any]) -> RenderConfig:
    """Build a RenderConfig from the ``rendering`` mapping, applying defaults."""
    base = RenderConfig()
    icons = payload.get("icons") or {}
    if not isinstance(icons, dict):
        msg = "The 'rendering.icons' section must be a mapping."
        raise RenderConfigError(msg)
    return RenderConfig(
        global_attribute_color=_normalize_color(
            payload.get("global_attribute_color", base.global_attribute_color)
        ),
        element_icon=_required_str(
            icons.get("element", base.element_icon), "icons.element"
        ),
        attribute_icon=_required_str(
            icons.get("attribute", base.attribute_icon), "icons.attribute"
        ),
        icon_root=_required_str(payload.get("icon_root", base.icon_root), "icon_root"),
        icon_extension=_required_str(
            payload.get("icon_extension", base.icon_extension), "icon_extension"
        ),
    )


__all__ = ["load_render_config"]
