"""Load and validate completion rendering configuration.

This subpackage parses an optional YAML file whose ``rendering`` section
overrides the colour used for global attributes and the icon resources shown
beside element and attribute rows. :func:`load_render_config` applies the
defaults from :class:`RenderConfig` for every key the file leaves out.

Examples
--------
>>> from pathlib import Path
>>> from html_index.config import load_render_config
>>> config = load_render_config(Path("config/completion.yaml"))  # doctest: +SKIP
>>> config.element_icon  # doctest: +SKIP
'ic_element_48dp'
"""

from .loader import load_render_config
from .models import RenderConfig, RenderConfigError

__all__ = ["RenderConfig", "RenderConfigError", "load_render_config"]
