"""Common literal values used across html_index.

Keeping the default icon names and label colour here lets the configuration
models, renderers, and tests agree on the same values. Intended for internal
use within the html_index package.

Examples
--------
>>> from html_index import _constants
>>> _constants.ICON_FILENAME_TEMPLATE.format(
...     root="icons", name=_constants.ELEMENT_ICON, extension=".svg"
... )
'icons/ic_element_48dp.svg'
"""

GLOBAL_ATTRIBUTE_COLOR = "#0000ff"
ELEMENT_ICON = "ic_element_48dp"
ATTRIBUTE_ICON = "ic_attribute_48dp"
ICON_FILENAME_TEMPLATE = "{root}/{name}{extension}"
