"""Load and validate renderer configuration.

This subpackage parses an optional YAML file describing image classes, the
Pygments style, and the Camo image proxy, and produces a
:class:`RenderOptions` instance that :class:`~docs_renderer.DocRenderer`
consumes. The primary entry point is :func:`load_render_config`.

Examples
--------
>>> from docs_renderer.config import RenderOptions
>>> RenderOptions(img_classes="rounded").img_classes
'rounded'
"""

from .loader import CAMO_KEY_ENV, load_render_config
from .models import CamoConfig, ConfigError, RenderOptions

__all__ = [
    "CAMO_KEY_ENV",
    "CamoConfig",
    "ConfigError",
    "RenderOptions",
    "load_render_config",
]
