"""Typed dataclasses describing renderer configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class ConfigError(ValueError):
    """Raised when the renderer configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class CamoConfig:
    """Image proxy host and the shared secret used to sign proxied URLs."""

    host: str
    key: str


@dc.dataclass(slots=True, frozen=True)
class RenderOptions:
    """Options threaded through a single render call.

    Attributes
    ----------
    img_classes : str
        CSS class string applied to every rendered ``<img>``.
    pygments_style : str
        Pygments style used for the highlight stylesheet.
    highlight_css_class : str
        Class name on the wrapper ``<div>`` of highlighted code blocks.
    camo : CamoConfig or None
        Image proxy configuration; ``None`` leaves image URLs untouched.
    """

    img_classes: str = ""
    pygments_style: str = "default"
    highlight_css_class: str = "highlight"
    camo: CamoConfig | None = None

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> RenderOptions:
        """Build options from a plain mapping, ignoring unknown keys."""
        base = cls()
        camo = payload.get("camo")
        match camo:
            case CamoConfig() | None:
                pass
            case {"host": str() as host, "key": str() as key}:
                camo = CamoConfig(host=host, key=key)
            case _:
                msg = "'camo' must provide string 'host' and 'key' values."
                raise ConfigError(msg)
        return cls(
            img_classes=str(payload.get("img_classes", base.img_classes) or ""),
            pygments_style=payload.get("pygments_style", base.pygments_style),
            highlight_css_class=payload.get(
                "highlight_css_class", base.highlight_css_class
            ),
            camo=camo,
        )


__all__ = ["CamoConfig", "ConfigError", "RenderOptions"]
