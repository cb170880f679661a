"""Load renderer configuration YAML into typed dataclasses."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import CamoConfig, ConfigError, RenderOptions

CAMO_KEY_ENV = "CAMO_KEY"


def load_render_config(path: Path) -> RenderOptions:
    """Load the YAML file describing renderer options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.

    Returns
    -------
    RenderOptions
        Parsed options; keys missing from the file fall back to the
        ``RenderOptions`` defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If the top-level structure is not a mapping or the ``camo`` block is
        incomplete.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_renderer.config import load_render_config
    >>> options = load_render_config(Path("renderer.yaml"))  # doctest: +SKIP
    >>> options.img_classes  # doctest: +SKIP
    'rounded shadow'
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
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    raw["camo"] = _build_camo_config(raw.get("camo"))
    return RenderOptions.from_mapping(raw)


def _build_camo_config(payload: object) -> CamoConfig | None:
    """Return a CamoConfig for ``payload``, reading the key from the env if absent."""
    if payload is None:
        return None
    if not isinstance(payload, dict):
        msg = "'camo' must be a mapping with a 'host' entry."
        raise ConfigError(msg)
    host = str(payload.get("host") or "").strip()
    if not host:
        msg = "'camo.host' is required when a camo block is configured."
        raise ConfigError(msg)
    key = payload.get("key") or os.getenv(CAMO_KEY_ENV)
    if not key:
        msg = f"'camo.key' is missing and {CAMO_KEY_ENV} is not set."
        raise ConfigError(msg)
    return CamoConfig(host=host.rstrip("/"), key=str(key))


__all__ = ["CAMO_KEY_ENV", "load_render_config"]
