"""Build signed Camo image-proxy URLs."""

from __future__ import annotations

import hashlib
import hmac
import typing as typ

if typ.TYPE_CHECKING:
    from docs_renderer.config import CamoConfig


def build_camo_url(url: str | None, camo: CamoConfig | None) -> str:
    """Return ``url`` routed through the Camo proxy described by ``camo``.

    The proxied form is ``<host>/<hmac-sha1 hex digest>/<hex-encoded url>``.
    Empty URLs, URLs already served by the proxy host, and calls without a
    proxy configuration are returned unchanged.

    Examples
    --------
    >>> build_camo_url("https://example.com/a.png", None)
    'https://example.com/a.png'
    """
    if not url or camo is None:
        return url or ""
    host = camo.host.rstrip("/")
    if url.startswith(f"{host}/"):
        return url
    encoded = url.encode("utf-8")
    digest = hmac.new(camo.key.encode("utf-8"), encoded, hashlib.sha1).hexdigest()
    return f"{host}/{digest}/{encoded.hex()}"


__all__ = ["build_camo_url"]
