"""Render docs Markdown into enriched, highlighted HTML.

The package converts Markdown with Python-Markdown and Pygments, then applies
a fixed sequence of document passes: directive handling, heading ids and
anchors, the on-page table of contents, and code-block annotations.

Exports
-------
- ``render``: Render Markdown text with optional options in one call.
- ``DocRenderer``: Reusable renderer bound to a set of options.
- ``RenderOptions``: Options such as image classes and the Camo proxy.
- ``DirectiveError``: Raised for directives with nothing to apply to.
- ``app`` / ``main``: The ``docs-render`` command line.

Examples
--------
>>> from docs_renderer import render
>>> "Docs__heading" in render("## Install\\n")
True
"""

from __future__ import annotations

from .cli import app, main
from .config import RenderOptions
from .passes import DirectiveError
from .renderer import DocRenderer, render

__all__ = ["DirectiveError", "DocRenderer", "RenderOptions", "app", "main", "render"]
