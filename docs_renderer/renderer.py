"""Render docs Markdown into the HTML served on documentation pages.

:class:`DocRenderer` converts Markdown with :class:`MarkdownConverter` and then
runs the document passes in :data:`DOCUMENT_PASSES` over the parsed fragment.
Directive passes consume their paragraphs, so the order of the tuple matters:
custom ids must land before automatic ids are generated, and anchors must exist
before the table of contents reads heading text.

Example
-------
>>> from docs_renderer import render
>>> html = render("## Getting Started\\n\\n### Setup\\n")
>>> 'id="getting-started-setup"' in html
True
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from bs4 import BeautifulSoup

from .config import RenderOptions
from .converter import MarkdownConverter
from .passes import (
    add_automatic_ids_to_headings,
    add_code_filenames,
    add_custom_classes,
    add_custom_ids,
    add_heading_anchor_links,
    add_table_of_contents,
    fix_curl_highlighting,
    hide_code,
)

logger = logging.getLogger(__name__)

DocumentPass = cabc.Callable[[BeautifulSoup], BeautifulSoup]

DOCUMENT_PASSES: tuple[DocumentPass, ...] = (
    add_custom_ids,
    add_custom_classes,
    add_automatic_ids_to_headings,
    add_heading_anchor_links,
    add_table_of_contents,
    fix_curl_highlighting,
    add_code_filenames,
    hide_code,
)


class DocRenderer:
    """Convert Markdown and post-process the resulting docs HTML."""

    def __init__(
        self, options: RenderOptions | cabc.Mapping[str, typ.Any] | None = None
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        options : RenderOptions or Mapping, optional
            Render options, or a mapping such as ``{"img_classes": "rounded"}``
            converted with :meth:`RenderOptions.from_mapping`. Defaults to
            ``RenderOptions()``.
        """
        match options:
            case None:
                self.options = RenderOptions()
            case RenderOptions():
                self.options = options
            case _:
                self.options = RenderOptions.from_mapping(options)
        self.converter = MarkdownConverter(self.options)

    def render(self, text: str) -> str:
        """Return the post-processed HTML for ``text``.

        Raises
        ------
        DirectiveError
            If a directive paragraph has no preceding element.
        """
        html = self.converter.convert(text)
        soup = BeautifulSoup(html, "html.parser")
        for document_pass in DOCUMENT_PASSES:
            soup = document_pass(soup)
        rendered = str(soup)
        logger.debug("Rendered %d characters of markdown", len(text))
        return rendered


def render(
    text: str, options: RenderOptions | cabc.Mapping[str, typ.Any] | None = None
) -> str:
    """Render ``text`` with a one-off :class:`DocRenderer`."""
    return DocRenderer(options).render(text)


__all__ = ["DOCUMENT_PASSES", "DocRenderer", "DocumentPass", "render"]
