"""Consume ``{: ...}`` directive paragraphs written in docs Markdown.

A directive is a paragraph of its own placed directly after the element it
targets::

    ```bash
    curl https://api.example.com/builds
    ```
    {: codeblock-file="request.sh"}

Each pass removes the paragraphs it understands and applies their payload to
the preceding sibling element. A directive with nothing before it is an
authoring mistake and raises :class:`DirectiveError`; a directive whose value
cannot be parsed is logged and dropped.
"""

from __future__ import annotations

import logging
import re
import typing as typ

from docs_renderer._constants import (
    CLASS_DIRECTIVE,
    CODEBLOCK_FILE_DIRECTIVE,
    FIGURE_CLASS,
    HIDDEN_CODE_DIRECTIVE,
    HIDDEN_CODE_SUMMARY,
    ID_DIRECTIVE,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r'id="(.*)"}')
CLASS_PATTERN = re.compile(r'class="(.*)"}')
CODEBLOCK_FILE_PATTERN = re.compile(r'codeblock-file="(.*)"}')


class DirectiveError(ValueError):
    """Raised when a directive paragraph has no element to apply to."""


def _directives(
    soup: BeautifulSoup, prefix: str
) -> cabc.Iterator[tuple[Tag, Tag, str]]:
    """Yield ``(paragraph, target, text)`` for top-level directives starting with ``prefix``."""
    for node in soup.find_all("p", recursive=False):
        text = node.get_text()
        if not text.startswith(prefix):
            continue
        target = node.find_previous_sibling(True)
        if target is None:
            msg = f"Directive '{text.strip()}' has no preceding element to apply to."
            raise DirectiveError(msg)
        yield node, target, text


def _extract(pattern: re.Pattern[str], text: str) -> str | None:
    """Return the quoted directive value, or ``None`` after logging a malformed one."""
    match = pattern.search(text)
    if match is None:
        logger.warning("Ignoring malformed directive %r", text.strip())
        return None
    return match.group(1)


def add_custom_ids(soup: BeautifulSoup) -> BeautifulSoup:
    """Apply ``{: id="..."}`` directives to the preceding element."""
    for node, target, text in _directives(soup, ID_DIRECTIVE):
        value = _extract(ID_PATTERN, text)
        if value is not None:
            target["id"] = value
            logger.debug("Set id=%r on <%s>", value, target.name)
        node.decompose()
    return soup


def add_custom_classes(soup: BeautifulSoup) -> BeautifulSoup:
    """Apply ``{: class="..."}`` directives to the preceding element."""
    for node, target, text in _directives(soup, CLASS_DIRECTIVE):
        value = _extract(CLASS_PATTERN, text)
        if value is not None:
            target["class"] = value
            logger.debug("Set class=%r on <%s>", value, target.name)
        node.decompose()
    return soup


def add_code_filenames(soup: BeautifulSoup) -> BeautifulSoup:
    """Wrap the preceding block in a captioned ``<figure>``."""
    for node, target, text in _directives(soup, CODEBLOCK_FILE_DIRECTIVE):
        filename = _extract(CODEBLOCK_FILE_PATTERN, text)
        if filename is not None:
            figure = target.wrap(soup.new_tag("figure", attrs={"class": FIGURE_CLASS}))
            caption = soup.new_tag("figcaption")
            caption.string = filename
            figure.insert(0, caption)
        node.decompose()
    return soup


def hide_code(soup: BeautifulSoup) -> BeautifulSoup:
    """Collapse the preceding block into a ``<details>`` disclosure."""
    for node, target, _text in _directives(soup, HIDDEN_CODE_DIRECTIVE):
        details = target.wrap(soup.new_tag("details"))
        summary = soup.new_tag("summary")
        summary.string = HIDDEN_CODE_SUMMARY
        details.insert(0, summary)
        node.decompose()
    return soup


__all__ = [
    "DirectiveError",
    "add_code_filenames",
    "add_custom_classes",
    "add_custom_ids",
    "hide_code",
]
