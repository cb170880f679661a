"""Highlight URI template placeholders inside ``curl`` examples."""

from __future__ import annotations

import re
import typing as typ

from bs4 import NavigableString, Tag

from docs_renderer._constants import TEMPLATE_TOKEN_CLASS

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup, PageElement

URI_TEMPLATE_PATTERN = re.compile(r"\{.*?\}", re.DOTALL | re.IGNORECASE)


def fix_curl_highlighting(soup: BeautifulSoup) -> BeautifulSoup:
    """Wrap ``{placeholder}`` segments of curl commands in an operator span.

    Placeholders are located on the text of the whole ``<code>`` element, so a
    template that Pygments split into several tokens (``{``, ``id``, ``}`` in
    shell samples) still ends up inside a single span.
    """
    for code in soup.find_all("code"):
        text = code.get_text()
        if not text.startswith("curl "):
            continue
        for match in URI_TEMPLATE_PATTERN.finditer(text):
            _wrap_range(soup, code, match.start(), match.end())
    return soup


def _text_length(node: PageElement) -> int:
    if isinstance(node, Tag):
        return len(node.get_text())
    return len(str(node))


def _children_with_offsets(element: Tag) -> list[tuple[PageElement, int, int]]:
    """Return ``(child, start, end)`` text offsets for the children of ``element``."""
    spans: list[tuple[PageElement, int, int]] = []
    cursor = 0
    for child in list(element.children):
        length = _text_length(child)
        spans.append((child, cursor, cursor + length))
        cursor += length
    return spans


def _split_at(soup: BeautifulSoup, element: Tag, offset: int) -> None:
    """Split the child of ``element`` straddling text ``offset`` into two siblings."""
    for child, start, end in _children_with_offsets(element):
        if not start < offset < end:
            continue
        cut = offset - start
        if isinstance(child, Tag):
            _split_at(soup, child, cut)
            attrs = {
                key: list(value) if isinstance(value, list) else value
                for key, value in child.attrs.items()
            }
            left = soup.new_tag(child.name, attrs=attrs)
            for grandchild, _start, grand_end in _children_with_offsets(child):
                if grand_end <= cut:
                    left.append(grandchild.extract())
            child.insert_before(left)
        else:
            value = str(child)
            child.replace_with(NavigableString(value[:cut]), NavigableString(value[cut:]))
        return


def _wrap_range(soup: BeautifulSoup, code: Tag, start: int, end: int) -> None:
    """Move the children of ``code`` covering ``[start, end)`` into one span."""
    _split_at(soup, code, start)
    _split_at(soup, code, end)
    covered = [
        child
        for child, child_start, child_end in _children_with_offsets(code)
        if start <= child_start and child_end <= end and child_end > child_start
    ]
    if not covered:
        return
    wrapper = soup.new_tag("span", attrs={"class": TEMPLATE_TOKEN_CLASS})
    covered[0].insert_before(wrapper)
    for child in covered:
        wrapper.append(child.extract())
    for inner in wrapper.find_all("span", class_=TEMPLATE_TOKEN_CLASS):
        if inner.get("class") == [TEMPLATE_TOKEN_CLASS]:
            inner.unwrap()


__all__ = ["URI_TEMPLATE_PATTERN", "fix_curl_highlighting"]
