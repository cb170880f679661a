"""Replace ``{:toc}`` paragraphs with an on-page table of contents."""

from __future__ import annotations

import typing as typ

from docs_renderer._constants import TOC_CLASS, TOC_LABEL, TOC_TOKEN

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag


def add_table_of_contents(soup: BeautifulSoup) -> BeautifulSoup:
    """Swap each ``{:toc}`` paragraph for a list of links to the ``h2`` headings.

    The paragraph is removed outright when the page has no second-level
    headings.
    """
    headings = soup.find_all("h2", recursive=False)
    for node in soup.find_all("p", recursive=False):
        if node.get_text() != TOC_TOKEN:
            continue
        if headings:
            node.replace_with(_build_toc(soup, headings))
        else:
            node.decompose()
    return soup


def _build_toc(soup: BeautifulSoup, headings: list[Tag]) -> Tag:
    container = soup.new_tag("div", attrs={"class": TOC_CLASS})
    label = soup.new_tag("p")
    label.string = TOC_LABEL
    container.append(label)
    entries = soup.new_tag("ul")
    for heading in headings:
        item = soup.new_tag("li")
        link = soup.new_tag("a", href=f"#{heading.get('id', '')}")
        link.string = heading.get_text().strip()
        item.append(link)
        entries.append(item)
    container.append(entries)
    return container


__all__ = ["add_table_of_contents"]
