"""Heading identifiers and anchor links for docs pages."""

from __future__ import annotations

import re
import typing as typ
import unicodedata

from docs_renderer._constants import HEADING_ANCHOR_CLASS, HEADING_CLASS

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup


def slugify(text: str) -> str:
    """Convert ``text`` into a lowercase, hyphen-separated URL slug.

    Examples
    --------
    >>> slugify("Getting Started")
    'getting-started'
    >>> slugify("Pipelines & Agents")
    'pipelines-and-agents'
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode()
    lowered = folded.lower().replace("&", " and ")
    lowered = re.sub(r"['’]", "", lowered)
    slug = re.sub(r"[^a-z0-9]+", "-", lowered).strip("-")
    return slug or "section"


def assign_heading_ids(soup: BeautifulSoup) -> list[str]:
    """Give top-level ``h2``/``h3`` headings ids and return the ``h2`` ids in order.

    Second-level headings without an id use the slug of their text.
    Third-level headings without an id are prefixed with the id of the nearest
    preceding ``h2``; ids that were already present are never replaced, so the
    function is idempotent.
    """
    h2_ids: list[str] = []
    section_id: str | None = None
    for node in soup.find_all(["h2", "h3"], recursive=False):
        existing = node.get("id")
        if node.name == "h2":
            if not existing:
                existing = node["id"] = slugify(node.get_text())
            h2_ids.append(existing)
            section_id = existing
        elif not existing:
            slug = slugify(node.get_text())
            node["id"] = f"{section_id}-{slug}" if section_id else slug
    return h2_ids


def add_automatic_ids_to_headings(soup: BeautifulSoup) -> BeautifulSoup:
    """Document pass wrapper around :func:`assign_heading_ids`."""
    assign_heading_ids(soup)
    return soup


def add_heading_anchor_links(soup: BeautifulSoup) -> BeautifulSoup:
    """Mark headings with the docs class and append a self-link anchor."""
    for node in soup.find_all(["h2", "h3"], recursive=False):
        node["class"] = HEADING_CLASS
        anchor = soup.new_tag(
            "a",
            attrs={
                "href": f"#{node.get('id', '')}",
                "aria-hidden": "true",
                "class": HEADING_ANCHOR_CLASS,
            },
        )
        node.append(anchor)
    return soup


__all__ = [
    "add_automatic_ids_to_headings",
    "add_heading_anchor_links",
    "assign_heading_ids",
    "slugify",
]
