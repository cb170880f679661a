"""Python-Markdown extension that shapes raw HTML for the docs passes.

The extension bundles the conversion tweaks docs pages rely on: directive
lines always become standalone paragraphs, ATX headings require a space after
the hashes, bare URLs are autolinked, images are routed through the Camo
proxy, and inline code spans receive the docs styling.
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown.blockprocessors import HashHeaderProcessor
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from docs_renderer._constants import CODESPAN_CLASS, CODESPAN_STYLE

from .camo import build_camo_url

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from docs_renderer.config import RenderOptions
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    RenderOptions = typ.Any

DIRECTIVE_LINE_PATTERN = re.compile(r"^\{:.*\}\s*$")
BARE_URL_PATTERN = re.compile(
    r"(?<![\w/@.])(?:https?://|www\.)[^\s<>\x02\x03]+", re.IGNORECASE
)
URL_BODY_PATTERN = re.compile(r"(?:https?://|www\.)\w", re.IGNORECASE)
TRAILING_PUNCTUATION = ".,:;!?'\""
NO_AUTOLINK_TAGS = frozenset({"a", "code", "pre"})


class DocsMarkdownExtension(Extension):
    """Register the docs preprocessors and treeprocessors on a Markdown instance."""

    def __init__(self, options: RenderOptions) -> None:
        self.options = options

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register every docs processor on ``md``."""
        md.preprocessors.register(
            DirectiveLinePreprocessor(md), "docs_directive_lines", 15
        )
        md.parser.blockprocessors.register(
            SpacedHashHeaderProcessor(md.parser), "hashheader", 70
        )
        md.treeprocessors.register(
            ImageProxyTreeprocessor(md, self.options), "docs_image_proxy", 14
        )
        md.treeprocessors.register(CodeSpanTreeprocessor(md), "docs_codespans", 13)
        md.treeprocessors.register(AutolinkTreeprocessor(md), "docs_autolink", 12)


class DirectiveLinePreprocessor(Preprocessor):
    """Surround directive lines with blank lines so each is its own paragraph.

    Runs after fenced blocks are stashed, so directive-looking lines inside
    code samples are never touched.
    """

    def run(self, lines: list[str]) -> list[str]:
        result: list[str] = []
        for line in lines:
            if DIRECTIVE_LINE_PATTERN.match(line):
                result.extend(["", line.rstrip(), ""])
            else:
                result.append(line)
        return result


class SpacedHashHeaderProcessor(HashHeaderProcessor):
    """ATX heading processor that requires whitespace after the hashes."""

    RE = re.compile(
        r"(?:^|\n)(?P<level>#{1,6})[ \t]+(?P<header>(?:\\.|[^\\])*?)#*(?:\n|$)"
    )


class ImageProxyTreeprocessor(Treeprocessor):
    """Route image sources through Camo and apply the configured classes."""

    def __init__(self, md: Markdown, options: RenderOptions) -> None:
        super().__init__(md)
        self.options = options

    def run(self, root: Element) -> Element:
        for element in root.iter("img"):
            element.set("src", build_camo_url(element.get("src"), self.options.camo))
            element.set("alt", element.get("alt") or "")
            element.set("class", self.options.img_classes)
            element.attrib.pop("title", None)
        return root


class CodeSpanTreeprocessor(Treeprocessor):
    """Style inline ``<code>`` spans that are not part of a ``<pre>`` block."""

    def run(self, root: Element) -> Element:
        for parent in root.iter():
            if parent.tag == "pre":
                continue
            for child in parent:
                if child.tag == "code":
                    child.set("class", CODESPAN_CLASS)
                    child.set("style", CODESPAN_STYLE)
        return root


class AutolinkTreeprocessor(Treeprocessor):
    """Turn bare ``http(s)://`` and ``www.`` URLs in text into links."""

    def run(self, root: Element) -> Element:
        self._linkify(root)
        return root

    def _linkify(self, element: Element) -> None:
        children = list(element)
        for child in children:
            if child.tag not in NO_AUTOLINK_TAGS:
                self._linkify(child)

        element.text, links = _split_links(element.text)
        for offset, link in enumerate(links):
            element.insert(offset, link)
        for child in children:
            child.tail, links = _split_links(child.tail)
            index = list(element).index(child) + 1
            for offset, link in enumerate(links):
                element.insert(index + offset, link)


def _split_links(text: str | None) -> tuple[str | None, list[Element]]:
    """Split ``text`` into leading text and anchor elements carrying the rest as tails."""
    if not text:
        return text, []

    head: str | None = None
    links: list[Element] = []
    cursor = 0
    for match in BARE_URL_PATTERN.finditer(text):
        url = _trim_url(match.group(0))
        if not URL_BODY_PATTERN.match(url):
            continue
        leading = text[cursor : match.start()]
        if links:
            links[-1].tail = leading
        else:
            head = leading
        anchor = etree.Element("a")
        anchor.set("href", url if "://" in url else f"http://{url}")
        anchor.text = url
        links.append(anchor)
        cursor = match.start() + len(url)
    if not links:
        return text, []
    links[-1].tail = text[cursor:]
    return head, links


def _trim_url(url: str) -> str:
    """Drop trailing punctuation and unbalanced closing parentheses."""
    while url:
        if url[-1] in TRAILING_PUNCTUATION:
            url = url[:-1]
        elif url[-1] == ")" and url.count(")") > url.count("("):
            url = url[:-1]
        else:
            break
    return url


__all__ = [
    "AutolinkTreeprocessor",
    "CodeSpanTreeprocessor",
    "DirectiveLinePreprocessor",
    "DocsMarkdownExtension",
    "ImageProxyTreeprocessor",
    "SpacedHashHeaderProcessor",
]
