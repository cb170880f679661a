"""Unit tests for the individual document passes.

Each pass is exercised on a hand-written HTML fragment so the behaviour can be
checked without going through Markdown conversion.

Usage
-----
Run ``pytest tests/test_passes.py -v``.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from docs_renderer.passes import (
    DirectiveError,
    add_code_filenames,
    add_custom_ids,
    add_table_of_contents,
    assign_heading_ids,
    fix_curl_highlighting,
    hide_code,
    slugify,
)
from docs_renderer.renderer import DOCUMENT_PASSES


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Getting Started", "getting-started"),
        ("Pipelines & Agents", "pipelines-and-agents"),
        ("What's new?", "whats-new"),
        ("Café au lait", "cafe-au-lait"),
        ("  --Trim me--  ", "trim-me"),
        ("!!!", "section"),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    """Slugs are lowercase ASCII joined by single hyphens."""
    assert slugify(text) == expected


def test_assign_heading_ids_is_idempotent() -> None:
    """A second run over already-identified headings changes nothing."""
    soup = _soup("<h2>Alpha</h2><h3>One</h3><h2>Beta</h2><h3>Two</h3>")
    first = assign_heading_ids(soup)
    snapshot = str(soup)
    second = assign_heading_ids(soup)
    assert first == second == ["alpha", "beta"]
    assert str(soup) == snapshot


def test_h3_before_any_section_uses_its_own_slug() -> None:
    """Third-level headings ahead of the first h2 are not prefixed."""
    soup = _soup("<h3>Preface</h3><h2>Alpha</h2>")
    assign_heading_ids(soup)
    assert soup.find("h3")["id"] == "preface"


def test_nested_headings_are_ignored() -> None:
    """Only headings at the top level of the fragment are identified."""
    soup = _soup("<blockquote><h2>Quoted</h2></blockquote><h2>Real</h2>")
    assert assign_heading_ids(soup) == ["real"]
    assert soup.find("blockquote").find("h2").get("id") is None


def test_consecutive_directives_target_the_same_element() -> None:
    """Directives stacked under one element all resolve to it."""
    soup = _soup(
        '<pre><code>body</code></pre>'
        '<p>{: codeblock-file="response.json"}</p>'
        '<p>{: code="hidden"}</p>'
    )
    add_code_filenames(soup)
    hide_code(soup)
    details = soup.find("details")
    assert details.find("figure").find("figcaption").get_text() == "response.json"
    assert soup.find("p") is None


def test_missing_target_names_the_directive() -> None:
    """The error message quotes the orphaned directive."""
    soup = _soup('<p>{: codeblock-file="a.sh"}</p>')
    with pytest.raises(DirectiveError, match='codeblock-file="a.sh"'):
        add_code_filenames(soup)


def test_custom_id_pattern_is_greedy_to_closing_brace() -> None:
    """Quoted values may contain quotes as long as the directive closes."""
    soup = _soup('<h2>T</h2><p>{: id="a"b"}</p>')
    add_custom_ids(soup)
    assert soup.find("h2")["id"] == 'a"b'


def test_toc_ignores_paragraphs_with_extra_text() -> None:
    """Only an exact ``{:toc}`` paragraph is replaced."""
    soup = _soup('<p>{:toc} please</p><h2 id="a">A</h2>')
    add_table_of_contents(soup)
    assert soup.find("p").get_text() == "{:toc} please"


def test_toc_text_is_escaped() -> None:
    """Heading text is inserted as text, never as markup."""
    soup = _soup('<p>{:toc}</p><h2 id="x">&lt;b&gt;bold&lt;/b&gt;</h2>')
    add_table_of_contents(soup)
    assert "&lt;b&gt;bold&lt;/b&gt;" in str(soup.find("ul"))


def test_curl_templates_spanning_lines() -> None:
    """Templates may span line breaks inside a single text node."""
    soup = _soup("<pre><code>curl -d '{\n  \"a\": 1\n}' https://x</code></pre>")
    fix_curl_highlighting(soup)
    span = soup.find("span", class_="o")
    assert span.get_text() == '{\n  "a": 1\n}'


def test_curl_templates_split_across_tokens() -> None:
    """Tokens that cut through a placeholder are split and merged into one span."""
    soup = _soup(
        '<pre><code><span class="n">curl</span> https://x/v2/'
        '<span class="o">{</span><span class="n">org.sl</span>'
        '<span class="n">ug}/builds</span></code></pre>'
    )
    fix_curl_highlighting(soup)
    code = soup.find("code")
    spans = code.find_all("span", class_="o")
    assert [span.get_text() for span in spans] == ["{org.slug}"]
    assert code.get_text() == "curl https://x/v2/{org.slug}/builds"
    assert code.find_all("span", class_="n")[-1].get_text() == "/builds"


def test_pass_order_is_fixed() -> None:
    """Directive passes that feed heading ids run before id generation."""
    names = [document_pass.__name__ for document_pass in DOCUMENT_PASSES]
    assert names == [
        "add_custom_ids",
        "add_custom_classes",
        "add_automatic_ids_to_headings",
        "add_heading_anchor_links",
        "add_table_of_contents",
        "fix_curl_highlighting",
        "add_code_filenames",
        "hide_code",
    ]
