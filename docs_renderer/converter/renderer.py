"""Convert docs Markdown into raw, highlighted HTML."""

from __future__ import annotations

import re
import typing as typ
from html import escape

import emoji
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .extensions import DocsMarkdownExtension

if typ.TYPE_CHECKING:
    from docs_renderer.config import RenderOptions

CODE_BLOCK_PATTERN = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ ]*\{?[ ]*\.?(?P<lang>[A-Za-z0-9_+#.-]+)?[^\n]*\n"
    r".*?^(?P=fence)[ ]*$",
    re.DOTALL | re.MULTILINE,
)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)


class MarkdownConverter:
    """Render docs Markdown with emoji, highlighting, and the docs extension."""

    def __init__(self, options: RenderOptions) -> None:
        """Initialize a converter for ``options``.

        Parameters
        ----------
        options : RenderOptions
            Image classes, Camo proxy, and highlighting settings applied to
            every conversion.
        """
        self.options = options
        self._formatter = HtmlFormatter(
            style=options.pygments_style, cssclass=options.highlight_css_class
        )
        self._open_tag = re.compile(
            f'<div class="{re.escape(options.highlight_css_class)}">'
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{self.options.highlight_css_class}")

    def convert(self, text: str) -> str:
        """Render ``text`` into HTML, expanding emoji shortcodes first."""
        normalized = self._normalize_fenced_blocks(
            emoji.emojize(text, language="alias")
        )
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                DocsMarkdownExtension(self.options),
            ],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": self.options.highlight_css_class,
                    "pygments_style": self.options.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_highlight(html, normalized)

    def _annotate_highlight(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group("lang") or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)
        css_class = escape(self.options.highlight_css_class, quote=True)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return f'<div class="{css_class}" data-language="{escape(lang, quote=True)}">'

        return self._open_tag.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["CODE_BLOCK_PATTERN", "MarkdownConverter"]
