"""Markdown conversion for docs pages: emoji, highlighting, and image proxying."""

from .camo import build_camo_url
from .extensions import DocsMarkdownExtension
from .renderer import MarkdownConverter

__all__ = ["DocsMarkdownExtension", "MarkdownConverter", "build_camo_url"]
