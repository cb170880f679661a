"""Cyclopts CLI entrypoint for rendering docs Markdown to HTML.

The ``docs-render`` console script renders a single Markdown file into the
post-processed HTML fragment used on docs pages, and emits the Pygments
stylesheet that matches the highlighted code blocks.

Examples
--------
Render a page to stdout:

>>> from docs_renderer.cli import app
>>> app(["render", "pages/getting-started.md"])  # doctest: +SKIP

Write the fragment and stylesheet next to each other:

>>> app(
...     ["render", "pages/getting-started.md", "--output", "public/start.html"]
... )  # doctest: +SKIP
>>> app(["stylesheet", "--output", "public/highlight.css"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import RenderOptions, load_render_config
from .converter import MarkdownConverter
from .renderer import DocRenderer

app = App(name="docs-render", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_options(config: Path | None) -> RenderOptions:
    """Return options from ``config`` or the defaults when no file is given."""
    if config is None:
        return RenderOptions()
    return load_render_config(config)


def _emit(content: str, output: Path | None) -> None:
    """Write ``content`` to ``output`` or stdout."""
    if output is None:
        sys.stdout.write(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Render a Markdown file into docs HTML.")
def render(
    source: typ.Annotated[Path, Parameter(help="Markdown file to render")],
    *,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write HTML here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to renderer config", env_var="INPUT_CONFIG"),
    ] = None,
    img_classes: typ.Annotated[
        str | None,
        Parameter(help="Override the CSS classes applied to images"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Render ``source`` and write the resulting HTML fragment.

    Parameters
    ----------
    source : Path
        Markdown file to render.
    output : Path or None, optional
        Destination file; when ``None`` the HTML is written to stdout.
    config : Path or None, optional
        YAML renderer configuration (overridable via ``INPUT_CONFIG``).
    img_classes : str or None, optional
        Replaces ``img_classes`` from the configuration.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    FileNotFoundError
        If ``source`` does not exist.
    DirectiveError
        If the Markdown contains a directive with nothing to apply to.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if not source.exists():
        msg = f"Markdown source '{source}' not found."
        raise FileNotFoundError(msg)
    options = _load_options(config)
    if img_classes is not None:
        options = dc.replace(options, img_classes=img_classes)
    html = DocRenderer(options).render(source.read_text(encoding="utf-8"))
    _emit(html, output)


@app.command(help="Emit the Pygments stylesheet for highlighted code blocks.")
def stylesheet(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to renderer config", env_var="INPUT_CONFIG"),
    ] = None,
    style: typ.Annotated[
        str | None, Parameter(help="Override the Pygments style name")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write CSS here instead of stdout")
    ] = None,
) -> None:
    """Write the CSS matching the configured highlight style."""
    options = _load_options(config)
    if style:
        options = dc.replace(options, pygments_style=style)
    _emit(MarkdownConverter(options).stylesheet, output)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs-render`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
