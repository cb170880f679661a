"""Common literal values shared by the converter and the document passes.

Class markers and labels end up in published HTML, so stylesheets, passes, and
tests import them from here instead of repeating the strings.

Examples
--------
>>> from docs_renderer import _constants
>>> _constants.HEADING_CLASS
'Docs__heading'
>>> _constants.TOC_TOKEN
'{:toc}'
"""

HEADING_CLASS = "Docs__heading"
HEADING_ANCHOR_CLASS = "Docs__heading__anchor"
TOC_CLASS = "Docs__toc"
TOC_LABEL = "On this page:"
TOC_TOKEN = "{:toc}"
FIGURE_CLASS = "highlight-figure"
HIDDEN_CODE_SUMMARY = "Show response body"
TEMPLATE_TOKEN_CLASS = "o"
CODESPAN_CLASS = "dark-gray border border-gray rounded"
CODESPAN_STYLE = "padding: .1em .25em; font-size: 85%"

ID_DIRECTIVE = "{: id="
CLASS_DIRECTIVE = "{: class="
CODEBLOCK_FILE_DIRECTIVE = "{: codeblock-file="
HIDDEN_CODE_DIRECTIVE = '{: code="hidden"'
