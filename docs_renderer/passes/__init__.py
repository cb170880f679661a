"""Document passes applied to rendered docs HTML.

Every pass takes the parsed document, mutates it in place, and returns it so
passes compose in a fixed order.
"""

from .directives import (
    DirectiveError,
    add_code_filenames,
    add_custom_classes,
    add_custom_ids,
    hide_code,
)
from .headings import (
    add_automatic_ids_to_headings,
    add_heading_anchor_links,
    assign_heading_ids,
    slugify,
)
from .highlighting import fix_curl_highlighting
from .toc import add_table_of_contents

__all__ = [
    "DirectiveError",
    "add_automatic_ids_to_headings",
    "add_code_filenames",
    "add_custom_classes",
    "add_custom_ids",
    "add_heading_anchor_links",
    "add_table_of_contents",
    "assign_heading_ids",
    "fix_curl_highlighting",
    "hide_code",
    "slugify",
]
