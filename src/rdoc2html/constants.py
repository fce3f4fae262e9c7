#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/constants.py
"""Static configuration tables for rdoc2html.

Everything in this module is immutable, constructed once at import time and
shared read-only by every renderer instance.

"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# =============================================================================
# Renderer defaults
# =============================================================================

DEFAULT_LINE_WIDTH = 76
DEFAULT_WRAP_PARAGRAPHS = True
DEFAULT_FROM_PATH = ""
DEFAULT_MAX_RULE_WEIGHT = 10

# =============================================================================
# List markup
# =============================================================================

# Keyed by ListType value; see rdoc2html.ast.nodes.ListType
LIST_TYPE_TO_HTML: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "BULLET": ("<ul>", "</ul>"),
        "LABEL": ("<dl>", "</dl>"),
        "LALPHA": ('<ol style="display: lower-alpha">', "</ol>"),
        "NOTE": ('<table class="rdoc-list">', "</table>"),
        "NUMBER": ("<ol>", "</ol>"),
        "UALPHA": ('<ol style="display: upper-alpha">', "</ol>"),
    }
)

LIST_ITEM_CLOSE: Mapping[str, str] = MappingProxyType(
    {
        "BULLET": "</li>",
        "LABEL": "</dd>",
        "LALPHA": "</li>",
        "NOTE": "</td></tr>",
        "NUMBER": "</li>",
        "UALPHA": "</li>",
    }
)

# =============================================================================
# Typography (numeric character references only)
# =============================================================================

ENTITY_ELLIPSIS = "&#8230;"
ENTITY_COPYRIGHT = "&#169;"
ENTITY_REGISTERED = "&#174;"
ENTITY_EM_DASH = "&#8212;"
ENTITY_LDQUO = "&#8220;"
ENTITY_RDQUO = "&#8221;"
ENTITY_LSQUO = "&#8216;"
ENTITY_RSQUO = "&#8217;"

TELETYPE_OPEN = "<tt>"
TELETYPE_CLOSE = "</tt>"

# =============================================================================
# Special spans
# =============================================================================

HYPERLINK_PATTERN = r"(?:link:|https?:|mailto:|ftp:|www\.)\S+\w"

# Labeled links. Neither label nor URL may contain brackets, and a word label
# starts at the first word character of its run. The URL must also hold a dot
# with text on both sides, which is checked outside the pattern.
BRACED_LINK_PATTERN = r"\{(?P<label>[^{}\n]*)\}\[(?P<url>[^\s\[\]]+)\]"
WORD_LINK_PATTERN = r"(?<![^\s\[\]])[^\w\s\[\]]*(?P<label>\w[^\s\[\]]*)\[(?P<url>[^\s\[\]]+)\]"

# Schemes whose targets are checked for an image extension
IMAGE_SCHEMES = frozenset({"http", "https", "link"})
IMAGE_EXTENSIONS = ("gif", "png", "jpg", "jpeg", "bmp")
IMAGE_URL_RE = re.compile(r"\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")$")

LOCAL_LINK_SCHEME = "link"
DEFAULT_URL_SCHEME = "http"
