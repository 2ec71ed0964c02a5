#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the copymd library.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Tag Classification - Tag names grouped by how the serializer treats them
3. Markdown Formatting - Defaults for the serializer
4. HTML Tree Provider - Defaults for the BeautifulSoup adapter
5. Dependencies - Packages checked at the adapter boundary
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

TableOverflowMode = Literal["extend", "truncate"]
HtmlParserType = Literal["html.parser", "lxml", "html5lib"]
CopyMode = Literal["markdown", "quote", "code"]

# =============================================================================
# Tag Classification
# =============================================================================

STRONG_TAGS = frozenset({"strong", "b"})
EMPHASIS_TAGS = frozenset({"em", "i"})
HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LIST_TAGS = frozenset({"ul", "ol"})
TABLE_CELL_TAGS = frozenset({"th", "td"})

# Interactive widgets and embedded media; removed from the output entirely
IGNORED_TAGS = frozenset(
    {
        "button",
        "form",
        "input",
        "textarea",
        "select",
        "option",
        "label",
        "svg",
        "script",
        "style",
        "noscript",
        "template",
        "nav",
        "footer",
        "iframe",
        "img",
        "picture",
        "source",
        "video",
        "audio",
        "canvas",
        "object",
        "embed",
    }
)

# =============================================================================
# Markdown Formatting
# =============================================================================

MARKDOWN_SPECIAL_CHARS = "*_`"
LANGUAGE_CLASS_PATTERN = r"language-([A-Za-z0-9_-]+)"

LIST_INDENT_STEP = 2
ORDERED_LIST_START = 1
UNORDERED_BULLET = "- "

TABLE_SEPARATOR_CELL = "---"
TABLE_CELL_LINE_BREAK = "<br>"

DEFAULT_ESCAPE_SPECIAL = True
DEFAULT_TABLE_OVERFLOW: TableOverflowMode = "extend"
DEFAULT_MAX_DEPTH = 150
DEFAULT_PLAIN_TEXT_LANGUAGE = "text"

# =============================================================================
# HTML Tree Provider
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParserType = "html.parser"

# Block-level containers; whitespace at their edges carries no meaning
BLOCK_TAGS = frozenset(
    {
        "html",
        "body",
        "div",
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "section",
        "article",
        "main",
        "header",
        "footer",
        "aside",
        "nav",
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        "blockquote",
        "pre",
        "hr",
        "table",
        "caption",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "th",
        "td",
        "figure",
        "figcaption",
        "details",
        "summary",
        "address",
    }
)
DEFAULT_COLLAPSE_WHITESPACE = True

# Chrome stripped from a chat message before conversion
DEFAULT_STRIP_SELECTORS: tuple[str, ...] = (
    "button",
    '[role="button"]',
    "nav",
    "footer",
    "form",
    "input",
    "textarea",
    "svg",
    '[data-testid*="copy"]',
    '[data-testid*="share"]',
    '[class*="toolbar"]',
    '[class*="action"]',
)

# =============================================================================
# Dependencies
# =============================================================================

DEPS_HTML = [("beautifulsoup4", "bs4")]
HTML_PARSER_PACKAGES: dict[str, tuple[str, str]] = {
    "lxml": ("lxml", ""),
    "html5lib": ("html5lib", ""),
}

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "COPYMD_CONFIG"
CONFIG_FILENAMES = (".copymd.toml", ".copymd.yaml", ".copymd.yml", ".copymd.json")
