#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the all2rst library.

This module centralizes the hardcoded values, lookup tables and default
configuration constants used by the reStructuredText writer.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Renderer Defaults - Default values for renderer options
3. Escaping Tables - Character classes used by the escaper
4. Inline Adjacency Tables - Characters that may touch inline markup
5. Block Tables - Class and attribute lookups used by block rendering
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

WrapMode = Literal["auto", "preserve", "none"]
QuoteType = Literal["single", "double"]
MathType = Literal["inline", "display"]
Alignment = Literal["left", "center", "right"]
ListNumberStyle = Literal[
    "default",
    "example",
    "decimal",
    "lower_roman",
    "upper_roman",
    "lower_alpha",
    "upper_alpha",
]
ListNumberDelim = Literal["default", "period", "one_paren", "two_parens"]
RstCodeDirective = Literal["code", "code-block", "sourcecode"]

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_RST_WRAP_MODE: WrapMode = "auto"
DEFAULT_RST_COLUMNS = 72
DEFAULT_RST_LIST_TABLES = False
DEFAULT_RST_TABLE_OF_CONTENTS = False
DEFAULT_RST_TOC_DEPTH = 3
DEFAULT_RST_NUMBER_SECTIONS = False
DEFAULT_RST_REFERENCE_LINKS = False
DEFAULT_RST_SMART = False
DEFAULT_RST_LITERATE_HASKELL = False
DEFAULT_RST_HEADING_CHARS = "=-~^'"
DEFAULT_RST_CODE_DIRECTIVE: RstCodeDirective = "code"
DEFAULT_RST_STANDALONE = False
DEFAULT_MAX_NESTING_DEPTH = 200

DEFAULT_TEMPLATE_NAME = "default.rst.jinja2"

# Indentation used for directive bodies, block quotes and footnote bodies
RST_INDENT = 3

# =============================================================================
# Escaping Tables
# =============================================================================

# Characters that delimit inline markup
RST_MARKUP_CHARS = frozenset("*_|`")

# Characters that trigger the slow escaping path
RST_SPECIAL_CHARS = frozenset("\\_`*|")
RST_SMART_SPECIAL_CHARS = frozenset("-.\"'")

# Inline markup boundary tables. The category sets are fixed; only the
# per-character category lookup goes through unicodedata.
RST_PRECEDE_ASCII = frozenset("-:/'\"<([{")
RST_FOLLOW_ASCII = frozenset("-.,:;!?'\")]}>")
RST_PRECEDE_CATEGORIES = frozenset({"Ps", "Pi", "Pf", "Pd", "Po"})
RST_FOLLOW_CATEGORIES = frozenset({"Pe", "Pi", "Pf", "Pd", "Po"})

# Typographic characters mapped back to their ASCII smart-punctuation triggers
RST_UNSMARTIFY_MAP = {
    "’": "'",
    "–": "--",
    "—": "---",
    "…": "...",
    "“": "\"",
    "”": "\"",
    "‘": "'",
}

# =============================================================================
# Inline Adjacency Tables
# =============================================================================

# Separator inserted between inlines whose concatenation would be misparsed
RST_SEPARATOR = "\\ "

SAFE_AFTER_COMPLEX = frozenset("-.,:;!?\\/'\")]}>–—")
SAFE_BEFORE_COMPLEX = frozenset("-:/'\"<([{–—")

# Bracketing pairs that look like a delimiter pair when they touch
MATCHING_PAIRS = frozenset(
    {
        ("'", "'"),
        ('"', '"'),
        ("(", ")"),
        ("[", "]"),
        ("{", "}"),
        ("<", ">"),
    }
)

# =============================================================================
# Block Tables
# =============================================================================

RST_ADMONITIONS = frozenset(
    {
        "attention",
        "caution",
        "danger",
        "error",
        "hint",
        "important",
        "note",
        "tip",
        "warning",
        "admonition",
    }
)

# Code block classes that never name the highlighting language
CODE_BLOCK_IGNORED_CLASSES = frozenset({"sourceCode", "literate", "numberLines", "number-lines", "example"})

HORIZONTAL_RULE = "--------------"

# Image substitution alignment: None means the class is understood but has
# no ``:align:`` equivalent for inline images
IMAGE_ALIGN_CLASSES: dict[str, str | None] = {
    "align-top": "top",
    "align-middle": "middle",
    "align-bottom": "bottom",
    "align-center": None,
    "align-right": None,
    "align-left": None,
}

FIGURE_ALIGN_CLASSES = {
    "align-right": "right",
    "align-left": "left",
    "align-center": "center",
}

# Units accepted in width/height attributes, in the order they are tried
DIMENSION_UNITS = ("px", "cm", "mm", "in", "em", "%")

# Raw formats that map onto the LaTeX role
RAW_LATEX_FORMATS = frozenset({"latex", "tex"})
