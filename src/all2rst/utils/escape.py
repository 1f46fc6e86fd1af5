#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/escape.py
"""reStructuredText text escaping utilities.

reStructuredText treats ``* _ ` |`` as inline markup delimiters only in
specific adjacency contexts: a start-string must follow whitespace or opening
punctuation and precede non-whitespace, an end-string must precede
whitespace or closing punctuation. The escaper below walks the text once and
escapes a delimiter only where one of those readings is possible, so ordinary
text such as ``snake_case`` or ``2*3`` is written unchanged.

"""

from __future__ import annotations

import unicodedata

from all2rst.constants import (
    RST_FOLLOW_ASCII,
    RST_FOLLOW_CATEGORIES,
    RST_MARKUP_CHARS,
    RST_PRECEDE_ASCII,
    RST_PRECEDE_CATEGORIES,
    RST_SMART_SPECIAL_CHARS,
    RST_SPECIAL_CHARS,
    RST_UNSMARTIFY_MAP,
)


def can_precede_markup(char: str) -> bool:
    """Whether an inline markup start-string may directly follow ``char``."""
    if char in RST_PRECEDE_ASCII or char.isspace():
        return True
    return not char.isascii() and unicodedata.category(char) in RST_PRECEDE_CATEGORIES


def can_follow_markup(char: str) -> bool:
    """Whether ``char`` may directly follow an inline markup end-string."""
    if char in RST_FOLLOW_ASCII or char.isspace():
        return True
    return not char.isascii() and unicodedata.category(char) in RST_FOLLOW_CATEGORIES


def escape_rst(text: str, smart: bool = False) -> str:
    r"""Escape text so that reStructuredText reads it back literally.

    Parameters
    ----------
    text : str
        Text to escape
    smart : bool, default False
        The consumer applies smart punctuation: straight quotes, ``--`` and
        ``...`` are escaped as well

    Returns
    -------
    str
        Escaped text. When no character needs attention the input object
        itself is returned.

    Examples
    --------
        >>> escape_rst("snake_case and 2*3")
        'snake_case and 2*3'
        >>> escape_rst("*not emphasis*")
        '\\*not emphasis\\*'
        >>> escape_rst("see target_ here")
        'see target\\_ here'

    """
    special = RST_SPECIAL_CHARS | RST_SMART_SPECIAL_CHARS if smart else RST_SPECIAL_CHARS
    if not any(c in special for c in text):
        return text

    out: list[str] = []
    can_start = True
    n = len(text)
    i = 0
    while i < n:
        c = text[i]
        nxt = text[i + 1] if i + 1 < n else None

        if c == "\\":
            out.append("\\\\")
            can_start = False
        elif smart and c in "'\"":
            out.append("\\" + c)
            can_start = True
        elif smart and c == "-" and nxt == "-":
            # the second hyphen is scanned again
            out.append("\\-")
            can_start = False
        elif smart and c == "." and text[i + 1 : i + 3] == "..":
            out.append("\\.")
            can_start = False
        elif nxt is None and c in RST_MARKUP_CHARS:
            out.append("\\" + c)
        elif can_precede_markup(c):
            out.append(c)
            can_start = True
        elif (
            c in RST_MARKUP_CHARS
            and nxt is not None
            and ((not can_start and can_follow_markup(nxt)) or (can_start and not nxt.isspace()))
        ):
            out.append("\\" + c)
            can_start = False
        elif c == "_" and nxt is not None and not nxt.isalnum():
            out.append("\\_")
            can_start = False
        else:
            out.append(c)
            can_start = False
        i += 1

    return "".join(out)


def unsmartify(text: str) -> str:
    """Turn typographic punctuation back into its ASCII smart-punctuation trigger.

    Parameters
    ----------
    text : str
        Already escaped text

    Returns
    -------
    str
        Text in which curly quotes, dashes and ellipses are spelled the way a
        smart-punctuation consumer expects to receive them

    Examples
    --------
        >>> unsmartify("it’s — fine…")
        "it's --- fine..."

    """
    if not any(c in RST_UNSMARTIFY_MAP for c in text):
        return text
    return "".join(RST_UNSMARTIFY_MAP.get(c, c) for c in text)
