#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/text.py
"""Text processing utilities.

This module derives automatic identifiers from inline content. The derivation
must agree with the one used by readers, so that a heading whose identifier
equals its automatic identifier can be written without an explicit anchor.

Functions
---------
make_identifier : Convert plain text to an identifier
unique_identifier : Derive a unique identifier from inline nodes

Examples
--------
    >>> from all2rst.utils.text import make_identifier
    >>> make_identifier("1. My Heading, Title!")
    'my-heading-title'

"""

from __future__ import annotations

from typing import Sequence, Set

from all2rst.ast.nodes import Node
from all2rst.ast.utils import extract_text

DEFAULT_IDENTIFIER = "section"

_KEPT_PUNCTUATION = frozenset("_-.")


def make_identifier(text: str) -> str:
    """Convert plain text to an identifier.

    The text is lowercased; everything except alphanumerics, ``_``, ``-``,
    ``.`` and whitespace is removed; runs of whitespace become single
    hyphens; and leading characters up to the first letter are dropped.

    Parameters
    ----------
    text : str
        Text to convert

    Returns
    -------
    str
        Identifier, possibly empty

    """
    kept = "".join(c for c in text.lower() if c.isalnum() or c in _KEPT_PUNCTUATION or c.isspace())
    joined = "-".join(kept.split())
    for i, c in enumerate(joined):
        if c.isalpha():
            return joined[i:]
    return ""


def unique_identifier(inlines: Sequence[Node], used_ids: Set[str] | None = None) -> str:
    """Derive an identifier from inline content, avoiding ``used_ids``.

    Parameters
    ----------
    inlines : sequence of Node
        Inline content (typically a heading's)
    used_ids : set of str, optional
        Identifiers already taken. When the derived identifier is taken,
        ``-1``, ``-2``... suffixes are tried in order. The set is not modified.

    Returns
    -------
    str
        The identifier; ``"section"`` when the content yields nothing usable

    Examples
    --------
        >>> from all2rst.ast import Text
        >>> unique_identifier([Text(content="Intro")], {"intro"})
        'intro-1'

    """
    base = make_identifier(extract_text(inlines)) or DEFAULT_IDENTIFIER
    if not used_ids or base not in used_ids:
        return base
    counter = 1
    while f"{base}-{counter}" in used_ids:
        counter += 1
    return f"{base}-{counter}"
