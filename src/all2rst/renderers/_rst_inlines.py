#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/renderers/_rst_inlines.py
"""Inline normalization for reStructuredText output.

reStructuredText inline markup cannot nest: ``*a **b** c*`` is not strong
text inside emphasis. Before inline content is written it is rewritten
bottom-up so that every styled run holds only unstyled content, leading and
trailing spaces sit outside the markup, and an escaped space separates
markup from neighbours that would otherwise glue onto it.

Functions
---------
transform_inlines : Run the whole normalization over a list of inlines
flatten : Split nested styling into a flat run of styled siblings
insert_separators : Insert escaped-space separators between unsafe neighbours
is_complex : Whether an inline is written with delimiters

"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from all2rst.ast.nodes import (
    Cite,
    Code,
    Emphasis,
    Image,
    LineBreak,
    Link,
    Math,
    Node,
    Quoted,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Text,
    Underline,
)
from all2rst.ast.utils import get_inline_children, same_wrapper, with_inline_children
from all2rst.constants import MATCHING_PAIRS, RST_SEPARATOR, SAFE_AFTER_COMPLEX, SAFE_BEFORE_COMPLEX
from all2rst.exceptions import NestingDepthError

_DELIMITED_TYPES = (
    Emphasis,
    Underline,
    Strong,
    SmallCaps,
    Strikethrough,
    Superscript,
    Subscript,
    Link,
    Image,
    Code,
    Math,
)


def separator() -> RawInline:
    """Escaped space that ends markup without producing any output."""
    return RawInline(format="rst", content=RST_SEPARATOR)


def is_complex(node: Node) -> bool:
    """Whether ``node`` is written with inline markup delimiters.

    Cites and spans are transparent: they count as complex when their first
    child is.
    """
    if isinstance(node, _DELIMITED_TYPES):
        return True
    if isinstance(node, (Cite, Span)):
        return bool(node.content) and is_complex(node.content[0])
    return False


def _is_plain_span(node: Node) -> bool:
    return isinstance(node, Span) and not node.attr.classes and not node.attr.attributes


def flatten(outer: Node) -> list[Node]:
    """Lift styled children out of a styled inline.

    The children of ``outer`` are folded into a list of siblings. Each
    child is either kept inside a copy of ``outer``, emitted next to it, or
    has its own wrapper dropped so its contents join ``outer``. Quotes,
    class-less generic spans (no classes, no key-value attributes) and
    images inside links keep their structure.

    Parameters
    ----------
    outer : Node
        Inline whose children have already been flattened

    Returns
    -------
    list of Node
        Siblings that replace ``outer``

    Examples
    --------
        >>> from all2rst.ast import Emphasis, Strong, Text
        >>> nested = Emphasis(content=[Text("a"), Strong(content=[Text("b")])])
        >>> [type(n).__name__ for n in flatten(nested)]
        ['Emphasis', 'Strong']

    """
    contents = get_inline_children(outer)
    if not contents:
        return [outer]

    result: list[Node] = []

    def append_to_last(items: list[Node]) -> None:
        if result and same_wrapper(result[-1], outer):
            last = result[-1]
            result[-1] = with_inline_children(last, list(get_inline_children(last) or []) + items)
        else:
            result.append(with_inline_children(outer, list(items)))

    for child in contents:
        if isinstance(outer, Quoted) or isinstance(child, Quoted):
            append_to_last([child])
        elif _is_plain_span(outer) or _is_plain_span(child):
            append_to_last([child])
        elif isinstance(outer, Link) and isinstance(child, Image):
            append_to_last([child])
        elif isinstance(child, Link):
            result.append(child)
        elif isinstance(outer, Emphasis) and isinstance(child, Strong):
            result.append(child)
        else:
            grandchildren = get_inline_children(child)
            append_to_last(list(grandchildren) if grandchildren else [child])
    return result


def _strip_edges(children: list[Node]) -> tuple[bool, list[Node], bool]:
    """Remove leading and trailing whitespace from a child list.

    Returns whether whitespace was found at the start and at the end.
    """
    items = list(children)
    leading = trailing = False

    while items:
        first = items[0]
        if isinstance(first, (Space, SoftBreak)):
            items.pop(0)
            leading = True
        elif isinstance(first, Text) and first.content[:1].isspace():
            stripped = first.content.lstrip()
            leading = True
            if stripped:
                items[0] = replace(first, content=stripped)
                break
            items.pop(0)
        else:
            break

    while items:
        last = items[-1]
        if isinstance(last, (Space, SoftBreak)):
            items.pop()
            trailing = True
        elif isinstance(last, Text) and last.content[-1:].isspace():
            stripped = last.content.rstrip()
            trailing = True
            if stripped:
                items[-1] = replace(last, content=stripped)
                break
            items.pop()
        else:
            break

    return leading, items, trailing


def export_edge_spaces(node: Node) -> list[Node]:
    """Move whitespace at the edges of delimited markup outside of it."""
    if not is_complex(node):
        return [node]
    children = get_inline_children(node)
    if not children:
        return [node]
    leading, inner, trailing = _strip_edges(children)
    if not (leading or trailing):
        return [node]
    result: list[Node] = []
    if leading:
        result.append(Space())
    result.append(with_inline_children(node, inner))
    if trailing:
        result.append(Space())
    return result


def drop_space_after_display_math(inlines: Sequence[Node]) -> list[Node]:
    result: list[Node] = []
    after_display = False
    for node in inlines:
        if after_display and isinstance(node, Space):
            continue
        after_display = isinstance(node, Math) and node.math_type == "display"
        result.append(node)
    return result


def has_contents(node: Node) -> bool:
    """Whether an inline produces any output.

    Empty text, empty styling and empty code are dropped; so are links and
    images with no content, target or title.
    """
    if isinstance(node, Text):
        return node.content != ""
    if isinstance(node, Code):
        return node.content.strip() != ""
    if isinstance(node, (Emphasis, Underline, Strong, Strikethrough, Superscript, Subscript, SmallCaps)):
        return bool(node.content)
    if isinstance(node, (Quoted, Cite, Span)):
        return bool(node.content)
    if isinstance(node, Link):
        return bool(node.content or node.url or node.title)
    if isinstance(node, Image):
        return bool(node.alt or node.url or node.title)
    return True


def _first_char(node: Node) -> Optional[str]:
    if isinstance(node, Text) and node.content:
        return node.content[0]
    return None


def _last_char(node: Node) -> Optional[str]:
    if isinstance(node, Text) and node.content:
        return node.content[-1]
    return None


def _ok_after_complex(node: Node) -> bool:
    if isinstance(node, (Space, SoftBreak, LineBreak)):
        return True
    char = _first_char(node)
    return char is not None and (char in SAFE_AFTER_COMPLEX or char.isspace())


def _ok_before_complex(node: Node) -> bool:
    if isinstance(node, (Space, SoftBreak, LineBreak)):
        return True
    char = _last_char(node)
    return char is not None and (char in SAFE_BEFORE_COMPLEX or char.isspace())


def _surround_complex(before: Node, after: Node) -> bool:
    first, last = _last_char(before), _first_char(after)
    return first is not None and last is not None and (first, last) in MATCHING_PAIRS


def insert_separators(inlines: Sequence[Node]) -> list[Node]:
    """Insert escaped spaces where neighbours would corrupt inline markup.

    A separator is inserted after delimited markup whose successor cannot
    follow an end-string, before delimited markup whose predecessor cannot
    precede a start-string, and between two text runs whose touching
    characters form a bracketing pair. Markup enclosed by a bracketing pair,
    as in ``'*x*'``, is left alone.

    Parameters
    ----------
    inlines : sequence of Node
        Flattened inline siblings

    Returns
    -------
    list of Node
        Siblings with separators added

    """
    result: list[Node] = []
    n = len(inlines)
    i = 0
    while i < n:
        current = inlines[i]
        result.append(current)
        if i + 1 >= n:
            break
        following = inlines[i + 1]
        if i + 2 < n and is_complex(following) and _surround_complex(current, inlines[i + 2]):
            result.append(following)
            i += 2
            continue
        if (
            (is_complex(current) and not _ok_after_complex(following))
            or (is_complex(following) and not _ok_before_complex(current))
            or (isinstance(current, Text) and isinstance(following, Text) and _surround_complex(current, following))
        ):
            result.append(separator())
        i += 1
    return result


def transform_inlines(inlines: Sequence[Node], max_depth: Optional[int] = None) -> list[Node]:
    """Normalize inline content for writing.

    Children are transformed before their parents. At each level the
    siblings are flattened, edge spaces are exported out of markup, spaces
    after display math are dropped, empty elements are removed, and
    separators are inserted.

    Parameters
    ----------
    inlines : sequence of Node
        Inline content
    max_depth : int or None
        Maximum inline nesting depth

    Returns
    -------
    list of Node
        Normalized inline content

    Raises
    ------
    NestingDepthError
        If the inlines nest deeper than ``max_depth``

    """
    return _transform(inlines, 1, max_depth)


def _transform(inlines: Sequence[Node], depth: int, max_depth: Optional[int]) -> list[Node]:
    walked: list[Node] = []
    for node in inlines:
        children = get_inline_children(node)
        if children:
            if max_depth is not None and depth >= max_depth:
                raise NestingDepthError(depth + 1, max_depth, type(node).__name__)
            node = with_inline_children(node, _transform(children, depth + 1, max_depth))
        walked.append(node)

    flat = [item for node in walked for item in flatten(node)]
    exported = [item for node in flat for item in export_edge_spaces(node)]
    kept = [node for node in drop_space_after_display_math(exported) if has_contents(node)]
    return insert_separators(kept)
