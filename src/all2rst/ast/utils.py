#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/ast/utils.py
"""Utility functions for working with AST nodes.

This module provides helpers shared by the writer and the serializer:
plain-text extraction, access to the inline children of container inlines,
and the tightness predicate for lists.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
get_inline_children : Inline children of a container inline
with_inline_children : Copy of a container inline with new children
is_tight_list : Whether list items are run together without blank lines

Examples
--------
Extract text from a heading:

    >>> from all2rst.ast import Heading, Text, Emphasis, Space
    >>> from all2rst.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello"), Space(),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading.content)
    'Hello world'

"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Optional, Sequence, Union

from all2rst.ast.nodes import (
    Cite,
    Code,
    Emphasis,
    Image,
    LineBreak,
    Link,
    Math,
    Node,
    Plain,
    Quoted,
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

# Inline containers and the field that holds their inline children
_INLINE_CHILD_FIELDS: dict[type[Node], str] = {
    Emphasis: "content",
    Underline: "content",
    Strong: "content",
    Strikethrough: "content",
    Superscript: "content",
    Subscript: "content",
    SmallCaps: "content",
    Quoted: "content",
    Cite: "content",
    Link: "content",
    Span: "content",
    Image: "alt",
}

_IGNORED_FIELDS = frozenset({"metadata", "source_location"})


def extract_text(node_or_nodes: Union[Node, Sequence[Node]]) -> str:
    """Extract plain text from inline nodes.

    Spaces and breaks become single spaces, code and math contribute their
    source, quotes contribute curly quotation marks. Notes and raw content are
    skipped.

    Parameters
    ----------
    node_or_nodes : Node or sequence of Node
        Inline node(s) to stringify

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, Node):
        nodes: Sequence[Node] = [node_or_nodes]
    else:
        nodes = node_or_nodes

    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.content)
        elif isinstance(node, (Space, SoftBreak, LineBreak)):
            parts.append(" ")
        elif isinstance(node, (Code, Math)):
            parts.append(node.content)
        elif isinstance(node, Quoted):
            open_q, close_q = ("‘", "’") if node.quote_type == "single" else ("“", "”")
            parts.append(open_q + extract_text(node.content) + close_q)
        else:
            children = get_inline_children(node)
            if children is not None:
                parts.append(extract_text(children))
    return "".join(parts)


def get_inline_children(node: Node) -> Optional[list[Node]]:
    """Return the inline children of a container inline.

    Parameters
    ----------
    node : Node
        Inline node

    Returns
    -------
    list of Node or None
        The children, or None when ``node`` is a leaf (Text, Code, Note...)

    """
    field_name = _INLINE_CHILD_FIELDS.get(type(node))
    if field_name is None:
        return None
    return getattr(node, field_name)


def with_inline_children(node: Node, children: list[Node]) -> Node:
    """Return a copy of ``node`` holding ``children``.

    Leaves are returned unchanged.

    """
    field_name = _INLINE_CHILD_FIELDS.get(type(node))
    if field_name is None:
        return node
    return replace(node, **{field_name: children})


def same_wrapper(first: Node, second: Node) -> bool:
    """Check whether two inlines are the same wrapper modulo their children.

    Two nodes match when they have the same type and equal values in every
    field except the inline children, metadata and source location.

    Parameters
    ----------
    first, second : Node
        Nodes to compare

    Returns
    -------
    bool
        True if the nodes could be merged into one element

    """
    if type(first) is not type(second):
        return False
    child_field = _INLINE_CHILD_FIELDS.get(type(first))
    for f in fields(first):  # type: ignore[arg-type]
        if f.name == child_field or f.name in _IGNORED_FIELDS:
            continue
        if getattr(first, f.name) != getattr(second, f.name):
            return False
    return True


def is_tight_list(items: Sequence[Sequence[Node]]) -> bool:
    """Check whether a list's items run together without blank lines.

    A list is tight when every item is empty or starts with a Plain block.

    Parameters
    ----------
    items : sequence of sequence of Node
        Block content of each item

    Returns
    -------
    bool
        True for tight lists

    """
    return all(not blocks or isinstance(blocks[0], Plain) for blocks in items)
