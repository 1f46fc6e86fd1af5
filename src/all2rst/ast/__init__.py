#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

This module provides the document model consumed by the reStructuredText
writer. It consists of several components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- serialization: JSON serialization and deserialization of AST structures
- utils: Text extraction and inline-container helpers

Examples
--------
Basic usage:

    >>> from all2rst.ast import Document, Heading, Paragraph, Text
    >>> from all2rst.renderers.rst import RestructuredTextRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> rst = RestructuredTextRenderer().render_to_string(doc)

"""

from __future__ import annotations

from all2rst.ast.nodes import (
    Attr,
    BlockQuote,
    Cite,
    Code,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Div,
    Document,
    Emphasis,
    Figure,
    Heading,
    Image,
    LineBlock,
    LineBreak,
    Link,
    List,
    ListItem,
    Math,
    Node,
    Note,
    Paragraph,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    SourceLocation,
    Space,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
)
from all2rst.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from all2rst.ast.utils import extract_text, is_tight_list
from all2rst.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Attr",
    "BlockQuote",
    "Cite",
    "Code",
    "CodeBlock",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "Div",
    "Document",
    "Emphasis",
    "Figure",
    "Heading",
    "Image",
    "LineBlock",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Math",
    "Node",
    "Note",
    "Paragraph",
    "Plain",
    "Quoted",
    "RawBlock",
    "RawInline",
    "SmallCaps",
    "SoftBreak",
    "SourceLocation",
    "Space",
    "Span",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "Underline",
    # Visitors
    "NodeVisitor",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    # Utilities
    "extract_text",
    "is_tight_list",
]
