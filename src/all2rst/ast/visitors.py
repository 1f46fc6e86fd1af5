#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk document trees.
Every node kind has its own abstract ``visit_*`` method, so a visitor that
forgets a kind fails at instantiation instead of silently dropping content.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from all2rst.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node kind. Each method
    accepts the node and returns whatever the visitor accumulates (rendered
    text for the writer, ``None`` for side-effect visitors).

    Examples
    --------
    Visitor that collects the text of a heading:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def visit_text(self, node):
        ...         self.parts.append(node.content)
        ...
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_plain(self, node: Plain) -> Any:
        """Visit a Plain node.

        Parameters
        ----------
        node : Plain
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_line_block(self, node: LineBlock) -> Any:
        """Visit a LineBlock node.

        Parameters
        ----------
        node : LineBlock
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node.

        Parameters
        ----------
        node : RawBlock
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node.

        Parameters
        ----------
        node : ThematicBreak
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node.

        Parameters
        ----------
        node : BlockQuote
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node.

        Parameters
        ----------
        node : ListItem
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node.

        Parameters
        ----------
        node : DefinitionList
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node.

        Parameters
        ----------
        node : DefinitionTerm
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_definition_description(self, node: DefinitionDescription) -> Any:
        """Visit a DefinitionDescription node.

        Parameters
        ----------
        node : DefinitionDescription
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node.

        Parameters
        ----------
        node : Table
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node.

        Parameters
        ----------
        node : TableRow
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node.

        Parameters
        ----------
        node : TableCell
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_figure(self, node: Figure) -> Any:
        """Visit a Figure node.

        Parameters
        ----------
        node : Figure
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_div(self, node: Div) -> Any:
        """Visit a Div node.

        Parameters
        ----------
        node : Div
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node.

        Parameters
        ----------
        node : Space
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node.

        Parameters
        ----------
        node : SoftBreak
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node.

        Parameters
        ----------
        node : LineBreak
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit a Emphasis node.

        Parameters
        ----------
        node : Emphasis
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit a Underline node.

        Parameters
        ----------
        node : Underline
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node.

        Parameters
        ----------
        node : Strong
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node.

        Parameters
        ----------
        node : Strikethrough
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node.

        Parameters
        ----------
        node : Superscript
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node.

        Parameters
        ----------
        node : Subscript
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node.

        Parameters
        ----------
        node : SmallCaps
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_quoted(self, node: Quoted) -> Any:
        """Visit a Quoted node.

        Parameters
        ----------
        node : Quoted
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_cite(self, node: Cite) -> Any:
        """Visit a Cite node.

        Parameters
        ----------
        node : Cite
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node.

        Parameters
        ----------
        node : Code
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node.

        Parameters
        ----------
        node : Math
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node.

        Parameters
        ----------
        node : RawInline
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node.

        Parameters
        ----------
        node : Image
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node.

        Parameters
        ----------
        node : Note
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node.

        Parameters
        ----------
        node : Span
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass
