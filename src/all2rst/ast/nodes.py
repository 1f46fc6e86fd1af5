#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy the reStructuredText writer consumes.
Each node represents a structural or inline element of a document; the model
follows the usual rich-document vocabulary (attributes with identifier,
classes and key/value pairs; notes carried inline; tables whose cells hold
block content) so that documents coming from any reader can be written out.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Plain, Paragraph, LineBlock, CodeBlock, RawBlock
    - ThematicBreak, Heading, BlockQuote, List, ListItem
    - DefinitionList, DefinitionTerm, DefinitionDescription
    - Table, TableRow, TableCell, Figure, Div

Inline nodes represent text formatting:
    - Text, Space, SoftBreak, LineBreak
    - Emphasis, Underline, Strong, Strikethrough, Superscript, Subscript, SmallCaps
    - Quoted, Cite, Code, Math, RawInline
    - Link, Image, Note, Span

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from all2rst.constants import (
    Alignment,
    ListNumberDelim,
    ListNumberStyle,
    MathType,
    QuoteType,
)


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (e.g., 'html', 'docx', 'markdown')
    line : int or None, default = None
        Line number in source document (for text formats)
    column : int or None, default = None
        Column number in source document
    metadata : dict, default = empty dict
        Additional format-specific location information

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Attr:
    """Attributes attached to blocks and inlines.

    Parameters
    ----------
    identifier : str, default = ""
        Element identifier (anchor name)
    classes : list of str, default = empty list
        Ordered class names
    attributes : dict, default = empty dict
        Key/value attributes, in insertion order

    """

    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata. ``title`` and ``subtitle`` may be strings or
        lists of inline nodes; other values are exposed to templates.
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Plain(Node):
    """Run of inlines that is not a paragraph (tight list items, table cells).

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this plain block."""
        return visitor.visit_plain(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes (text, emphasis, links, etc.)
    metadata : dict, default = empty dict
        Paragraph metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass
class LineBlock(Node):
    """Sequence of lines whose breaks are significant (poetry, addresses).

    Parameters
    ----------
    lines : list of list of Node, default = empty list
        Each entry is the inline content of one line

    """

    lines: list[list[Node]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line block."""
        return visitor.visit_line_block(self)


@dataclass
class CodeBlock(Node):
    """Code block node.

    The highlighting language is the first class that is not a rendering
    hint (``sourceCode``, ``numberLines``, ...).

    Parameters
    ----------
    content : str
        Code content
    attr : Attr, default = empty Attr
        Classes name the language; ``startFrom`` sets the first line number
    metadata : dict, default = empty dict
        Code block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass
class RawBlock(Node):
    """Raw block content in a named format (``rst``, ``html``, ``latex``...).

    Parameters
    ----------
    format : str
        Name of the format the content is written in
    content : str
        Raw content, passed through untouched

    """

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule).

    Parameters
    ----------
    metadata : dict, default = empty dict
        Break metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level (1 is most important; there is no upper bound)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    attr : Attr, default = empty Attr
        Identifier and classes of the heading
    metadata : dict, default = empty dict
        Heading metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be at least 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing quoted content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes within the quote
    metadata : dict, default = empty dict
        Block quote metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_block_quote method

        Returns
        -------
        Any
            Result from visitor.visit_block_quote(self)

        """
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for bullet lists
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    style : ListNumberStyle, default = "default"
        Numbering style for ordered lists
    delimiter : ListNumberDelim, default = "default"
        Delimiter around the number for ordered lists
    metadata : dict, default = empty dict
        List metadata
    source_location : SourceLocation or None, default = None
        Source location information

    Notes
    -----
    Whether a list is tight is derived from its items (see
    :func:`all2rst.ast.utils.is_tight_list`), not stored on the node.

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    style: ListNumberStyle = "default"
    delimiter: ListNumberDelim = "default"
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    metadata : dict, default = empty dict
        List item metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class DefinitionList(Node):
    """Definition list of terms, each with one or more definitions.

    Parameters
    ----------
    items : list of (DefinitionTerm, list of DefinitionDescription)
        Terms paired with their definitions

    """

    items: list[tuple[DefinitionTerm, list[DefinitionDescription]]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class DefinitionTerm(Node):
    """Term of a definition list entry.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes of the term

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition term."""
        return visitor.visit_definition_term(self)


@dataclass
class DefinitionDescription(Node):
    """One definition of a definition list term.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes of the definition

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition description."""
        return visitor.visit_definition_description(self)


@dataclass
class Table(Node):
    """Table node with optional header, column widths and caption.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table body rows (excluding header)
    header : TableRow or None, default = None
        Optional header row
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    column_widths : list of float, default = empty list
        Relative column widths as fractions of the text width. ``0`` (or an
        empty list) means the width is not specified.
    caption : list of Node, default = empty list
        Inline caption content
    attr : Attr, default = empty Attr
        Table attributes
    metadata : dict, default = empty dict
        Table metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    column_widths: list[float] = field(default_factory=list)
    caption: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    is_header : bool, default = False
        Whether this is a header row

    """

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node with optional span and alignment.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block content of the cell (usually a single Plain)
    colspan : int, default = 1
        Number of columns this cell spans
    rowspan : int, default = 1
        Number of rows this cell spans
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment

    """

    content: list[Node] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 1
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class Figure(Node):
    """Figure node: block content with a caption.

    Parameters
    ----------
    children : list of Node, default = empty list
        Figure body; a single image in a Plain or Paragraph renders as a
        ``figure`` directive
    caption : list of Node, default = empty list
        Caption blocks
    attr : Attr, default = empty Attr
        Figure attributes

    """

    children: list[Node] = field(default_factory=list)
    caption: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this figure."""
        return visitor.visit_figure(self)


@dataclass
class Div(Node):
    """Generic block container.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the container
    attr : Attr, default = empty Attr
        Container attributes; an admonition class selects that directive

    """

    children: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this container."""
        return visitor.visit_div(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Spaces inside the content are treated as line-break opportunities,
    exactly like :class:`Space`.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Space(Node):
    """Inter-word space."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this space."""
        return visitor.visit_space(self)


@dataclass
class SoftBreak(Node):
    """Line break from the source that carries no meaning of its own."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Node):
    """Hard line break node.

    A paragraph containing hard breaks is written as a line block.

    """

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes to emphasize
    metadata : dict, default = empty dict
        Emphasis metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_emphasis method

        Returns
        -------
        Any
            Result from visitor.visit_emphasis(self)

        """
        return visitor.visit_emphasis(self)


@dataclass
class Underline(Node):
    """Underlined text node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Strong(Node):
    """Strong emphasis (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes to make strong
    metadata : dict, default = empty dict
        Strong metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough text node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Superscript(Node):
    """Superscript text node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript text node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class SmallCaps(Node):
    """Small capitals text node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this small caps node."""
        return visitor.visit_small_caps(self)


@dataclass
class Quoted(Node):
    """Quoted text node.

    Parameters
    ----------
    quote_type : {'single', 'double'}
        Kind of quotation marks
    content : list of Node, default = empty list
        Quoted inline nodes

    """

    quote_type: QuoteType
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this quotation."""
        return visitor.visit_quoted(self)


@dataclass
class Cite(Node):
    """Citation node.

    Parameters
    ----------
    citations : list of str, default = empty list
        Citation keys
    content : list of Node, default = empty list
        Rendered citation text

    """

    citations: list[str] = field(default_factory=list)
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this citation."""
        return visitor.visit_cite(self)


@dataclass
class Code(Node):
    """Inline code node.

    Parameters
    ----------
    content : str
        Code content
    attr : Attr, default = empty Attr
        Code attributes; class ``interpreted-text`` plus a ``role``
        attribute selects an interpreted text role
    metadata : dict, default = empty dict
        Code metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code method

        Returns
        -------
        Any
            Result from visitor.visit_code(self)

        """
        return visitor.visit_code(self)


@dataclass
class Math(Node):
    """TeX math node.

    Parameters
    ----------
    content : str
        TeX source of the formula
    math_type : {'inline', 'display'}, default = 'inline'
        Inline formula or displayed equation

    """

    content: str
    math_type: MathType = "inline"
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math node."""
        return visitor.visit_math(self)


@dataclass
class RawInline(Node):
    """Raw inline content in a named format.

    Parameters
    ----------
    format : str
        Name of the format the content is written in
    content : str
        Raw content

    """

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link URL
    content : list of Node, default = empty list
        Link text (inline nodes)
    title : str, default = ""
        Link title
    attr : Attr, default = empty Attr
        Link attributes
    metadata : dict, default = empty dict
        Link metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: str = ""
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_link method

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source
    alt : list of Node, default = empty list
        Alternative text (inline nodes)
    title : str, default = ""
        Image title
    attr : Attr, default = empty Attr
        Image attributes; ``width`` and ``height`` attributes carry dimensions
        and ``align-*`` classes carry alignment
    metadata : dict, default = empty dict
        Image metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    alt: list[Node] = field(default_factory=list)
    title: str = ""
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_image method

        Returns
        -------
        Any
            Result from visitor.visit_image(self)

        """
        return visitor.visit_image(self)


@dataclass
class Note(Node):
    """Footnote carried inline at its point of reference.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block content of the footnote

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this note."""
        return visitor.visit_note(self)


@dataclass
class Span(Node):
    """Generic inline container.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes
    attr : Attr, default = empty Attr
        Span attributes; a ``role`` attribute or a ``mark`` class selects an
        interpreted text role

    """

    content: list[Node] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_span(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Plain,
    Paragraph,
    LineBlock,
    CodeBlock,
    RawBlock,
    ThematicBreak,
    Heading,
    BlockQuote,
    List,
    DefinitionList,
    Table,
    Figure,
    Div,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Space,
    SoftBreak,
    LineBreak,
    Emphasis,
    Underline,
    Strong,
    Strikethrough,
    Superscript,
    Subscript,
    SmallCaps,
    Quoted,
    Cite,
    Code,
    Math,
    RawInline,
    Link,
    Image,
    Note,
    Span,
)
