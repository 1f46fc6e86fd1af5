#  Copyright (c) 2025 Tom Villani, Ph.D.
"""all2rst - render a document AST as reStructuredText.

all2rst takes a tree of block and inline nodes (headings, paragraphs, lists,
tables, emphasis, links, footnotes...) and writes it as reStructuredText that
docutils reads back with the same structure. Inline markup that cannot nest
in reStructuredText is flattened, text is escaped only where a character
would otherwise be read as markup, and footnotes, link targets and image
substitutions are collected at the end of the document.

Examples
--------
    >>> from all2rst import to_rst
    >>> from all2rst.ast import Document, Emphasis, Heading, Paragraph, Space, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text("Title")]),
    ...     Paragraph(content=[Text("Hello"), Space(), Emphasis(content=[Text("world")])]),
    ... ])
    >>> print(to_rst(doc))
    Title
    =====
    <BLANKLINE>
    Hello *world*

"""

from all2rst.api import to_rst
from all2rst.exceptions import (
    All2RstError,
    FileError,
    InvalidOptionsError,
    MalformedFileError,
    NestingDepthError,
    OutputWriteError,
    RenderingError,
    TemplateError,
    ValidationError,
)
from all2rst.options import RstRendererOptions
from all2rst.renderers import RestructuredTextRenderer

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "to_rst",
    "RstRendererOptions",
    "RestructuredTextRenderer",
    "All2RstError",
    "FileError",
    "InvalidOptionsError",
    "MalformedFileError",
    "NestingDepthError",
    "OutputWriteError",
    "RenderingError",
    "TemplateError",
    "ValidationError",
]
