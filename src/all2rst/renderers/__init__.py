#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/all2rst/renderers/__init__.py
"""AST renderers for converting documents to reStructuredText.

Examples
--------
    >>> from all2rst.ast import Document, Heading, Text
    >>> from all2rst.renderers import RestructuredTextRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> rst = RestructuredTextRenderer().render_to_string(doc)

"""

from all2rst.renderers.base import BaseRenderer, RenderMessage
from all2rst.renderers.rst import RestructuredTextRenderer

__all__ = [
    "BaseRenderer",
    "RenderMessage",
    "RestructuredTextRenderer",
]
