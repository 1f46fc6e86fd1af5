#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class of the reStructuredText
renderer and the record type for content it could not represent.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from all2rst.ast import Document
from all2rst.ast.nodes import Node, TableRow
from all2rst.exceptions import InvalidOptionsError
from all2rst.options.base import BaseRendererOptions
from all2rst.utils.io_utils import write_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderMessage:
    """Content that was dropped because the output format cannot express it.

    Parameters
    ----------
    node_type : str
        Class name of the dropped node
    description : str
        Human-readable explanation

    """

    node_type: str
    description: str

    def __str__(self) -> str:
        return f"{self.node_type}: {self.description}"


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Attributes
    ----------
    messages : list of RenderMessage
        Content dropped during the most recent render

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options
        self.messages: list[RenderMessage] = []

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to a file or file-like object.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        ...

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string."""
        ...

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        bytes
            Rendered document

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    def _report(self, node: Node, description: str) -> None:
        """Record and log content that cannot be rendered."""
        message = RenderMessage(node_type=type(node).__name__, description=description)
        self.messages.append(message)
        logger.warning(f"Content not rendered: {message}")

    @staticmethod
    def _compute_table_columns(rows: list[TableRow]) -> int:
        """Compute the maximum number of columns needed for a table.

        Parameters
        ----------
        rows : list[TableRow]
            All table rows (including header)

        Returns
        -------
        int
            Maximum column count accounting for colspan

        """
        max_cols = 0
        for row in rows:
            col_count = sum(max(1, cell.colspan) for cell in row.cells)
            max_cols = max(max_cols, col_count)
        return max_cols

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a path or stream.

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("Hello", buffer)
            >>> buffer.getvalue()
            b'Hello'

        """
        write_text(text, output)
