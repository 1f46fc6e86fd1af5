#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/api.py
"""Convenience API for rendering documents to reStructuredText."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from all2rst.ast import Document
from all2rst.options.rst import RstRendererOptions
from all2rst.renderers.rst import RestructuredTextRenderer

logger = logging.getLogger(__name__)


def to_rst(
    document: Document,
    options: Optional[RstRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document to reStructuredText.

    Parameters
    ----------
    document : Document
        Document to render
    options : RstRendererOptions or None, default None
        Rendering options; defaults are used when omitted
    output : str, Path, IO[bytes], IO[str] or None, default None
        Destination. When None the text is returned instead of written.
    **kwargs
        Individual option overrides, applied on top of ``options``

    Returns
    -------
    str or None
        The rendered text when ``output`` is None

    Raises
    ------
    ValueError
        If an option override has an invalid value
    TypeError
        If an override names an unknown option

    Examples
    --------
        >>> from all2rst.ast import Document, Paragraph, Text
        >>> to_rst(Document(children=[Paragraph(content=[Text("Hello")])]), columns=40)
        'Hello'

    """
    options = options or RstRendererOptions()
    if kwargs:
        logger.debug(f"Applying option overrides: {sorted(kwargs)}")
        options = options.create_updated(**kwargs)

    renderer = RestructuredTextRenderer(options)
    if output is None:
        return renderer.render_to_string(document)
    renderer.render(document, output)
    return None
