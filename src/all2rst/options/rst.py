#  Copyright (c) 2025 Tom Villani, Ph.D.

# all2rst/options/rst.py
"""Configuration options for reStructuredText rendering.

This module defines the option bundle of the reStructuredText writer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from all2rst.constants import (
    DEFAULT_RST_CODE_DIRECTIVE,
    DEFAULT_RST_COLUMNS,
    DEFAULT_RST_HEADING_CHARS,
    DEFAULT_RST_LIST_TABLES,
    DEFAULT_RST_LITERATE_HASKELL,
    DEFAULT_RST_NUMBER_SECTIONS,
    DEFAULT_RST_REFERENCE_LINKS,
    DEFAULT_RST_SMART,
    DEFAULT_RST_STANDALONE,
    DEFAULT_RST_TABLE_OF_CONTENTS,
    DEFAULT_RST_TOC_DEPTH,
    DEFAULT_RST_WRAP_MODE,
    RstCodeDirective,
    WrapMode,
)
from all2rst.options.base import BaseRendererOptions


@dataclass(frozen=True)
class RstRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-reStructuredText rendering.

    Parameters
    ----------
    wrap_mode : {"auto", "preserve", "none"}, default "auto"
        How paragraphs are laid out:
        - "auto": fill lines up to ``columns`` characters
        - "preserve": never wrap, but keep the source's soft line breaks
        - "none": never wrap; soft line breaks become spaces
    columns : int, default 72
        Target line width for wrapping and for sizing tables.
    list_tables : bool, default False
        Always render tables with the ``list-table`` directive.
    table_of_contents : bool, default False
        Ask the template for a ``contents`` directive.
    toc_depth : int, default 3
        Depth passed to the ``contents`` directive.
    number_sections : bool, default False
        Ask the template for a ``sectnum`` directive.
    reference_links : bool, default False
        Render links as named references with a trailing target block
        instead of anonymous inline links.
    smart : bool, default False
        The consumer applies smart punctuation: straight quotes, ``--`` and
        ``...`` in text are escaped, and typographic characters are written
        back as their ASCII triggers.
    literate_haskell : bool, default False
        Write ``haskell literate`` code blocks with bird tracks.
    heading_chars : str, default "=-~^'"
        Underline characters for heading levels 1 to ``len(heading_chars)``.
        Deeper headings get a blank underline.
    code_directive : {"code", "code-block", "sourcecode"}, default "code"
        Directive used for code blocks with a language.
    standalone : bool, default False
        Render through the default document template (title block, toc,
        math and raw-LaTeX preambles).
    template_string : str or None, default None
        Jinja2 template source used instead of the default template.
    template_file : str or None, default None
        Path to a Jinja2 template used instead of the default template.

    Notes
    -----
    **Text Escaping:**
        Inline markup characters (``\ _ ` * |``) are escaped only where a
        reStructuredText parser would read them as markup delimiters.

    **Tables:**
        Tables without column widths are written as simple tables when they
        fit within ``columns`` and every cell is a single line; otherwise a
        grid table is written.

    """

    wrap_mode: WrapMode = field(
        default=DEFAULT_RST_WRAP_MODE,
        metadata={
            "help": "Line wrapping: auto (fill to columns), preserve (keep soft breaks), none",
            "choices": ["auto", "preserve", "none"],
            "importance": "core",
        },
    )
    columns: int = field(
        default=DEFAULT_RST_COLUMNS,
        metadata={"help": "Target line width for wrapping and tables", "type": int, "importance": "core"},
    )
    list_tables: bool = field(
        default=DEFAULT_RST_LIST_TABLES,
        metadata={"help": "Render all tables as list-table directives", "importance": "core"},
    )
    table_of_contents: bool = field(
        default=DEFAULT_RST_TABLE_OF_CONTENTS,
        metadata={"help": "Include a table of contents (standalone output)", "importance": "core"},
    )
    toc_depth: int = field(
        default=DEFAULT_RST_TOC_DEPTH,
        metadata={"help": "Depth of the table of contents", "type": int, "importance": "advanced"},
    )
    number_sections: bool = field(
        default=DEFAULT_RST_NUMBER_SECTIONS,
        metadata={"help": "Number sections (standalone output)", "importance": "advanced"},
    )
    reference_links: bool = field(
        default=DEFAULT_RST_REFERENCE_LINKS,
        metadata={"help": "Use reference-style links with a trailing target block", "importance": "core"},
    )
    smart: bool = field(
        default=DEFAULT_RST_SMART,
        metadata={"help": "Escape for consumers that apply smart punctuation", "importance": "advanced"},
    )
    literate_haskell: bool = field(
        default=DEFAULT_RST_LITERATE_HASKELL,
        metadata={"help": "Write literate Haskell code blocks with bird tracks", "importance": "advanced"},
    )
    heading_chars: str = field(
        default=DEFAULT_RST_HEADING_CHARS,
        metadata={"help": "Characters for heading underlines, one per level", "importance": "advanced"},
    )
    code_directive: RstCodeDirective = field(
        default=DEFAULT_RST_CODE_DIRECTIVE,
        metadata={
            "help": "Directive for code blocks with a language",
            "choices": ["code", "code-block", "sourcecode"],
            "importance": "advanced",
        },
    )
    standalone: bool = field(
        default=DEFAULT_RST_STANDALONE,
        metadata={"help": "Produce a standalone document using the default template", "importance": "core"},
    )
    template_string: str | None = field(
        default=None,
        metadata={"help": "Jinja2 template source for standalone output", "importance": "advanced"},
    )
    template_file: str | None = field(
        default=None,
        metadata={"help": "Path to a Jinja2 template for standalone output", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate RST renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        super().__post_init__()

        if self.columns <= 0:
            raise ValueError(f"columns must be positive, got {self.columns}")

        if self.toc_depth <= 0:
            raise ValueError(f"toc_depth must be positive, got {self.toc_depth}")

        if not self.heading_chars:
            raise ValueError("heading_chars must not be empty")

        if self.wrap_mode not in get_args(WrapMode):
            raise ValueError(f"wrap_mode must be one of {get_args(WrapMode)}, got {self.wrap_mode!r}")

        if self.code_directive not in get_args(RstCodeDirective):
            raise ValueError(
                f"code_directive must be one of {get_args(RstCodeDirective)}, got {self.code_directive!r}"
            )

        if self.template_string is not None and self.template_file is not None:
            raise ValueError("template_string and template_file are mutually exclusive")

    @property
    def uses_template(self) -> bool:
        """Whether output is merged into a document template."""
        return self.standalone or self.template_string is not None or self.template_file is not None
