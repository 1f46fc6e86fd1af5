#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/renderers/rst.py
"""reStructuredText rendering from AST.

This module provides the RestructuredTextRenderer class which converts AST nodes
to reStructuredText. Block nodes render to blocks of lines, inline nodes to a
stream of layout tokens that is filled into lines at the configured width
(see :mod:`all2rst.utils.layout`).

Inline content is normalized before it is written (see
:mod:`all2rst.renderers._rst_inlines`). Footnotes, named hyperlink targets
and image substitutions are collected while the body is rendered and written
after it.

"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Sequence, Union

import jinja2

from all2rst.ast.nodes import (
    INLINE_NODE_TYPES,
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
from all2rst.ast.utils import extract_text, is_tight_list
from all2rst.ast.visitors import NodeVisitor
from all2rst.constants import (
    CODE_BLOCK_IGNORED_CLASSES,
    DEFAULT_TEMPLATE_NAME,
    FIGURE_ALIGN_CLASSES,
    HORIZONTAL_RULE,
    IMAGE_ALIGN_CLASSES,
    RAW_LATEX_FORMATS,
    RST_ADMONITIONS,
    RST_INDENT,
)
from all2rst.exceptions import NestingDepthError, TemplateError
from all2rst.options.rst import RstRendererOptions
from all2rst.renderers._rst_inlines import transform_inlines
from all2rst.renderers._rst_references import ImageTarget, ReferenceRegistry
from all2rst.renderers._rst_tables import TableRenderingMixin, to_legacy_table
from all2rst.renderers.base import BaseRenderer
from all2rst.utils.dimensions import image_dimension_fields
from all2rst.utils.escape import escape_rst, unsmartify
from all2rst.utils.layout import (
    BLANK,
    NEWLINE,
    SPACE,
    Block,
    Lines,
    Token,
    hang,
    measure_width,
    nest,
    prefixed,
    render_block,
    strip_blanks,
    text_lines,
    vcat,
    vsep,
    wrap,
)
from all2rst.utils.text import unique_identifier

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Whitespace that may break a line; no-break spaces stay inside words
_BREAKABLE_RE = re.compile(r"[ \t\n\r]+")

_URI_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:\S+$")

# Blocks after which an indented block quote would be read as their continuation
_OPEN_ENDED_BEFORE_QUOTE = (Plain, Heading, LineBlock, ThematicBreak, Paragraph)

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    """Upper-case Roman numeral for 1 <= number < 4000, decimal otherwise."""
    if not 0 < number < 4000:
        return str(number)
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


def ordered_list_markers(start: int, style: str, delimiter: str, count: int) -> list[str]:
    """Generate ``count`` enumerators for an ordered list.

    Parameters
    ----------
    start : int
        First ordinal
    style : str
        Numbering style (``decimal``, ``lower_alpha``, ``upper_roman``...)
    delimiter : str
        ``period``, ``one_paren``, ``two_parens`` or ``default``
    count : int
        Number of markers

    Returns
    -------
    list of str
        Markers such as ``3.``, ``b)`` or ``(iv)``

    Examples
    --------
        >>> ordered_list_markers(3, "decimal", "one_paren", 2)
        ['3)', '4)']
        >>> ordered_list_markers(1, "lower_roman", "two_parens", 3)
        ['(i)', '(ii)', '(iii)']

    """
    labels = []
    for ordinal in range(start, start + count):
        if style in ("lower_alpha", "upper_alpha"):
            label = chr(ord("a") + (ordinal - 1) % 26)
            label = label.upper() if style == "upper_alpha" else label
        elif style == "lower_roman":
            label = to_roman(ordinal).lower()
        elif style == "upper_roman":
            label = to_roman(ordinal)
        else:
            label = str(ordinal)
        labels.append(label)

    if delimiter == "one_paren":
        return [f"{label})" for label in labels]
    if delimiter == "two_parens":
        return [f"({label})" for label in labels]
    return [f"{label}." for label in labels]


def normalize_headings(blocks: Sequence[Node], level: int = 1) -> list[Node]:
    """Renumber heading levels so that they form a gap-free hierarchy.

    The first heading of a run gets ``level``; headings below it, up to the
    next heading at its original level or above, are normalized one level
    deeper.

    Examples
    --------
        >>> from all2rst.ast import Heading, Text
        >>> blocks = [Heading(level=2, content=[Text("a")]), Heading(level=4, content=[Text("b")])]
        >>> [h.level for h in normalize_headings(blocks)]
        [1, 2]

    """
    result: list[Node] = []
    i = 0
    while i < len(blocks):
        block = blocks[i]
        if isinstance(block, Heading):
            end = i + 1
            while end < len(blocks) and not (
                isinstance(blocks[end], Heading) and blocks[end].level <= block.level  # type: ignore[attr-defined]
            ):
                end += 1
            result.append(replace(block, level=level))
            result.extend(normalize_headings(blocks[i + 1 : end], level + 1))
            i = end
        else:
            result.append(block)
            i += 1
    return result


def _separate_block_quotes(blocks: Sequence[Node]) -> list[Node]:
    """Insert an empty comment before block quotes that would merge upwards."""
    result: list[Node] = []
    for block in blocks:
        if isinstance(block, BlockQuote) and result and not isinstance(result[-1], _OPEN_ENDED_BEFORE_QUOTE):
            result.append(RawBlock(format="rst", content="..\n\n"))
        result.append(block)
    return result


def _tokens_text(tokens: list[Token]) -> str:
    """Join rendered inline tokens into one line."""
    return " ".join(line for line in text_lines(wrap(tokens, None)) if line)


def _explicit_target(name: str) -> str:
    """Name part of an explicit target, back-quoted when it would be misread."""
    if ":" in name or name.startswith("_"):
        return f"`{name}`"
    return name


def _literal_lines(text: str) -> Block:
    lines: Block = list(text.split("\n"))
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def _starts_with_block_quote(blocks: Sequence[Node]) -> bool:
    return bool(blocks) and isinstance(blocks[0], BlockQuote)


class RestructuredTextRenderer(NodeVisitor, TableRenderingMixin, BaseRenderer):
    """Render AST nodes to reStructuredText.

    This class implements the visitor pattern to traverse an AST and
    generate RST output with configurable formatting options. Block
    ``visit_*`` methods return blocks of lines; inline ``visit_*`` methods
    return layout tokens.

    Parameters
    ----------
    options : RstRendererOptions or None, default = None
        RST formatting options

    Attributes
    ----------
    has_math : bool
        Whether the last rendered document contained math
    has_raw_latex : bool
        Whether the last rendered document contained raw LaTeX inlines
    messages : list of RenderMessage
        Content dropped while rendering the last document

    Examples
    --------
    Basic usage:

        >>> from all2rst.ast import Document, Heading, Text
        >>> from all2rst.renderers.rst import RestructuredTextRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> print(RestructuredTextRenderer().render_to_string(doc))
        Title
        =====

    """

    def __init__(self, options: RstRendererOptions | None = None):
        """Initialize the RST renderer with options."""
        BaseRenderer._validate_options_type(options, RstRendererOptions, "rst")
        options = options or RstRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: RstRendererOptions = options
        self._reset()

    def _reset(self) -> None:
        self.registry = ReferenceRegistry()
        self.messages = []
        self.has_math = False
        self.has_raw_latex = False
        self._top_level = True
        self._indent = 0
        self._depth = 0

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to RST string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            RST text

        Raises
        ------
        NestingDepthError
            If the document nests deeper than ``max_nesting_depth``
        TemplateError
            If the template cannot be loaded or rendered

        """
        self._reset()
        body = render_block(document.accept(self))

        if self.options.uses_template:
            text = self._apply_template(body, document)
        else:
            text = body
        return text.rstrip()

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to RST and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        rst_text = self.render_to_string(doc)
        self.write_text_output(rst_text + "\n", output)

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    @contextmanager
    def _indented(self, amount: int) -> Iterator[None]:
        """Account for ``amount`` columns of indentation added by the caller."""
        self._indent += amount
        try:
            yield
        finally:
            self._indent -= amount

    @contextmanager
    def _cell_scope(self, width: Optional[int]) -> Iterator[None]:
        """Render table cells at ``width`` columns, or unwrapped when None."""
        saved_options, saved_indent, saved_top = self.options, self._indent, self._top_level
        if width is None:
            self.options = self.options.create_updated(wrap_mode="none")
        else:
            self.options = self.options.create_updated(columns=max(1, width))
        self._indent = 0
        try:
            yield
        finally:
            self.options, self._indent, self._top_level = saved_options, saved_indent, saved_top

    @contextmanager
    def _nesting(self, node_type: str) -> Iterator[None]:
        self._depth += 1
        try:
            if self._depth > self.options.max_nesting_depth:
                raise NestingDepthError(self._depth, self.options.max_nesting_depth, node_type)
            yield
        finally:
            self._depth -= 1

    def _wrap_width(self, extra: int = 0) -> Optional[int]:
        """Line width available to inline content, or None when not wrapping."""
        if self.options.wrap_mode != "auto":
            return None
        return max(1, self.options.columns - self._indent - extra)

    # ------------------------------------------------------------------
    # Block helpers
    # ------------------------------------------------------------------

    def _render_blocks(self, blocks: Sequence[Node], top_level: bool = False) -> Block:
        """Render a list of blocks, stacking them directly."""
        saved = self._top_level
        self._top_level = top_level
        try:
            result: Block = []
            for block in _separate_block_quotes(blocks):
                with self._nesting(type(block).__name__):
                    result.extend(block.accept(self))
            return result
        finally:
            self._top_level = saved

    def _cell_lines(self, blocks: list[Node]) -> list[str]:
        with self._nesting("TableCell"):
            text = render_block(self._render_blocks(blocks))
        return text.split("\n") if text else []

    def _item_contents(self, blocks: list[Node], indent: int) -> Block:
        """Render list item content, guarding block quotes at its start."""
        with self._nesting("ListItem"), self._indented(indent):
            contents = self._render_blocks(blocks)
        if _starts_with_block_quote(blocks):
            contents = ["..", BLANK] + contents
        return contents

    @staticmethod
    def _item_separator(blocks: list[Node]) -> Block:
        if not blocks or isinstance(blocks[-1], Plain):
            return []
        return [BLANK]

    def _bullet_item(self, blocks: list[Node]) -> Block:
        contents = self._item_contents(blocks, 2)
        return hang(contents, 2, "- ") + self._item_separator(blocks)

    def _ordered_item(self, marker: str, blocks: list[Node]) -> Block:
        contents = self._item_contents(blocks, len(marker))
        return hang(contents, len(marker), marker) + self._item_separator(blocks)

    # ------------------------------------------------------------------
    # Inline helpers
    # ------------------------------------------------------------------

    def _inline_tokens(self, inlines: Sequence[Node]) -> list[Token]:
        """Normalize and render a list of inlines."""
        remaining = max(1, self.options.max_nesting_depth - self._depth)
        return self._render_inline_nodes(transform_inlines(inlines, max_depth=remaining))

    def _render_inline_nodes(self, inlines: Sequence[Node]) -> list[Token]:
        """Render already normalized inlines."""
        tokens: list[Token] = []
        for node in inlines:
            with self._nesting(type(node).__name__):
                tokens.extend(node.accept(self))
        return tokens

    def _inline_lines(self, inlines: Sequence[Node], extra_indent: int = 0) -> Block:
        return wrap(self._inline_tokens(inlines), self._wrap_width(extra_indent))

    def _inline_text(self, inlines: list[Node]) -> str:
        """Render inlines on a single line."""
        return _tokens_text(self._inline_tokens(inlines))

    def _normalized_text(self, inlines: list[Node]) -> str:
        """Render already normalized inlines on a single line."""
        return _tokens_text(self._render_inline_nodes(inlines))

    # ------------------------------------------------------------------
    # Document and deferred sections
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> Block:
        """Render the document body followed by the deferred sections."""
        blocks = normalize_headings(node.children) if self.options.uses_template else node.children
        body = self._render_blocks(blocks, top_level=True)
        notes = self._render_notes()
        links = self._render_link_targets()
        images = self._render_image_targets()
        return vsep([body, notes, links, images])

    def _render_notes(self) -> Block:
        """Render footnote bodies; notes found inside notes are appended and rendered too."""
        rendered: list[Block] = []
        index = 0
        while index < len(self.registry.notes):
            with self._indented(RST_INDENT):
                contents = self._render_blocks(self.registry.notes[index])
            index += 1
            rendered.append([f".. [{index}]"] + nest(strip_blanks(contents), RST_INDENT))
        return vsep(rendered)

    def _render_link_targets(self) -> Block:
        lines: Block = []
        for link in self.registry.links:
            lines.append(f".. _{_explicit_target(link.text)}: {link.url}")
        return lines

    def _image_fields(self, image: ImageTarget) -> Block:
        classes = image.attr.classes
        fields: Block = []
        if len(classes) == 1 and classes[0] in IMAGE_ALIGN_CLASSES:
            align = IMAGE_ALIGN_CLASSES[classes[0]]
            if align is not None:
                fields.append(f":align: {align}")
        elif classes:
            fields.append(f":class: {' '.join(classes)}")
        if image.attr.identifier:
            fields.append(f":name: {image.attr.identifier}")
        fields.extend(image_dimension_fields(image.attr.attributes))
        if image.target is not None:
            fields.append(f":target: {image.target}")
        return fields

    def _render_image_targets(self) -> Block:
        lines: Block = []
        for image in self.registry.images:
            lines.append(f".. |{image.text}| image:: {image.url}")
            lines.extend(nest(self._image_fields(image), RST_INDENT))
        return lines

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def _metadata_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return escape_rst(value, self.options.smart)
        if isinstance(value, Node):
            value = [value]
        if isinstance(value, list):
            if value and all(isinstance(v, Node) for v in value):
                if all(isinstance(v, INLINE_NODE_TYPES) for v in value):
                    return self._inline_text(value)
                return render_block(self._render_blocks(value))
            return [self._metadata_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._metadata_value(v) for k, v in value.items()}
        return value

    def _title_block(self, title: str, subtitle: str) -> str:
        def bordered(text: str, char: str) -> Block:
            if not text:
                return []
            border = char * measure_width(text)
            return [border, text, border]

        return render_block(vcat([bordered(title, "="), bordered(subtitle, "-")]))

    def _build_context(self, body: str, document: Document) -> dict[str, Any]:
        metadata = {str(key).replace("-", "_"): self._metadata_value(v) for key, v in document.metadata.items()}

        authors = metadata.get("author", metadata.get("authors", []))
        if not isinstance(authors, list):
            authors = [authors]

        context: dict[str, Any] = {
            "title": "",
            "subtitle": "",
            "date": "",
            "abstract": "",
            "include_before": [],
            "include_after": [],
        }
        context.update(metadata)
        context.update(
            {
                "author": [a for a in authors if a],
                "body": body,
                "toc": self.options.table_of_contents,
                "toc_depth": self.options.toc_depth,
                "number_sections": self.options.number_sections,
                "math": self.has_math,
                "rawtex": self.has_raw_latex,
                "titleblock": self._title_block(str(context["title"]), str(context["subtitle"])),
            }
        )
        return context

    def _load_template(self) -> jinja2.Template:
        if self.options.template_file is not None:
            template_path = Path(self.options.template_file)
            template_dir, template_name = str(template_path.parent), template_path.name
        else:
            template_dir, template_name = str(TEMPLATE_DIR), DEFAULT_TEMPLATE_NAME

        # autoescape=False: the output is reStructuredText, not HTML
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir),
            autoescape=False,  # nosec B701
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        if self.options.template_string is not None:
            return env.from_string(self.options.template_string)
        return env.get_template(template_name)

    def _apply_template(self, body: str, document: Document) -> str:
        """Merge the rendered body into the document template."""
        context = self._build_context(body, document)
        try:
            template = self._load_template()
            logger.debug(f"Rendering body through template {template.name or '<string>'}")
            return template.render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template: {e}", original_error=e) from e

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_plain(self, node: Plain) -> Block:
        return self._inline_lines(node.content)

    def visit_paragraph(self, node: Paragraph) -> Block:
        """Render a paragraph; hard line breaks turn it into a line block."""
        if any(isinstance(child, LineBreak) for child in node.content):
            lines: list[list[Node]] = [[]]
            for child in node.content:
                if isinstance(child, LineBreak):
                    lines.append([])
                else:
                    lines[-1].append(child)
            return self.visit_line_block(LineBlock(lines=lines))
        return self._inline_lines(node.content) + [BLANK]

    def visit_line_block(self, node: LineBlock) -> Block:
        result: Block = []
        with self._indented(2):
            for line in node.lines:
                result.extend(hang(self._inline_lines(line), 2, "| "))
        return result + [BLANK]

    def visit_code_block(self, node: CodeBlock) -> Block:
        """Render a literal block or a code directive.

        Literate Haskell blocks are written with bird tracks when enabled.
        The language is the first class with no rendering meaning.
        """
        classes = node.attr.classes
        code = _literal_lines(node.content)

        if self.options.literate_haskell and "haskell" in classes and "literate" in classes:
            return prefixed(code, "> ") + [BLANK]

        languages = [c for c in classes if c not in CODE_BLOCK_IGNORED_CLASSES]
        if not languages:
            return ["::", BLANK] + nest(code, RST_INDENT) + [BLANK]

        header: Block = [f".. {self.options.code_directive}:: {languages[0]}"]
        if "numberLines" in classes or "number-lines" in classes:
            start = node.attr.attributes.get("startFrom", "")
            header.append(f"   :number-lines: {start}".rstrip())
        return header + [BLANK] + nest(code, RST_INDENT) + [BLANK]

    def visit_raw_block(self, node: RawBlock) -> Block:
        fmt = node.format.lower()
        if fmt == "rst":
            return _literal_lines(node.content)
        if fmt == "tex":
            fmt = "latex"
        return [BLANK, f".. raw:: {fmt}", BLANK] + nest(_literal_lines(node.content), RST_INDENT) + [BLANK]

    def visit_thematic_break(self, node: ThematicBreak) -> Block:
        return [BLANK, HORIZONTAL_RULE, BLANK]

    def visit_heading(self, node: Heading) -> Block:
        """Render a section title, or a rubric when not at the top level.

        An explicit target is written only when the identifier differs from
        the one a reader would derive from the heading text.
        """
        text = self._inline_text(node.content)
        identifier = node.attr.identifier

        if not self._top_level:
            lines: Block = [f"rubric:: {text}".rstrip()]
            if identifier:
                lines.append(f":name: {identifier}")
            if node.attr.classes:
                lines.append(f":class: {' '.join(node.attr.classes)}")
            return hang(lines, RST_INDENT, ".. ") + [BLANK]

        if not text:
            return []

        result: Block = []
        if identifier and identifier != unique_identifier(node.content):
            result += [f".. _{_explicit_target(identifier)}:", BLANK]

        chars = self.options.heading_chars
        char = chars[node.level - 1] if node.level <= len(chars) else " "
        result += [text, char * measure_width(text), BLANK]
        return result

    def visit_block_quote(self, node: BlockQuote) -> Block:
        with self._indented(RST_INDENT):
            contents = self._render_blocks(node.children)
        return nest(contents, RST_INDENT) + [BLANK]

    def visit_list(self, node: List) -> Block:
        """Render a bullet or enumerated list."""
        blocks = [item.children for item in node.items]
        if node.ordered:
            if node.start == 1 and node.style == "default" and node.delimiter == "default":
                markers = ["#."] * len(blocks)
            else:
                markers = ordered_list_markers(node.start, node.style, node.delimiter, len(blocks))
            width = max((len(m) for m in markers), default=0)
            items = [self._ordered_item(m.ljust(width) + " ", b) for m, b in zip(markers, blocks)]
        else:
            items = [self._bullet_item(b) for b in blocks]

        joined = vcat(items) if is_tight_list(blocks) else vsep(items)
        return [BLANK] + joined + [BLANK]

    def visit_list_item(self, node: ListItem) -> Block:
        return self._bullet_item(node.children)

    def visit_definition_list(self, node: DefinitionList) -> Block:
        items: list[Block] = []
        for term, descriptions in node.items:
            label = self.visit_definition_term(term)
            with self._indented(RST_INDENT):
                contents = vcat(self.visit_definition_description(d) for d in descriptions)
            if descriptions and _starts_with_block_quote(descriptions[0].content):
                contents = ["..", BLANK] + contents
            first = descriptions[0].content if descriptions else []
            tight = bool(first) and isinstance(first[0], Plain)
            items.append(label + nest(strip_blanks(contents), RST_INDENT) + ([] if tight else [BLANK]))
        return [BLANK] + vcat(items) + [BLANK]

    def visit_definition_term(self, node: DefinitionTerm) -> Block:
        return [self._inline_text(node.content)]

    def visit_definition_description(self, node: DefinitionDescription) -> Block:
        with self._nesting("DefinitionDescription"):
            return self._render_blocks(node.content)

    def visit_table(self, node: Table) -> Block:
        """Render a table as a list table, simple table or grid table."""
        rows = ([node.header] if node.header is not None else []) + list(node.rows)
        min_columns = max(self._compute_table_columns(rows), len(node.column_widths), len(node.alignments))
        legacy = to_legacy_table(node, min_columns)
        result = self._render_legacy_table(legacy)
        logger.debug(f"Rendered {legacy.column_count}-column table")
        return result

    def visit_table_row(self, node: TableRow) -> Block:
        return vcat(self.visit_table_cell(cell) for cell in node.cells)

    def visit_table_cell(self, node: TableCell) -> Block:
        return self._render_blocks(node.content)

    def _simple_figure_image(self, node: Figure) -> Optional[Image]:
        if len(node.children) != 1:
            return None
        block = node.children[0]
        if isinstance(block, (Plain, Paragraph)) and len(block.content) == 1 and isinstance(block.content[0], Image):
            return block.content[0]
        return None

    def visit_figure(self, node: Figure) -> Block:
        """Render a figure directive, or a float container for complex figures."""
        image = self._simple_figure_image(node)
        with self._indented(RST_INDENT):
            caption = self._render_blocks(node.caption)

        if image is not None:
            lines: Block = [f"figure:: {image.url}"]
            if node.attr.identifier:
                lines.append(f":name: {node.attr.identifier}")
            elif image.attr.identifier:
                lines.append(f":name: {image.attr.identifier}")
            alt = extract_text(image.alt) or image.title
            if alt:
                lines.append(f":alt: {alt}")
            classes = image.attr.classes
            if len(classes) == 1 and classes[0] in FIGURE_ALIGN_CLASSES:
                lines.append(f":align: {FIGURE_ALIGN_CLASSES[classes[0]]}")
            elif classes:
                lines.append(f":figclass: {' '.join(classes)}")
            lines.extend(image_dimension_fields(image.attr.attributes))
            if strip_blanks(caption):
                lines += [BLANK] + strip_blanks(caption)
            return hang(lines, RST_INDENT, ".. ") + [BLANK]

        with self._indented(RST_INDENT):
            body = self._render_blocks(node.children)
        classes = " ".join(c for c in node.attr.classes if c != "container")
        result: Block = [BLANK, f".. container:: float {classes}".rstrip()]
        if node.attr.identifier:
            result.append(f"   :name: {node.attr.identifier}")
        contents = vsep([body, caption])
        return result + [BLANK] + nest(contents, RST_INDENT) + [BLANK]

    def visit_div(self, node: Div) -> Block:
        """Render an admonition or a generic container."""
        attr = node.attr
        if not attr.identifier and attr.classes == ["title"] and not attr.attributes:
            return []

        children = list(node.children)
        admonition = next((c for c in attr.classes if c in RST_ADMONITIONS), None)
        if admonition == "admonition":
            title = ""
            if children and isinstance(children[0], Div) and children[0].attr.classes == ["title"]:
                title = " ".join(
                    line for line in text_lines(self._render_blocks(children[0].children)) if line.strip()
                )
                children = children[1:]
            directive = f".. admonition:: {title}".rstrip()
        elif admonition is not None:
            directive = f".. {admonition}::"
        else:
            classes = " ".join(c for c in attr.classes if c != "container")
            directive = f".. container:: {classes}".rstrip()

        with self._indented(RST_INDENT):
            contents = self._render_blocks(children)
        if _starts_with_block_quote(children):
            contents = ["..", BLANK] + contents

        result: Block = [BLANK, directive]
        if attr.identifier:
            result.append(f"   :name: {attr.identifier}")
        return result + [BLANK] + nest(contents, RST_INDENT) + [BLANK]

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _wrapped(self, opener: str, content: Sequence[Node], closer: str) -> list[Token]:
        return [opener, *self._render_inline_nodes(content), closer]

    def visit_text(self, node: Text) -> list[Token]:
        text = escape_rst(node.content, self.options.smart)
        if self.options.smart:
            text = unsmartify(text)
        tokens: list[Token] = []
        words = [w for w in _BREAKABLE_RE.split(text) if w]
        if _BREAKABLE_RE.match(text):
            tokens.append(SPACE)
        for i, word in enumerate(words):
            if i:
                tokens.append(SPACE)
            tokens.append(word)
        if words and text[-1:] in " \t\n\r":
            tokens.append(SPACE)
        return tokens

    def visit_space(self, node: Space) -> list[Token]:
        return [SPACE]

    def visit_soft_break(self, node: SoftBreak) -> list[Token]:
        return [NEWLINE] if self.options.wrap_mode == "preserve" else [SPACE]

    def visit_line_break(self, node: LineBreak) -> list[Token]:
        return [NEWLINE]

    def visit_emphasis(self, node: Emphasis) -> list[Token]:
        return self._wrapped("*", node.content, "*")

    def visit_underline(self, node: Underline) -> list[Token]:
        return self._wrapped("*", node.content, "*")

    def visit_strong(self, node: Strong) -> list[Token]:
        return self._wrapped("**", node.content, "**")

    def visit_strikethrough(self, node: Strikethrough) -> list[Token]:
        return self._wrapped("[STRIKEOUT:", node.content, "]")

    def visit_superscript(self, node: Superscript) -> list[Token]:
        return self._wrapped(":sup:`", node.content, "`")

    def visit_subscript(self, node: Subscript) -> list[Token]:
        return self._wrapped(":sub:`", node.content, "`")

    def visit_small_caps(self, node: SmallCaps) -> list[Token]:
        return self._render_inline_nodes(node.content)

    def visit_cite(self, node: Cite) -> list[Token]:
        return self._render_inline_nodes(node.content)

    def visit_quoted(self, node: Quoted) -> list[Token]:
        if node.quote_type == "single":
            opener, closer = ("'", "'") if self.options.smart else ("‘", "’")
        else:
            opener, closer = ('"', '"') if self.options.smart else ("“", "”")
        return self._wrapped(opener, node.content, closer)

    def visit_span(self, node: Span) -> list[Token]:
        attr = node.attr
        if attr.classes == ["mark"] and not attr.identifier and not attr.attributes:
            return self._wrapped(":mark:`", node.content, "`")
        role = attr.attributes.get("role")
        if role:
            return self._wrapped(f":{role}:`", node.content, "`")
        return self._render_inline_nodes(node.content)

    def visit_code(self, node: Code) -> list[Token]:
        attr = node.attr
        role = attr.attributes.get("role")
        if role and attr.classes == ["interpreted-text"]:
            return [f":{role}:`{node.content}`"]
        code = node.content.strip()
        if "`" in code:
            return [f":literal:`{escape_rst(code)}`"]
        return [f"``{code}``"]

    def visit_math(self, node: Math) -> list[Token]:
        self.has_math = True
        if node.math_type == "inline":
            return [f":math:`{' '.join(node.content.split())}`"]
        formula = node.content.strip()
        if "\n" in formula:
            directive = tuple([".. math::", BLANK, *nest(_literal_lines(formula), RST_INDENT)])
            return [BLANK, Lines(directive), BLANK]
        return [BLANK, Lines((f".. math:: {formula}",)), BLANK]

    def visit_raw_inline(self, node: RawInline) -> list[Token]:
        fmt = node.format.lower()
        if fmt == "rst":
            if "\n" in node.content:
                return [Lines(tuple(_literal_lines(node.content)))]
            return [node.content]
        if fmt in RAW_LATEX_FORMATS:
            self.has_raw_latex = True
            return [f":raw-latex:`{node.content}`"]
        self._report(node, f"raw inline in format {node.format!r} cannot be written as reStructuredText")
        return []

    def visit_link(self, node: Link) -> list[Token]:
        """Render a hyperlink as an autolink, image target, named or anonymous reference."""
        content = node.content
        if len(content) == 1 and isinstance(content[0], Text) and _URI_RE.match(node.url):
            text = content[0].content
            if node.url in (text, f"mailto:{text}"):
                return [node.url[len("mailto:") :] if node.url.startswith("mailto:") else node.url]

        if len(content) == 1 and isinstance(content[0], Image):
            image = content[0]
            entry = self.registry.register_image(
                image.alt, image.url, image.title, image.attr, target=node.url, render_label=self._normalized_text
            )
            return [f"|{entry.text}|"]

        text = self._render_inline_nodes(content)
        if not text:
            return [f"`<{node.url}>`__"]

        if self.options.reference_links:
            existing = self.registry.find_link(content)
            if existing is None:
                self.registry.add_link(content, node.url, node.title, text=_tokens_text(text))
                return ["`", *text, "`_"]
            if existing.url == node.url and existing.title == node.title:
                return ["`", *text, "`_"]
        return ["`", *text, SPACE, f"<{node.url}>`__"]

    def visit_image(self, node: Image) -> list[Token]:
        entry = self.registry.register_image(
            node.alt, node.url, node.title, node.attr, render_label=self._normalized_text
        )
        return [f"|{entry.text}|"]

    def visit_note(self, node: Note) -> list[Token]:
        number = self.registry.add_note(node.children)
        return [f" [{number}]_"]

