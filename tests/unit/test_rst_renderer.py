#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_rst_renderer.py
"""Unit tests for reStructuredText renderer.

Tests cover:
- Rendering headings with underlines, targets and rubrics
- Rendering inline formatting and separators
- Rendering lists (bullet, enumerated and definition lists)
- Rendering code blocks, raw blocks and line blocks
- Rendering links, images and footnotes
- Rendering admonitions, containers and figures
- Nesting limits and dropped content

"""

import pytest

from all2rst.ast import (
    Attr,
    BlockQuote,
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
    LineBreak,
    Link,
    List,
    ListItem,
    Math,
    Note,
    Paragraph,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SoftBreak,
    Space,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Text,
    ThematicBreak,
)
from all2rst.exceptions import NestingDepthError
from all2rst.options import RstRendererOptions
from all2rst.renderers.rst import RestructuredTextRenderer, normalize_headings, ordered_list_markers, to_roman


def render(*blocks, **options) -> str:
    renderer = RestructuredTextRenderer(RstRendererOptions(**options))
    return renderer.render_to_string(Document(children=list(blocks)))


def para(*inlines) -> Paragraph:
    return Paragraph(content=list(inlines))


def plain(text: str) -> Plain:
    return Plain(content=[Text(content=text)])


@pytest.mark.unit
class TestHeadings:
    """Tests for section titles."""

    def test_title_and_paragraph(self, hello_document: Document) -> None:
        assert RestructuredTextRenderer().render_to_string(hello_document) == "Title\n=====\n\nHello *world*"

    def test_heading_levels(self) -> None:
        rst = render(
            Heading(level=1, content=[Text(content="One")]),
            Heading(level=2, content=[Text(content="Two")]),
            Heading(level=3, content=[Text(content="Three")]),
        )
        assert rst == "One\n===\n\nTwo\n---\n\nThree\n~~~~~"

    def test_custom_heading_chars(self) -> None:
        assert render(Heading(level=1, content=[Text(content="T")]), heading_chars="#*") == "T\n#"

    def test_underline_matches_display_width(self) -> None:
        assert render(Heading(level=1, content=[Text(content="日本")])) == "日本\n===="

    def test_explicit_target_for_custom_identifier(self) -> None:
        heading = Heading(level=1, content=[Text(content="Intro")], attr=Attr(identifier="custom"))
        assert render(heading) == ".. _custom:\n\nIntro\n====="

    def test_no_target_for_automatic_identifier(self) -> None:
        heading = Heading(level=1, content=[Text(content="Intro")], attr=Attr(identifier="intro"))
        assert render(heading) == "Intro\n====="

    def test_empty_heading_dropped(self) -> None:
        assert render(Heading(level=1, content=[]), para(Text(content="x"))) == "x"

    def test_nested_heading_becomes_rubric(self) -> None:
        quote = BlockQuote(children=[Heading(level=2, content=[Text(content="Sub")])])
        assert render(quote) == "   .. rubric:: Sub"

    def test_normalize_headings(self) -> None:
        blocks = [
            Heading(level=2, content=[Text(content="a")]),
            Heading(level=4, content=[Text(content="b")]),
            Heading(level=2, content=[Text(content="c")]),
        ]
        assert [h.level for h in normalize_headings(blocks)] == [1, 2, 1]


@pytest.mark.unit
class TestInlines:
    """Tests for inline markup."""

    def test_strong(self) -> None:
        assert render(para(Strong(content=[Text(content="bold")]))) == "**bold**"

    def test_word_glued_markup_gets_separators(self) -> None:
        rst = render(para(Text(content="a"), Emphasis(content=[Text(content="b")]), Text(content="c")))
        assert rst == "a\\ *b*\\ c"

    def test_nested_strong_in_emphasis(self) -> None:
        rst = render(
            para(Emphasis(content=[Text(content="a"), Space(), Strong(content=[Text(content="b")])]))
        )
        assert rst == "*a* **b**"

    def test_edge_spaces_moved_out(self) -> None:
        rst = render(para(Text(content="x"), Emphasis(content=[Space(), Text(content="y"), Space()]), Text(content="z")))
        assert rst == "x *y* z"

    def test_text_escaped(self) -> None:
        assert render(para(Text(content="*not* emphasis"))) == "\\*not\\* emphasis"

    def test_strikethrough_super_sub(self) -> None:
        rst = render(
            para(
                Strikethrough(content=[Text(content="gone")]),
                Space(),
                Superscript(content=[Text(content="2")]),
                Space(),
                Subscript(content=[Text(content="i")]),
            )
        )
        assert rst == "[STRIKEOUT:gone] :sup:`2` :sub:`i`"

    def test_quotes(self) -> None:
        quoted = Quoted(quote_type="double", content=[Text(content="q")])
        assert render(para(quoted)) == "“q”"
        assert render(para(quoted), smart=True) == '"q"'

    def test_code(self) -> None:
        assert render(para(Code(content="x = 1"))) == "``x = 1``"

    def test_code_with_backtick(self) -> None:
        assert render(para(Code(content="a`b"))) == ":literal:`a`b`"

    def test_code_interpreted_role(self) -> None:
        code = Code(content="func", attr=Attr(classes=["interpreted-text"], attributes={"role": "py:func"}))
        assert render(para(code)) == ":py:func:`func`"

    def test_mark_span(self) -> None:
        span = Span(content=[Text(content="hi")], attr=Attr(classes=["mark"]))
        assert render(para(span)) == ":mark:`hi`"

    def test_mark_span_inside_emphasis_is_flattened(self) -> None:
        mark = Span(content=[Text(content="x")], attr=Attr(classes=["mark"]))
        assert render(para(Emphasis(content=[Text(content="a"), Space(), mark]))) == "*a x*"

    def test_role_span(self) -> None:
        span = Span(content=[Text(content="C")], attr=Attr(attributes={"role": "kbd"}))
        assert render(para(span)) == ":kbd:`C`"

    def test_inline_math(self) -> None:
        renderer = RestructuredTextRenderer()
        rst = renderer.render_to_string(Document(children=[para(Math(content="x^2"))]))
        assert rst == ":math:`x^2`"
        assert renderer.has_math

    def test_display_math(self) -> None:
        assert render(para(Math(content="E=mc^2", math_type="display"))) == ".. math:: E=mc^2"

    def test_multiline_display_math(self) -> None:
        rst = render(para(Math(content="a\nb", math_type="display")))
        assert rst == ".. math::\n\n   a\n   b"

    def test_raw_rst_inline(self) -> None:
        assert render(para(RawInline(format="rst", content=":ref:`x`"))) == ":ref:`x`"

    def test_raw_latex_inline(self) -> None:
        renderer = RestructuredTextRenderer()
        rst = renderer.render_to_string(Document(children=[para(RawInline(format="latex", content="\\alpha"))]))
        assert rst == ":raw-latex:`\\alpha`"
        assert renderer.has_raw_latex

    def test_unknown_raw_inline_reported(self) -> None:
        renderer = RestructuredTextRenderer()
        doc = Document(children=[para(Text(content="a"), Space(), RawInline(format="html", content="<b>"))])
        assert renderer.render_to_string(doc) == "a"
        assert len(renderer.messages) == 1
        assert renderer.messages[0].node_type == "RawInline"

    def test_messages_reset_between_renders(self) -> None:
        renderer = RestructuredTextRenderer()
        renderer.render_to_string(Document(children=[para(RawInline(format="html", content="<b>"))]))
        renderer.render_to_string(Document(children=[para(Text(content="ok"))]))
        assert renderer.messages == []

    def test_soft_break(self) -> None:
        paragraph = para(Text(content="a"), SoftBreak(), Text(content="b"))
        assert render(paragraph) == "a b"
        assert render(paragraph, wrap_mode="preserve") == "a\nb"

    def test_wrapping(self) -> None:
        words = []
        for word in ["lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit"]:
            words += [Text(content=word), Space()]
        rst = render(para(*words), columns=20)
        assert all(len(line) <= 20 for line in rst.split("\n"))
        assert rst.split() == ["lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit"]

    def test_no_wrap(self) -> None:
        words = [Text(content="word "), Text(content="word " * 30)]
        assert "\n" not in render(para(*words), columns=20, wrap_mode="none")

    def test_no_break_space_keeps_words_together(self) -> None:
        rst = render(para(Text(content="aaaa\u00a0bbbb cccc")), columns=6)
        assert rst == "aaaa\u00a0bbbb\ncccc"


@pytest.mark.unit
class TestBlocks:
    """Tests for block elements."""

    def test_line_block(self) -> None:
        assert render(para(Text(content="a"), LineBreak(), Text(content="b"))) == "| a\n| b"

    def test_code_block_with_language(self) -> None:
        block = CodeBlock(content="x = 1\n", attr=Attr(classes=["python"]))
        assert render(block) == ".. code:: python\n\n   x = 1"

    def test_code_block_directive_option(self) -> None:
        block = CodeBlock(content="x = 1", attr=Attr(classes=["python"]))
        assert render(block, code_directive="code-block") == ".. code-block:: python\n\n   x = 1"

    def test_code_block_line_numbers(self) -> None:
        block = CodeBlock(
            content="x", attr=Attr(classes=["python", "numberLines"], attributes={"startFrom": "5"})
        )
        assert render(block) == ".. code:: python\n   :number-lines: 5\n\n   x"

    def test_literal_block(self) -> None:
        assert render(CodeBlock(content="a\n  b")) == "::\n\n   a\n     b"

    def test_literate_haskell(self) -> None:
        block = CodeBlock(content="main = pure ()", attr=Attr(classes=["haskell", "literate"]))
        assert render(block, literate_haskell=True) == "> main = pure ()"

    def test_raw_blocks(self) -> None:
        assert render(RawBlock(format="rst", content=".. note:: hi")) == ".. note:: hi"
        assert render(RawBlock(format="html", content="<b>x</b>")) == ".. raw:: html\n\n   <b>x</b>"
        assert render(RawBlock(format="tex", content="\\x")) == ".. raw:: latex\n\n   \\x"

    def test_thematic_break(self) -> None:
        rst = render(para(Text(content="a")), ThematicBreak(), para(Text(content="b")))
        assert rst == "a\n\n--------------\n\nb"

    def test_block_quote(self) -> None:
        rst = render(para(Text(content="a")), BlockQuote(children=[para(Text(content="q"))]))
        assert rst == "a\n\n   q"

    def test_consecutive_block_quotes_separated(self) -> None:
        rst = render(
            BlockQuote(children=[para(Text(content="q1"))]),
            BlockQuote(children=[para(Text(content="q2"))]),
        )
        assert rst == "   q1\n\n..\n\n   q2"

    def test_admonition(self) -> None:
        div = Div(attr=Attr(classes=["note"]), children=[para(Text(content="careful"))])
        assert render(div) == ".. note::\n\n   careful"

    def test_admonition_with_title(self) -> None:
        div = Div(
            attr=Attr(classes=["admonition"]),
            children=[
                Div(attr=Attr(classes=["title"]), children=[para(Text(content="Heads up"))]),
                para(Text(content="body")),
            ],
        )
        assert render(div) == ".. admonition:: Heads up\n\n   body"

    def test_container(self) -> None:
        div = Div(attr=Attr(identifier="d1", classes=["foo"]), children=[para(Text(content="x"))])
        assert render(div) == ".. container:: foo\n   :name: d1\n\n   x"

    def test_figure(self) -> None:
        figure = Figure(
            children=[Plain(content=[Image(url="f.png", alt=[Text(content="alt")])])],
            caption=[plain("Cap")],
            attr=Attr(identifier="fig1"),
        )
        assert render(figure) == ".. figure:: f.png\n   :name: fig1\n   :alt: alt\n\n   Cap"

    def test_figure_alignment_and_size(self) -> None:
        image = Image(url="f.png", attr=Attr(classes=["align-center"], attributes={"width": "50%"}))
        rst = render(Figure(children=[Plain(content=[image])]))
        assert rst == ".. figure:: f.png\n   :align: center\n   :width: 50%"


@pytest.mark.unit
class TestLists:
    """Tests for bullet, enumerated and definition lists."""

    def test_tight_bullet_list(self) -> None:
        lst = List(ordered=False, items=[ListItem(children=[plain("one")]), ListItem(children=[plain("two")])])
        assert render(lst) == "- one\n- two"

    def test_loose_bullet_list(self) -> None:
        lst = List(
            ordered=False,
            items=[ListItem(children=[para(Text(content="one"))]), ListItem(children=[para(Text(content="two"))])],
        )
        assert render(lst) == "- one\n\n- two"

    def test_default_ordered_list(self) -> None:
        lst = List(ordered=True, items=[ListItem(children=[plain("one")]), ListItem(children=[plain("two")])])
        assert render(lst) == "#. one\n#. two"

    def test_ordered_list_markers_aligned(self) -> None:
        lst = List(
            ordered=True,
            start=9,
            style="decimal",
            delimiter="period",
            items=[ListItem(children=[plain("nine")]), ListItem(children=[plain("ten")])],
        )
        assert render(lst) == "9.  nine\n10. ten"

    def test_nested_list(self) -> None:
        inner = List(ordered=False, items=[ListItem(children=[plain("b")])])
        outer = List(ordered=False, items=[ListItem(children=[plain("a"), inner])])
        assert render(outer) == "- a\n\n  - b"

    def test_empty_item(self) -> None:
        lst = List(ordered=False, items=[ListItem(children=[])])
        assert render(lst) == "-"

    def test_marker_styles(self) -> None:
        assert ordered_list_markers(1, "lower_alpha", "one_paren", 3) == ["a)", "b)", "c)"]
        assert ordered_list_markers(3, "upper_roman", "period", 2) == ["III.", "IV."]
        assert ordered_list_markers(1, "lower_roman", "two_parens", 3) == ["(i)", "(ii)", "(iii)"]

    def test_roman_numerals(self) -> None:
        assert to_roman(1994) == "MCMXCIV"
        assert to_roman(0) == "0"

    def test_tight_definition_list(self) -> None:
        dl = DefinitionList(
            items=[(DefinitionTerm(content=[Text(content="term")]), [DefinitionDescription(content=[plain("def")])])]
        )
        assert render(dl) == "term\n   def"

    def test_loose_definition_list(self) -> None:
        dl = DefinitionList(
            items=[
                (DefinitionTerm(content=[Text(content="a")]), [DefinitionDescription(content=[para(Text(content="1"))])]),
                (DefinitionTerm(content=[Text(content="b")]), [DefinitionDescription(content=[para(Text(content="2"))])]),
            ]
        )
        assert render(dl) == "a\n   1\n\nb\n   2"


@pytest.mark.unit
class TestReferences:
    """Tests for links, images and footnotes."""

    def test_inline_link(self) -> None:
        link = Link(url="http://x.org", content=[Text(content="site")])
        assert render(para(link)) == "`site <http://x.org>`__"

    def test_autolink(self) -> None:
        assert render(para(Link(url="http://x.org", content=[Text(content="http://x.org")]))) == "http://x.org"

    def test_email_autolink(self) -> None:
        assert render(para(Link(url="mailto:a@b.org", content=[Text(content="a@b.org")]))) == "a@b.org"

    def test_link_without_text(self) -> None:
        assert render(para(Link(url="http://x.org", content=[]))) == "`<http://x.org>`__"

    def test_reference_links_deduplicated(self) -> None:
        link = Link(url="http://x.org", content=[Text(content="site")])
        rst = render(para(link, Space(), Text(content="and"), Space(), link), reference_links=True)
        assert rst == "`site`_ and `site`_\n\n.. _site: http://x.org"

    def test_reference_label_conflict_falls_back_to_anonymous(self) -> None:
        first = Link(url="http://x.org", content=[Text(content="site")])
        second = Link(url="http://y.org", content=[Text(content="site")])
        rst = render(para(first, Space(), second), reference_links=True)
        assert rst == "`site`_ `site <http://y.org>`__\n\n.. _site: http://x.org"

    def test_reference_label_rendered_once(self) -> None:
        link = Link(url="http://x.org", content=[Text(content="site"), Note(children=[para(Text(content="n"))])])
        rst = render(para(link), reference_links=True)
        assert rst.count(".. [") == 1
        assert "[2]" not in rst

    def test_image_alt_rendered_once(self) -> None:
        image = Image(url="a.png", alt=[Text(content="pic"), Note(children=[para(Text(content="n"))])])
        rst = render(para(image))
        assert rst.count(".. [") == 1
        assert "[2]" not in rst

    def test_image_substitution(self) -> None:
        image = Image(url="a.png", alt=[Text(content="logo")], attr=Attr(attributes={"width": "10"}))
        assert render(para(image)) == "|logo|\n\n.. |logo| image:: a.png\n   :width: 10px"

    def test_duplicate_alt_text(self) -> None:
        rst = render(
            para(
                Image(url="a.png", alt=[Text(content="pic")]),
                Space(),
                Image(url="b.png", alt=[Text(content="pic")]),
            )
        )
        assert rst == "|pic| |image1|\n\n.. |pic| image:: a.png\n.. |image1| image:: b.png"

    def test_linked_image(self) -> None:
        link = Link(url="http://x.org", content=[Image(url="a.png", alt=[Text(content="logo")])])
        assert render(para(link)) == "|logo|\n\n.. |logo| image:: a.png\n   :target: http://x.org"

    def test_footnote(self) -> None:
        note = Note(children=[para(Text(content="note"))])
        assert render(para(Text(content="text"), note)) == "text [1]_\n\n.. [1]\n   note"

    def test_footnotes_numbered_in_order(self) -> None:
        rst = render(
            para(Text(content="a"), Note(children=[para(Text(content="x"))])),
            para(Text(content="b"), Note(children=[para(Text(content="y"))])),
        )
        assert rst == "a [1]_\n\nb [2]_\n\n.. [1]\n   x\n\n.. [2]\n   y"

    def test_note_inside_note(self) -> None:
        inner = Note(children=[para(Text(content="b"))])
        outer = Note(children=[para(Text(content="a"), inner)])
        rst = render(para(Text(content="x"), outer))
        assert rst == "x [1]_\n\n.. [1]\n   a [2]_\n\n.. [2]\n   b"

    def test_deferred_sections_in_order(self) -> None:
        rst = render(
            para(
                Link(url="http://x.org", content=[Text(content="site")]),
                Note(children=[para(Text(content="n"))]),
                Space(),
                Image(url="a.png", alt=[Text(content="img")]),
            ),
            reference_links=True,
        )
        body, notes, links, images = rst.split("\n\n")
        assert notes.startswith(".. [1]")
        assert links.startswith(".. _site:")
        assert images.startswith(".. |img|")
        assert body.startswith("`site`_")


@pytest.mark.unit
class TestNestingLimit:
    """Pathological nesting aborts with NestingDepthError."""

    def test_deep_block_quotes(self) -> None:
        block = para(Text(content="deep"))
        for _ in range(30):
            block = BlockQuote(children=[block])
        with pytest.raises(NestingDepthError) as exc_info:
            render(block, max_nesting_depth=20)
        assert exc_info.value.limit == 20

    def test_deep_inlines(self) -> None:
        inline = Text(content="deep")
        for _ in range(30):
            inline = Emphasis(content=[inline])
        with pytest.raises(NestingDepthError):
            render(para(inline), max_nesting_depth=10)

    def test_moderate_nesting_renders(self) -> None:
        block = para(Text(content="deep"))
        for _ in range(50):
            block = BlockQuote(children=[block])
        assert render(block, columns=400).strip() == "deep"

    def test_default_limit_enforced(self) -> None:
        block = para(Text(content="deep"))
        for _ in range(250):
            block = BlockQuote(children=[block])
        with pytest.raises(NestingDepthError):
            render(block)


@pytest.mark.unit
class TestEmptyDocuments:
    def test_empty_document(self) -> None:
        assert render() == ""

    def test_empty_paragraph(self) -> None:
        assert render(para()) == ""
