#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST serialization and deserialization."""
import json

import pytest

from all2rst.ast import (
    Attr,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Math,
    Note,
    Paragraph,
    Plain,
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
)
from all2rst.ast.serialization import SCHEMA_VERSION, ast_to_dict, ast_to_json, dict_to_ast, json_to_ast


@pytest.mark.unit
class TestAstToDictConversion:
    """Test AST to dictionary conversion."""

    def test_text_node_to_dict(self) -> None:
        """Test converting Text node to dict."""
        assert ast_to_dict(Text(content="Hello")) == {"node_type": "Text", "content": "Hello"}

    def test_heading_to_dict(self) -> None:
        """Test converting Heading node to dict."""
        heading = Heading(level=1, content=[Text(content="Title")], attr=Attr(identifier="title"))
        result = ast_to_dict(heading)

        assert result["node_type"] == "Heading"
        assert result["level"] == 1
        assert result["content"][0] == {"node_type": "Text", "content": "Title"}
        assert result["attr"] == {"identifier": "title"}

    def test_empty_attr_omitted(self) -> None:
        """Empty attributes are left out of the output."""
        result = ast_to_dict(Link(url="http://x.org", content=[Text(content="x")]))
        assert "attr" not in result

    def test_source_location(self) -> None:
        """Source locations are serialized when present."""
        text = Text(content="x", source_location=SourceLocation(format="markdown", line=3))
        result = ast_to_dict(text)
        assert result["source_location"] == {"node_type": "SourceLocation", "format": "markdown", "line": 3}

    def test_definition_items(self) -> None:
        """Definition list pairs serialize as two-element lists."""
        dl = DefinitionList(
            items=[
                (
                    DefinitionTerm(content=[Text(content="term")]),
                    [DefinitionDescription(content=[Plain(content=[Text(content="desc")])])],
                )
            ]
        )
        result = ast_to_dict(dl)
        term, descriptions = result["items"][0]
        assert term["node_type"] == "DefinitionTerm"
        assert descriptions[0]["node_type"] == "DefinitionDescription"


@pytest.mark.unit
class TestDictToAst:
    """Test dictionary to AST conversion."""

    def test_unknown_node_type_strict(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"node_type": "Blink", "content": []})

    def test_unknown_node_type_lenient(self) -> None:
        assert dict_to_ast({"node_type": "Blink"}, strict_mode=False) == Text(content="")

    def test_unknown_field_strict(self) -> None:
        with pytest.raises(ValueError, match="Unknown field"):
            dict_to_ast({"node_type": "Text", "content": "x", "colour": "red"})

    def test_unknown_field_lenient(self) -> None:
        node = dict_to_ast({"node_type": "Text", "content": "x", "colour": "red"}, strict_mode=False)
        assert node == Text(content="x")

    def test_missing_node_type(self) -> None:
        with pytest.raises(ValueError):
            dict_to_ast({"content": "x"})

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValueError, match="Invalid fields"):
            dict_to_ast({"node_type": "Text"})


@pytest.mark.unit
class TestJsonRoundTrip:
    """Documents survive a trip through JSON."""

    def test_rich_document(self) -> None:
        doc = Document(
            metadata={"title": [Text(content="My"), Emphasis(content=[Text(content="Doc")])], "date": "2025"},
            children=[
                Heading(level=2, content=[Text(content="Intro")]),
                Paragraph(
                    content=[
                        Strong(content=[Text(content="bold")]),
                        Math(content="x^2", math_type="display"),
                        Note(children=[Paragraph(content=[Text(content="note")])]),
                        Image(url="a.png", alt=[Text(content="a")], attr=Attr(attributes={"width": "10"})),
                    ]
                ),
                List(
                    ordered=True,
                    start=3,
                    style="lower_roman",
                    delimiter="two_parens",
                    items=[ListItem(children=[Plain(content=[Text(content="one")])])],
                ),
                Table(
                    header=TableRow(cells=[TableCell(content=[Plain(content=[Text(content="h")])])]),
                    rows=[TableRow(cells=[TableCell(content=[Plain(content=[Text(content="c")])], colspan=2)])],
                    alignments=["left", None],
                    column_widths=[0.5, 0.5],
                ),
            ],
        )
        assert json_to_ast(ast_to_json(doc, indent=2)) == doc

    def test_schema_version_written(self) -> None:
        data = json.loads(ast_to_json(Document()))
        assert data["schema_version"] == SCHEMA_VERSION

    def test_missing_schema_version_accepted(self) -> None:
        assert json_to_ast('{"node_type": "Document", "children": []}') == Document()

    def test_unsupported_schema_version(self) -> None:
        with pytest.raises(ValueError, match="Unsupported schema version"):
            json_to_ast('{"schema_version": 99, "node_type": "Document"}')

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ValueError):
            json_to_ast("[1, 2]")

    def test_malformed_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            json_to_ast("{not json")
