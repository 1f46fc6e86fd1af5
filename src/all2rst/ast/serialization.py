#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts document trees to and from a JSON format, which is the
input format of the ``all2rst`` command line tool.

The JSON format preserves:
- All node types and their fields (``node_type`` names the class)
- Attributes, metadata and source location information
- Round-trip compatibility (AST → JSON → AST produces an equal structure)

Examples
--------
Serialize AST to JSON:

    >>> from all2rst.ast import Document, Heading, Text
    >>> from all2rst.ast.serialization import ast_to_json
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from all2rst.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any, cast

from all2rst.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    Attr,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    ListItem,
    Node,
    SourceLocation,
    TableCell,
    TableRow,
    Text,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

_NODE_CLASSES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        *BLOCK_NODE_TYPES,
        *INLINE_NODE_TYPES,
        ListItem,
        DefinitionTerm,
        DefinitionDescription,
        TableRow,
        TableCell,
    )
}


def _serialize_attr(attr: Attr) -> dict[str, Any]:
    """Serialize an Attr, omitting empty parts."""
    result: dict[str, Any] = {}
    if attr.identifier:
        result["identifier"] = attr.identifier
    if attr.classes:
        result["classes"] = list(attr.classes)
    if attr.attributes:
        result["attributes"] = dict(attr.attributes)
    return result


def _serialize_source_location(loc: SourceLocation) -> dict[str, Any]:
    """Serialize a SourceLocation.

    Parameters
    ----------
    loc : SourceLocation
        SourceLocation to serialize

    Returns
    -------
    dict
        Serialized SourceLocation

    """
    result: dict[str, Any] = {"node_type": "SourceLocation", "format": loc.format}
    if loc.line is not None:
        result["line"] = loc.line
    if loc.column is not None:
        result["column"] = loc.column
    if loc.metadata:
        result["metadata"] = loc.metadata
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return ast_to_dict(value)
    if isinstance(value, Attr):
        return _serialize_attr(value)
    if isinstance(value, SourceLocation):
        return _serialize_source_location(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    return value


def ast_to_dict(node: Node | SourceLocation) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node or SourceLocation
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is not part of the document model

    Examples
    --------
    >>> from all2rst.ast import Text
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    if isinstance(node, SourceLocation):
        return _serialize_source_location(node)

    node_type = type(node).__name__
    if _NODE_CLASSES.get(node_type) is not type(node):
        raise ValueError(f"Unknown node type for serialization: {node_type}")

    result: dict[str, Any] = {"node_type": node_type}
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if f.name == "source_location":
            if value is not None:
                result["source_location"] = _serialize_source_location(value)
            continue
        if f.name == "metadata" and not value:
            continue
        if isinstance(value, Attr) and value == Attr():
            continue
        result[f.name] = _serialize_value(value)
    return result


def _deserialize_attr(data: dict[str, Any]) -> Attr:
    return Attr(
        identifier=data.get("identifier", ""),
        classes=list(data.get("classes", [])),
        attributes=dict(data.get("attributes", {})),
    )


def _deserialize_source_location(data: dict[str, Any] | None) -> SourceLocation | None:
    """Deserialize a source location if present."""
    if not data:
        return None
    return SourceLocation(
        format=data["format"],
        line=data.get("line"),
        column=data.get("column"),
        metadata=data.get("metadata", {}),
    )


def _deserialize_value(value: Any, strict_mode: bool) -> Any:
    if isinstance(value, dict) and "node_type" in value:
        return dict_to_ast(value, strict_mode=strict_mode)
    if isinstance(value, list):
        return [_deserialize_value(v, strict_mode) for v in value]
    if isinstance(value, dict):
        return {k: _deserialize_value(v, strict_mode) for k, v in value.items()}
    return value


def _deserialize_definition_items(
    items: list[Any], strict_mode: bool
) -> list[tuple[DefinitionTerm, list[DefinitionDescription]]]:
    """Rebuild the (term, descriptions) pairs of a definition list."""
    result = []
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError("DefinitionList items must be [term, [descriptions]] pairs")
        term = cast(DefinitionTerm, dict_to_ast(item[0], strict_mode=strict_mode))
        descriptions = [
            cast(DefinitionDescription, dict_to_ast(d, strict_mode=strict_mode)) for d in item[1]
        ]
        result.append((term, descriptions))
    return result


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node | SourceLocation:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types and fields.
        If False, log a warning and substitute an empty Text node (unknown
        node types) or drop the field (unknown fields).

    Returns
    -------
    Node or SourceLocation
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary is not a node or names an unknown node type while
        ``strict_mode`` is True

    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node dictionary, got {type(data).__name__}")

    node_type = data.get("node_type")
    if not node_type:
        if strict_mode:
            raise ValueError("Dictionary must contain 'node_type' field")
        logger.warning("Dictionary missing 'node_type' field, skipping")
        return Text(content="")

    if node_type == "SourceLocation":
        return cast(SourceLocation, _deserialize_source_location(data))

    node_class = _NODE_CLASSES.get(node_type)
    if node_class is None:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning(f"Unknown node type '{node_type}', skipping")
        return Text(content="")

    known = {f.name for f in fields(node_class)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in known:
            if strict_mode:
                raise ValueError(f"Unknown field '{key}' for node type {node_type}")
            logger.warning(f"Unknown field '{key}' for node type {node_type}, ignoring")
            continue
        if key == "attr":
            kwargs[key] = _deserialize_attr(value)
        elif key == "source_location":
            kwargs[key] = _deserialize_source_location(value)
        elif node_class is DefinitionList and key == "items":
            kwargs[key] = _deserialize_definition_items(value, strict_mode)
        else:
            kwargs[key] = _deserialize_value(value, strict_mode)

    try:
        return node_class(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid fields for node type {node_type}: {e}") from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string with a ``schema_version`` field at the root

    """
    node_dict = ast_to_dict(node)
    versioned_dict = {"schema_version": SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    JSON without a ``schema_version`` field is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, reject unsupported schema versions
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types or fields

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the JSON does not describe a valid document tree
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError("AST JSON must be an object")

    schema_version = data.pop("schema_version", None)
    if validate_schema:
        if schema_version is None:
            schema_version = SCHEMA_VERSION
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        elif schema_version != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of all2rst supports schema version {SCHEMA_VERSION} only."
            )
    elif schema_version is not None and schema_version != SCHEMA_VERSION:
        logger.warning(
            f"Schema version {schema_version} differs from supported version {SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    node = dict_to_ast(data, strict_mode=strict_mode)
    if isinstance(node, SourceLocation):
        raise ValueError("AST JSON root must be a node, not a SourceLocation")
    return node


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
