"""Load ESTree JSON (as produced by esprima, acorn, espree) into AST nodes."""

import dataclasses
import json
from typing import Any, Dict, IO, Type

from . import ast_nodes
from .ast_nodes import (
    Node, SourceLocation, NumericLiteral, StringLiteral, BooleanLiteral,
    NullLiteral, RegexLiteral, TemplateElement,
)
from .errors import MalformedTree

NODE_TYPES: Dict[str, Type[Node]] = {
    name: cls
    for name, cls in vars(ast_nodes).items()
    if isinstance(cls, type) and issubclass(cls, Node) and cls is not Node
}


def from_dict(data: Dict[str, Any]) -> Node:
    """Convert an ESTree node dictionary into an AST node.

    Dictionaries produced by Node.to_dict() are accepted as well. Keys the
    node type does not define (range, sourceType, directive, ...) are ignored.
    """
    if not isinstance(data, dict) or "type" not in data:
        raise MalformedTree(f"expected a node object, got {data!r}")

    node_type = data["type"]
    if node_type == "Literal":
        node = _literal(data)
    elif node_type == "TemplateElement":
        value = data.get("value")
        raw = value.get("raw", "") if isinstance(value, dict) else data.get("raw", "")
        node = TemplateElement(raw=raw, tail=data.get("tail", False))
    else:
        cls = NODE_TYPES.get(node_type)
        if cls is None:
            raise MalformedTree(f"unsupported node type: {node_type}")
        kwargs = {}
        for f in dataclasses.fields(cls):
            if f.name == "loc":
                continue
            if f.name in data:
                kwargs[f.name] = _convert(data[f.name])
            elif (f.default is dataclasses.MISSING
                    and f.default_factory is dataclasses.MISSING):
                raise MalformedTree(f"{node_type} is missing required field '{f.name}'")
        node = cls(**kwargs)

    node.loc = _location(data.get("loc"))
    return node


def _convert(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


def _literal(data: Dict[str, Any]) -> Node:
    """ESTree uses one Literal type for every literal kind."""
    value = data.get("value")
    if "regex" in data:
        regex = data["regex"]
        return RegexLiteral(pattern=regex.get("pattern", ""), flags=regex.get("flags", ""))
    if "bigint" in data:
        return NumericLiteral(value=int(data["bigint"]))
    # bool is a subclass of int, so check it first
    if isinstance(value, bool):
        return BooleanLiteral(value=value)
    if value is None:
        return NullLiteral()
    if isinstance(value, str):
        return StringLiteral(value=value)
    if isinstance(value, (int, float)):
        return NumericLiteral(value=value)
    raise MalformedTree(f"unsupported literal value: {value!r}")


def _location(loc: Any) -> Any:
    if not isinstance(loc, dict):
        return None
    start = loc.get("start", loc)
    if not isinstance(start, dict):
        return None
    return SourceLocation(line=start.get("line", 0), column=start.get("column", 0))


def loads(text: str) -> Node:
    """Parse ESTree JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedTree(f"invalid JSON: {e}") from e
    return from_dict(data)


def load(fp: IO[str]) -> Node:
    """Read ESTree JSON from a file object."""
    return loads(fp.read())
