"""Tests for loading ESTree JSON and resolving the loaded trees.

- Each .json file in tests/estree/ must resolve without errors
- Each .json file in tests/estree/errors/ must fail with a ScopeError
"""

import json
from pathlib import Path

import pytest
from jsscope import analyze, ScopeError, MalformedTree, DeclarationKind
from jsscope.estree import from_dict, load, loads
from jsscope.ast_nodes import (
    Program, Identifier, NumericLiteral, StringLiteral, BooleanLiteral,
    NullLiteral, RegexLiteral, ExpressionStatement, VariableDeclaration,
    TemplateLiteral,
)

FIXTURES = Path(__file__).parent / "estree"


def get_fixture_files(subdir=""):
    """Discover all .json files in a fixture directory."""
    directory = FIXTURES / subdir
    if not directory.exists():
        return []
    return [(f.name, f) for f in sorted(directory.glob("*.json"))]


@pytest.mark.parametrize(
    "name,path",
    get_fixture_files(),
    ids=lambda x: x if isinstance(x, str) else None,
)
def test_fixture_resolves(name: str, path: Path):
    """Resolve a fixture program - if it raises, the test fails."""
    with path.open(encoding="utf-8") as fp:
        program = load(fp)
    tree, table = analyze(program)
    assert len(table) > 0
    assert all(ref.resolved for ref in table)


@pytest.mark.parametrize(
    "name,path",
    get_fixture_files("errors"),
    ids=lambda x: x if isinstance(x, str) else None,
)
def test_fixture_fails(name: str, path: Path):
    """Resolve a fixture program that must be rejected."""
    program = loads(path.read_text(encoding="utf-8"))
    with pytest.raises(ScopeError) as exc_info:
        analyze(program)
    assert exc_info.value.line == 2


class TestLiterals:
    """Test mapping of the ESTree Literal type."""

    def test_number(self):
        node = from_dict({"type": "Literal", "value": 42, "raw": "42"})
        assert node == NumericLiteral(42)

    def test_string(self):
        node = from_dict({"type": "Literal", "value": "hi", "raw": "'hi'"})
        assert isinstance(node, StringLiteral)

    def test_boolean_is_not_number(self):
        """true must not load as the number 1."""
        node = from_dict({"type": "Literal", "value": True, "raw": "true"})
        assert isinstance(node, BooleanLiteral)
        assert node.value is True

    def test_null(self):
        node = from_dict({"type": "Literal", "value": None, "raw": "null"})
        assert isinstance(node, NullLiteral)

    def test_regex(self):
        node = from_dict({
            "type": "Literal", "value": None, "raw": "/a+/g",
            "regex": {"pattern": "a+", "flags": "g"},
        })
        assert node == RegexLiteral("a+", "g")

    def test_bigint(self):
        node = from_dict({"type": "Literal", "value": None, "bigint": "10", "raw": "10n"})
        assert node == NumericLiteral(10)


class TestConversion:
    """Test conversion of node objects."""

    def test_location(self):
        """loc.start becomes the node location."""
        node = from_dict({
            "type": "Identifier", "name": "x",
            "loc": {"start": {"line": 4, "column": 2}, "end": {"line": 4, "column": 3}},
        })
        assert isinstance(node, Identifier)
        assert (node.loc.line, node.loc.column) == (4, 2)

    def test_extra_keys_ignored(self):
        """range, sourceType and other parser extras are ignored."""
        node = from_dict({
            "type": "Program", "sourceType": "script", "range": [0, 0], "body": [],
        })
        assert node == Program([])

    def test_nested_nodes(self):
        node = from_dict({
            "type": "VariableDeclaration",
            "kind": "let",
            "declarations": [{
                "type": "VariableDeclarator",
                "id": {"type": "Identifier", "name": "a"},
                "init": None,
            }],
        })
        assert isinstance(node, VariableDeclaration)
        assert node.kind == "let"
        assert node.declarations[0].id.name == "a"
        assert node.declarations[0].init is None

    def test_template_literal(self):
        node = from_dict({
            "type": "TemplateLiteral",
            "quasis": [{"type": "TemplateElement", "value": {"raw": "a", "cooked": "a"}, "tail": True}],
            "expressions": [],
        })
        assert isinstance(node, TemplateLiteral)
        assert node.quasis[0].raw == "a"
        assert node.quasis[0].tail is True

    def test_to_dict_output_loads(self):
        """Dictionaries from Node.to_dict load back to equal nodes."""
        original = from_dict({
            "type": "ExpressionStatement",
            "expression": {"type": "Identifier", "name": "x", "loc": {"start": {"line": 1, "column": 0}}},
        })
        reloaded = from_dict(original.to_dict())
        assert isinstance(reloaded, ExpressionStatement)
        assert reloaded == original
        assert reloaded.expression.loc == original.expression.loc

    def test_unsupported_type(self):
        """Node types outside the contract are rejected."""
        with pytest.raises(MalformedTree) as exc_info:
            from_dict({"type": "ClassDeclaration", "id": None, "body": None})
        assert "ClassDeclaration" in str(exc_info.value)

    def test_missing_field(self):
        with pytest.raises(MalformedTree):
            from_dict({"type": "Identifier"})

    def test_not_a_node(self):
        with pytest.raises(MalformedTree):
            from_dict({"name": "x"})

    def test_invalid_json(self):
        with pytest.raises(MalformedTree):
            loads("{not json")


class TestLoadedPrograms:
    """Test resolution of loaded fixture programs."""

    def test_closure_counter(self):
        """The counter closure captures the let of its factory."""
        program = loads((FIXTURES / "closure_counter.json").read_text(encoding="utf-8"))
        tree, table = analyze(program)
        assert tree.root.strict
        factory = tree.root.children[0]
        count = factory.bindings["count"]
        assert count.kind is DeclarationKind.LET
        assert count.captured
        refs = table.named("count")
        assert [ref.node.loc.line for ref in refs] == [3, 5, 6]
        assert all(ref.binding is count for ref in refs)
        assert tree.root.bindings["console"].kind is DeclarationKind.GLOBAL

    def test_loop_closures(self):
        """Loop closures and a sloppy implicit global."""
        program = loads((FIXTURES / "loop_closures.json").read_text(encoding="utf-8"))
        tree, table = analyze(program)
        loop_scope = tree.root.children[0]
        assert loop_scope.per_iteration
        assert loop_scope.bindings["i"].per_iteration
        assert loop_scope.bindings["i"].captured
        assert loop_scope.captured == [loop_scope.bindings["i"]]
        assert [b.name for b in table.implicit_globals] == ["total"]

    def test_fixture_is_valid_json(self):
        for _, path in get_fixture_files() + get_fixture_files("errors"):
            assert json.loads(path.read_text(encoding="utf-8"))["type"] == "Program"
