"""Scope tree data model: scopes, bindings and identifier references."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .ast_nodes import ForStatement, Identifier, Node


class ScopeKind(str, Enum):
    """Kinds of lexical scope."""
    GLOBAL = "global"
    FUNCTION = "function"
    BLOCK = "block"
    CATCH = "catch"


class DeclarationKind(str, Enum):
    """How a binding was introduced."""
    VAR = "var"
    LET = "let"
    CONST = "const"
    FUNCTION = "function"
    CATCH_PARAM = "catch-param"
    PARAMETER = "parameter"
    # Not written in the source
    IMPLICIT_GLOBAL = "implicit-global"
    GLOBAL = "global"
    ARGUMENTS = "arguments"

    @property
    def is_lexical(self) -> bool:
        return self in (DeclarationKind.LET, DeclarationKind.CONST)


class Hoisting(str, Enum):
    """Where a declaration becomes visible."""
    HOISTED = "hoisted"  # top of the enclosing function or global scope
    BLOCK = "block"  # enclosing block, unusable before the declaration
    NONE = "none"  # bound on scope entry or at runtime, never moved


class ReferenceKind(str, Enum):
    """Identifier reference classification."""
    LHS = "lhs"  # assignment target
    RHS = "rhs"  # value read


@dataclass(eq=False)
class Binding:
    """A declared name and the scope that owns it."""

    name: str
    kind: DeclarationKind
    scope: "Scope"
    hoisting: Hoisting
    node: Optional[Node] = None
    declarations: List[Identifier] = field(default_factory=list)
    references: List["Reference"] = field(default_factory=list)
    captured: bool = False  # Referenced from an inner function
    per_iteration: bool = False
    initialized_at: Optional[int] = None  # Walk order where a lexical binding leaves its TDZ
    # Per-iteration copies
    iteration: Optional[int] = None
    template: Optional["Binding"] = None
    initialized_from: Optional["Binding"] = None
    _iterations: Dict[int, "Binding"] = field(default_factory=dict, repr=False)

    def __repr__(self) -> str:
        suffix = f"#{self.iteration}" if self.iteration is not None else ""
        return f"<Binding {self.kind.value} {self.name}{suffix} in {self.scope.kind.value}>"

    @property
    def is_lexical(self) -> bool:
        """True for let/const and block-scoped function declarations."""
        return self.hoisting is Hoisting.BLOCK

    def for_iteration(self, index: int) -> "Binding":
        """Return the fresh binding a loop head creates for iteration ``index``.

        ``for (let i = ...; ...)`` copies each iteration's binding from the
        previous iteration's final value, so ``initialized_from`` chains back
        to iteration 0. ``for-in``/``for-of`` heads initialise every
        iteration from the iterated value instead.
        """
        if not self.per_iteration:
            raise ValueError(f"{self.name} is not a per-iteration binding")
        if index < 0:
            raise ValueError("iteration index must be non-negative")
        if index in self._iterations:
            return self._iterations[index]

        previous = None
        if index > 0 and self.kind is DeclarationKind.LET and self._copies_previous():
            previous = self.for_iteration(index - 1)
        copy = Binding(
            name=self.name,
            kind=self.kind,
            scope=self.scope,
            hoisting=self.hoisting,
            node=self.node,
            declarations=self.declarations,
            iteration=index,
            template=self,
            initialized_from=previous,
        )
        self._iterations[index] = copy
        return copy

    def _copies_previous(self) -> bool:
        return isinstance(self.scope.node, ForStatement)


@dataclass(eq=False)
class Reference:
    """An identifier occurrence that reads or writes a variable."""

    node: Identifier
    scope: "Scope"
    kind: ReferenceKind
    compound: bool = False
    initializer: bool = False
    typeof: bool = False  # Operand of typeof
    order: int = 0  # Position in walk order
    binding: Optional[Binding] = None
    implicit_global: bool = False
    in_tdz: bool = False
    is_closure: bool = False

    def __repr__(self) -> str:
        return f"<Reference {self.kind.value} {self.name}>"

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def resolved(self) -> bool:
        return self.binding is not None

    @property
    def is_read(self) -> bool:
        return self.kind is ReferenceKind.RHS or self.compound

    @property
    def is_write(self) -> bool:
        return self.kind is ReferenceKind.LHS

    def binding_at(self, iteration: int) -> Optional[Binding]:
        """Binding this reference sees during loop iteration ``iteration``."""
        if self.binding is not None and self.binding.per_iteration:
            return self.binding.for_iteration(iteration)
        return self.binding


class Scope:
    """A lexical scope: an ordered set of bindings plus a parent link."""

    def __init__(
        self,
        kind: ScopeKind,
        node: Node,
        parent: Optional["Scope"] = None,
        strict: bool = False,
        is_arrow: bool = False,
    ):
        self.kind = kind
        self.node = node
        self.parent = parent
        self.strict = strict
        self.is_arrow = is_arrow
        self.per_iteration = False
        self.bindings: Dict[str, Binding] = {}
        self.children: List["Scope"] = []
        self.references: List[Reference] = []
        self.through: List[Reference] = []  # Left this scope unresolved
        self.free_variables: List[str] = []  # Captured from outer functions
        if parent is not None:
            parent.children.append(self)

    def __repr__(self) -> str:
        names = ", ".join(self.bindings)
        return f"<Scope {self.kind.value} [{names}]>"

    @property
    def is_function_scope(self) -> bool:
        return self.kind in (ScopeKind.FUNCTION, ScopeKind.GLOBAL)

    @property
    def function_scope(self) -> "Scope":
        """Nearest enclosing function or global scope (possibly self)."""
        scope = self
        while not scope.is_function_scope:
            scope = scope.parent
        return scope

    @property
    def depth(self) -> int:
        depth = 0
        scope = self.parent
        while scope is not None:
            depth += 1
            scope = scope.parent
        return depth

    @property
    def captured(self) -> List[Binding]:
        """Own bindings referenced from inner functions."""
        return [b for b in self.bindings.values() if b.captured]

    def get(self, name: str) -> Optional[Binding]:
        """Binding declared directly in this scope, if any."""
        return self.bindings.get(name)

    def ancestors(self) -> Iterator["Scope"]:
        """Yield this scope and every enclosing scope, innermost first."""
        scope = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def walk(self) -> Iterator["Scope"]:
        """Yield this scope and its descendants in depth-first order."""
        stack = [self]
        while stack:
            scope = stack.pop()
            yield scope
            stack.extend(reversed(scope.children))

    def to_dict(self) -> dict:
        """Convert scope subtree to dictionary for serialization."""
        result = {
            "kind": self.kind.value,
            "node": self.node.__class__.__name__,
            "strict": self.strict,
            "bindings": [
                {
                    "name": b.name,
                    "kind": b.kind.value,
                    "hoisting": b.hoisting.value,
                    "references": len(b.references),
                    "captured": b.captured,
                    "per_iteration": b.per_iteration,
                }
                for b in self.bindings.values()
            ],
            "children": [child.to_dict() for child in self.children],
        }
        if self.per_iteration:
            result["per_iteration"] = True
        if self.free_variables:
            result["free_variables"] = list(self.free_variables)
        return result


class ScopeTree:
    """Result of the scope-building pass."""

    def __init__(self, program: Node, root: Scope):
        self.program = program
        self.root = root
        self.scopes: List[Scope] = [root]
        self.reference_table: Optional["ReferenceTable"] = None
        self._scope_by_node: Dict[int, Scope] = {id(program): root}
        self._declarations: Dict[int, Binding] = {}

    def __iter__(self) -> Iterator[Scope]:
        return iter(self.scopes)

    def __len__(self) -> int:
        return len(self.scopes)

    @property
    def resolved(self) -> bool:
        return self.reference_table is not None

    def add_scope(self, scope: Scope, *aliases: Node) -> None:
        self.scopes.append(scope)
        # A function and its body block share one scope
        for node in (scope.node,) + aliases:
            self._scope_by_node.setdefault(id(node), scope)

    def record_declaration(self, identifier: Identifier, binding: Binding) -> None:
        self._declarations[id(identifier)] = binding
        binding.declarations.append(identifier)

    def scope_of(self, node: Node) -> Optional[Scope]:
        """Scope opened by ``node`` (Program, function, block, catch, loop)."""
        return self._scope_by_node.get(id(node))

    def declaration_of(self, identifier: Identifier) -> Optional[Binding]:
        """Binding declared by the identifier ``identifier``, if it declares one."""
        return self._declarations.get(id(identifier))

    def bindings(self) -> Iterator[Binding]:
        for scope in self.scopes:
            yield from scope.bindings.values()

    @property
    def references(self) -> Iterator[Reference]:
        for scope in self.scopes:
            yield from scope.references

    def to_dict(self) -> dict:
        return self.root.to_dict()


class ReferenceTable:
    """Resolved references, queryable by identifier node or binding."""

    def __init__(self, tree: ScopeTree, references: List[Reference]):
        self.tree = tree
        self._references = references
        self._by_node: Dict[int, Reference] = {id(ref.node): ref for ref in references}

    def __iter__(self) -> Iterator[Reference]:
        return iter(self._references)

    def __len__(self) -> int:
        return len(self._references)

    def lookup(self, identifier: Identifier) -> Optional[Reference]:
        return self._by_node.get(id(identifier))

    def classify(self, identifier: Identifier) -> Optional[str]:
        """Return "declaration", "lhs", "rhs", or None for non-references.

        Identifiers that both declare and initialise (``var x = 1``) are
        declarations.
        """
        if self.tree.declaration_of(identifier) is not None:
            return "declaration"
        ref = self.lookup(identifier)
        if ref is None:
            return None
        return ref.kind.value

    def references_to(self, binding: Binding) -> List[Reference]:
        return [ref for ref in self._references if ref.binding is binding]

    def named(self, name: str) -> List[Reference]:
        return [ref for ref in self._references if ref.name == name]

    @property
    def unresolved(self) -> List[Reference]:
        return [ref for ref in self._references if ref.binding is None]

    @property
    def implicit_globals(self) -> List[Binding]:
        return [
            b for b in self.tree.root.bindings.values()
            if b.kind is DeclarationKind.IMPLICIT_GLOBAL
        ]

    def to_dict(self) -> List[dict]:
        result = []
        for ref in self._references:
            entry = {
                "name": ref.name,
                "kind": ref.kind.value,
                "scope": ref.scope.kind.value,
                "resolved": ref.resolved,
            }
            if ref.binding is not None:
                entry["binding"] = ref.binding.kind.value
                entry["depth"] = ref.binding.scope.depth
            if ref.node.loc is not None:
                entry["line"] = ref.node.loc.line
                entry["column"] = ref.node.loc.column
            for flag in ("compound", "implicit_global", "in_tdz", "is_closure"):
                if getattr(ref, flag):
                    entry[flag] = True
            result.append(entry)
        return result
