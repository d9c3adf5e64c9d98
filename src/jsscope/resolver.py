"""Scope resolver - builds the scope tree and binds identifier references."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .ast_nodes import (
    Node, Program, StringLiteral, Identifier,
    UnaryExpression, UpdateExpression, AssignmentExpression,
    MemberExpression, Property,
    ExpressionStatement, BlockStatement, EmptyStatement,
    VariableDeclaration, VariableDeclarator,
    IfStatement, WhileStatement, DoWhileStatement, ForStatement,
    ForInStatement, ForOfStatement, BreakStatement, ContinueStatement,
    ReturnStatement, ThrowStatement, TryStatement, CatchClause,
    SwitchStatement, LabeledStatement,
    FunctionDeclaration, FunctionExpression, ArrowFunctionExpression,
    FUNCTION_NODES,
)
from .errors import MalformedTree, RedeclarationConflict, UnresolvedReference
from .globals import DEFAULT_GLOBALS
from .scope import (
    Binding, DeclarationKind, Hoisting, Reference, ReferenceKind,
    ReferenceTable, Scope, ScopeKind, ScopeTree,
)

logger = logging.getLogger(__name__)

LEXICAL_KINDS = {"let": DeclarationKind.LET, "const": DeclarationKind.CONST}


def _has_use_strict(statements: List[Node]) -> bool:
    """Check the directive prologue of a body for "use strict"."""
    for stmt in statements:
        if not (isinstance(stmt, ExpressionStatement)
                and isinstance(stmt.expression, StringLiteral)):
            return False
        if stmt.expression.value == "use strict":
            return True
    return False


def _lexical_names(statements: List[Node]) -> FrozenSet[str]:
    """Names declared with let or const directly in a statement list."""
    return frozenset(
        decl.id.name
        for stmt in statements
        if isinstance(stmt, VariableDeclaration) and stmt.kind in LEXICAL_KINDS
        for decl in stmt.declarations
        if isinstance(decl.id, Identifier)
    )


def _block_lexical_names(node: Node) -> FrozenSet[str]:
    """Names bound lexically by the block-like statement ``node`` opens."""
    if isinstance(node, BlockStatement):
        return _lexical_names(node.body)
    if isinstance(node, SwitchStatement):
        return _lexical_names([stmt for case in node.cases for stmt in case.consequent])
    if isinstance(node, ForStatement) and isinstance(node.init, VariableDeclaration):
        return _lexical_names([node.init])
    if isinstance(node, (ForInStatement, ForOfStatement)) and isinstance(node.left, VariableDeclaration):
        return _lexical_names([node.left])
    return frozenset()


class ScopeResolver:
    """Resolves lexical scopes of a JavaScript AST."""

    def __init__(self, strict: bool = False, globals: Optional[Iterable[str]] = None):
        """Create a resolver.

        Args:
            strict: Treat all code as strict mode code, as if the program
                started with a "use strict" directive
            globals: Names the host environment provides in the global scope
                (defaults to DEFAULT_GLOBALS); reads of these never fail
        """
        self.strict = strict
        self.globals = frozenset(DEFAULT_GLOBALS if globals is None else globals)
        self._tree: Optional[ScopeTree] = None
        self._order = 0
        # Sloppy block functions that stay in their block instead of hoisting
        self._block_functions: Set[int] = set()

    def analyze(self, program: Program) -> Tuple[ScopeTree, ReferenceTable]:
        """Run both passes over a program."""
        tree = self.build_scope_tree(program)
        return tree, self.resolve_references(tree)

    # ---- Scope tree ----

    def build_scope_tree(self, program: Program) -> ScopeTree:
        """Walk the program once, creating scopes and declaring bindings."""
        if not isinstance(program, Program):
            raise MalformedTree(f"expected Program, got {type(program).__name__}")

        strict = self.strict or _has_use_strict(program.body)
        root = Scope(ScopeKind.GLOBAL, program, strict=strict)
        self._tree = ScopeTree(program, root)
        self._order = 0
        self._block_functions = set()
        logger.debug("Building scope tree (strict=%s)", strict)

        self._instantiate_function_scope(root, [], program.body)
        self._visit_statements(program.body, root)

        tree, self._tree = self._tree, None
        logger.debug("Built %d scopes", len(tree))
        return tree

    def _next_order(self) -> int:
        self._order += 1
        return self._order

    def _new_scope(
        self,
        kind: ScopeKind,
        node: Node,
        parent: Scope,
        *aliases: Node,
        strict: Optional[bool] = None,
        is_arrow: bool = False,
    ) -> Scope:
        """Create a child scope and register it with the tree."""
        scope = Scope(
            kind,
            node,
            parent,
            strict=parent.strict if strict is None else strict,
            is_arrow=is_arrow,
        )
        self._tree.add_scope(scope, *aliases)
        logger.debug(
            "Created %s scope for %s at depth %d",
            kind.value, type(node).__name__, scope.depth,
        )
        return scope

    def _instantiate_function_scope(
        self, scope: Scope, params: List[Identifier], body: List[Node]
    ) -> None:
        """Declare everything a function or global scope binds on entry.

        Parameters first, then hoisted function and var declarations, then
        the lexical declarations of the body's top level.
        """
        strict_params = scope.strict or scope.is_arrow
        for param in params:
            if not isinstance(param, Identifier):
                raise MalformedTree(f"unsupported parameter {type(param).__name__}")
            existing = scope.get(param.name)
            if existing is not None:
                if strict_params:
                    raise RedeclarationConflict(param, scope, existing.kind.value)
                self._tree.record_declaration(param, existing)
                continue
            self._add_binding(scope, param, DeclarationKind.PARAMETER, Hoisting.NONE, param)

        hoisted: List[Node] = []
        # Block functions do not hoist onto a parameter or a top-level let
        blocked = _lexical_names(body) | {param.name for param in params}
        for stmt in body:
            self._collect_hoisted(stmt, hoisted, scope.strict, blocked, top_level=True)
        for node in hoisted:
            if isinstance(node, FunctionDeclaration):
                self._declare_function(scope, node)
            else:
                self._declare_var(scope, node.id)

        self._declare_lexical(scope, body)

    def _collect_hoisted(
        self,
        node: Node,
        hoisted: List[Node],
        strict: bool,
        blocked: FrozenSet[str],
        top_level: bool = False,
    ) -> None:
        """Collect var declarators and hoistable function declarations.

        Does not descend into nested functions. Function declarations nested
        in blocks hoist only in non-strict code, and only when no let or
        const of the same name sits between them and the function scope
        (``blocked``). Those that cannot hoist stay bound in their block.
        """
        if isinstance(node, FunctionDeclaration):
            if top_level:
                hoisted.append(node)
            elif not strict:
                if node.id.name in blocked:
                    logger.debug("Block function %s is not hoisted past a lexical binding", node.id.name)
                    self._block_functions.add(id(node))
                else:
                    hoisted.append(node)
            return
        if isinstance(node, FUNCTION_NODES):
            return
        if isinstance(node, VariableDeclaration):
            if node.kind == "var":
                hoisted.extend(node.declarations)
            return
        blocked = blocked | _block_lexical_names(node)
        for value in node.__dict__.values():
            if isinstance(value, Node):
                self._collect_hoisted(value, hoisted, strict, blocked)
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        self._collect_hoisted(item, hoisted, strict, blocked)

    def _is_block_function(self, node: Node, strict: bool) -> bool:
        return isinstance(node, FunctionDeclaration) and (
            strict or id(node) in self._block_functions
        )

    def _declare_lexical(self, scope: Scope, statements: List[Node]) -> None:
        """Declare let/const (and block-local functions) of a statement list."""
        for stmt in statements:
            if isinstance(stmt, VariableDeclaration) and stmt.kind in LEXICAL_KINDS:
                for decl in stmt.declarations:
                    self._declare_lexical_binding(
                        scope, decl.id, LEXICAL_KINDS[stmt.kind], decl
                    )
            elif not scope.is_function_scope and self._is_block_function(stmt, scope.strict):
                self._declare_lexical_binding(
                    scope, stmt.id, DeclarationKind.FUNCTION, stmt
                )

    def _needs_block_scope(self, statements: List[Node], strict: bool) -> bool:
        for stmt in statements:
            if isinstance(stmt, VariableDeclaration) and stmt.kind in LEXICAL_KINDS:
                return True
            if self._is_block_function(stmt, strict):
                return True
        return False

    def _add_binding(
        self,
        scope: Scope,
        identifier: Identifier,
        kind: DeclarationKind,
        hoisting: Hoisting,
        node: Node,
    ) -> Binding:
        binding = Binding(name=identifier.name, kind=kind, scope=scope, hoisting=hoisting, node=node)
        scope.bindings[identifier.name] = binding
        self._tree.record_declaration(identifier, binding)
        return binding

    def _declare_lexical_binding(
        self, scope: Scope, identifier: Identifier, kind: DeclarationKind, node: Node
    ) -> Binding:
        existing = scope.get(identifier.name)
        if existing is not None:
            logger.debug(
                "Conflict: %s %s in %s scope already bound as %s",
                kind.value, identifier.name, scope.kind.value, existing.kind.value,
            )
            raise RedeclarationConflict(identifier, scope, existing.kind.value)
        return self._add_binding(scope, identifier, kind, Hoisting.BLOCK, node)

    def _declare_var(self, scope: Scope, identifier: Identifier) -> Binding:
        """Declare a var in a function scope; redeclaring is a no-op."""
        if not isinstance(identifier, Identifier):
            raise MalformedTree(f"unsupported declaration target {type(identifier).__name__}")
        existing = scope.get(identifier.name)
        if existing is None:
            return self._add_binding(scope, identifier, DeclarationKind.VAR, Hoisting.HOISTED, identifier)
        if existing.is_lexical:
            raise RedeclarationConflict(identifier, scope, existing.kind.value)
        self._tree.record_declaration(identifier, existing)
        return existing

    def _declare_function(self, scope: Scope, node: FunctionDeclaration) -> Binding:
        """Declare a hoisted function; a later declaration overrides."""
        existing = scope.get(node.id.name)
        if existing is None:
            return self._add_binding(scope, node.id, DeclarationKind.FUNCTION, Hoisting.HOISTED, node)
        if existing.is_lexical:
            raise RedeclarationConflict(node.id, scope, existing.kind.value)
        logger.debug(
            "Function %s overrides earlier %s binding", node.id.name, existing.kind.value
        )
        existing.kind = DeclarationKind.FUNCTION
        existing.hoisting = Hoisting.HOISTED
        existing.node = node
        self._tree.record_declaration(node.id, existing)
        return existing

    def _check_hoisting_path(self, scope: Scope, identifier: Identifier) -> None:
        """A var may not hoist through a block that binds the name lexically."""
        while not scope.is_function_scope:
            existing = scope.get(identifier.name)
            if existing is not None and existing.is_lexical:
                raise RedeclarationConflict(identifier, scope, existing.kind.value)
            scope = scope.parent

    def _reference(
        self,
        identifier: Identifier,
        scope: Scope,
        kind: ReferenceKind,
        compound: bool = False,
        initializer: bool = False,
        typeof: bool = False,
        order: Optional[int] = None,
    ) -> Reference:
        ref = Reference(
            node=identifier,
            scope=scope,
            kind=kind,
            compound=compound,
            initializer=initializer,
            typeof=typeof,
            order=self._next_order() if order is None else order,
        )
        scope.references.append(ref)
        return ref

    # ---- Statements ----

    def _visit_statements(self, statements: List[Node], scope: Scope) -> None:
        for stmt in statements:
            self._visit_statement(stmt, scope)

    def _visit_statement(self, node: Node, scope: Scope) -> None:
        """Visit a statement."""
        if isinstance(node, ExpressionStatement):
            self._visit_expression(node.expression, scope)

        elif isinstance(node, BlockStatement):
            self._visit_block(node, node.body, scope)

        elif isinstance(node, EmptyStatement):
            pass

        elif isinstance(node, VariableDeclaration):
            self._visit_declaration(node, scope)

        elif isinstance(node, FunctionDeclaration):
            self._visit_function(node, scope)

        elif isinstance(node, IfStatement):
            self._visit_expression(node.test, scope)
            self._visit_statement(node.consequent, scope)
            if node.alternate:
                self._visit_statement(node.alternate, scope)

        elif isinstance(node, WhileStatement):
            self._visit_expression(node.test, scope)
            self._visit_statement(node.body, scope)

        elif isinstance(node, DoWhileStatement):
            self._visit_statement(node.body, scope)
            self._visit_expression(node.test, scope)

        elif isinstance(node, ForStatement):
            self._visit_for(node, scope)

        elif isinstance(node, (ForInStatement, ForOfStatement)):
            self._visit_for_in_of(node, scope)

        elif isinstance(node, (BreakStatement, ContinueStatement)):
            # Labels are not variable references
            pass

        elif isinstance(node, (ReturnStatement, ThrowStatement)):
            if node.argument is not None:
                self._visit_expression(node.argument, scope)

        elif isinstance(node, TryStatement):
            self._visit_statement(node.block, scope)
            if node.handler:
                self._visit_catch(node.handler, scope)
            if node.finalizer:
                self._visit_statement(node.finalizer, scope)

        elif isinstance(node, SwitchStatement):
            self._visit_expression(node.discriminant, scope)
            statements = [stmt for case in node.cases for stmt in case.consequent]
            if self._needs_block_scope(statements, scope.strict):
                scope = self._new_scope(ScopeKind.BLOCK, node, scope)
                self._declare_lexical(scope, statements)
            for case in node.cases:
                if case.test is not None:
                    self._visit_expression(case.test, scope)
                self._visit_statements(case.consequent, scope)

        elif isinstance(node, LabeledStatement):
            self._visit_statement(node.body, scope)

        else:
            raise MalformedTree(f"unknown statement type: {type(node).__name__}")

    def _visit_block(self, node: Node, statements: List[Node], scope: Scope) -> None:
        if self._needs_block_scope(statements, scope.strict):
            scope = self._new_scope(ScopeKind.BLOCK, node, scope)
            self._declare_lexical(scope, statements)
        self._visit_statements(statements, scope)

    def _visit_declaration(self, node: VariableDeclaration, scope: Scope) -> None:
        """Visit a var/let/const declaration whose bindings already exist."""
        for decl in node.declarations:
            self._visit_declarator(node.kind, decl, scope)

    def _visit_declarator(self, kind: str, decl: VariableDeclarator, scope: Scope) -> None:
        identifier = decl.id
        if not isinstance(identifier, Identifier):
            raise MalformedTree(f"unsupported declaration target {type(identifier).__name__}")
        if kind == "var":
            self._check_hoisting_path(scope, identifier)
        if decl.init is not None:
            self._visit_expression(decl.init, scope)

        order = self._next_order()
        binding = self._tree.declaration_of(identifier)
        if binding is not None and binding.is_lexical:
            binding.initialized_at = order
        if decl.init is not None:
            self._reference(identifier, scope, ReferenceKind.LHS, initializer=True, order=order)

    def _loop_head_scope(
        self, node: Node, declaration: VariableDeclaration, scope: Scope
    ) -> Scope:
        """Create the scope holding let/const declared in a loop head."""
        loop_scope = self._new_scope(ScopeKind.BLOCK, node, scope)
        # for (const ...;;) never changes, so only let needs copies there
        per_iteration = declaration.kind == "let" or not isinstance(node, ForStatement)
        loop_scope.per_iteration = per_iteration
        self._declare_lexical(loop_scope, [declaration])
        for binding in loop_scope.bindings.values():
            binding.per_iteration = per_iteration
        return loop_scope

    def _visit_for(self, node: ForStatement, scope: Scope) -> None:
        init = node.init
        if isinstance(init, VariableDeclaration):
            if init.kind in LEXICAL_KINDS:
                scope = self._loop_head_scope(node, init, scope)
            self._visit_declaration(init, scope)
        elif init is not None:
            self._visit_expression(init, scope)
        if node.test is not None:
            self._visit_expression(node.test, scope)
        if node.update is not None:
            self._visit_expression(node.update, scope)
        self._visit_statement(node.body, scope)

    def _visit_for_in_of(self, node: Node, scope: Scope) -> None:
        left = node.left
        if isinstance(left, VariableDeclaration):
            if len(left.declarations) != 1:
                raise MalformedTree("for-in/of head must declare exactly one binding")
            if left.kind in LEXICAL_KINDS:
                scope = self._loop_head_scope(node, left, scope)
            decl = left.declarations[0]
            if not isinstance(decl.id, Identifier):
                raise MalformedTree(f"unsupported declaration target {type(decl.id).__name__}")
            if left.kind == "var":
                self._check_hoisting_path(scope, decl.id)
            self._visit_expression(node.right, scope)
            order = self._next_order()
            binding = self._tree.declaration_of(decl.id)
            if binding is not None and binding.is_lexical:
                binding.initialized_at = order
            self._reference(decl.id, scope, ReferenceKind.LHS, initializer=True, order=order)
        else:
            self._visit_expression(node.right, scope)
            if isinstance(left, Identifier):
                self._reference(left, scope, ReferenceKind.LHS, initializer=True)
            else:
                self._visit_expression(left, scope)
        self._visit_statement(node.body, scope)

    def _visit_catch(self, node: CatchClause, scope: Scope) -> None:
        if node.param is None:
            self._visit_statement(node.body, scope)
            return
        if not isinstance(node.param, Identifier):
            raise MalformedTree(f"unsupported catch parameter {type(node.param).__name__}")
        # The catch body shares the parameter's scope, so let e conflicts
        catch_scope = self._new_scope(ScopeKind.CATCH, node, scope, node.body)
        self._add_binding(catch_scope, node.param, DeclarationKind.CATCH_PARAM, Hoisting.NONE, node.param)
        self._declare_lexical(catch_scope, node.body.body)
        self._visit_statements(node.body.body, catch_scope)

    def _visit_function(self, node: Node, scope: Scope) -> None:
        """Create a function scope and visit the function body in it."""
        body = node.body
        is_arrow = isinstance(node, ArrowFunctionExpression)
        block_body = isinstance(body, BlockStatement)
        strict = scope.strict or (block_body and _has_use_strict(body.body))
        aliases = (body,) if block_body else ()
        fn_scope = self._new_scope(
            ScopeKind.FUNCTION, node, scope, *aliases, strict=strict, is_arrow=is_arrow
        )

        statements = body.body if block_body else []
        self._instantiate_function_scope(fn_scope, node.params, statements)

        # A named function expression sees its own name unless shadowed
        if isinstance(node, FunctionExpression) and node.id is not None:
            if node.id.name not in fn_scope.bindings:
                self._add_binding(fn_scope, node.id, DeclarationKind.FUNCTION, Hoisting.NONE, node)

        if block_body:
            self._visit_statements(statements, fn_scope)
        else:
            self._visit_expression(body, fn_scope)

    # ---- Expressions ----

    def _visit_expression(self, node: Node, scope: Scope) -> None:
        """Visit an expression, recording identifier references."""
        if isinstance(node, Identifier):
            self._reference(node, scope, ReferenceKind.RHS)

        elif isinstance(node, AssignmentExpression):
            if isinstance(node.left, Identifier):
                self._visit_expression(node.right, scope)
                self._reference(
                    node.left, scope, ReferenceKind.LHS, compound=node.operator != "="
                )
            else:
                self._visit_expression(node.left, scope)
                self._visit_expression(node.right, scope)

        elif isinstance(node, UpdateExpression):
            if isinstance(node.argument, Identifier):
                self._reference(node.argument, scope, ReferenceKind.LHS, compound=True)
            else:
                self._visit_expression(node.argument, scope)

        elif isinstance(node, UnaryExpression):
            if node.operator == "typeof" and isinstance(node.argument, Identifier):
                self._reference(node.argument, scope, ReferenceKind.RHS, typeof=True)
            else:
                self._visit_expression(node.argument, scope)

        elif isinstance(node, MemberExpression):
            self._visit_expression(node.object, scope)
            if node.computed:
                self._visit_expression(node.property, scope)

        elif isinstance(node, Property):
            if node.computed:
                self._visit_expression(node.key, scope)
            self._visit_expression(node.value, scope)

        elif isinstance(node, FUNCTION_NODES):
            self._visit_function(node, scope)

        elif isinstance(node, Node):
            # Literals, this, and compound expressions
            for value in node.__dict__.values():
                if isinstance(value, Node):
                    self._visit_expression(value, scope)
                elif isinstance(value, list):
                    for item in value:
                        if isinstance(item, Node):
                            self._visit_expression(item, scope)

        elif node is not None:
            raise MalformedTree(f"expected expression node, got {type(node).__name__}")

    # ---- References ----

    def resolve_references(self, tree: ScopeTree) -> ReferenceTable:
        """Bind every recorded reference to its declaring scope.

        Plain writes are resolved first so that implicit globals created by
        sloppy-mode assignments are visible to every read in the program.
        """
        if tree.reference_table is not None:
            return tree.reference_table

        references = sorted(tree.references, key=lambda ref: ref.order)
        writes = [ref for ref in references if ref.kind is ReferenceKind.LHS and not ref.compound]
        others = [ref for ref in references if ref.kind is not ReferenceKind.LHS or ref.compound]

        # Nothing is recorded on the tree until every reference resolves
        pending: Dict[Tuple[int, str], Binding] = {}
        found = [(ref, self._find_binding(ref, tree.root, pending)) for ref in writes + others]
        for binding in pending.values():
            binding.scope.bindings[binding.name] = binding
        for ref, binding in found:
            self._bind(ref, binding, tree.root)
        for binding in tree.bindings():
            binding.references.sort(key=lambda ref: ref.order)

        tree.reference_table = ReferenceTable(tree, references)
        logger.debug(
            "Resolved %d references (%d unresolved)",
            len(references), len(tree.reference_table.unresolved),
        )
        return tree.reference_table

    def _find_binding(
        self, ref: Reference, root: Scope, pending: Dict[Tuple[int, str], Binding]
    ) -> Optional[Binding]:
        """Find the binding a reference resolves to, innermost scope first.

        Bindings the lookup creates (``arguments``, environment globals,
        implicit globals) go into ``pending`` rather than into their scope.
        """
        for scope in ref.scope.ancestors():
            binding = scope.get(ref.name)
            if binding is None:
                binding = pending.get((id(scope), ref.name))
            if (binding is None and ref.name == "arguments"
                    and scope.kind is ScopeKind.FUNCTION and not scope.is_arrow):
                binding = self._implicit_binding(scope, "arguments", DeclarationKind.ARGUMENTS, pending)
            if binding is not None:
                return binding
        return self._resolve_global(ref, root, pending)

    def _bind(self, ref: Reference, binding: Optional[Binding], root: Scope) -> None:
        """Record a resolved reference on its binding and the scopes it passes."""
        for scope in ref.scope.ancestors():
            if binding is not None and scope is binding.scope:
                break
            scope.through.append(ref)
        if binding is None:
            return

        ref.binding = binding
        ref.implicit_global = (
            binding.kind is DeclarationKind.IMPLICIT_GLOBAL and binding.node is ref.node
        )
        binding.references.append(ref)

        ref_function = ref.scope.function_scope
        owner_function = binding.scope.function_scope
        if binding.scope is not root and owner_function is not ref_function:
            ref.is_closure = True
            binding.captured = True
            scope = ref_function
            while scope is not owner_function:
                if scope.is_function_scope and ref.name not in scope.free_variables:
                    scope.free_variables.append(ref.name)
                scope = scope.parent
        elif (binding.is_lexical and owner_function is ref_function
                and binding.initialized_at is not None
                and ref.order < binding.initialized_at):
            ref.in_tdz = True

    def _resolve_global(
        self, ref: Reference, root: Scope, pending: Dict[Tuple[int, str], Binding]
    ) -> Optional[Binding]:
        """Handle a name no scope declares, raising where the language does."""
        if ref.name in self.globals:
            return self._implicit_binding(root, ref.name, DeclarationKind.GLOBAL, pending)
        if ref.kind is ReferenceKind.LHS and not ref.compound:
            if ref.scope.strict:
                raise UnresolvedReference(ref.node, ref.scope)
            logger.debug("Assignment to undeclared %s creates a global", ref.name)
            return self._implicit_binding(
                root, ref.name, DeclarationKind.IMPLICIT_GLOBAL, pending, node=ref.node
            )
        if ref.typeof:
            return None
        raise UnresolvedReference(ref.node, ref.scope)

    @staticmethod
    def _implicit_binding(
        scope: Scope,
        name: str,
        kind: DeclarationKind,
        pending: Dict[Tuple[int, str], Binding],
        node: Optional[Node] = None,
    ) -> Binding:
        binding = Binding(name=name, kind=kind, scope=scope, hoisting=Hoisting.NONE, node=node)
        pending[(id(scope), name)] = binding
        return binding


def build_scope_tree(
    program: Program, strict: bool = False, globals: Optional[Iterable[str]] = None
) -> ScopeTree:
    """Build the scope tree of a program."""
    return ScopeResolver(strict=strict, globals=globals).build_scope_tree(program)


def resolve_references(
    tree: ScopeTree, strict: bool = False, globals: Optional[Iterable[str]] = None
) -> ReferenceTable:
    """Resolve the references recorded in a scope tree."""
    return ScopeResolver(strict=strict, globals=globals).resolve_references(tree)


def analyze(
    program: Program, strict: bool = False, globals: Optional[Iterable[str]] = None
) -> Tuple[ScopeTree, ReferenceTable]:
    """Build the scope tree and resolve its references."""
    return ScopeResolver(strict=strict, globals=globals).analyze(program)
