"""
jsscope - Static Lexical-Scope Resolution for JavaScript ASTs

Builds the scope tree of a JavaScript program, classifies declarations by
hoisting behaviour and binds every identifier reference to the scope that
declares it. Implemented entirely in Python with no external dependencies.
"""

__version__ = "0.1.0"

from .errors import (
    MalformedTree, RedeclarationConflict, ScopeError, UnresolvedReference,
)
from .resolver import ScopeResolver, analyze, build_scope_tree, resolve_references
from .scope import (
    Binding, DeclarationKind, Hoisting, Reference, ReferenceKind,
    ReferenceTable, Scope, ScopeKind, ScopeTree,
)

__all__ = [
    "ScopeResolver",
    "analyze",
    "build_scope_tree",
    "resolve_references",
    "Scope",
    "ScopeKind",
    "ScopeTree",
    "Binding",
    "DeclarationKind",
    "Hoisting",
    "Reference",
    "ReferenceKind",
    "ReferenceTable",
    "ScopeError",
    "UnresolvedReference",
    "RedeclarationConflict",
    "MalformedTree",
]
