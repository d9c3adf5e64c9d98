"""Scope resolution error types."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .ast_nodes import Identifier
    from .scope import Scope


class ScopeError(Exception):
    """Base class for all scope resolution errors."""

    def __init__(self, message: str = "", name: str = "Error"):
        self.message = message
        self.name = name
        super().__init__(f"{name}: {message}" if message else name)


class ResolutionError(ScopeError):
    """An error tied to one identifier in one scope."""

    def __init__(
        self,
        message: str,
        name: str,
        identifier: "Identifier",
        scope: "Scope",
    ):
        self.identifier = identifier
        self.scope = scope
        loc = identifier.loc
        self.line = loc.line if loc is not None else 0
        self.column = loc.column if loc is not None else 0
        # Include position in error message if line is known
        if self.line > 0:
            message = f"{message} (line {self.line}, column {self.column})"
        super().__init__(message, name)


class UnresolvedReference(ResolutionError):
    """A read, or a strict-mode write, of a name no scope declares."""

    def __init__(self, identifier: "Identifier", scope: "Scope"):
        super().__init__(
            f"{identifier.name} is not defined", "ReferenceError", identifier, scope
        )


class RedeclarationConflict(ResolutionError):
    """A lexical declaration colliding with a binding of the same scope."""

    def __init__(
        self,
        identifier: "Identifier",
        scope: "Scope",
        existing: Optional[str] = None,
    ):
        self.existing = existing
        message = f"Identifier '{identifier.name}' has already been declared"
        if existing:
            message += f" as {existing}"
        super().__init__(message, "SyntaxError", identifier, scope)


class MalformedTree(ScopeError):
    """The input does not follow the AST contract."""

    def __init__(self, message: str = ""):
        super().__init__(message, "TypeError")
