"""Small builders for hand-written ASTs."""

from jsscope.ast_nodes import (
    Identifier, SourceLocation, NumericLiteral, StringLiteral,
    AssignmentExpression, CallExpression, MemberExpression, UpdateExpression,
    UnaryExpression, ArrowFunctionExpression, FunctionExpression,
    Program, ExpressionStatement, BlockStatement, ReturnStatement,
    VariableDeclaration, VariableDeclarator, FunctionDeclaration,
)


def ident(name, line=0, column=0):
    loc = SourceLocation(line, column) if line else None
    return Identifier(name, loc=loc)


def num(value):
    return NumericLiteral(value)


def use_strict():
    return ExpressionStatement(StringLiteral("use strict"))


def declare(kind, name, init=None):
    """Declaration of one name; accepts an Identifier or a string."""
    target = name if isinstance(name, Identifier) else ident(name)
    return VariableDeclaration([VariableDeclarator(target, init)], kind)


def var(name, init=None):
    return declare("var", name, init)


def let(name, init=None):
    return declare("let", name, init)


def const(name, init=None):
    return declare("const", name, init)


def stmt(expression):
    return ExpressionStatement(expression)


def assign(target, value, operator="="):
    target = target if isinstance(target, Identifier) else ident(target)
    return ExpressionStatement(AssignmentExpression(operator, target, value))


def incr(target):
    return ExpressionStatement(UpdateExpression("++", target, prefix=False))


def typeof(target):
    return ExpressionStatement(UnaryExpression("typeof", target))


def call(callee, *args):
    callee = callee if not isinstance(callee, str) else ident(callee)
    return CallExpression(callee, list(args))


def member(obj, prop):
    return MemberExpression(obj, ident(prop), computed=False)


def ret(argument=None):
    return ReturnStatement(argument)


def block(*body):
    return BlockStatement(list(body))


def func(name, params, *body):
    name = name if isinstance(name, Identifier) else ident(name)
    return FunctionDeclaration(name, [ident(p) for p in params], BlockStatement(list(body)))


def func_expr(name, params, *body):
    name = ident(name) if isinstance(name, str) else name
    return FunctionExpression(name, [ident(p) for p in params], BlockStatement(list(body)))


def arrow(params, body):
    expression = not isinstance(body, BlockStatement)
    return ArrowFunctionExpression([ident(p) for p in params], body, expression=expression)


def program(*body):
    return Program(list(body))
