"""Minimal JavaScript expression model and printer.

Route configuration values are built as small immutable expression
trees and printed once, so nesting depth never has to be tracked by
string concatenation.  Only the node types the router module needs are
modelled.
"""

from dataclasses import dataclass

INDENT = "  "


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    """A string, boolean, or ``null`` literal."""

    value: str | bool | None


@dataclass(frozen=True, slots=True)
class ObjectExpr:
    """Object literal.  ``multiline`` objects put one property per line."""

    properties: tuple[tuple[str, "Expr"], ...] = ()
    multiline: bool = False


@dataclass(frozen=True, slots=True)
class ArrayExpr:
    items: tuple["Expr", ...] = ()


@dataclass(frozen=True, slots=True)
class Call:
    callee: "Expr"
    args: tuple["Expr", ...] = ()


@dataclass(frozen=True, slots=True)
class Arrow:
    """Zero-argument arrow function with an expression body."""

    body: "Expr"


@dataclass(frozen=True, slots=True)
class DynamicImport:
    specifier: str


Expr = Identifier | Literal | ObjectExpr | ArrayExpr | Call | Arrow | DynamicImport

NULL = Literal(None)


def quote(value: str) -> str:
    """Quote *value* as a single-quoted JavaScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
    return f"'{escaped}'"


def print_expr(expr: Expr, level: int = 0) -> str:
    """Render *expr* as JavaScript source.

    *level* is the indentation depth of the line the expression starts on;
    nested multiline objects and arrays indent relative to it.
    """
    match expr:
        case Identifier(name=name):
            return name
        case Literal(value=None):
            return "null"
        case Literal(value=bool() as flag):
            return "true" if flag else "false"
        case Literal(value=str() as text):
            return quote(text)
        case DynamicImport(specifier=specifier):
            return f"import({quote(specifier)})"
        case Arrow(body=body):
            return f"() => {print_expr(body, level)}"
        case Call(callee=callee, args=args):
            rendered = ", ".join(print_expr(arg, level) for arg in args)
            return f"{print_expr(callee, level)}({rendered})"
        case ObjectExpr(properties=()):
            return "{}"
        case ObjectExpr(properties=properties, multiline=False):
            body = ", ".join(f"{key}: {print_expr(value, level)}" for key, value in properties)
            return f"{{ {body} }}"
        case ObjectExpr(properties=properties):
            inner = INDENT * (level + 1)
            lines = [f"{inner}{key}: {print_expr(value, level + 1)}" for key, value in properties]
            return "{\n" + ",\n".join(lines) + "\n" + INDENT * level + "}"
        case ArrayExpr(items=()):
            return "[]"
        case ArrayExpr(items=items):
            inner = INDENT * (level + 1)
            lines = [f"{inner}{print_expr(item, level + 1)}" for item in items]
            return "[\n" + ",\n".join(lines) + "\n" + INDENT * level + "]"
    raise TypeError(f"Cannot print {type(expr).__name__} as JavaScript")
