from tree_sitter import Node

from ..syntax.nodes import (
    as_method_call,
    inner_expression,
    is_deref,
    named_children,
    node_text,
    path_string,
)

UNKNOWN_EXPR = "<expr>"


def describe(expr: Node) -> str:
    """Render an expression as a canonical path string.

    ``state.items[i].name`` -> ``state.items[..].name``,
    ``*self.value`` -> ``*self.value``, ``ui.button("x")`` -> ``ui.button()``.
    Anything without a path shape renders as ``<expr>``.
    """
    path = path_string(expr)
    if path is not None:
        return path

    kind = expr.type

    if kind == "field_expression":
        base = expr.child_by_field_name("value")
        field = expr.child_by_field_name("field")
        if base is not None and field is not None:
            return f"{describe(base)}.{node_text(field)}"
        return UNKNOWN_EXPR

    call = as_method_call(expr)
    if call is not None:
        return f"{describe(call.receiver)}.{call.method}()"

    if is_deref(expr):
        inner = named_children(expr)
        return f"*{describe(inner[0])}" if inner else UNKNOWN_EXPR

    if kind == "reference_expression":
        value = expr.child_by_field_name("value")
        return describe(value) if value is not None else UNKNOWN_EXPR

    if kind == "parenthesized_expression":
        inner_node = inner_expression(expr)
        return describe(inner_node) if inner_node is not None else UNKNOWN_EXPR

    if kind == "index_expression":
        operands = named_children(expr)
        return f"{describe(operands[0])}[..]" if operands else UNKNOWN_EXPR

    return UNKNOWN_EXPR


def looks_like_state(target: str) -> bool:
    """Heuristic: does a described mutation target look like application state?

    Field paths, ``self.`` paths, anything mentioning ``state`` and
    dereferences pass; bare locals do not.
    """
    return (
        "." in target
        or target.startswith("self.")
        or "state" in target
        or target.startswith("*")
    )
