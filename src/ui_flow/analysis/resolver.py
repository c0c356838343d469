"""Resolve method-call chains to the UI element they query."""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from tree_sitter import Node

from ..config.vocabulary import Vocabulary
from ..syntax.nodes import (
    MethodCall,
    as_method_call,
    inner_expression,
    path_string,
    string_literal_value,
)
from ..types import LINE_UNKNOWN, UiElement
from .scope import Site

RESPONSE_VAR_TYPE = "response_var"
UNKNOWN_TYPE = "unknown"


def string_from_expr(expr: Node) -> str | None:
    """String literal value, looking through ``&`` borrows."""
    if expr.type == "reference_expression":
        value = expr.child_by_field_name("value")
        return string_from_expr(value) if value is not None else None
    return string_literal_value(expr)


def first_string_arg(arguments: Iterable[Node]) -> str | None:
    for arg in arguments:
        value = string_from_expr(arg)
        if value is not None:
            return value
    return None


def _constructed(call: MethodCall, site: Site) -> UiElement:
    return UiElement(
        element_type=call.method,
        label=first_string_arg(call.arguments),
        context=site.context,
        file_path=site.file_path,
        line=LINE_UNKNOWN,
        response_var=None,
    )


def construct_ui_element(expr: Node, site: Site, vocabulary: Vocabulary) -> UiElement | None:
    """Find the UI-constructor call in a method chain.

    ``ui.button("x").on_hover_text("y")`` yields the ``button`` element.
    Variable references are not resolved here.
    """
    call = as_method_call(expr)
    if call is not None:
        if call.method in vocabulary.ui_methods:
            return _constructed(call, site)
        return construct_ui_element(call.receiver, site, vocabulary)

    if expr.type == "parenthesized_expression":
        inner = inner_expression(expr)
        return construct_ui_element(inner, site, vocabulary) if inner is not None else None

    return None


def resolve_ui_element(
    expr: Node,
    site: Site,
    bindings: Mapping[str, UiElement],
    vocabulary: Vocabulary,
) -> UiElement:
    """Resolve the receiver of an action query to a UI element.

    Never fails: unknown variables give a ``response_var`` element named after
    the variable, other shapes give an ``unknown`` element.
    """
    call = as_method_call(expr)
    if call is not None:
        if call.method in vocabulary.ui_methods:
            return _constructed(call, site)
        return resolve_ui_element(call.receiver, site, bindings, vocabulary)

    if expr.type == "parenthesized_expression":
        inner = inner_expression(expr)
        if inner is not None:
            return resolve_ui_element(inner, site, bindings, vocabulary)

    var_name = path_string(expr)
    if var_name is not None:
        bound = bindings.get(var_name)
        if bound is not None:
            # Report where the response is used, not where it was bound.
            return replace(
                bound,
                context=site.context,
                file_path=site.file_path,
                line=LINE_UNKNOWN,
                response_var=var_name,
            )
        return UiElement(
            element_type=RESPONSE_VAR_TYPE,
            label=var_name,
            context=site.context,
            file_path=site.file_path,
            line=LINE_UNKNOWN,
            response_var=var_name,
        )

    return UiElement(
        element_type=UNKNOWN_TYPE,
        label=None,
        context=site.context,
        file_path=site.file_path,
        line=LINE_UNKNOWN,
        response_var=None,
    )
