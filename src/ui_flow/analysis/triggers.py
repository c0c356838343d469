from collections.abc import Mapping

from tree_sitter import Node

from ..config.vocabulary import Vocabulary
from ..syntax.nodes import as_method_call, inner_expression, operator_token
from ..types import LINE_UNKNOWN, Action, UiElement
from .describe import describe
from .resolver import resolve_ui_element
from .scope import Site

Trigger = tuple[UiElement, Action]

# Both disjuncts and conjuncts become independent triggers.
_SPLIT_OPERATORS = frozenset({"||", "&&"})


def collect_triggers(
    cond: Node,
    site: Site,
    bindings: Mapping[str, UiElement],
    vocabulary: Vocabulary,
) -> list[Trigger]:
    """Extract (UI element, action) pairs from an ``if`` condition, left to right."""
    triggers: list[Trigger] = []
    _collect(cond, site, bindings, vocabulary, triggers)
    return triggers


def _collect(
    expr: Node,
    site: Site,
    bindings: Mapping[str, UiElement],
    vocabulary: Vocabulary,
    triggers: list[Trigger],
) -> None:
    if expr.type == "binary_expression" and operator_token(expr) in _SPLIT_OPERATORS:
        for side in ("left", "right"):
            operand = expr.child_by_field_name(side)
            if operand is not None:
                _collect(operand, site, bindings, vocabulary, triggers)
        return

    if expr.type == "parenthesized_expression":
        inner = inner_expression(expr)
        if inner is not None:
            _collect(inner, site, bindings, vocabulary, triggers)
        return

    call = as_method_call(expr)
    if call is None or call.method not in vocabulary.action_methods:
        return

    action = Action(
        action_type=call.method,
        source=describe(call.receiver),
        context=site.context,
        file_path=site.file_path,
        line=LINE_UNKNOWN,
    )
    ui_element = resolve_ui_element(call.receiver, site, bindings, vocabulary)
    triggers.append((ui_element, action))
