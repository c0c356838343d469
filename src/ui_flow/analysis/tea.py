"""Extract message-passing (Elm architecture) patterns.

Two halves, joined by message name:

- emissions: ``Button::primary("+").on_click(ctx, Msg::Increment)``
- handlers: ``Msg::Increment => model.counter += 1`` arms of ``match msg``
  inside an ``update`` impl method
"""

import logging
from collections.abc import Iterable, Sequence

from tree_sitter import Node, Tree

from ..config.vocabulary import TEA_VOCABULARY, TeaVocabulary
from ..syntax.nodes import as_method_call, named_children, node_text, path_string
from ..types import LINE_UNKNOWN, MsgEmission, MsgHandler, TeaFlow
from .describe import UNKNOWN_EXPR
from .mutations import MutationScanner
from .resolver import first_string_arg
from .scope import ScopedVisitor

logger = logging.getLogger(__name__)

UNKNOWN_CALL = "<call>"
UNKNOWN_PATTERN = "<pattern>"


def _root(syntax_tree: Tree | Node) -> Node:
    return syntax_tree.root_node if isinstance(syntax_tree, Tree) else syntax_tree


def message_path(expr: Node) -> str:
    """``Msg::Increment`` for a path, ``Msg::Rename`` for ``Msg::Rename(name)``."""
    path = path_string(expr)
    if path is not None:
        return path

    if expr.type == "call_expression" and as_method_call(expr) is None:
        function = expr.child_by_field_name("function")
        name = path_string(function) if function is not None else None
        return name if name is not None else UNKNOWN_CALL

    return UNKNOWN_EXPR


def message_argument(arguments: Sequence[Node]) -> str | None:
    """The emitted message: the first message-like argument after ``ctx``, else the first."""
    for arg in [*arguments[1:], *arguments[:1]]:
        msg = message_path(arg)
        if "::" in msg or msg.startswith("Msg"):
            return msg
    return None


def _call_arguments(node: Node) -> list[Node]:
    args = node.child_by_field_name("arguments")
    return named_children(args) if args is not None else []


def find_component(
    expr: Node, components: Iterable[str]
) -> tuple[str, str, str | None] | None:
    """Walk down a receiver chain to the design-system constructor.

    Returns ``(component, variant, label)``: ``Button::primary("+")`` gives
    ``("Button", "primary", "+")``.
    """
    components = frozenset(components)

    call = as_method_call(expr)
    if call is not None:
        receiver_path = path_string(call.receiver)
        if receiver_path is not None:
            component = receiver_path.split("::")[-1]
            if component in components:
                return component, call.method, first_string_arg(call.arguments)
        return find_component(call.receiver, components)

    if expr.type == "call_expression":
        function = expr.child_by_field_name("function")
        path = path_string(function) if function is not None else None
        if path is not None:
            segments = path.split("::")
            if len(segments) >= 2 and segments[-2] in components:
                return segments[-2], segments[-1], first_string_arg(_call_arguments(expr))

    return None


def pattern_name(pattern: Node) -> str:
    """Message named by a match-arm pattern (``Msg::Rename(name)`` -> ``Msg::Rename``)."""
    if pattern.type == "match_pattern":
        children = named_children(pattern)
        if not children:
            return UNKNOWN_PATTERN
        pattern = children[0]

    if pattern.type in ("tuple_struct_pattern", "struct_pattern"):
        type_node = pattern.child_by_field_name("type")
        if type_node is not None:
            pattern = type_node

    name = path_string(pattern)
    return name if name is not None else UNKNOWN_PATTERN


class EmissionCollector(ScopedVisitor):
    def __init__(self, file_path: str, vocabulary: TeaVocabulary) -> None:
        super().__init__(file_path)
        self.vocabulary = vocabulary
        self.emissions: list[MsgEmission] = []

    def visit_call_expression(self, node: Node) -> None:
        call = as_method_call(node)
        if call is not None and call.method in self.vocabulary.actions:
            self._collect(call.method, call.receiver, call.arguments)
        self.generic_visit(node)

    def _collect(self, action: str, receiver: Node, arguments: Sequence[Node]) -> None:
        msg = message_argument(arguments)
        if msg is None:
            return
        found = find_component(receiver, self.vocabulary.components)
        if found is None:
            return

        component, variant, label = found
        site = self.site
        self.emissions.append(
            MsgEmission(
                component=component,
                variant=variant,
                label=label,
                action=action,
                msg=msg,
                context=site.context,
                file_path=site.file_path,
                line=LINE_UNKNOWN,
            )
        )


class HandlerCollector(ScopedVisitor):
    """Collect ``match msg`` arms inside handler impl methods."""

    def __init__(self, file_path: str, vocabulary: TeaVocabulary) -> None:
        super().__init__(file_path)
        self.vocabulary = vocabulary
        self.handlers: list[MsgHandler] = []
        self.in_handler = False

    def visit_function_item(self, node: Node) -> None:
        outer = self.in_handler
        parent = node.parent
        if parent is not None and parent.type == "declaration_list":
            name_node = node.child_by_field_name("name")
            name = node_text(name_node) if name_node is not None else ""
            self.in_handler = name in self.vocabulary.handler_functions
        try:
            super().visit_function_item(node)
        finally:
            self.in_handler = outer

    def visit_match_expression(self, node: Node) -> None:
        if self.in_handler:
            value = node.child_by_field_name("value")
            matched = path_string(value) if value is not None else None
            body = node.child_by_field_name("body")
            if matched is not None and matched.endswith("msg") and body is not None:
                for arm in named_children(body):
                    if arm.type == "match_arm":
                        self._collect(arm)
        self.generic_visit(node)

    def _collect(self, arm: Node) -> None:
        pattern = arm.child_by_field_name("pattern")
        value = arm.child_by_field_name("value")
        if pattern is None or value is None:
            return

        scanner = MutationScanner(
            self.file_path,
            self.vocabulary.mutations,
            function=self.site.context or None,
            is_state=self.vocabulary.is_model_state,
        )
        scanner.visit(value)
        if not scanner.mutations:
            return

        self.handlers.append(
            MsgHandler(
                msg_pattern=pattern_name(pattern),
                state_mutations=tuple(scanner.mutations),
                file_path=self.file_path,
            )
        )


def extract_msg_emissions(
    file_path: str, syntax_tree: Tree | Node, vocabulary: TeaVocabulary | None = None
) -> list[MsgEmission]:
    collector = EmissionCollector(file_path, vocabulary or TEA_VOCABULARY)
    collector.visit(_root(syntax_tree))
    return collector.emissions


def extract_msg_handlers(
    file_path: str, syntax_tree: Tree | Node, vocabulary: TeaVocabulary | None = None
) -> list[MsgHandler]:
    """Message handlers with at least one model mutation, in source order."""
    collector = HandlerCollector(file_path, vocabulary or TEA_VOCABULARY)
    collector.visit(_root(syntax_tree))
    return collector.handlers


def handles(handler: MsgHandler, msg: str) -> bool:
    """Does ``handler`` match ``msg``, allowing either side to be module-qualified?"""
    pattern = handler.msg_pattern
    return (
        msg == pattern
        or msg.endswith(f"::{pattern}")
        or pattern.endswith(f"::{msg.split('::')[-1]}")
    )


def build_tea_flows(
    emissions: Iterable[MsgEmission], handlers: Sequence[MsgHandler]
) -> list[TeaFlow]:
    """Pair every emission with the first handler for its message."""
    flows = [
        TeaFlow(
            emission=emission,
            handler=next((h for h in handlers if handles(h, emission.msg)), None),
        )
        for emission in emissions
    ]
    logger.debug(
        "Matched %d of %d emission(s) to handlers",
        sum(1 for flow in flows if flow.handler is not None),
        len(flows),
    )
    return flows
