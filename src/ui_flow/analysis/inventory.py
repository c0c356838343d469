"""Whole-file inventories of UI elements, actions and state mutations.

Unlike the flow extractor these do not relate records to each other; they
list every occurrence in the file together with its enclosing function.
"""

from tree_sitter import Node, Tree

from ..config.vocabulary import INVENTORY_VOCABULARY, Vocabulary
from ..syntax.nodes import as_method_call, path_string
from ..types import LINE_UNKNOWN, Action, StateMutation, UiElement
from .describe import describe
from .mutations import MutationScanner
from .resolver import first_string_arg
from .scope import ScopedVisitor


def _root(syntax_tree: Tree | Node) -> Node:
    return syntax_tree.root_node if isinstance(syntax_tree, Tree) else syntax_tree


def is_ui_receiver(expr: Node) -> bool:
    """Does ``expr`` look like a ``Ui`` handle (``ui``, ``&mut ui``, ``ctx.ui()``)?"""
    if expr.type == "reference_expression":
        value = expr.child_by_field_name("value")
        return value is not None and is_ui_receiver(value)

    call = as_method_call(expr)
    if call is not None:
        return call.method == "ui" or is_ui_receiver(call.receiver)

    name = path_string(expr)
    if name is None or "::" in name:
        return False
    return name == "ui" or name.endswith("_ui") or "ui" in name


class UiElementCollector(ScopedVisitor):
    def __init__(self, file_path: str, vocabulary: Vocabulary) -> None:
        super().__init__(file_path)
        self.vocabulary = vocabulary
        self.elements: list[UiElement] = []

    def visit_call_expression(self, node: Node) -> None:
        call = as_method_call(node)
        if (
            call is not None
            and call.method in self.vocabulary.ui_methods
            and is_ui_receiver(call.receiver)
        ):
            site = self.site
            self.elements.append(
                UiElement(
                    element_type=call.method,
                    label=first_string_arg(call.arguments),
                    context=site.context,
                    file_path=site.file_path,
                    line=LINE_UNKNOWN,
                    response_var=None,
                )
            )
        self.generic_visit(node)


class ActionCollector(ScopedVisitor):
    def __init__(self, file_path: str, vocabulary: Vocabulary) -> None:
        super().__init__(file_path)
        self.vocabulary = vocabulary
        self.actions: list[Action] = []

    def visit_call_expression(self, node: Node) -> None:
        call = as_method_call(node)
        if call is not None and call.method in self.vocabulary.action_methods:
            site = self.site
            self.actions.append(
                Action(
                    action_type=call.method,
                    source=describe(call.receiver),
                    context=site.context,
                    file_path=site.file_path,
                    line=LINE_UNKNOWN,
                )
            )
        self.generic_visit(node)


def extract_ui_elements(
    file_path: str, syntax_tree: Tree | Node, vocabulary: Vocabulary | None = None
) -> list[UiElement]:
    collector = UiElementCollector(file_path, vocabulary or INVENTORY_VOCABULARY)
    collector.visit(_root(syntax_tree))
    return collector.elements


def extract_actions(
    file_path: str, syntax_tree: Tree | Node, vocabulary: Vocabulary | None = None
) -> list[Action]:
    collector = ActionCollector(file_path, vocabulary or INVENTORY_VOCABULARY)
    collector.visit(_root(syntax_tree))
    return collector.actions


def extract_state_mutations(
    file_path: str, syntax_tree: Tree | Node, vocabulary: Vocabulary | None = None
) -> list[StateMutation]:
    """Every state mutation in the file, including those inside conditionals."""
    scanner = MutationScanner(
        file_path, vocabulary or INVENTORY_VOCABULARY, descend_into_conditionals=True
    )
    scanner.visit(_root(syntax_tree))
    return scanner.mutations
