"""Extract UI flows with scope-aware analysis.

Tracks causality: ``if ui.button("x").clicked() { state.y = z; }`` becomes
``UiFlow(ui=button("x"), action=clicked, mutations=[state.y assign])``.

Response bindings are followed within a function body:
``let r = ui.button("x"); if r.clicked() { ... }`` resolves ``r`` back to the
button.
"""

import logging

from tree_sitter import Node, Tree

from ..config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from ..syntax.nodes import node_text
from ..types import UiFlow
from .mutations import collect_mutations
from .resolver import construct_ui_element
from .scope import ScopedVisitor
from .triggers import collect_triggers

logger = logging.getLogger(__name__)


class FlowExtractor(ScopedVisitor):
    def __init__(self, file_path: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        super().__init__(file_path)
        self.vocabulary = vocabulary
        self.flows: list[UiFlow] = []

    def visit_let_declaration(self, node: Node) -> None:
        self._capture_binding(node)
        self.generic_visit(node)

    def visit_if_expression(self, node: Node) -> None:
        self.scan_conditional(node)
        # Nested conditionals get their own scan on the way down.
        self.generic_visit(node)

    def _capture_binding(self, node: Node) -> None:
        pattern = node.child_by_field_name("pattern")
        value = node.child_by_field_name("value")
        if pattern is None or value is None or pattern.type != "identifier":
            return

        element = construct_ui_element(value, self.site, self.vocabulary)
        if element is not None:
            self.scope.bind(node_text(pattern), element)

    def scan_conditional(self, node: Node) -> None:
        """Emit one flow per trigger in the condition, sharing the body's mutations."""
        condition = node.child_by_field_name("condition")
        consequence = node.child_by_field_name("consequence")
        if condition is None or consequence is None:
            return

        site = self.site
        mutations = collect_mutations(consequence, site, self.vocabulary)
        if not mutations:
            return

        triggers = collect_triggers(
            condition, site, self.scope.current.bindings, self.vocabulary
        )
        for ui_element, action in triggers:
            self.flows.append(
                UiFlow(
                    ui_element=ui_element,
                    action=action,
                    state_mutations=tuple(mutations),
                    context=site.context,
                )
            )


def extract_flows(
    file_path: str,
    syntax_tree: Tree | Node,
    vocabulary: Vocabulary | None = None,
) -> list[UiFlow]:
    """Extract UI flows from a parsed Rust source file.

    Args:
        file_path: Identifier stamped on every record.
        syntax_tree: tree-sitter-rust tree (or its root node).
        vocabulary: Method vocabularies; defaults to the packaged flow vocabulary.

    Returns:
        Flows in traversal order: outer before inner, top to bottom, left to
        right within a disjunction.
    """
    root = syntax_tree.root_node if isinstance(syntax_tree, Tree) else syntax_tree
    extractor = FlowExtractor(file_path, vocabulary or DEFAULT_VOCABULARY)
    extractor.visit(root)
    logger.debug("Extracted %d flow(s) from %s", len(extractor.flows), file_path)
    return extractor.flows
