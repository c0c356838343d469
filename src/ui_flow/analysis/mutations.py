from collections.abc import Callable

from tree_sitter import Node

from ..config.vocabulary import Vocabulary
from ..syntax.nodes import as_method_call, named_children, operator_token
from ..types import LINE_UNKNOWN, StateMutation
from .describe import describe, looks_like_state
from .scope import ScopedVisitor, Site


class MutationScanner(ScopedVisitor):
    """Collect assignments, compound assignments and mutating method calls.

    Targets rejected by ``is_state`` are dropped. With
    ``descend_into_conditionals=False`` the scan stops at every nested
    ``if`` expression, so a mutation is only credited to the innermost
    conditional that gates it.
    """

    def __init__(
        self,
        file_path: str,
        vocabulary: Vocabulary,
        *,
        function: str | None = None,
        descend_into_conditionals: bool = True,
        is_state: Callable[[str], bool] = looks_like_state,
    ) -> None:
        super().__init__(file_path, function)
        self.vocabulary = vocabulary
        self.descend_into_conditionals = descend_into_conditionals
        self.is_state = is_state
        self.mutations: list[StateMutation] = []

    def _record(self, target: str, mutation_type: str) -> None:
        if not self.is_state(target):
            return
        site = self.site
        self.mutations.append(
            StateMutation(
                target=target,
                mutation_type=mutation_type,
                context=site.context,
                file_path=site.file_path,
                line=LINE_UNKNOWN,
            )
        )

    def visit_if_expression(self, node: Node) -> None:
        if self.descend_into_conditionals:
            self.generic_visit(node)

    def visit_assignment_expression(self, node: Node) -> None:
        left = node.child_by_field_name("left")
        if left is not None:
            self._record(describe(left), "assign")
        self.generic_visit(node)

    def visit_compound_assignment_expr(self, node: Node) -> None:
        mutation_type = self.vocabulary.compound_assign_operators.get(operator_token(node) or "")
        left = node.child_by_field_name("left")
        if mutation_type is not None and left is not None:
            self._record(describe(left), mutation_type)
        self.generic_visit(node)

    def visit_call_expression(self, node: Node) -> None:
        call = as_method_call(node)
        if call is not None and call.method in self.vocabulary.mutating_methods:
            self._record(describe(call.receiver), f"method:{call.method}")
        self.generic_visit(node)


def collect_mutations(block: Node, site: Site, vocabulary: Vocabulary) -> list[StateMutation]:
    """State mutations directly gated by ``block`` (an ``if`` body).

    Nested conditionals inside the block are skipped; the flow extractor
    visits them as conditionals of their own.
    """
    scanner = MutationScanner(
        site.file_path,
        vocabulary,
        function=site.context or None,
        descend_into_conditionals=False,
    )
    for stmt in named_children(block):
        scanner.visit(stmt)
    return scanner.mutations
