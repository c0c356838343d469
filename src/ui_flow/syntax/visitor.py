from tree_sitter import Node

from .nodes import COMMENT_TYPES


class TreeVisitor:
    """Depth-first walker over named tree-sitter nodes.

    Works like ``ast.NodeVisitor``: ``visit`` dispatches to
    ``visit_<node.type>`` when defined and to ``generic_visit`` otherwise.
    Overrides that want the walk to continue below their node must call
    ``generic_visit`` themselves.

    Subtrees without handlers are walked with an explicit stack, so long
    operator chains (``1 + 1 + ...``) do not grow the Python call stack.
    Only nesting of handled node types does.
    """

    def visit(self, node: Node) -> None:
        method = getattr(self, f"visit_{node.type}", None)
        if method is None:
            self.generic_visit(node)
        else:
            method(node)

    def generic_visit(self, node: Node) -> None:
        stack = self._children(node)
        while stack:
            child = stack.pop()
            method = getattr(self, f"visit_{child.type}", None)
            if method is None:
                stack.extend(self._children(child))
            else:
                method(child)

    @staticmethod
    def _children(node: Node) -> list[Node]:
        """Named non-comment children, reversed for popping in source order."""
        return [child for child in reversed(node.named_children) if child.type not in COMMENT_TYPES]
