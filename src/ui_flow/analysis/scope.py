from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from tree_sitter import Node

from ..syntax.nodes import node_text
from ..syntax.visitor import TreeVisitor
from ..types import UiElement


@dataclass
class ScopeFrame:
    """Per-function analysis state."""

    function: str | None = None
    bindings: dict[str, UiElement] = field(default_factory=dict)
    """Local name -> UI element whose response it holds."""

    @property
    def context(self) -> str:
        return self.function or ""


class ScopeStack:
    """Explicit save/restore of scope frames around function bodies."""

    def __init__(self, function: str | None = None) -> None:
        self.current = ScopeFrame(function=function)
        self._saved: list[ScopeFrame] = []

    @contextmanager
    def function(self, name: str) -> Iterator[ScopeFrame]:
        """Enter a function body with a fresh, empty binding table."""
        self._saved.append(self.current)
        self.current = ScopeFrame(function=name)
        try:
            yield self.current
        finally:
            self.current = self._saved.pop()

    def bind(self, name: str, element: UiElement) -> None:
        self.current.bindings[name] = element


@dataclass(frozen=True)
class Site:
    """Where a record is being produced: file and enclosing function."""

    file_path: str
    context: str = ""


class ScopedVisitor(TreeVisitor):
    """TreeVisitor that tracks the enclosing function of every node."""

    def __init__(self, file_path: str, function: str | None = None) -> None:
        self.file_path = file_path
        self.scope = ScopeStack(function)

    @property
    def site(self) -> Site:
        return Site(file_path=self.file_path, context=self.scope.current.context)

    def visit_function_item(self, node: Node) -> None:
        name_node = node.child_by_field_name("name")
        name = node_text(name_node) if name_node is not None else ""
        with self.scope.function(name):
            self.generic_visit(node)
