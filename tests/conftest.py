from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Node, Tree

from ui_flow.analysis.scope import Site
from ui_flow.config import AnalyzerConfig
from ui_flow.syntax import parse_source


def _find_first(node: Node, node_type: str) -> Node | None:
    if node.type == node_type:
        return node
    for child in node.named_children:
        found = _find_first(child, node_type)
        if found is not None:
            return found
    return None


@pytest.fixture
def parse_rust() -> Callable[[str], Tree]:
    return parse_source


@pytest.fixture
def find_first() -> Callable[[Node, str], Node]:
    """Depth-first search for the first node of a given type."""

    def _find(node: Node, node_type: str) -> Node:
        found = _find_first(node, node_type)
        assert found is not None, f"no {node_type} node in {node.type}"
        return found

    return _find


@pytest.fixture
def parse_expr() -> Callable[[str], Node]:
    """Parse a single Rust expression (wrapped as a statement inside a function)."""

    def _parse(code: str) -> Node:
        tree = parse_source(f"fn f() {{ {code}; }}")
        assert not tree.root_node.has_error, code
        stmt = _find_first(tree.root_node, "expression_statement")
        assert stmt is not None, code
        return stmt.named_children[0]

    return _parse


@pytest.fixture
def parse_condition() -> Callable[[str], Node]:
    """Parse ``if <code> {}`` and return the condition node."""

    def _parse(code: str) -> Node:
        tree = parse_source(f"fn f() {{ if {code} {{}} }}")
        assert not tree.root_node.has_error, code
        if_node = _find_first(tree.root_node, "if_expression")
        assert if_node is not None, code
        condition = if_node.child_by_field_name("condition")
        assert condition is not None, code
        return condition

    return _parse


@pytest.fixture
def parse_block() -> Callable[[str], Node]:
    """Parse ``if cond { <code> }`` and return the body block."""

    def _parse(code: str) -> Node:
        tree = parse_source(f"fn f() {{ if cond {{ {code} }} }}")
        assert not tree.root_node.has_error, code
        if_node = _find_first(tree.root_node, "if_expression")
        assert if_node is not None, code
        body = if_node.child_by_field_name("consequence")
        assert body is not None, code
        return body

    return _parse


@pytest.fixture
def site() -> Site:
    return Site(file_path="src/app.rs", context="show")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in [
        "UI_FLOW_VOCABULARY_PATH",
        "UI_FLOW_STRICT_PARSE",
        "UI_FLOW_MAX_FILE_SIZE_BYTES",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def strict_config() -> AnalyzerConfig:
    return AnalyzerConfig(strict_parse=True)


@pytest.fixture
def temp_source_file(tmp_path: Path) -> Path:
    source_file = tmp_path / "app.rs"
    source_file.write_text(
        "fn show(ui: &mut egui::Ui, state: &mut AppState) {\n"
        '    if ui.button("Save").clicked() {\n'
        "        state.saved = true;\n"
        "    }\n"
        "}\n",
        encoding="utf-8",
    )
    return source_file
