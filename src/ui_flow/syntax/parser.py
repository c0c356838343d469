"""Shared tree-sitter utilities for Rust parsing."""

import tree_sitter_rust as tsrust
from tree_sitter import Language, Parser, Tree

RUST_LANGUAGE = Language(tsrust.language())
_PARSER: Parser | None = None


def get_parser() -> Parser:
    global _PARSER
    if _PARSER is None:
        _PARSER = Parser(RUST_LANGUAGE)
    return _PARSER


def parse_source(source: str | bytes) -> Tree:
    """Parse Rust source into a tree-sitter tree.

    tree-sitter is error tolerant: malformed source still yields a tree, with
    ERROR / missing nodes where recovery happened. Use ``syntax_errors`` to
    find them.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    return get_parser().parse(source)


def syntax_errors(tree: Tree) -> list[tuple[int, int]]:
    """List 1-indexed (line, column) positions of ERROR and missing nodes."""
    positions: list[tuple[int, int]] = []
    stack = [tree.root_node] if tree.root_node.has_error else []
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            positions.append((node.start_point.row + 1, node.start_point.column + 1))
            continue
        stack.extend(
            child for child in reversed(node.children) if child.has_error or child.is_missing
        )
    return positions
