"""tree-sitter boundary: parsing Rust source and reading its nodes."""

from .nodes import (
    MethodCall,
    as_method_call,
    inner_expression,
    node_text,
    path_string,
    string_literal_value,
)
from .parser import RUST_LANGUAGE, get_parser, parse_source, syntax_errors
from .visitor import TreeVisitor

__all__ = [
    "MethodCall",
    "RUST_LANGUAGE",
    "TreeVisitor",
    "as_method_call",
    "get_parser",
    "inner_expression",
    "node_text",
    "parse_source",
    "path_string",
    "string_literal_value",
    "syntax_errors",
]
