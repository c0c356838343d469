"""Helpers for reading tree-sitter-rust expression nodes."""

from dataclasses import dataclass

from tree_sitter import Node

COMMENT_TYPES = frozenset({"line_comment", "block_comment"})

# Node kinds that form a single path segment.
_SEGMENT_TYPES = frozenset(
    {
        "identifier",
        "type_identifier",
        "field_identifier",
        "self",
        "super",
        "crate",
        "metavariable",
    }
)

_ESCAPES = {
    "\\n": "\n",
    "\\r": "\r",
    "\\t": "\t",
    "\\\\": "\\",
    "\\0": "\0",
    '\\"': '"',
    "\\'": "'",
}

# Whitespace skipped after a `\` line continuation.
_CONTINUATION_WHITESPACE = " \t\n\r"


@dataclass(frozen=True)
class MethodCall:
    """A ``receiver.method(arguments)`` call."""

    node: Node
    receiver: Node
    method: str
    arguments: tuple[Node, ...]


def node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def named_children(node: Node) -> list[Node]:
    """Named children without comments."""
    return [child for child in node.named_children if child.type not in COMMENT_TYPES]


def inner_expression(node: Node) -> Node | None:
    """The expression wrapped by a parenthesized_expression."""
    children = named_children(node)
    return children[0] if children else None


def as_method_call(node: Node) -> MethodCall | None:
    """Return the method-call view of ``node``, or None if it is not one.

    tree-sitter-rust models ``a.b(x)`` as a call_expression whose function is
    a field_expression; turbofish calls (``a.b::<T>(x)``) wrap that field
    expression in a generic_function.
    """
    if node.type != "call_expression":
        return None

    function = node.child_by_field_name("function")
    if function is not None and function.type == "generic_function":
        function = function.child_by_field_name("function")
    if function is None or function.type != "field_expression":
        return None

    receiver = function.child_by_field_name("value")
    field = function.child_by_field_name("field")
    if receiver is None or field is None:
        return None

    args_node = node.child_by_field_name("arguments")
    arguments = tuple(named_children(args_node)) if args_node is not None else ()
    return MethodCall(node=node, receiver=receiver, method=node_text(field), arguments=arguments)


def _path_segments(node: Node) -> list[str] | None:
    if node.type in _SEGMENT_TYPES:
        return [node_text(node)]

    if node.type in ("scoped_identifier", "scoped_type_identifier"):
        name = node.child_by_field_name("name")
        if name is None:
            return None
        path = node.child_by_field_name("path")
        if path is None:
            return [node_text(name)]
        prefix = _path_segments(path)
        if prefix is None:
            return None
        return [*prefix, node_text(name)]

    if node.type == "generic_type":
        inner = node.child_by_field_name("type")
        return _path_segments(inner) if inner is not None else None

    return None


def path_string(node: Node) -> str | None:
    """``a::b::c`` for a path expression, None for anything else."""
    segments = _path_segments(node)
    if segments is None:
        return None
    return "::".join(segments)


def decode_escape(text: str) -> str:
    """Decode one escape sequence; unknown or out-of-range escapes are kept verbatim."""
    try:
        if text.startswith("\\u{") and text.endswith("}"):
            return chr(int(text[3:-1].replace("_", ""), 16))
        if text.startswith("\\x") and len(text) == 4:
            return chr(int(text[2:], 16))
    except ValueError:
        return text
    return _ESCAPES.get(text, text)


def _is_continuation(text: str) -> bool:
    return text in ("\\\n", "\\\r", "\\\r\n")


def string_literal_value(node: Node) -> str | None:
    """Value of a string literal node, None for anything else.

    Escapes are decoded the way rustc does, including ``\\u{..}``, ``\\xNN`` and
    line continuations (a trailing backslash drops the newline and the
    leading whitespace of the next line).
    """
    if node.type == "string_literal":
        parts: list[str] = []
        skip_whitespace = False
        for child in node.named_children:
            text = node_text(child)
            if child.type == "escape_sequence":
                skip_whitespace = _is_continuation(text)
                if not skip_whitespace:
                    parts.append(decode_escape(text))
            elif child.type == "string_content":
                if skip_whitespace:
                    text = text.lstrip(_CONTINUATION_WHITESPACE)
                    skip_whitespace = not text
                parts.append(text)
        return "".join(parts)

    if node.type == "raw_string_literal":
        for child in node.named_children:
            if child.type == "string_content":
                return node_text(child)
        # Grammars without a string_content child: strip r#"..."# by hand.
        text = node_text(node)
        start = text.find('"')
        end = text.rfind('"')
        return text[start + 1 : end] if 0 <= start < end else ""

    return None


def operator_token(node: Node) -> str | None:
    """Operator of a binary_expression or compound_assignment_expr."""
    operator = node.child_by_field_name("operator")
    return operator.type if operator is not None else None


def is_deref(node: Node) -> bool:
    return node.type == "unary_expression" and bool(node.children) and node.children[0].type == "*"
