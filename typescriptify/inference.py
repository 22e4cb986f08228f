"""Best-effort static types for JavaScript expression nodes.

Every function here is pure and total: unknown shapes, missing fields and
absent nodes all come back as ``"any"``.
"""

import codecs
import json
import re

from .core import ANY, get_text, named_items

LITERAL_TYPES = {
    "number": "number",
    "string": "string",
    "true": "boolean",
    "false": "boolean",
    "null": "null",
}

# Node types whose source text is kept as the emitted initializer.
LITERAL_NODES = frozenset({"number", "string", "true", "false", "null", "regex", "array", "object"})

NUMERIC_OPERATORS = frozenset({"+", "-", "*", "/", "%"})

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def unwrap(node):
    while node is not None and node.type == "parenthesized_expression":
        inner = named_items(node)
        node = inner[0] if inner else None
    return node


def infer_expression_type(node, code_bytes: bytes) -> str:
    node = unwrap(node)
    if node is None:
        return ANY

    kind = node.type
    if kind == "number" and get_text(node, code_bytes).endswith("n"):
        # BigInt
        return ANY
    if kind in LITERAL_TYPES:
        return LITERAL_TYPES[kind]
    if kind == "array":
        return f"{infer_expression_type(first_element(node), code_bytes)}[]"
    if kind == "object":
        return _object_type(node, code_bytes)
    if kind == "binary_expression":
        operator = node.child_by_field_name("operator")
        if operator is not None and operator.type in NUMERIC_OPERATORS:
            return "number"
        return ANY
    # call_expression and everything else
    return ANY


def first_element(node):
    """First element of an array literal, or None for an empty array or a leading hole."""
    for child in node.children[1:]:
        if child.type == "comment":
            continue
        if child.type in (",", "]"):
            return None
        return child
    return None


def array_element_types(node, code_bytes: bytes) -> list[str]:
    node = unwrap(node)
    if node is None or node.type != "array":
        return []
    return [infer_expression_type(el, code_bytes) for el in named_items(node)]


def _object_type(node, code_bytes):
    members = []
    for prop in named_items(node):
        if prop.type == "pair":
            key = property_key(prop.child_by_field_name("key"), code_bytes)
            value_type = infer_expression_type(prop.child_by_field_name("value"), code_bytes)
        elif prop.type == "shorthand_property_identifier":
            key, value_type = get_text(prop, code_bytes), ANY
        elif prop.type == "method_definition":
            key, value_type = property_key(prop.child_by_field_name("name"), code_bytes), ANY
        else:
            # spread_element
            continue
        if key is None:
            continue
        members.append(f"{key}: {value_type}")
    if not members:
        return "{}"
    return "{ " + "; ".join(members) + " }"


def property_key(key, code_bytes):
    """Render an object key as it should appear in a type literal."""
    if key is None:
        return None
    if key.type != "string":
        return get_text(key, code_bytes)
    text = string_value(key, code_bytes)
    if IDENTIFIER_RE.match(text):
        return text
    return json.dumps(text)


def string_value(node, code_bytes):
    """Value of a string literal node with its escape sequences resolved."""
    parts = []
    for child in node.named_children:
        text = get_text(child, code_bytes)
        if child.type == "escape_sequence":
            try:
                text = codecs.decode(text, "unicode_escape")
            except UnicodeDecodeError:
                text = text[1:]
        parts.append(text)
    return "".join(parts)
