import json

from .core import get_text


def _point(point) -> dict:
    row, column = point
    return {"line": row + 1, "column": column}


def tree_to_dict(node, code_bytes: bytes, field_name=None) -> dict:
    """Convert a tree-sitter node (and its whole subtree) to plain data."""
    data = {
        "type": node.type,
        "named": node.is_named,
        "start": node.start_byte,
        "end": node.end_byte,
        "loc": {"start": _point(node.start_point), "end": _point(node.end_point)},
    }
    if field_name:
        data["field"] = field_name
    if node.child_count == 0:
        data["text"] = get_text(node, code_bytes)
    data["children"] = [
        tree_to_dict(child, code_bytes, node.field_name_for_child(i))
        for i, child in enumerate(node.children)
    ]
    return data


def dump_ast(tree, code_bytes: bytes) -> str:
    return json.dumps(tree_to_dict(tree.root_node, code_bytes), indent=2, ensure_ascii=False)
