import json

from typescriptify.dump import dump_ast, tree_to_dict
from typescriptify.parsing import parse_source


def _walk_pairs(node, data):
    yield node, data
    assert len(node.children) == len(data["children"])
    for child, child_data in zip(node.children, data["children"]):
        yield from _walk_pairs(child, child_data)


def test_dump_round_trips_types_and_ranges(samples_dir):
    code = (samples_dir / "basics.js").read_bytes()
    tree = parse_source(code)
    text = dump_ast(tree, code)
    data = json.loads(text)

    assert data["type"] == "program"
    for node, node_data in _walk_pairs(tree.root_node, data):
        assert node_data["type"] == node.type
        assert node_data["start"] == node.start_byte
        assert node_data["end"] == node.end_byte
        assert node_data["loc"]["start"] == {
            "line": node.start_point[0] + 1,
            "column": node.start_point[1],
        }


def test_dump_uses_two_space_indent():
    code = b"let a = 1;"
    text = dump_ast(parse_source(code), code)
    assert text.startswith('{\n  "type": "program"')


def test_leaves_carry_text_and_fields():
    code = b"const x = 5;"
    data = tree_to_dict(parse_source(code).root_node, code)
    declaration = data["children"][0]
    declarator = next(c for c in declaration["children"] if c["type"] == "variable_declarator")
    name, _, value = declarator["children"]
    assert name == {
        "type": "identifier",
        "named": True,
        "start": 6,
        "end": 7,
        "loc": {"start": {"line": 1, "column": 6}, "end": {"line": 1, "column": 7}},
        "field": "name",
        "text": "x",
        "children": [],
    }
    assert value["field"] == "value"
    assert value["text"] == "5"
    assert "text" not in declarator
