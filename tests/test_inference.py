import pytest


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("5", "number"),
        ("3.14", "number"),
        ("'text'", "string"),
        ('"text"', "string"),
        ("true", "boolean"),
        ("false", "boolean"),
        ("null", "null"),
    ],
)
def test_primitive_literals(infer, expression, expected):
    assert infer(expression) == expected


@pytest.mark.parametrize(
    "expression",
    ["/ab+c/", "`template`", "undefined", "someName", "a.b", "-1", "!flag", "a > b", "x ? 1 : 2", "() => 1"],
)
def test_unrecognised_shapes_are_any(infer, expression):
    assert infer(expression) == "any"


def test_parentheses_are_transparent(infer):
    assert infer("(42)") == "number"


def test_empty_array(infer):
    assert infer("[]") == "any[]"


def test_array_uses_first_element(infer):
    assert infer("[1, 2, 3]") == "number[]"
    assert infer("['a']") == "string[]"
    assert infer("[[true]]") == "boolean[][]"


def test_array_ignores_later_elements(infer):
    assert infer("[1, 'two', null]") == "number[]"
    assert infer("['one', 2]") == "string[]"


def test_object_literal_keeps_declaration_order(infer):
    assert infer("{ b: 1, a: 'x', c: true }") == "{ b: number; a: string; c: boolean }"


def test_nested_object_recurses(infer):
    assert infer("{ outer: { inner: { leaf: null } } }") == "{ outer: { inner: { leaf: null } } }"


def test_object_keys(infer):
    assert infer("{ 'quoted': 1, 2: 'n', 'has-dash': true }") == '{ quoted: number; 2: string; "has-dash": boolean }'


def test_object_shorthand_method_and_spread(infer):
    assert infer("{ a, run() { return 1; }, ...rest }") == "{ a: any; run: any }"


def test_empty_object(infer):
    assert infer("{}") == "{}"


@pytest.mark.parametrize("operator", ["+", "-", "*", "/", "%"])
def test_arithmetic_is_number(infer, operator):
    assert infer(f"a {operator} b") == "number"


def test_string_concatenation_is_still_number(infer):
    assert infer("'a' + 'b'") == "number"


def test_other_binary_operators_are_any(infer):
    assert infer("a && b") == "any"
    assert infer("a === b") == "any"


def test_call_is_any(infer):
    assert infer("compute(1, 2)") == "any"


def test_absent_node_is_any():
    from typescriptify.inference import infer_expression_type

    assert infer_expression_type(None, b"") == "any"


def test_bigint_is_any(infer):
    assert infer("10n") == "any"
    assert infer("0x1fn") == "any"


def test_leading_hole_is_any_element(infer):
    assert infer("[, 1]") == "any[]"
    assert infer("[1, , 2]") == "number[]"


def test_escaped_string_key(infer):
    assert infer(r"{ 'it\'s': 1 }") == '{ "it\'s": number }'
    assert infer(r"{ 'abc': true }") == "{ abc: boolean }"
