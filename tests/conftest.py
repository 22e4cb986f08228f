from pathlib import Path

import pytest

from typescriptify.collector import collect_declarations
from typescriptify.inference import infer_expression_type
from typescriptify.parsing import parse_source

SAMPLES = Path(__file__).parent / "samples"


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES


@pytest.fixture
def infer():
    """Infer the type of a single expression placed in a const initializer."""

    def _infer(expression: str) -> str:
        code = f"const probe = {expression};".encode("utf-8")
        tree = parse_source(code)
        declaration = tree.root_node.named_children[0]
        declarator = declaration.named_children[0]
        return infer_expression_type(declarator.child_by_field_name("value"), code)

    return _infer


@pytest.fixture
def collect():
    def _collect(source: str):
        code = source.encode("utf-8")
        tree = parse_source(code)
        return collect_declarations(tree.root_node, code)

    return _collect
